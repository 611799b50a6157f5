from abc import ABC, abstractmethod
from typing import Optional

from src.service.routing.domain.entity.pathway_entity import Pathway


class IPathwayCommandRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, pathway_id: int, for_update: bool = False) -> Optional[Pathway]:
        """
        Load a pathway that has not been soft-deleted.

        Args:
            pathway_id: Pathway ID
            for_update: Lock the row until the transaction ends
        """
        pass

    @abstractmethod
    async def create(self, *, pathway: Pathway) -> Pathway:
        pass

    @abstractmethod
    async def update(self, *, pathway: Pathway) -> Pathway:
        pass
