from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.routing.domain.entity.pathway_option_entity import PathwayOption


class IPathwayOptionCommandRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, option_id: int) -> Optional[PathwayOption]:
        """Option that has not been soft-deleted, whatever pathway it belongs to."""
        pass

    @abstractmethod
    async def list_by_ids(self, *, option_ids: List[int]) -> List[PathwayOption]:
        pass

    @abstractmethod
    async def list_by_pathway(self, *, pathway_id: int) -> List[PathwayOption]:
        """Live options of a pathway ordered by sequence, then ID."""
        pass

    @abstractmethod
    async def create(self, *, option: PathwayOption) -> PathwayOption:
        pass

    @abstractmethod
    async def update(self, *, option: PathwayOption) -> PathwayOption:
        pass

    @abstractmethod
    async def soft_delete(self, *, option_id: int) -> None:
        pass

    @abstractmethod
    async def set_default(self, *, pathway_id: int, option_id: int) -> None:
        """Clear is_default on every option of the pathway, then set it on option_id."""
        pass
