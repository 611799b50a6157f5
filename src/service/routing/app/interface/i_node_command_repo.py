from abc import ABC, abstractmethod
from typing import List, Optional, Set

from src.service.routing.domain.entity.node_entity import Node


class INodeCommandRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, node_id: int) -> Optional[Node]:
        pass

    @abstractmethod
    async def find_existing_ids(self, *, node_ids: List[int]) -> Set[int]:
        """
        Single batch lookup.

        Returns:
            The subset of node_ids that exist
        """
        pass
