"""
Pathway Query Repository Interface - CQRS Read Side
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.routing.domain.entity.pathway_entity import Pathway
from src.service.routing.domain.entity.pathway_option_entity import PathwayOption
from src.service.routing.domain.entity.pathway_option_toll_entity import PathwayOptionToll


class IPathwayQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, pathway_id: int) -> Optional[Pathway]:
        pass

    @abstractmethod
    async def list_options(self, *, pathway_id: int) -> List[PathwayOption]:
        pass

    @abstractmethod
    async def get_option(self, *, option_id: int) -> Optional[PathwayOption]:
        pass

    @abstractmethod
    async def list_option_tolls(self, *, pathway_option_id: int) -> List[PathwayOptionToll]:
        pass
