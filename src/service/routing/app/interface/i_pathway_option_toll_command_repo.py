from abc import ABC, abstractmethod
from typing import List

from src.service.routing.domain.entity.pathway_option_toll_entity import PathwayOptionToll


class IPathwayOptionTollCommandRepo(ABC):
    @abstractmethod
    async def list_by_option(self, *, pathway_option_id: int) -> List[PathwayOptionToll]:
        """Tolls ordered by sequence."""
        pass

    @abstractmethod
    async def replace_for_option(
        self, *, pathway_option_id: int, tolls: List[PathwayOptionToll]
    ) -> List[PathwayOptionToll]:
        """Delete every toll of the option, then insert the given ones."""
        pass

    @abstractmethod
    async def update_pass_times(self, *, tolls: List[PathwayOptionToll]) -> None:
        pass
