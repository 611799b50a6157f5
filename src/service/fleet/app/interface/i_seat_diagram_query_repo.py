"""
Seat Diagram Query Repository Interface - CQRS Read Side
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.fleet.domain.entity.seat_diagram_entity import SeatDiagram


class ISeatDiagramQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, seat_diagram_id: int) -> Optional[SeatDiagram]:
        """Get a diagram that has not been soft-deleted."""
        pass

    @abstractmethod
    async def list_diagrams(self) -> List[SeatDiagram]:
        """All diagrams that have not been soft-deleted, ordered by ID."""
        pass
