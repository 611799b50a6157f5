"""
Seat Diagram Command Repository Interface - CQRS Write Side

Bound to the Unit of Work session; callers commit through the UoW.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.service.fleet.domain.entity.seat_diagram_entity import SeatDiagram


class ISeatDiagramCommandRepo(ABC):
    @abstractmethod
    async def get_by_id(
        self, *, seat_diagram_id: int, for_update: bool = False
    ) -> Optional[SeatDiagram]:
        """
        Load a diagram that has not been soft-deleted.

        Args:
            seat_diagram_id: Diagram ID
            for_update: Lock the row until the transaction ends

        Returns:
            The diagram, or None when missing or deleted
        """
        pass

    @abstractmethod
    async def create(self, *, seat_diagram: SeatDiagram) -> SeatDiagram:
        """Insert a diagram and return it with its ID."""
        pass

    @abstractmethod
    async def update(self, *, seat_diagram: SeatDiagram) -> SeatDiagram:
        """Persist every mutable field of an existing diagram."""
        pass
