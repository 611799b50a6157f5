"""
Bus Seat Command Repository Interface - CQRS Write Side
"""

from abc import ABC, abstractmethod
from typing import List

from src.service.fleet.domain.entity.bus_seat_entity import BusSeat


class IBusSeatCommandRepo(ABC):
    @abstractmethod
    async def list_by_diagram(self, *, seat_diagram_id: int) -> List[BusSeat]:
        """All seat rows of a diagram, active and inactive."""
        pass

    @abstractmethod
    async def exists_for_diagram(self, *, seat_diagram_id: int) -> bool:
        pass

    @abstractmethod
    async def bulk_create(self, *, seats: List[BusSeat]) -> List[BusSeat]:
        """
        Insert new seat rows.

        Returns:
            The seats with their generated IDs, in input order
        """
        pass

    @abstractmethod
    async def bulk_update(self, *, seats: List[BusSeat]) -> None:
        """Write every field of already persisted seats, matched by ID."""
        pass

    @abstractmethod
    async def deactivate_all(self, *, seat_diagram_id: int) -> int:
        """
        Soft-deactivate every active seat of a diagram.

        Returns:
            Number of rows deactivated
        """
        pass

    @abstractmethod
    async def count_active(self, *, seat_diagram_id: int) -> int:
        pass
