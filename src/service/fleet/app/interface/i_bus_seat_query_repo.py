"""
Bus Seat Query Repository Interface - CQRS Read Side
"""

from abc import ABC, abstractmethod
from typing import List

from src.service.fleet.domain.entity.bus_seat_entity import BusSeat


class IBusSeatQueryRepo(ABC):
    @abstractmethod
    async def list_active_by_diagram(self, *, seat_diagram_id: int) -> List[BusSeat]:
        """Active seats and spaces ordered by floor, seat number, then position."""
        pass
