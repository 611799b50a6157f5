"""Fleet Domain Enums"""

from src.service.fleet.domain.enum.seat_type import SeatType
from src.service.fleet.domain.enum.space_type import SpaceType

__all__ = ['SeatType', 'SpaceType']
