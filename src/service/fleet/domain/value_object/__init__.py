"""Fleet Domain Value Objects"""

from src.service.fleet.domain.value_object.floor_seats import FloorSeats
from src.service.fleet.domain.value_object.seat_input import SeatInput
from src.service.fleet.domain.value_object.seat_position import SeatPosition

__all__ = ['FloorSeats', 'SeatInput', 'SeatPosition']
