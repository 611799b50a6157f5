from typing import Any, Dict, List, Optional

import attrs

from src.service.fleet.domain.enum.seat_type import SeatType
from src.service.fleet.domain.enum.space_type import SpaceType
from src.service.fleet.domain.value_object.seat_position import SeatPosition


@attrs.define
class SeatInput:
    """Desired state of one grid cell in a seat configuration payload"""

    floor_number: int
    position: SeatPosition
    space_type: SpaceType = SpaceType.SEAT
    seat_number: Optional[str] = None
    seat_type: Optional[SeatType] = None
    amenities: Optional[List[str]] = None
    reclinement_angle: Optional[int] = None
    meta: Optional[Dict[str, Any]] = None
    active: bool = True

    @property
    def position_key(self) -> tuple[int, int, int]:
        return (self.floor_number, self.position.x, self.position.y)

    @property
    def is_seat(self) -> bool:
        return self.space_type == SpaceType.SEAT
