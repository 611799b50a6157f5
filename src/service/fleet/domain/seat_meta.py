from typing import Any, Dict, Optional

from src.service.fleet.domain.enum.space_type import SpaceType
from src.service.fleet.domain.value_object.floor_seats import FloorSeats
from src.service.fleet.domain.value_object.seat_position import SeatPosition


SEAT_ONLY_META_KEYS = ('is_window', 'is_legroom')


def calculate_seat_meta(
    *, position: SeatPosition, floor: FloorSeats, space_type: SpaceType = SpaceType.SEAT
) -> Dict[str, Any]:
    """
    Grid coordinates plus derived seat flags.

    Window seats sit on either outer column, legroom seats on the first row.
    Non-seat spaces only carry their coordinates.
    """
    meta: Dict[str, Any] = {'row_index': position.y, 'col_index': position.x}
    if space_type == SpaceType.SEAT:
        meta['is_window'] = position.x == 0 or position.x == floor.max_column
        meta['is_legroom'] = position.y == 1
    return meta


def merge_seat_meta(
    *,
    current: Optional[Dict[str, Any]],
    incoming: Optional[Dict[str, Any]],
    position: SeatPosition,
    floor: FloorSeats,
    space_type: SpaceType,
) -> Dict[str, Any]:
    merged = {**(current or {}), **(incoming or {})}
    for key in SEAT_ONLY_META_KEYS:
        merged.pop(key, None)
    merged.update(calculate_seat_meta(position=position, floor=floor, space_type=space_type))
    return merged
