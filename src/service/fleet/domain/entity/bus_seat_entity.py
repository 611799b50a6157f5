from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import attrs

from src.service.fleet.domain.enum.seat_type import SeatType
from src.service.fleet.domain.enum.space_type import SpaceType
from src.service.fleet.domain.seat_meta import calculate_seat_meta, merge_seat_meta
from src.service.fleet.domain.value_object.floor_seats import FloorSeats
from src.service.fleet.domain.value_object.seat_input import SeatInput
from src.service.fleet.domain.value_object.seat_position import SeatPosition


DEFAULT_SEAT_TYPE = SeatType.REGULAR
DEFAULT_RECLINEMENT_ANGLE = 120


@attrs.define
class BusSeat:
    seat_diagram_id: int
    floor_number: int
    position: SeatPosition
    space_type: SpaceType = SpaceType.SEAT
    seat_number: Optional[str] = None
    seat_type: Optional[SeatType] = None
    amenities: List[str] = attrs.field(factory=list)
    reclinement_angle: Optional[int] = None
    meta: Dict[str, Any] = attrs.field(factory=dict)
    active: bool = True
    id: Optional[int] = None  # None until persisted
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def position_key(self) -> tuple[int, int, int]:
        return (self.floor_number, self.position.x, self.position.y)

    @property
    def is_seat(self) -> bool:
        return self.space_type == SpaceType.SEAT

    @classmethod
    def create_seat(
        cls,
        *,
        seat_diagram_id: int,
        floor: FloorSeats,
        position: SeatPosition,
        seat_number: str,
    ) -> 'BusSeat':
        now = datetime.now(timezone.utc)
        return cls(
            seat_diagram_id=seat_diagram_id,
            floor_number=floor.floor_number,
            position=position,
            space_type=SpaceType.SEAT,
            seat_number=seat_number,
            seat_type=DEFAULT_SEAT_TYPE,
            amenities=[],
            reclinement_angle=DEFAULT_RECLINEMENT_ANGLE,
            meta=calculate_seat_meta(position=position, floor=floor),
            active=True,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_from_input(
        cls, *, seat_diagram_id: int, seat_input: SeatInput, floor: FloorSeats
    ) -> 'BusSeat':
        now = datetime.now(timezone.utc)
        new_seat = cls(
            seat_diagram_id=seat_diagram_id,
            floor_number=seat_input.floor_number,
            position=seat_input.position,
            space_type=seat_input.space_type,
            created_at=now,
        )
        return new_seat.apply_input(seat_input=seat_input, floor=floor)

    def apply_input(self, *, seat_input: SeatInput, floor: FloorSeats) -> 'BusSeat':
        """
        Overwrite this slot with the desired state, keeping the row identity.

        Non-seat spaces drop every seat-only attribute.
        """
        meta = merge_seat_meta(
            current=self.meta,
            incoming=seat_input.meta,
            position=seat_input.position,
            floor=floor,
            space_type=seat_input.space_type,
        )
        now = datetime.now(timezone.utc)

        if not seat_input.is_seat:
            return attrs.evolve(
                self,
                floor_number=seat_input.floor_number,
                position=seat_input.position,
                space_type=seat_input.space_type,
                seat_number=None,
                seat_type=None,
                reclinement_angle=None,
                amenities=[],
                meta=meta,
                active=seat_input.active,
                updated_at=now,
            )

        return attrs.evolve(
            self,
            floor_number=seat_input.floor_number,
            position=seat_input.position,
            space_type=SpaceType.SEAT,
            seat_number=seat_input.seat_number,
            seat_type=seat_input.seat_type or self.seat_type or DEFAULT_SEAT_TYPE,
            amenities=list(
                seat_input.amenities if seat_input.amenities is not None else self.amenities
            ),
            reclinement_angle=(
                seat_input.reclinement_angle
                if seat_input.reclinement_angle is not None
                else self.reclinement_angle or DEFAULT_RECLINEMENT_ANGLE
            ),
            meta=meta,
            active=seat_input.active,
            updated_at=now,
        )

    def deactivate(self) -> 'BusSeat':
        return attrs.evolve(self, active=False, updated_at=datetime.now(timezone.utc))
