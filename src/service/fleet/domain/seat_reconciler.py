"""
Seat Reconciler - position-keyed diff between persisted seats and a desired layout

Existing rows are matched by (floor_number, x, y), never by id:
- match    -> update in place, row identity kept, inactive rows are reactivated
- no match -> create a new row
- existing active rows nobody asked for -> soft deactivation (active=False)
"""

from typing import Dict, List

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.fleet.domain.entity.bus_seat_entity import BusSeat
from src.service.fleet.domain.entity.seat_diagram_entity import SeatDiagram
from src.service.fleet.domain.value_object.seat_input import SeatInput


PositionKey = tuple[int, int, int]


@attrs.define
class ReconciliationPlan:
    to_create: List[BusSeat] = attrs.field(factory=list)
    to_update: List[BusSeat] = attrs.field(factory=list)
    to_deactivate: List[BusSeat] = attrs.field(factory=list)

    @property
    def seats_created(self) -> int:
        return len(self.to_create)

    @property
    def seats_updated(self) -> int:
        return len(self.to_update)

    @property
    def seats_deactivated(self) -> int:
        return len(self.to_deactivate)

    @property
    def expected_active_seats(self) -> int:
        return sum(1 for seat in (*self.to_create, *self.to_update) if seat.active)


def index_by_position(seats: List[BusSeat]) -> Dict[PositionKey, BusSeat]:
    """
    One row per slot. Should history leave several rows on a slot, the active
    one wins, then the most recent id.
    """
    index: Dict[PositionKey, BusSeat] = {}
    for seat in seats:
        current = index.get(seat.position_key)
        if current is None or (seat.active, seat.id or 0) > (current.active, current.id or 0):
            index[seat.position_key] = seat
    return index


@Logger.io
def reconcile_seats(
    *, diagram: SeatDiagram, existing: List[BusSeat], desired: List[SeatInput]
) -> ReconciliationPlan:
    """
    Partition the desired layout into creates, updates and deactivations.

    Inputs are handled in payload order. Positions must already be unique and
    inside the diagram geometry.
    """
    if diagram.id is None:
        raise ValueError('Cannot reconcile seats of an unsaved seat diagram')

    by_position = index_by_position(existing)
    touched_ids: set[int] = set()
    plan = ReconciliationPlan()

    for seat_input in desired:
        floor = diagram.floor_config(seat_input.floor_number)
        if floor is None:
            raise ValueError(f'Floor configuration not found for floor {seat_input.floor_number}')

        match = by_position.get(seat_input.position_key)
        if match is not None and match.id is not None:
            touched_ids.add(match.id)
            plan.to_update.append(match.apply_input(seat_input=seat_input, floor=floor))
        else:
            plan.to_create.append(
                BusSeat.create_from_input(
                    seat_diagram_id=diagram.id, seat_input=seat_input, floor=floor
                )
            )

    plan.to_deactivate = [
        seat.deactivate()
        for seat in existing
        if seat.active and seat.id is not None and seat.id not in touched_ids
    ]

    Logger.base.info(
        f'🪑 [RECONCILE] diagram={diagram.id} create={plan.seats_created} '
        f'update={plan.seats_updated} deactivate={plan.seats_deactivated}'
    )
    return plan
