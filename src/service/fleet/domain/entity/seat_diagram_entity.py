"""
Seat Diagram - aggregate root of a bus floor plan

[Business Invariants]
- total_seats caches the number of active seat rows after the last reconciliation
- is_modified flips to True on any effective change and never flips back on its own
- seats_per_floor declares one geometry per floor, floors numbered 1..num_floors
"""

from datetime import datetime, timezone
from typing import Any, List, Optional

import attrs

from src.platform.exception.field_error_collector import FieldErrorCode, FieldErrorCollector
from src.platform.logging.loguru_io import Logger
from src.service.fleet.domain.value_object.floor_seats import FloorSeats


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise ValueError(f'Seat diagram {attribute.name} cannot be empty')


def collect_layout_errors(
    *, num_floors: int, seats_per_floor: List[FloorSeats], collector: FieldErrorCollector
) -> None:
    if num_floors < 1:
        collector.add_error(
            'numFloors',
            FieldErrorCode.OUT_OF_RANGE,
            'Number of floors must be at least 1',
            num_floors,
        )

    seen_floors: set[int] = set()
    for index, floor in enumerate(seats_per_floor):
        prefix = f'seatsPerFloor[{index}]'
        if not 1 <= floor.floor_number <= max(num_floors, 1):
            collector.add_error(
                f'{prefix}.floorNumber',
                FieldErrorCode.OUT_OF_RANGE,
                f'Invalid floor number {floor.floor_number}. Must be between 1 and {num_floors}',
                floor.floor_number,
            )
        if floor.floor_number in seen_floors:
            collector.add_error(
                f'{prefix}.floorNumber',
                FieldErrorCode.DUPLICATE,
                f'Duplicate configuration for floor {floor.floor_number}',
                floor.floor_number,
            )
        seen_floors.add(floor.floor_number)

        if floor.num_rows < 1:
            collector.add_error(
                f'{prefix}.numRows',
                FieldErrorCode.OUT_OF_RANGE,
                f'Number of rows for floor {floor.floor_number} must be at least 1',
                floor.num_rows,
            )
        if floor.seats_left < 0 or floor.seats_right < 0:
            collector.add_error(
                f'{prefix}.seatsLeft',
                FieldErrorCode.OUT_OF_RANGE,
                f'Seats per side for floor {floor.floor_number} cannot be negative',
                (floor.seats_left, floor.seats_right),
            )


# Fields a caller may change directly; total_seats only moves through seat operations
UPDATABLE_FIELDS = frozenset(
    {
        'name',
        'description',
        'max_capacity',
        'num_floors',
        'seats_per_floor',
        'bathroom_rows',
        'allows_adjacent_seat',
        'observations',
        'active',
    }
)


@attrs.define
class SeatDiagram:
    name: str = attrs.field(validator=_validate_non_empty_string)
    max_capacity: int
    num_floors: int
    seats_per_floor: List[FloorSeats] = attrs.field(factory=list)
    description: Optional[str] = None
    bus_diagram_model_id: Optional[int] = None
    bathroom_rows: List[int] = attrs.field(factory=list)
    total_seats: int = 0
    is_factory_default: bool = False
    is_modified: bool = False
    allows_adjacent_seat: bool = False
    observations: Optional[str] = None
    active: bool = True
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        name: str,
        max_capacity: int,
        num_floors: int,
        seats_per_floor: List[FloorSeats],
        description: Optional[str] = None,
        bus_diagram_model_id: Optional[int] = None,
        bathroom_rows: Optional[List[int]] = None,
        is_factory_default: bool = False,
        allows_adjacent_seat: bool = False,
        observations: Optional[str] = None,
        active: bool = True,
    ) -> 'SeatDiagram':
        collector = FieldErrorCollector()
        collect_layout_errors(
            num_floors=num_floors, seats_per_floor=seats_per_floor, collector=collector
        )
        collector.throw_if_errors()

        now = datetime.now(timezone.utc)
        return cls(
            name=name,
            description=description,
            max_capacity=max_capacity,
            num_floors=num_floors,
            seats_per_floor=sorted(seats_per_floor, key=lambda f: f.floor_number),
            bus_diagram_model_id=bus_diagram_model_id,
            bathroom_rows=list(bathroom_rows or []),
            total_seats=sum(floor.seat_count for floor in seats_per_floor),
            is_factory_default=is_factory_default,
            is_modified=False,
            allows_adjacent_seat=allows_adjacent_seat,
            observations=observations,
            active=active,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def floor_config(self, floor_number: int) -> Optional[FloorSeats]:
        return next(
            (floor for floor in self.seats_per_floor if floor.floor_number == floor_number),
            None,
        )

    @Logger.io
    def apply_changes(self, **changes: Any) -> 'SeatDiagram':
        """
        Direct field update.

        is_modified is raised only when at least one value actually differs,
        unlike seat reconciliation which always marks the diagram.

        Raises:
            ValueError: Unknown field
            FieldValidationError: Resulting floor layout is invalid
        """
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f'Unknown seat diagram fields: {", ".join(sorted(unknown))}')

        effective = {key: value for key, value in changes.items() if getattr(self, key) != value}
        if not effective:
            return self

        if 'num_floors' in effective or 'seats_per_floor' in effective:
            collector = FieldErrorCollector()
            collect_layout_errors(
                num_floors=effective.get('num_floors', self.num_floors),
                seats_per_floor=effective.get('seats_per_floor', self.seats_per_floor),
                collector=collector,
            )
            collector.throw_if_errors()

        return attrs.evolve(
            self,
            **effective,
            is_modified=True,
            updated_at=datetime.now(timezone.utc),
        )

    def record_seat_reconciliation(self, *, total_active_seats: int) -> 'SeatDiagram':
        return attrs.evolve(
            self,
            total_seats=total_active_seats,
            is_modified=True,
            updated_at=datetime.now(timezone.utc),
        )

    def record_generated_seats(self, *, total_active_seats: int) -> 'SeatDiagram':
        return attrs.evolve(
            self,
            total_seats=total_active_seats,
            updated_at=datetime.now(timezone.utc),
        )

    def soft_delete(self) -> 'SeatDiagram':
        now = datetime.now(timezone.utc)
        return attrs.evolve(self, active=False, deleted_at=now, updated_at=now)
