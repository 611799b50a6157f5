"""
Seat configuration payload validation

Two stages, both collecting every violation before raising:
- validate_seat_payload: input-only checks (field rules, duplicates), no diagram needed
- validate_seat_geometry: bounds checks against the diagram's declared floors
"""

from typing import List, Optional

from src.platform.exception.field_error_collector import FieldErrorCode, FieldErrorCollector
from src.service.fleet.domain.entity.seat_diagram_entity import SeatDiagram
from src.service.fleet.domain.value_object.seat_input import SeatInput


SEAT_NUMBER_REQUIRED = 'Seat number is required for SEAT space types'
DUPLICATE_SEAT_NUMBERS = 'Duplicate seat numbers found in payload'
DUPLICATE_POSITIONS = 'Duplicate positions found in payload'


def collect_seat_field_errors(seats: List[SeatInput], collector: FieldErrorCollector) -> None:
    for index, seat in enumerate(seats):
        if seat.is_seat and not (seat.seat_number and seat.seat_number.strip()):
            collector.add_error(
                f'seats[{index}].seatNumber',
                FieldErrorCode.REQUIRED,
                SEAT_NUMBER_REQUIRED,
                seat.seat_number,
            )


def collect_duplicate_errors(seats: List[SeatInput], collector: FieldErrorCollector) -> None:
    seat_numbers = [seat.seat_number for seat in seats if seat.is_seat and seat.seat_number]
    duplicated_numbers = sorted({n for n in seat_numbers if seat_numbers.count(n) > 1})
    if duplicated_numbers:
        collector.add_error(
            'seats',
            FieldErrorCode.DUPLICATE,
            DUPLICATE_SEAT_NUMBERS,
            duplicated_numbers,
        )

    positions = [seat.position_key for seat in seats]
    duplicated_positions = sorted({p for p in positions if positions.count(p) > 1})
    if duplicated_positions:
        collector.add_error(
            'seats',
            FieldErrorCode.DUPLICATE,
            DUPLICATE_POSITIONS,
            duplicated_positions,
        )


def validate_seat_payload(seats: List[SeatInput]) -> None:
    """
    Reject malformed payloads before any database access.

    An empty list passes: it means every existing seat gets deactivated.

    Raises:
        FieldValidationError: Missing seat numbers, duplicate seat numbers or duplicate positions
    """
    collector = FieldErrorCollector()
    collect_seat_field_errors(seats, collector)
    collect_duplicate_errors(seats, collector)
    collector.throw_if_errors()


def validate_seat_geometry(
    diagram: SeatDiagram, seats: List[SeatInput], collector: Optional[FieldErrorCollector] = None
) -> None:
    """
    Check every position against the diagram's floor layout.

    Floors run 1..num_floors, rows 1..num_rows and columns 0..seats_left+seats_right
    (the upper bound leaves room for the aisle column). A floor outside the range
    skips its row and column checks.

    Raises:
        FieldValidationError: Listing every out-of-range floor, row and column
    """
    collector = collector or FieldErrorCollector()

    for index, seat in enumerate(seats):
        floor_number = seat.floor_number
        x, y = seat.position.x, seat.position.y

        if not 1 <= floor_number <= diagram.num_floors:
            collector.add_error(
                f'seats[{index}].floorNumber',
                FieldErrorCode.OUT_OF_RANGE,
                f'Invalid floor number {floor_number}. Must be between 1 and {diagram.num_floors}',
                floor_number,
            )
            continue

        floor = diagram.floor_config(floor_number)
        if floor is None:
            collector.add_error(
                f'seats[{index}].floorNumber',
                FieldErrorCode.NOT_FOUND,
                f'Floor configuration not found for floor {floor_number}',
                floor_number,
            )
            continue

        if not 1 <= y <= floor.num_rows:
            collector.add_error(
                f'seats[{index}].position.y',
                FieldErrorCode.OUT_OF_RANGE,
                f'Invalid row number {y} for floor {floor_number}. Must be between 1 and {floor.num_rows}',
                y,
            )

        if not 0 <= x <= floor.max_column:
            collector.add_error(
                f'seats[{index}].position.x',
                FieldErrorCode.OUT_OF_RANGE,
                f'Invalid column number {x} for floor {floor_number}. Must be between 0 and {floor.max_column}',
                x,
            )

    collector.throw_if_errors()
