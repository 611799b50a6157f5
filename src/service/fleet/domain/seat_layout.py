"""
Seat layout generation and grid views

Column convention per floor: left seats 0..seats_left-1, aisle at seats_left,
right seats seats_left+1..seats_left+seats_right. Rows are 1-based.
"""

from typing import Dict, List

import attrs

from src.platform.exception.exceptions import DomainError
from src.service.fleet.domain.entity.bus_seat_entity import BusSeat
from src.service.fleet.domain.entity.seat_diagram_entity import SeatDiagram
from src.service.fleet.domain.enum.space_type import SpaceType
from src.service.fleet.domain.seat_meta import calculate_seat_meta
from src.service.fleet.domain.value_object.floor_seats import FloorSeats, default_floor_seats
from src.service.fleet.domain.value_object.seat_position import SeatPosition


@attrs.define
class FloorLayout:
    floor_number: int
    rows: List[List[BusSeat]]


@attrs.define
class SeatConfiguration:
    floors: List[FloorLayout]
    total_seats: int


def _require_floor(diagram: SeatDiagram, floor_number: int) -> FloorSeats:
    floor = diagram.floor_config(floor_number)
    if floor is None:
        raise DomainError(f'Floor configuration not found for floor {floor_number}')
    return floor


def generate_floor_seats(
    *, seat_diagram_id: int, floor: FloorSeats, start_number: int = 1
) -> List[BusSeat]:
    seats: List[BusSeat] = []
    seat_counter = start_number
    right_columns = [floor.seats_left + 1 + i for i in range(floor.seats_right)]
    columns = [*range(floor.seats_left), *right_columns]

    for row in range(1, floor.num_rows + 1):
        for col in columns:
            seats.append(
                BusSeat.create_seat(
                    seat_diagram_id=seat_diagram_id,
                    floor=floor,
                    position=SeatPosition(x=col, y=row),
                    seat_number=str(seat_counter),
                )
            )
            seat_counter += 1
    return seats


def generate_all_seats(diagram: SeatDiagram) -> List[BusSeat]:
    """One seat per grid cell, numbered "1".."N" across floors in floor order"""
    if diagram.id is None:
        raise ValueError('Cannot generate seats for an unsaved seat diagram')

    seats: List[BusSeat] = []
    for floor_number in range(1, diagram.num_floors + 1):
        floor = _require_floor(diagram, floor_number)
        seats.extend(
            generate_floor_seats(
                seat_diagram_id=diagram.id, floor=floor, start_number=len(seats) + 1
            )
        )
    return seats


def _filler_space(
    *, seat_diagram_id: int, floor: FloorSeats, position: SeatPosition
) -> BusSeat:
    space_type = SpaceType.HALLWAY if position.x == floor.aisle_column else SpaceType.EMPTY
    return BusSeat(
        seat_diagram_id=seat_diagram_id,
        floor_number=floor.floor_number,
        position=position,
        space_type=space_type,
        meta=calculate_seat_meta(position=position, floor=floor, space_type=space_type),
    )


def build_seat_configuration(diagram: SeatDiagram, seats: List[BusSeat]) -> SeatConfiguration:
    """
    Grid view of the diagram, one row list per floor row.

    Active persisted seats fill the grid when there are any; otherwise the
    theoretical layout is shown. A floor without declared geometry falls back
    to 10 rows of 2+2 seats.
    """
    seat_diagram_id = diagram.id or 0
    active_seats = [seat for seat in seats if seat.active]
    floors: List[FloorLayout] = []
    total_seats = 0
    next_number = 1

    for floor_number in range(1, diagram.num_floors + 1):
        floor = diagram.floor_config(floor_number) or default_floor_seats(floor_number)

        if active_seats:
            placed: Dict[tuple[int, int], BusSeat] = {
                (seat.position.y, seat.position.x): seat
                for seat in active_seats
                if seat.floor_number == floor_number
            }
        else:
            placed = {
                (seat.position.y, seat.position.x): seat
                for seat in generate_floor_seats(
                    seat_diagram_id=seat_diagram_id, floor=floor, start_number=next_number
                )
            }
            next_number += floor.seat_count

        rows: List[List[BusSeat]] = []
        for y in range(1, floor.num_rows + 1):
            row: List[BusSeat] = []
            for x in range(floor.row_width):
                position = SeatPosition(x=x, y=y)
                cell = placed.get((y, x)) or _filler_space(
                    seat_diagram_id=seat_diagram_id, floor=floor, position=position
                )
                if cell.is_seat:
                    total_seats += 1
                row.append(cell)
            rows.append(row)

        floors.append(FloorLayout(floor_number=floor_number, rows=rows))

    return SeatConfiguration(floors=floors, total_seats=total_seats)
