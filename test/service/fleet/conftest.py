from typing import Callable, List

import pytest

from src.service.fleet.domain.entity.seat_diagram_entity import SeatDiagram
from src.service.fleet.domain.enum.space_type import SpaceType
from src.service.fleet.domain.seat_layout import generate_all_seats
from src.service.fleet.domain.value_object.floor_seats import FloorSeats
from src.service.fleet.domain.value_object.seat_input import SeatInput
from src.service.fleet.domain.value_object.seat_position import SeatPosition


def build_diagram(
    *, num_rows: int, seats_left: int = 2, seats_right: int = 2, num_floors: int = 1
) -> SeatDiagram:
    return SeatDiagram.create(
        name='Test Diagram',
        max_capacity=num_floors * num_rows * (seats_left + seats_right),
        num_floors=num_floors,
        seats_per_floor=[
            FloorSeats(
                floor_number=floor,
                num_rows=num_rows,
                seats_left=seats_left,
                seats_right=seats_right,
            )
            for floor in range(1, num_floors + 1)
        ],
    )


def seat(
    x: int,
    y: int,
    seat_number: str | None = None,
    *,
    floor_number: int = 1,
    space_type: SpaceType = SpaceType.SEAT,
    **fields,
) -> SeatInput:
    return SeatInput(
        floor_number=floor_number,
        position=SeatPosition(x=x, y=y),
        space_type=space_type,
        seat_number=seat_number,
        **fields,
    )


@pytest.fixture
def diagram_factory():
    return build_diagram


@pytest.fixture
def seat_input() -> Callable[..., SeatInput]:
    return seat


@pytest.fixture
def seeded_diagram(uow):
    """Persist a diagram together with its generated seats; returns the stored diagram"""

    def _seed(*, num_rows: int, seats_left: int = 2, seats_right: int = 2) -> SeatDiagram:
        diagram = uow.seat_diagrams.seed(
            build_diagram(num_rows=num_rows, seats_left=seats_left, seats_right=seats_right)
        )
        generated: List = generate_all_seats(diagram)
        for generated_seat in generated:
            uow.bus_seats.seed(generated_seat)
        return diagram

    return _seed
