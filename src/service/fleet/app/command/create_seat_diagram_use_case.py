from typing import List, Optional, Self

from fastapi import Depends

from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.logging.loguru_io import Logger
from src.service.fleet.domain.entity.seat_diagram_entity import SeatDiagram
from src.service.fleet.domain.value_object.floor_seats import FloorSeats


class CreateSeatDiagramUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow)

    @Logger.io
    async def execute(
        self,
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
    ) -> SeatDiagram:
        seat_diagram = SeatDiagram.create(
            name=name,
            description=description,
            max_capacity=max_capacity,
            num_floors=num_floors,
            seats_per_floor=seats_per_floor,
            bus_diagram_model_id=bus_diagram_model_id,
            bathroom_rows=bathroom_rows,
            is_factory_default=is_factory_default,
            allows_adjacent_seat=allows_adjacent_seat,
            observations=observations,
            active=active,
        )

        async with self.uow:
            created = await self.uow.seat_diagrams.create(seat_diagram=seat_diagram)
            await self.uow.commit()

        return created
