from typing import Self

from fastapi import Depends

from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.fleet.app.dto.seat_configuration_result import SeatsCreatedResult
from src.service.fleet.domain.seat_layout import generate_all_seats


class CreateSeatsFromDiagramUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow)

    @Logger.io
    async def execute(self, *, seat_diagram_id: int) -> SeatsCreatedResult:
        """
        Materialize the diagram's declared grid as seat rows.

        Raises:
            NotFoundError: Diagram missing or soft-deleted
            ConflictError: The diagram already has seat rows
        """
        async with self.uow:
            diagram = await self.uow.seat_diagrams.get_by_id(
                seat_diagram_id=seat_diagram_id, for_update=True
            )
            if not diagram:
                raise NotFoundError(f'Seat diagram {seat_diagram_id} not found')

            if await self.uow.bus_seats.exists_for_diagram(seat_diagram_id=seat_diagram_id):
                raise ConflictError(
                    f'Seat diagram {seat_diagram_id} already has seats. '
                    'Use the seat configuration endpoint to change them.'
                )

            created = await self.uow.bus_seats.bulk_create(seats=generate_all_seats(diagram))
            await self.uow.seat_diagrams.update(
                seat_diagram=diagram.record_generated_seats(total_active_seats=len(created))
            )
            await self.uow.commit()

        return SeatsCreatedResult(seats_created=len(created))
