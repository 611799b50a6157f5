from typing import Self

from fastapi import Depends

from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger


class DeleteSeatDiagramUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow)

    @Logger.io
    async def execute(self, *, seat_diagram_id: int) -> None:
        """Soft-delete the diagram and deactivate all of its seats"""
        async with self.uow:
            diagram = await self.uow.seat_diagrams.get_by_id(
                seat_diagram_id=seat_diagram_id, for_update=True
            )
            if not diagram:
                raise NotFoundError(f'Seat diagram {seat_diagram_id} not found')

            deactivated = await self.uow.bus_seats.deactivate_all(seat_diagram_id=seat_diagram_id)
            await self.uow.seat_diagrams.update(seat_diagram=diagram.soft_delete())
            await self.uow.commit()

        Logger.base.info(
            f'🗑️ [DIAGRAM] Soft-deleted seat diagram {seat_diagram_id}, deactivated {deactivated} seats'
        )
