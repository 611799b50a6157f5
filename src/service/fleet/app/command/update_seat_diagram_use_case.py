from typing import Any, Self

from fastapi import Depends

from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.fleet.domain.entity.seat_diagram_entity import SeatDiagram


class UpdateSeatDiagramUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow)

    @Logger.io
    async def execute(self, *, seat_diagram_id: int, **changes: Any) -> SeatDiagram:
        """
        Direct field update of a diagram.

        is_modified only flips when a submitted value differs from the stored one;
        a no-op update leaves the row untouched.
        """
        async with self.uow:
            diagram = await self.uow.seat_diagrams.get_by_id(
                seat_diagram_id=seat_diagram_id, for_update=True
            )
            if not diagram:
                raise NotFoundError(f'Seat diagram {seat_diagram_id} not found')

            updated = diagram.apply_changes(**changes)
            if updated is diagram:
                return diagram

            saved = await self.uow.seat_diagrams.update(seat_diagram=updated)
            await self.uow.commit()

        return saved
