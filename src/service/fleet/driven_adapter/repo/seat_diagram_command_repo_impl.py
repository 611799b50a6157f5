"""
Seat Diagram Command Repository Implementation - CQRS Write Side

Shares the Unit of Work session; never commits on its own.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.fleet.app.interface.i_seat_diagram_command_repo import ISeatDiagramCommandRepo
from src.service.fleet.domain.entity.seat_diagram_entity import SeatDiagram
from src.service.fleet.driven_adapter.model.seat_diagram_model import SeatDiagramModel
from src.service.fleet.driven_adapter.repo.fleet_model_mapper import (
    copy_diagram_to_model,
    diagram_model_to_entity,
)


class SeatDiagramCommandRepoImpl(ISeatDiagramCommandRepo):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def get_by_id(
        self, *, seat_diagram_id: int, for_update: bool = False
    ) -> Optional[SeatDiagram]:
        stmt = select(SeatDiagramModel).where(
            SeatDiagramModel.id == seat_diagram_id,
            SeatDiagramModel.deleted_at.is_(None),
        )
        if for_update:
            stmt = stmt.with_for_update()

        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return diagram_model_to_entity(model) if model else None

    @Logger.io
    async def create(self, *, seat_diagram: SeatDiagram) -> SeatDiagram:
        model = copy_diagram_to_model(seat_diagram, SeatDiagramModel())
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)

        Logger.base.info(f'🚌 [DIAGRAM] Created seat diagram {model.id} ({model.name})')
        return diagram_model_to_entity(model)

    @Logger.io
    async def update(self, *, seat_diagram: SeatDiagram) -> SeatDiagram:
        model = await self.session.get(SeatDiagramModel, seat_diagram.id)
        if model is None:
            raise NotFoundError(f'Seat diagram {seat_diagram.id} not found')

        copy_diagram_to_model(seat_diagram, model)
        await self.session.flush()
        await self.session.refresh(model)
        return diagram_model_to_entity(model)
