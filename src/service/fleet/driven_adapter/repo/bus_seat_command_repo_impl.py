"""
Bus Seat Command Repository Implementation - CQRS Write Side
"""

from typing import List

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.fleet.app.interface.i_bus_seat_command_repo import IBusSeatCommandRepo
from src.service.fleet.domain.entity.bus_seat_entity import BusSeat
from src.service.fleet.driven_adapter.model.bus_seat_model import BusSeatModel
from src.service.fleet.driven_adapter.repo.fleet_model_mapper import (
    copy_seat_to_model,
    seat_model_to_entity,
)


class BusSeatCommandRepoImpl(IBusSeatCommandRepo):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def list_by_diagram(self, *, seat_diagram_id: int) -> List[BusSeat]:
        result = await self.session.execute(
            select(BusSeatModel)
            .where(BusSeatModel.seat_diagram_id == seat_diagram_id)
            .order_by(BusSeatModel.id)
        )
        return [seat_model_to_entity(m) for m in result.scalars().all()]

    @Logger.io
    async def exists_for_diagram(self, *, seat_diagram_id: int) -> bool:
        result = await self.session.execute(
            select(BusSeatModel.id).where(BusSeatModel.seat_diagram_id == seat_diagram_id).limit(1)
        )
        return result.first() is not None

    @Logger.io
    async def bulk_create(self, *, seats: List[BusSeat]) -> List[BusSeat]:
        if not seats:
            return []

        models = [copy_seat_to_model(seat, BusSeatModel()) for seat in seats]
        self.session.add_all(models)
        await self.session.flush()

        Logger.base.info(f'🪑 [BULK_CREATE] Inserted {len(models)} seats')
        return [seat_model_to_entity(m) for m in models]

    @Logger.io
    async def bulk_update(self, *, seats: List[BusSeat]) -> None:
        if not seats:
            return

        by_id = {seat.id: seat for seat in seats}
        result = await self.session.execute(
            select(BusSeatModel).where(BusSeatModel.id.in_(list(by_id)))
        )
        models = result.scalars().all()
        for model in models:
            copy_seat_to_model(by_id[model.id], model)
        await self.session.flush()

        Logger.base.info(f'🪑 [BULK_UPDATE] Updated {len(models)} seats')

    @Logger.io
    async def deactivate_all(self, *, seat_diagram_id: int) -> int:
        result = await self.session.execute(
            update(BusSeatModel)
            .where(BusSeatModel.seat_diagram_id == seat_diagram_id, BusSeatModel.active)
            .values(active=False, updated_at=func.now())
        )
        return result.rowcount or 0

    @Logger.io
    async def count_active(self, *, seat_diagram_id: int) -> int:
        result = await self.session.execute(
            select(func.count(BusSeatModel.id)).where(
                BusSeatModel.seat_diagram_id == seat_diagram_id, BusSeatModel.active
            )
        )
        return int(result.scalar_one())
