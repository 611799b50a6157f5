"""
Bus Seat Query Repository Implementation - CQRS Read Side
"""

from typing import AsyncContextManager, Callable, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.fleet.app.interface.i_bus_seat_query_repo import IBusSeatQueryRepo
from src.service.fleet.domain.entity.bus_seat_entity import BusSeat
from src.service.fleet.driven_adapter.model.bus_seat_model import BusSeatModel
from src.service.fleet.driven_adapter.repo.fleet_model_mapper import seat_model_to_entity


class BusSeatQueryRepoImpl(IBusSeatQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def list_active_by_diagram(self, *, seat_diagram_id: int) -> List[BusSeat]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(BusSeatModel)
                .where(BusSeatModel.seat_diagram_id == seat_diagram_id, BusSeatModel.active)
                .order_by(
                    BusSeatModel.floor_number,
                    BusSeatModel.seat_number.nulls_last(),
                    BusSeatModel.position_y,
                    BusSeatModel.position_x,
                )
            )
            return [seat_model_to_entity(m) for m in result.scalars().all()]
