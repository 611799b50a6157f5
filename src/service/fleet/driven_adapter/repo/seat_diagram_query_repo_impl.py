"""
Seat Diagram Query Repository Implementation - CQRS Read Side
"""

from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.fleet.app.interface.i_seat_diagram_query_repo import ISeatDiagramQueryRepo
from src.service.fleet.domain.entity.seat_diagram_entity import SeatDiagram
from src.service.fleet.driven_adapter.model.seat_diagram_model import SeatDiagramModel
from src.service.fleet.driven_adapter.repo.fleet_model_mapper import diagram_model_to_entity


class SeatDiagramQueryRepoImpl(ISeatDiagramQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, seat_diagram_id: int) -> Optional[SeatDiagram]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(SeatDiagramModel).where(
                    SeatDiagramModel.id == seat_diagram_id,
                    SeatDiagramModel.deleted_at.is_(None),
                )
            )
            model = result.scalar_one_or_none()
            return diagram_model_to_entity(model) if model else None

    @Logger.io
    async def list_diagrams(self) -> List[SeatDiagram]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(SeatDiagramModel)
                .where(SeatDiagramModel.deleted_at.is_(None))
                .order_by(SeatDiagramModel.id)
            )
            diagrams = [diagram_model_to_entity(m) for m in result.scalars().all()]
            Logger.base.info(f'[LIST_DIAGRAMS] Found {len(diagrams)} seat diagrams')
            return diagrams
