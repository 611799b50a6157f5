"""
Pathway Query Repository Implementation - CQRS Read Side
"""

from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.routing.app.interface.i_pathway_query_repo import IPathwayQueryRepo
from src.service.routing.domain.entity.pathway_entity import Pathway
from src.service.routing.domain.entity.pathway_option_entity import PathwayOption
from src.service.routing.domain.entity.pathway_option_toll_entity import PathwayOptionToll
from src.service.routing.driven_adapter.model.pathway_model import PathwayModel
from src.service.routing.driven_adapter.model.pathway_option_model import PathwayOptionModel
from src.service.routing.driven_adapter.model.pathway_option_toll_model import (
    PathwayOptionTollModel,
)
from src.service.routing.driven_adapter.repo.routing_model_mapper import (
    option_model_to_entity,
    pathway_model_to_entity,
    toll_model_to_entity,
)


class PathwayQueryRepoImpl(IPathwayQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, pathway_id: int) -> Optional[Pathway]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(PathwayModel).where(
                    PathwayModel.id == pathway_id, PathwayModel.deleted_at.is_(None)
                )
            )
            model = result.scalar_one_or_none()
            return pathway_model_to_entity(model) if model else None

    @Logger.io
    async def list_options(self, *, pathway_id: int) -> List[PathwayOption]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(PathwayOptionModel)
                .where(
                    PathwayOptionModel.pathway_id == pathway_id,
                    PathwayOptionModel.deleted_at.is_(None),
                )
                .order_by(PathwayOptionModel.sequence.nulls_last(), PathwayOptionModel.id)
            )
            return [option_model_to_entity(m) for m in result.scalars().all()]

    @Logger.io
    async def get_option(self, *, option_id: int) -> Optional[PathwayOption]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(PathwayOptionModel).where(
                    PathwayOptionModel.id == option_id, PathwayOptionModel.deleted_at.is_(None)
                )
            )
            model = result.scalar_one_or_none()
            return option_model_to_entity(model) if model else None

    @Logger.io
    async def list_option_tolls(self, *, pathway_option_id: int) -> List[PathwayOptionToll]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(PathwayOptionTollModel)
                .where(PathwayOptionTollModel.pathway_option_id == pathway_option_id)
                .order_by(PathwayOptionTollModel.sequence)
            )
            return [toll_model_to_entity(m) for m in result.scalars().all()]
