"""
Pathway Command Repository Implementation - CQRS Write Side
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.routing.app.interface.i_pathway_command_repo import IPathwayCommandRepo
from src.service.routing.domain.entity.pathway_entity import Pathway
from src.service.routing.driven_adapter.model.pathway_model import PathwayModel
from src.service.routing.driven_adapter.repo.routing_model_mapper import (
    copy_pathway_to_model,
    pathway_model_to_entity,
)


class PathwayCommandRepoImpl(IPathwayCommandRepo):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def get_by_id(self, *, pathway_id: int, for_update: bool = False) -> Optional[Pathway]:
        stmt = select(PathwayModel).where(
            PathwayModel.id == pathway_id, PathwayModel.deleted_at.is_(None)
        )
        if for_update:
            stmt = stmt.with_for_update()

        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return pathway_model_to_entity(model) if model else None

    @Logger.io
    async def create(self, *, pathway: Pathway) -> Pathway:
        model = copy_pathway_to_model(pathway, PathwayModel())
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)

        Logger.base.info(f'🛣️ [PATHWAY] Created pathway {model.id} ({model.code})')
        return pathway_model_to_entity(model)

    @Logger.io
    async def update(self, *, pathway: Pathway) -> Pathway:
        model = await self.session.get(PathwayModel, pathway.id)
        if model is None:
            raise NotFoundError(f'Pathway {pathway.id} not found')

        copy_pathway_to_model(pathway, model)
        await self.session.flush()
        await self.session.refresh(model)
        return pathway_model_to_entity(model)
