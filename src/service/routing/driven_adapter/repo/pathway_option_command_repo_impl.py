"""
Pathway Option Command Repository Implementation - CQRS Write Side

Options are soft-deleted; every read here skips rows with deleted_at set.
"""

from typing import List, Optional

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.routing.app.interface.i_pathway_option_command_repo import (
    IPathwayOptionCommandRepo,
)
from src.service.routing.domain.entity.pathway_option_entity import PathwayOption
from src.service.routing.driven_adapter.model.pathway_option_model import PathwayOptionModel
from src.service.routing.driven_adapter.repo.routing_model_mapper import (
    copy_option_to_model,
    option_model_to_entity,
)


class PathwayOptionCommandRepoImpl(IPathwayOptionCommandRepo):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def get_by_id(self, *, option_id: int) -> Optional[PathwayOption]:
        result = await self.session.execute(
            select(PathwayOptionModel).where(
                PathwayOptionModel.id == option_id, PathwayOptionModel.deleted_at.is_(None)
            )
        )
        model = result.scalar_one_or_none()
        return option_model_to_entity(model) if model else None

    @Logger.io
    async def list_by_ids(self, *, option_ids: List[int]) -> List[PathwayOption]:
        if not option_ids:
            return []

        result = await self.session.execute(
            select(PathwayOptionModel).where(
                PathwayOptionModel.id.in_(set(option_ids)),
                PathwayOptionModel.deleted_at.is_(None),
            )
        )
        return [option_model_to_entity(m) for m in result.scalars().all()]

    @Logger.io
    async def list_by_pathway(self, *, pathway_id: int) -> List[PathwayOption]:
        result = await self.session.execute(
            select(PathwayOptionModel)
            .where(
                PathwayOptionModel.pathway_id == pathway_id,
                PathwayOptionModel.deleted_at.is_(None),
            )
            .order_by(PathwayOptionModel.sequence.nulls_last(), PathwayOptionModel.id)
        )
        return [option_model_to_entity(m) for m in result.scalars().all()]

    @Logger.io
    async def create(self, *, option: PathwayOption) -> PathwayOption:
        model = copy_option_to_model(option, PathwayOptionModel())
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return option_model_to_entity(model)

    @Logger.io
    async def update(self, *, option: PathwayOption) -> PathwayOption:
        model = await self.session.get(PathwayOptionModel, option.id)
        if model is None or model.deleted_at is not None:
            raise NotFoundError(f'Pathway option {option.id} not found')

        copy_option_to_model(option, model)
        await self.session.flush()
        await self.session.refresh(model)
        return option_model_to_entity(model)

    @Logger.io
    async def soft_delete(self, *, option_id: int) -> None:
        await self.session.execute(
            update(PathwayOptionModel)
            .where(PathwayOptionModel.id == option_id)
            .values(is_default=False, active=False, deleted_at=func.now(), updated_at=func.now())
            .execution_options(synchronize_session='fetch')
        )

    @Logger.io
    async def set_default(self, *, pathway_id: int, option_id: int) -> None:
        await self.session.execute(
            update(PathwayOptionModel)
            .where(
                PathwayOptionModel.pathway_id == pathway_id,
                PathwayOptionModel.is_default,
                PathwayOptionModel.id != option_id,
            )
            .values(is_default=False, updated_at=func.now())
            .execution_options(synchronize_session='fetch')
        )
        await self.session.execute(
            update(PathwayOptionModel)
            .where(PathwayOptionModel.id == option_id)
            .values(is_default=True, updated_at=func.now())
            .execution_options(synchronize_session='fetch')
        )
        Logger.base.info(f'⭐ [DEFAULT] Pathway {pathway_id} default option -> {option_id}')
