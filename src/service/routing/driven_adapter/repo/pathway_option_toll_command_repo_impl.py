from typing import List

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.routing.app.interface.i_pathway_option_toll_command_repo import (
    IPathwayOptionTollCommandRepo,
)
from src.service.routing.domain.entity.pathway_option_toll_entity import PathwayOptionToll
from src.service.routing.driven_adapter.model.pathway_option_toll_model import (
    PathwayOptionTollModel,
)
from src.service.routing.driven_adapter.repo.routing_model_mapper import (
    toll_entity_to_model,
    toll_model_to_entity,
)


class PathwayOptionTollCommandRepoImpl(IPathwayOptionTollCommandRepo):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def list_by_option(self, *, pathway_option_id: int) -> List[PathwayOptionToll]:
        result = await self.session.execute(
            select(PathwayOptionTollModel)
            .where(PathwayOptionTollModel.pathway_option_id == pathway_option_id)
            .order_by(PathwayOptionTollModel.sequence)
        )
        return [toll_model_to_entity(m) for m in result.scalars().all()]

    @Logger.io
    async def replace_for_option(
        self, *, pathway_option_id: int, tolls: List[PathwayOptionToll]
    ) -> List[PathwayOptionToll]:
        await self.session.execute(
            delete(PathwayOptionTollModel)
            .where(PathwayOptionTollModel.pathway_option_id == pathway_option_id)
            .execution_options(synchronize_session='fetch')
        )
        # the unique (option, sequence) constraint needs the delete flushed first
        await self.session.flush()

        models = [toll_entity_to_model(toll) for toll in tolls]
        self.session.add_all(models)
        await self.session.flush()

        Logger.base.info(f'🚧 [TOLLS] Option {pathway_option_id} now has {len(models)} tolls')
        return [toll_model_to_entity(m) for m in models]

    @Logger.io
    async def update_pass_times(self, *, tolls: List[PathwayOptionToll]) -> None:
        if not tolls:
            return

        by_id = {toll.id: toll for toll in tolls}
        result = await self.session.execute(
            select(PathwayOptionTollModel).where(PathwayOptionTollModel.id.in_(list(by_id)))
        )
        for model in result.scalars().all():
            model.pass_time_min = by_id[model.id].pass_time_min
        await self.session.flush()
