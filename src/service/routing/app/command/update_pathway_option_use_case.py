from typing import Any, Self

from fastapi import Depends

from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.routing.domain.entity.pathway_option_entity import PathwayOption
from src.service.routing.domain.pathway_rules import ensure_option_belongs
from src.service.routing.domain.toll_sync import recalculate_pass_times


class UpdatePathwayOptionUseCase:
    """
    Update one option of a pathway.

    Distance or time changes recompute the average speed; a new average speed
    recomputes the pass time of every toll that has a distance, in the same
    transaction.
    """

    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow)

    @Logger.io
    async def execute(self, *, pathway_id: int, option_id: int, **changes: Any) -> PathwayOption:
        async with self.uow:
            pathway = await self.uow.pathways.get_by_id(pathway_id=pathway_id, for_update=True)
            if not pathway:
                raise NotFoundError(f'Pathway {pathway_id} not found')

            option = ensure_option_belongs(
                pathway_id=pathway_id,
                option_id=option_id,
                option=await self.uow.pathway_options.get_by_id(option_id=option_id),
            )
            updated = option.apply_update(**changes)
            saved = await self.uow.pathway_options.update(option=updated)

            if saved.avg_speed_kmh and saved.avg_speed_kmh != option.avg_speed_kmh:
                tolls = await self.uow.pathway_option_tolls.list_by_option(
                    pathway_option_id=option_id
                )
                changed = recalculate_pass_times(tolls, avg_speed_kmh=saved.avg_speed_kmh)
                await self.uow.pathway_option_tolls.update_pass_times(tolls=changed)
                Logger.base.info(
                    f'🚧 [TOLLS] Option {option_id} speed {saved.avg_speed_kmh} km/h, '
                    f'{len(changed)} pass times recalculated'
                )

            await self.uow.commit()

        return saved
