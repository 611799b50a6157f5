from typing import Self

from fastapi import Depends

from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.routing.domain.entity.pathway_option_entity import PathwayOption
from src.service.routing.domain.pathway_option_rules import validate_option_rules
from src.service.routing.domain.pathway_rules import ensure_option_belongs


class SetDefaultPathwayOptionUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow)

    @Logger.io
    async def execute(self, *, pathway_id: int, option_id: int) -> PathwayOption:
        async with self.uow:
            pathway = await self.uow.pathways.get_by_id(pathway_id=pathway_id, for_update=True)
            if not pathway:
                raise NotFoundError(f'Pathway {pathway_id} not found')

            option = ensure_option_belongs(
                pathway_id=pathway_id,
                option_id=option_id,
                option=await self.uow.pathway_options.get_by_id(option_id=option_id),
            )
            if option.is_default:
                return option

            validate_option_rules(
                is_pass_through=None,
                pass_through_time_min=None,
                is_default=True,
                active=option.active,
            )
            await self.uow.pathway_options.set_default(pathway_id=pathway_id, option_id=option_id)
            await self.uow.commit()

        return option.mark_default(True)
