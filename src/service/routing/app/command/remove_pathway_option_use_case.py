from typing import Self

from fastapi import Depends

from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.routing.domain.pathway_rules import ensure_option_belongs, ensure_option_removable


class RemovePathwayOptionUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow)

    @Logger.io
    async def execute(self, *, pathway_id: int, option_id: int) -> None:
        """
        Raises:
            NotFoundError: Pathway or option missing
            FieldValidationError: Option is the default, or the last one of an active pathway
        """
        async with self.uow:
            pathway = await self.uow.pathways.get_by_id(pathway_id=pathway_id, for_update=True)
            if not pathway:
                raise NotFoundError(f'Pathway {pathway_id} not found')

            option = ensure_option_belongs(
                pathway_id=pathway_id,
                option_id=option_id,
                option=await self.uow.pathway_options.get_by_id(option_id=option_id),
            )
            options = await self.uow.pathway_options.list_by_pathway(pathway_id=pathway_id)
            ensure_option_removable(pathway=pathway, option=option, option_count=len(options))

            await self.uow.pathway_options.soft_delete(option_id=option_id)
            await self.uow.commit()
