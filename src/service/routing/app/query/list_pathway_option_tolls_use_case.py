from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.routing.app.interface.i_pathway_query_repo import IPathwayQueryRepo
from src.service.routing.domain.entity.pathway_option_toll_entity import PathwayOptionToll
from src.service.routing.domain.pathway_rules import ensure_option_belongs


class ListPathwayOptionTollsUseCase:
    def __init__(self, pathway_query_repo: IPathwayQueryRepo):
        self.pathway_query_repo = pathway_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        pathway_query_repo: IPathwayQueryRepo = Depends(Provide[Container.pathway_query_repo]),
    ) -> Self:
        return cls(pathway_query_repo=pathway_query_repo)

    @Logger.io
    async def execute(self, *, pathway_id: int, option_id: int) -> List[PathwayOptionToll]:
        pathway = await self.pathway_query_repo.get_by_id(pathway_id=pathway_id)
        if not pathway:
            raise NotFoundError(f'Pathway {pathway_id} not found')

        ensure_option_belongs(
            pathway_id=pathway_id,
            option_id=option_id,
            option=await self.pathway_query_repo.get_option(option_id=option_id),
        )
        return await self.pathway_query_repo.list_option_tolls(pathway_option_id=option_id)
