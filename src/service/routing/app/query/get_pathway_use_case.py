from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.routing.app.dto.pathway_detail import PathwayDetail
from src.service.routing.app.interface.i_pathway_query_repo import IPathwayQueryRepo


class GetPathwayUseCase:
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
    async def execute(self, *, pathway_id: int) -> PathwayDetail:
        pathway = await self.pathway_query_repo.get_by_id(pathway_id=pathway_id)
        if not pathway:
            raise NotFoundError(f'Pathway {pathway_id} not found')

        options = await self.pathway_query_repo.list_options(pathway_id=pathway_id)
        return PathwayDetail(pathway=pathway, options=options)
