from typing import Optional, Self

from fastapi import Depends

from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.logging.loguru_io import Logger
from src.service.routing.domain.entity.pathway_entity import Pathway
from src.service.routing.domain.pathway_rules import ensure_nodes_exist


class CreatePathwayUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow)

    @Logger.io
    async def execute(
        self,
        *,
        name: str,
        code: str,
        origin_node_id: int,
        destination_node_id: int,
        description: Optional[str] = None,
        is_sellable: bool = False,
        is_empty_trip: bool = False,
        active: bool = False,
    ) -> Pathway:
        pathway = Pathway.create(
            name=name,
            code=code,
            origin_node_id=origin_node_id,
            destination_node_id=destination_node_id,
            description=description,
            is_sellable=is_sellable,
            is_empty_trip=is_empty_trip,
            active=active,
        )

        async with self.uow:
            existing_node_ids = await self.uow.nodes.find_existing_ids(
                node_ids=[origin_node_id, destination_node_id]
            )
            ensure_nodes_exist(
                origin_node_id=origin_node_id,
                destination_node_id=destination_node_id,
                existing_node_ids=existing_node_ids,
            )

            created = await self.uow.pathways.create(pathway=pathway)
            await self.uow.commit()

        return created
