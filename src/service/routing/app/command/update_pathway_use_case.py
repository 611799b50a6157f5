from typing import Any, Self

from fastapi import Depends

from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.routing.domain.entity.pathway_entity import Pathway
from src.service.routing.domain.pathway_rules import ensure_nodes_exist


class UpdatePathwayUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow)

    @Logger.io
    async def execute(self, *, pathway_id: int, **changes: Any) -> Pathway:
        """
        Raises:
            NotFoundError: Pathway missing or soft-deleted
            FieldValidationError: Unknown nodes or pathway rule violations
        """
        async with self.uow:
            pathway = await self.uow.pathways.get_by_id(pathway_id=pathway_id, for_update=True)
            if not pathway:
                raise NotFoundError(f'Pathway {pathway_id} not found')

            origin_node_id = changes.get('origin_node_id')
            destination_node_id = changes.get('destination_node_id')
            node_ids = [n for n in (origin_node_id, destination_node_id) if n is not None]
            if node_ids:
                ensure_nodes_exist(
                    origin_node_id=origin_node_id,
                    destination_node_id=destination_node_id,
                    existing_node_ids=await self.uow.nodes.find_existing_ids(node_ids=node_ids),
                )

            options = await self.uow.pathway_options.list_by_pathway(pathway_id=pathway_id)
            updated = pathway.apply_update(option_count=len(options), **changes)

            saved = await self.uow.pathways.update(pathway=updated)
            await self.uow.commit()

        return saved
