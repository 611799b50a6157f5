from typing import List, Self

from fastapi import Depends

from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.routing.domain.entity.pathway_option_toll_entity import PathwayOptionToll
from src.service.routing.domain.pathway_rules import ensure_option_belongs
from src.service.routing.domain.toll_sync import build_tolls, validate_tolls
from src.service.routing.domain.value_object.toll_input import TollInput


class SyncPathwayOptionTollsUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow)

    @Logger.io
    async def execute(
        self, *, pathway_id: int, option_id: int, tolls: List[TollInput]
    ) -> List[PathwayOptionToll]:
        """
        Replace the option's tolls with the given list, numbered 1..N.
        An empty list removes every toll.
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
            validate_tolls(
                tolls,
                existing_node_ids=await self.uow.nodes.find_existing_ids(
                    node_ids=[t.node_id for t in tolls]
                ),
                avg_speed_kmh=option.avg_speed_kmh,
            )

            saved = await self.uow.pathway_option_tolls.replace_for_option(
                pathway_option_id=option_id,
                tolls=build_tolls(
                    pathway_option_id=option_id, avg_speed_kmh=option.avg_speed_kmh, tolls=tolls
                ),
            )
            await self.uow.commit()

        return saved
