from typing import List, Optional, Self

from fastapi import Depends

from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.routing.domain.entity.pathway_option_entity import PathwayOption
from src.service.routing.domain.pathway_rules import resolve_new_option_default
from src.service.routing.domain.toll_sync import build_tolls, validate_tolls
from src.service.routing.domain.value_object.toll_input import TollInput


class AddPathwayOptionUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow)

    @Logger.io
    async def execute(
        self,
        *,
        pathway_id: int,
        name: Optional[str],
        distance_km: Optional[float],
        typical_time_min: Optional[int],
        avg_speed_kmh: Optional[float] = None,
        description: Optional[str] = None,
        is_default: Optional[bool] = None,
        is_pass_through: bool = False,
        pass_through_time_min: Optional[int] = None,
        sequence: Optional[int] = None,
        active: bool = True,
        tolls: Optional[List[TollInput]] = None,
    ) -> PathwayOption:
        """
        The first option of a pathway becomes its default unless is_default is given.
        Becoming the default clears the flag on every other option of the pathway.
        """
        async with self.uow:
            pathway = await self.uow.pathways.get_by_id(pathway_id=pathway_id, for_update=True)
            if not pathway:
                raise NotFoundError(f'Pathway {pathway_id} not found')

            existing = await self.uow.pathway_options.list_by_pathway(pathway_id=pathway_id)
            option = PathwayOption.create(
                pathway_id=pathway_id,
                name=name,
                distance_km=distance_km,
                typical_time_min=typical_time_min,
                avg_speed_kmh=avg_speed_kmh,
                description=description,
                is_default=resolve_new_option_default(
                    requested=is_default, existing_count=len(existing)
                ),
                is_pass_through=is_pass_through,
                pass_through_time_min=pass_through_time_min,
                sequence=sequence if sequence is not None else len(existing) + 1,
                active=active,
            )

            if tolls:
                validate_tolls(
                    tolls,
                    existing_node_ids=await self.uow.nodes.find_existing_ids(
                        node_ids=[t.node_id for t in tolls]
                    ),
                    avg_speed_kmh=option.avg_speed_kmh,
                )

            created = await self.uow.pathway_options.create(option=option)
            assert created.id is not None
            if created.is_default:
                await self.uow.pathway_options.set_default(
                    pathway_id=pathway_id, option_id=created.id
                )
            if tolls:
                await self.uow.pathway_option_tolls.replace_for_option(
                    pathway_option_id=created.id,
                    tolls=build_tolls(
                        pathway_option_id=created.id,
                        avg_speed_kmh=created.avg_speed_kmh,
                        tolls=tolls,
                    ),
                )
            await self.uow.commit()

        Logger.base.info(f'➕ [OPTION] Pathway {pathway_id} gained option {created.id}')
        return created
