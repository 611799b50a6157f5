from typing import Dict, List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.fleet_metrics import FleetMetrics
from src.service.routing.app.dto.pathway_detail import PathwayDetail
from src.service.routing.domain.entity.pathway_option_entity import PathwayOption
from src.service.routing.domain.pathway_option_sync import (
    assign_default_option,
    categorize_operations,
    ensure_minimum_options_and_default,
    validate_bulk_sync_payload,
)
from src.service.routing.domain.toll_sync import (
    all_node_ids,
    build_tolls,
    recalculate_pass_times,
)
from src.service.routing.domain.value_object.option_sync_input import OptionSyncInput


class BulkSyncPathwayOptionsUseCase:
    """
    Make a pathway's options match the given list in one transaction.

    Entries with an id update that option, entries without one create an
    option, and current options left out of the list are soft-deleted.
    """

    def __init__(self, *, uow: AbstractUnitOfWork, fleet_metrics: FleetMetrics) -> None:
        self.uow = uow
        self.fleet_metrics = fleet_metrics

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(get_unit_of_work),
        fleet_metrics: FleetMetrics = Depends(Provide[Container.fleet_metrics]),
    ) -> Self:
        return cls(uow=uow, fleet_metrics=fleet_metrics)

    @Logger.io
    async def execute(self, *, pathway_id: int, options: List[OptionSyncInput]) -> PathwayDetail:
        """
        Steps:
        1. Lock the pathway and load its options, referenced options and toll nodes
        2. Validate the whole payload (collected)
        3. Settle the default and categorize into create/update/delete
        4. Creates, updates, default switch, non-default deletes, old default delete
        5. Toll sync per option; omitted tolls keep the existing ones

        Raises:
            NotFoundError: Pathway missing or soft-deleted
            FieldValidationError: Payload or business rule violations, nothing written
        """
        try:
            async with self.uow:
                pathway = await self.uow.pathways.get_by_id(
                    pathway_id=pathway_id, for_update=True
                )
                if not pathway:
                    raise NotFoundError(f'Pathway {pathway_id} not found')

                current = await self.uow.pathway_options.list_by_pathway(pathway_id=pathway_id)
                referenced = await self.uow.pathway_options.list_by_ids(
                    option_ids=[o.id for o in options if o.id is not None]
                )
                existing_node_ids = await self.uow.nodes.find_existing_ids(
                    node_ids=sorted(all_node_ids(o.tolls for o in options))
                )
                validate_bulk_sync_payload(
                    pathway_id=pathway_id,
                    options=options,
                    referenced_options=referenced,
                    existing_node_ids=existing_node_ids,
                )

                assign_default_option(options, current)
                plan = categorize_operations(options, current)
                ensure_minimum_options_and_default(
                    pathway=pathway, current_options=current, plan=plan
                )

                positions = {id(entry): index for index, entry in enumerate(options, start=1)}
                saved: Dict[int, PathwayOption] = {}

                for entry in plan.to_create:
                    option = PathwayOption.create(
                        pathway_id=pathway_id,
                        name=entry.name,
                        distance_km=entry.distance_km,
                        typical_time_min=entry.typical_time_min,
                        avg_speed_kmh=entry.avg_speed_kmh,
                        description=entry.description,
                        is_default=bool(entry.is_default),
                        is_pass_through=entry.is_pass_through,
                        pass_through_time_min=entry.pass_through_time_min,
                        sequence=entry.sequence
                        if entry.sequence is not None
                        else positions[id(entry)],
                        active=entry.active,
                    )
                    # the flag is moved by set_default once every row exists
                    created = await self.uow.pathway_options.create(
                        option=option.mark_default(False)
                    )
                    saved[id(entry)] = created

                current_by_id = {o.id: o for o in current}
                for entry in plan.to_update:
                    existing = current_by_id[entry.id]
                    updated = existing.mark_default(bool(entry.is_default)).apply_update(
                        name=entry.name,
                        description=entry.description,
                        distance_km=entry.distance_km,
                        typical_time_min=entry.typical_time_min,
                        avg_speed_kmh=entry.avg_speed_kmh,
                        is_pass_through=entry.is_pass_through,
                        pass_through_time_min=entry.pass_through_time_min,
                        sequence=entry.sequence
                        if entry.sequence is not None
                        else positions[id(entry)],
                        active=entry.active,
                    )
                    result = await self.uow.pathway_options.update(option=updated)
                    saved[id(entry)] = result

                    if entry.tolls is None and result.avg_speed_kmh != existing.avg_speed_kmh:
                        tolls = await self.uow.pathway_option_tolls.list_by_option(
                            pathway_option_id=entry.id
                        )
                        await self.uow.pathway_option_tolls.update_pass_times(
                            tolls=recalculate_pass_times(
                                tolls, avg_speed_kmh=result.avg_speed_kmh
                            )
                        )

                new_default = plan.new_default
                if new_default is not None:
                    default_id = saved[id(new_default)].id
                    assert default_id is not None
                    await self.uow.pathway_options.set_default(
                        pathway_id=pathway_id, option_id=default_id
                    )

                for removed in sorted(plan.to_delete, key=lambda o: o.is_default):
                    assert removed.id is not None
                    await self.uow.pathway_options.soft_delete(option_id=removed.id)

                for entry in options:
                    if entry.tolls is None:
                        continue
                    option_id = saved[id(entry)].id
                    assert option_id is not None
                    await self.uow.pathway_option_tolls.replace_for_option(
                        pathway_option_id=option_id,
                        tolls=build_tolls(
                            pathway_option_id=option_id,
                            avg_speed_kmh=saved[id(entry)].avg_speed_kmh,
                            tolls=entry.tolls,
                        ),
                    )

                final_options = await self.uow.pathway_options.list_by_pathway(
                    pathway_id=pathway_id
                )
                await self.uow.commit()
        except Exception:
            self.fleet_metrics.record_pathway_option_sync(result='error')
            raise

        self.fleet_metrics.record_pathway_option_sync(result='success')
        Logger.base.info(
            f'🔁 [OPTION_SYNC] pathway={pathway_id} created={len(plan.to_create)} '
            f'updated={len(plan.to_update)} deleted={len(plan.to_delete)}'
        )
        return PathwayDetail(pathway=pathway, options=final_options)
