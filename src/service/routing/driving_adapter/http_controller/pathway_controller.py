from typing import List

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.routing.app.command.add_pathway_option_use_case import AddPathwayOptionUseCase
from src.service.routing.app.command.bulk_sync_pathway_options_use_case import (
    BulkSyncPathwayOptionsUseCase,
)
from src.service.routing.app.command.create_pathway_use_case import CreatePathwayUseCase
from src.service.routing.app.command.remove_pathway_option_use_case import (
    RemovePathwayOptionUseCase,
)
from src.service.routing.app.command.set_default_pathway_option_use_case import (
    SetDefaultPathwayOptionUseCase,
)
from src.service.routing.app.command.sync_pathway_option_tolls_use_case import (
    SyncPathwayOptionTollsUseCase,
)
from src.service.routing.app.command.update_pathway_option_use_case import (
    UpdatePathwayOptionUseCase,
)
from src.service.routing.app.command.update_pathway_use_case import UpdatePathwayUseCase
from src.service.routing.app.query.get_pathway_use_case import GetPathwayUseCase
from src.service.routing.app.query.list_pathway_option_tolls_use_case import (
    ListPathwayOptionTollsUseCase,
)
from src.service.routing.driving_adapter.schema.pathway_schema import (
    BulkSyncOptionsRequest,
    PathwayCreateRequest,
    PathwayDetailResponse,
    PathwayOptionCreateRequest,
    PathwayOptionResponse,
    PathwayOptionUpdateRequest,
    PathwayResponse,
    PathwayUpdateRequest,
    SyncTollsRequest,
    TollResponse,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_pathway(
    request: PathwayCreateRequest,
    use_case: CreatePathwayUseCase = Depends(CreatePathwayUseCase.depends),
) -> PathwayResponse:
    pathway = await use_case.execute(
        name=request.name,
        code=request.code,
        origin_node_id=request.origin_node_id,
        destination_node_id=request.destination_node_id,
        description=request.description,
        is_sellable=request.is_sellable,
        is_empty_trip=request.is_empty_trip,
        active=request.active,
    )
    return PathwayResponse.from_entity(pathway)


@router.get('/{pathway_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_pathway(
    pathway_id: int,
    use_case: GetPathwayUseCase = Depends(GetPathwayUseCase.depends),
) -> PathwayDetailResponse:
    detail = await use_case.execute(pathway_id=pathway_id)
    return PathwayDetailResponse.from_detail(detail)


@router.patch('/{pathway_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def update_pathway(
    pathway_id: int,
    request: PathwayUpdateRequest,
    use_case: UpdatePathwayUseCase = Depends(UpdatePathwayUseCase.depends),
) -> PathwayResponse:
    pathway = await use_case.execute(pathway_id=pathway_id, **request.to_changes())
    return PathwayResponse.from_entity(pathway)


# ============================ Option Endpoints ============================


@router.post('/{pathway_id}/options', status_code=status.HTTP_201_CREATED)
@Logger.io
async def add_pathway_option(
    pathway_id: int,
    request: PathwayOptionCreateRequest,
    use_case: AddPathwayOptionUseCase = Depends(AddPathwayOptionUseCase.depends),
) -> PathwayOptionResponse:
    option = await use_case.execute(
        pathway_id=pathway_id,
        name=request.name,
        distance_km=request.distance_km,
        typical_time_min=request.typical_time_min,
        avg_speed_kmh=request.avg_speed_kmh,
        description=request.description,
        is_default=request.is_default,
        is_pass_through=request.is_pass_through,
        pass_through_time_min=request.pass_through_time_min,
        sequence=request.sequence,
        active=request.active,
        tolls=[t.to_toll_input() for t in request.tolls] if request.tolls else None,
    )
    return PathwayOptionResponse.from_entity(option)


@router.put('/{pathway_id}/options', status_code=status.HTTP_200_OK)
@Logger.io
async def bulk_sync_pathway_options(
    pathway_id: int,
    request: BulkSyncOptionsRequest,
    use_case: BulkSyncPathwayOptionsUseCase = Depends(BulkSyncPathwayOptionsUseCase.depends),
) -> PathwayDetailResponse:
    detail = await use_case.execute(
        pathway_id=pathway_id, options=[o.to_sync_input() for o in request.options]
    )
    return PathwayDetailResponse.from_detail(detail)


@router.patch('/{pathway_id}/options/{option_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def update_pathway_option(
    pathway_id: int,
    option_id: int,
    request: PathwayOptionUpdateRequest,
    use_case: UpdatePathwayOptionUseCase = Depends(UpdatePathwayOptionUseCase.depends),
) -> PathwayOptionResponse:
    option = await use_case.execute(
        pathway_id=pathway_id, option_id=option_id, **request.to_changes()
    )
    return PathwayOptionResponse.from_entity(option)


@router.delete('/{pathway_id}/options/{option_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def remove_pathway_option(
    pathway_id: int,
    option_id: int,
    use_case: RemovePathwayOptionUseCase = Depends(RemovePathwayOptionUseCase.depends),
) -> None:
    await use_case.execute(pathway_id=pathway_id, option_id=option_id)


@router.post('/{pathway_id}/options/{option_id}/set-default', status_code=status.HTTP_200_OK)
@Logger.io
async def set_default_pathway_option(
    pathway_id: int,
    option_id: int,
    use_case: SetDefaultPathwayOptionUseCase = Depends(SetDefaultPathwayOptionUseCase.depends),
) -> PathwayOptionResponse:
    option = await use_case.execute(pathway_id=pathway_id, option_id=option_id)
    return PathwayOptionResponse.from_entity(option)


# ============================ Toll Endpoints ============================


@router.get('/{pathway_id}/options/{option_id}/tolls', status_code=status.HTTP_200_OK)
@Logger.io
async def list_pathway_option_tolls(
    pathway_id: int,
    option_id: int,
    use_case: ListPathwayOptionTollsUseCase = Depends(ListPathwayOptionTollsUseCase.depends),
) -> List[TollResponse]:
    tolls = await use_case.execute(pathway_id=pathway_id, option_id=option_id)
    return [TollResponse.from_entity(t) for t in tolls]


@router.put('/{pathway_id}/options/{option_id}/tolls', status_code=status.HTTP_200_OK)
@Logger.io
async def sync_pathway_option_tolls(
    pathway_id: int,
    option_id: int,
    request: SyncTollsRequest,
    use_case: SyncPathwayOptionTollsUseCase = Depends(SyncPathwayOptionTollsUseCase.depends),
) -> List[TollResponse]:
    tolls = await use_case.execute(
        pathway_id=pathway_id,
        option_id=option_id,
        tolls=[t.to_toll_input() for t in request.tolls],
    )
    return [TollResponse.from_entity(t) for t in tolls]
