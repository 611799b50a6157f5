from typing import List

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.fleet.app.command.create_seat_diagram_use_case import CreateSeatDiagramUseCase
from src.service.fleet.app.command.create_seats_from_diagram_use_case import (
    CreateSeatsFromDiagramUseCase,
)
from src.service.fleet.app.command.delete_seat_diagram_use_case import DeleteSeatDiagramUseCase
from src.service.fleet.app.command.update_seat_configuration_use_case import (
    UpdateSeatConfigurationUseCase,
)
from src.service.fleet.app.command.update_seat_diagram_use_case import UpdateSeatDiagramUseCase
from src.service.fleet.app.query.get_seat_configuration_use_case import (
    GetSeatConfigurationUseCase,
)
from src.service.fleet.app.query.get_seat_diagram_use_case import GetSeatDiagramUseCase
from src.service.fleet.app.query.list_diagram_seats_use_case import ListDiagramSeatsUseCase
from src.service.fleet.app.query.list_seat_diagrams_use_case import ListSeatDiagramsUseCase
from src.service.fleet.driving_adapter.schema.seat_diagram_schema import (
    FloorLayoutResponse,
    SeatConfigurationResponse,
    SeatConfigurationResultResponse,
    SeatDiagramCreateRequest,
    SeatDiagramResponse,
    SeatDiagramUpdateRequest,
    SeatsCreatedResponse,
    SpaceResponse,
    UpdateSeatConfigurationRequest,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_seat_diagram(
    request: SeatDiagramCreateRequest,
    use_case: CreateSeatDiagramUseCase = Depends(CreateSeatDiagramUseCase.depends),
) -> SeatDiagramResponse:
    diagram = await use_case.execute(
        name=request.name,
        description=request.description,
        max_capacity=request.max_capacity,
        num_floors=request.num_floors,
        seats_per_floor=[f.to_value_object() for f in request.seats_per_floor],
        bus_diagram_model_id=request.bus_diagram_model_id,
        bathroom_rows=request.bathroom_rows,
        is_factory_default=request.is_factory_default,
        allows_adjacent_seat=request.allows_adjacent_seat,
        observations=request.observations,
        active=request.active,
    )
    return SeatDiagramResponse.from_entity(diagram)


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def list_seat_diagrams(
    use_case: ListSeatDiagramsUseCase = Depends(ListSeatDiagramsUseCase.depends),
) -> List[SeatDiagramResponse]:
    diagrams = await use_case.execute()
    return [SeatDiagramResponse.from_entity(d) for d in diagrams]


@router.get('/{seat_diagram_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_seat_diagram(
    seat_diagram_id: int,
    use_case: GetSeatDiagramUseCase = Depends(GetSeatDiagramUseCase.depends),
) -> SeatDiagramResponse:
    diagram = await use_case.execute(seat_diagram_id=seat_diagram_id)
    return SeatDiagramResponse.from_entity(diagram)


@router.patch('/{seat_diagram_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def update_seat_diagram(
    seat_diagram_id: int,
    request: SeatDiagramUpdateRequest,
    use_case: UpdateSeatDiagramUseCase = Depends(UpdateSeatDiagramUseCase.depends),
) -> SeatDiagramResponse:
    diagram = await use_case.execute(seat_diagram_id=seat_diagram_id, **request.to_changes())
    return SeatDiagramResponse.from_entity(diagram)


@router.delete('/{seat_diagram_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_seat_diagram(
    seat_diagram_id: int,
    use_case: DeleteSeatDiagramUseCase = Depends(DeleteSeatDiagramUseCase.depends),
) -> None:
    await use_case.execute(seat_diagram_id=seat_diagram_id)


# ============================ Seat Endpoints ============================


@router.get('/{seat_diagram_id}/seats', status_code=status.HTTP_200_OK)
@Logger.io
async def list_diagram_seats(
    seat_diagram_id: int,
    use_case: ListDiagramSeatsUseCase = Depends(ListDiagramSeatsUseCase.depends),
) -> List[SpaceResponse]:
    seats = await use_case.execute(seat_diagram_id=seat_diagram_id)
    return [SpaceResponse.from_entity(seat) for seat in seats]


@router.get('/{seat_diagram_id}/seat-configuration', status_code=status.HTTP_200_OK)
@Logger.io
async def get_seat_configuration(
    seat_diagram_id: int,
    use_case: GetSeatConfigurationUseCase = Depends(GetSeatConfigurationUseCase.depends),
) -> SeatConfigurationResponse:
    configuration = await use_case.execute(seat_diagram_id=seat_diagram_id)
    return SeatConfigurationResponse(
        floors=[
            FloorLayoutResponse(
                floor_number=floor.floor_number,
                rows=[[SpaceResponse.from_entity(cell) for cell in row] for row in floor.rows],
            )
            for floor in configuration.floors
        ],
        total_seats=configuration.total_seats,
    )


@router.post('/{seat_diagram_id}/create-seats', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_seats_from_diagram(
    seat_diagram_id: int,
    use_case: CreateSeatsFromDiagramUseCase = Depends(CreateSeatsFromDiagramUseCase.depends),
) -> SeatsCreatedResponse:
    result = await use_case.execute(seat_diagram_id=seat_diagram_id)
    return SeatsCreatedResponse(seats_created=result.seats_created)


@router.put('/{seat_diagram_id}/seat-configuration', status_code=status.HTTP_200_OK)
@Logger.io
async def update_seat_configuration(
    seat_diagram_id: int,
    request: UpdateSeatConfigurationRequest,
    use_case: UpdateSeatConfigurationUseCase = Depends(UpdateSeatConfigurationUseCase.depends),
) -> SeatConfigurationResultResponse:
    result = await use_case.execute(
        seat_diagram_id=seat_diagram_id,
        seats=[seat.to_seat_input() for seat in request.seats],
    )
    return SeatConfigurationResultResponse(
        seats_created=result.seats_created,
        seats_updated=result.seats_updated,
        seats_deactivated=result.seats_deactivated,
        total_active_seats=result.total_active_seats,
    )
