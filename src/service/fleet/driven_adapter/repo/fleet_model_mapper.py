"""Conversions between fleet ORM rows and domain entities"""

from typing import Any, Dict, List

from src.service.fleet.domain.entity.bus_seat_entity import BusSeat
from src.service.fleet.domain.entity.seat_diagram_entity import SeatDiagram
from src.service.fleet.domain.enum.seat_type import SeatType
from src.service.fleet.domain.enum.space_type import SpaceType
from src.service.fleet.domain.value_object.floor_seats import FloorSeats
from src.service.fleet.domain.value_object.seat_position import SeatPosition
from src.service.fleet.driven_adapter.model.bus_seat_model import BusSeatModel
from src.service.fleet.driven_adapter.model.seat_diagram_model import SeatDiagramModel


def floors_to_json(floors: List[FloorSeats]) -> List[Dict[str, int]]:
    return [
        {
            'floor_number': floor.floor_number,
            'num_rows': floor.num_rows,
            'seats_left': floor.seats_left,
            'seats_right': floor.seats_right,
        }
        for floor in floors
    ]


def floors_from_json(raw: List[Dict[str, Any]] | None) -> List[FloorSeats]:
    return [
        FloorSeats(
            floor_number=int(item['floor_number']),
            num_rows=int(item['num_rows']),
            seats_left=int(item['seats_left']),
            seats_right=int(item['seats_right']),
        )
        for item in raw or []
    ]


def diagram_model_to_entity(model: SeatDiagramModel) -> SeatDiagram:
    return SeatDiagram(
        id=model.id,
        name=model.name,
        description=model.description,
        max_capacity=model.max_capacity,
        num_floors=model.num_floors,
        seats_per_floor=floors_from_json(model.seats_per_floor),
        bus_diagram_model_id=model.bus_diagram_model_id,
        bathroom_rows=list(model.bathroom_rows or []),
        total_seats=model.total_seats,
        is_factory_default=model.is_factory_default,
        is_modified=model.is_modified,
        allows_adjacent_seat=model.allows_adjacent_seat,
        observations=model.observations,
        active=model.active,
        created_at=model.created_at,
        updated_at=model.updated_at,
        deleted_at=model.deleted_at,
    )


def copy_diagram_to_model(diagram: SeatDiagram, model: SeatDiagramModel) -> SeatDiagramModel:
    model.name = diagram.name
    model.description = diagram.description
    model.max_capacity = diagram.max_capacity
    model.num_floors = diagram.num_floors
    model.seats_per_floor = floors_to_json(diagram.seats_per_floor)
    model.bus_diagram_model_id = diagram.bus_diagram_model_id
    model.bathroom_rows = list(diagram.bathroom_rows)
    model.total_seats = diagram.total_seats
    model.is_factory_default = diagram.is_factory_default
    model.is_modified = diagram.is_modified
    model.allows_adjacent_seat = diagram.allows_adjacent_seat
    model.observations = diagram.observations
    model.active = diagram.active
    model.deleted_at = diagram.deleted_at
    if diagram.updated_at is not None:
        model.updated_at = diagram.updated_at
    return model


def seat_model_to_entity(model: BusSeatModel) -> BusSeat:
    return BusSeat(
        id=model.id,
        seat_diagram_id=model.seat_diagram_id,
        floor_number=model.floor_number,
        position=SeatPosition(x=model.position_x, y=model.position_y),
        space_type=SpaceType(model.space_type),
        seat_number=model.seat_number,
        seat_type=SeatType(model.seat_type) if model.seat_type else None,
        amenities=list(model.amenities or []),
        reclinement_angle=model.reclinement_angle,
        meta=dict(model.meta or {}),
        active=model.active,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def copy_seat_to_model(seat: BusSeat, model: BusSeatModel) -> BusSeatModel:
    model.seat_diagram_id = seat.seat_diagram_id
    model.floor_number = seat.floor_number
    model.position_x = seat.position.x
    model.position_y = seat.position.y
    model.space_type = seat.space_type.value
    model.seat_number = seat.seat_number
    model.seat_type = seat.seat_type.value if seat.seat_type else None
    model.amenities = list(seat.amenities)
    model.reclinement_angle = seat.reclinement_angle
    model.meta = dict(seat.meta)
    model.active = seat.active
    if seat.updated_at is not None:
        model.updated_at = seat.updated_at
    return model
