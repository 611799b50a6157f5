from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from src.platform.types.camel_model import CamelModel, lower_enum_value
from src.service.fleet.domain.entity.bus_seat_entity import BusSeat
from src.service.fleet.domain.entity.seat_diagram_entity import SeatDiagram
from src.service.fleet.domain.enum.seat_type import SeatType
from src.service.fleet.domain.enum.space_type import SpaceType
from src.service.fleet.domain.value_object.floor_seats import FloorSeats
from src.service.fleet.domain.value_object.seat_input import SeatInput
from src.service.fleet.domain.value_object.seat_position import SeatPosition


# ============================ Diagram ============================


class FloorSeatsSchema(CamelModel):
    floor_number: int
    num_rows: int
    seats_left: int
    seats_right: int

    def to_value_object(self) -> FloorSeats:
        return FloorSeats(
            floor_number=self.floor_number,
            num_rows=self.num_rows,
            seats_left=self.seats_left,
            seats_right=self.seats_right,
        )

    @classmethod
    def from_value_object(cls, floor: FloorSeats) -> 'FloorSeatsSchema':
        return cls(
            floor_number=floor.floor_number,
            num_rows=floor.num_rows,
            seats_left=floor.seats_left,
            seats_right=floor.seats_right,
        )


class SeatDiagramCreateRequest(CamelModel):
    name: str
    description: Optional[str] = None
    max_capacity: int
    num_floors: int = 1
    seats_per_floor: List[FloorSeatsSchema]
    bus_diagram_model_id: Optional[int] = None
    bathroom_rows: List[int] = Field(default_factory=list)
    is_factory_default: bool = False
    allows_adjacent_seat: bool = False
    observations: Optional[str] = None
    active: bool = True

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            'example': {
                'name': 'Double Decker 2+2',
                'maxCapacity': 40,
                'numFloors': 1,
                'seatsPerFloor': [
                    {'floorNumber': 1, 'numRows': 10, 'seatsLeft': 2, 'seatsRight': 2}
                ],
            }
        },
    )


class SeatDiagramUpdateRequest(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    max_capacity: Optional[int] = None
    num_floors: Optional[int] = None
    seats_per_floor: Optional[List[FloorSeatsSchema]] = None
    bathroom_rows: Optional[List[int]] = None
    allows_adjacent_seat: Optional[bool] = None
    observations: Optional[str] = None
    active: Optional[bool] = None

    def to_changes(self) -> Dict[str, Any]:
        """Only the fields the client actually sent"""
        changes = self.model_dump(exclude_unset=True, by_alias=False)
        if self.seats_per_floor is not None:
            changes['seats_per_floor'] = [f.to_value_object() for f in self.seats_per_floor]
        return changes


class SeatDiagramResponse(CamelModel):
    id: int
    name: str
    description: Optional[str]
    max_capacity: int
    num_floors: int
    seats_per_floor: List[FloorSeatsSchema]
    bus_diagram_model_id: Optional[int]
    bathroom_rows: List[int]
    total_seats: int
    is_factory_default: bool
    is_modified: bool
    allows_adjacent_seat: bool
    observations: Optional[str]
    active: bool
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    @classmethod
    def from_entity(cls, diagram: SeatDiagram) -> 'SeatDiagramResponse':
        if diagram.id is None:
            raise ValueError('Seat diagram ID should not be None after persistence.')

        return cls(
            id=diagram.id,
            name=diagram.name,
            description=diagram.description,
            max_capacity=diagram.max_capacity,
            num_floors=diagram.num_floors,
            seats_per_floor=[
                FloorSeatsSchema.from_value_object(f) for f in diagram.seats_per_floor
            ],
            bus_diagram_model_id=diagram.bus_diagram_model_id,
            bathroom_rows=diagram.bathroom_rows,
            total_seats=diagram.total_seats,
            is_factory_default=diagram.is_factory_default,
            is_modified=diagram.is_modified,
            allows_adjacent_seat=diagram.allows_adjacent_seat,
            observations=diagram.observations,
            active=diagram.active,
            created_at=diagram.created_at,
            updated_at=diagram.updated_at,
        )


# ============================ Seats ============================


class PositionSchema(CamelModel):
    x: int
    y: int


class SeatInputSchema(CamelModel):
    seat_number: Optional[str] = None
    floor_number: int
    position: PositionSchema
    space_type: SpaceType = SpaceType.SEAT
    seat_type: Optional[SeatType] = None
    amenities: Optional[List[str]] = None
    reclinement_angle: Optional[int] = None
    meta: Optional[Dict[str, Any]] = None
    active: bool = True

    @field_validator('space_type', 'seat_type', mode='before')
    @classmethod
    def _case_insensitive_enum(cls, value: Any) -> Any:
        return lower_enum_value(value)

    def to_seat_input(self) -> SeatInput:
        return SeatInput(
            floor_number=self.floor_number,
            position=SeatPosition(x=self.position.x, y=self.position.y),
            space_type=self.space_type,
            seat_number=self.seat_number,
            seat_type=self.seat_type,
            amenities=self.amenities,
            reclinement_angle=self.reclinement_angle,
            meta=self.meta,
            active=self.active,
        )


class UpdateSeatConfigurationRequest(CamelModel):
    seats: List[SeatInputSchema]

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            'example': {
                'seats': [
                    {
                        'seatNumber': '1A',
                        'floorNumber': 1,
                        'position': {'x': 0, 'y': 1},
                        'spaceType': 'seat',
                        'seatType': 'premium',
                        'amenities': ['usb'],
                    },
                    {'floorNumber': 1, 'position': {'x': 2, 'y': 1}, 'spaceType': 'hallway'},
                ]
            }
        },
    )


class SpaceResponse(CamelModel):
    id: Optional[int]
    floor_number: int
    position: PositionSchema
    space_type: SpaceType
    seat_number: Optional[str]
    seat_type: Optional[SeatType]
    amenities: List[str]
    reclinement_angle: Optional[int]
    meta: Dict[str, Any]
    active: bool

    @classmethod
    def from_entity(cls, seat: BusSeat) -> 'SpaceResponse':
        return cls(
            id=seat.id,
            floor_number=seat.floor_number,
            position=PositionSchema(x=seat.position.x, y=seat.position.y),
            space_type=seat.space_type,
            seat_number=seat.seat_number,
            seat_type=seat.seat_type,
            amenities=seat.amenities,
            reclinement_angle=seat.reclinement_angle,
            meta=seat.meta,
            active=seat.active,
        )


class FloorLayoutResponse(CamelModel):
    floor_number: int
    rows: List[List[SpaceResponse]]


class SeatConfigurationResponse(CamelModel):
    floors: List[FloorLayoutResponse]
    total_seats: int


class SeatConfigurationResultResponse(CamelModel):
    seats_created: int
    seats_updated: int
    seats_deactivated: int
    total_active_seats: int


class SeatsCreatedResponse(CamelModel):
    seats_created: int
