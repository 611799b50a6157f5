from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.platform.types.camel_model import CamelModel
from src.service.routing.app.dto.pathway_detail import PathwayDetail
from src.service.routing.domain.entity.pathway_entity import Pathway
from src.service.routing.domain.entity.pathway_option_entity import PathwayOption
from src.service.routing.domain.entity.pathway_option_toll_entity import PathwayOptionToll
from src.service.routing.domain.value_object.option_sync_input import OptionSyncInput
from src.service.routing.domain.value_object.toll_input import TollInput


# ============================ Tolls ============================


class TollInputSchema(CamelModel):
    node_id: int
    pass_time_min: Optional[int] = None
    distance_km: Optional[float] = None

    def to_toll_input(self) -> TollInput:
        return TollInput(
            node_id=self.node_id, pass_time_min=self.pass_time_min, distance_km=self.distance_km
        )


class SyncTollsRequest(CamelModel):
    tolls: List[TollInputSchema] = Field(default_factory=list)

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            'example': {
                'tolls': [
                    {'nodeId': 12, 'passTimeMin': 15},
                    {'nodeId': 31, 'distanceKm': 120.5},
                ]
            }
        },
    )


class TollResponse(CamelModel):
    id: Optional[int]
    pathway_option_id: int
    node_id: int
    sequence: int
    pass_time_min: int
    distance_km: Optional[float]

    @classmethod
    def from_entity(cls, toll: PathwayOptionToll) -> 'TollResponse':
        return cls(
            id=toll.id,
            pathway_option_id=toll.pathway_option_id,
            node_id=toll.node_id,
            sequence=toll.sequence,
            pass_time_min=toll.pass_time_min,
            distance_km=toll.distance_km,
        )


# ============================ Options ============================


class PathwayOptionCreateRequest(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    distance_km: Optional[float] = None
    typical_time_min: Optional[int] = None
    avg_speed_kmh: Optional[float] = None
    is_default: Optional[bool] = None
    is_pass_through: bool = False
    pass_through_time_min: Optional[int] = None
    sequence: Optional[int] = None
    active: bool = True
    tolls: Optional[List[TollInputSchema]] = None


class PathwayOptionUpdateRequest(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    distance_km: Optional[float] = None
    typical_time_min: Optional[int] = None
    avg_speed_kmh: Optional[float] = None
    is_pass_through: Optional[bool] = None
    pass_through_time_min: Optional[int] = None
    sequence: Optional[int] = None
    active: Optional[bool] = None

    def to_changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True, by_alias=False)


class OptionSyncSchema(CamelModel):
    id: Optional[int] = None
    name: str
    description: Optional[str] = None
    distance_km: Optional[float] = None
    typical_time_min: Optional[int] = None
    avg_speed_kmh: Optional[float] = None
    is_default: Optional[bool] = None
    is_pass_through: bool = False
    pass_through_time_min: Optional[int] = None
    sequence: Optional[int] = None
    active: bool = True
    tolls: Optional[List[TollInputSchema]] = None

    def to_sync_input(self) -> OptionSyncInput:
        return OptionSyncInput(
            id=self.id,
            name=self.name,
            description=self.description,
            distance_km=self.distance_km,
            typical_time_min=self.typical_time_min,
            avg_speed_kmh=self.avg_speed_kmh,
            is_default=self.is_default,
            is_pass_through=self.is_pass_through,
            pass_through_time_min=self.pass_through_time_min,
            sequence=self.sequence,
            active=self.active,
            tolls=[t.to_toll_input() for t in self.tolls] if self.tolls is not None else None,
        )


class BulkSyncOptionsRequest(CamelModel):
    options: List[OptionSyncSchema]

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            'example': {
                'options': [
                    {'id': 7, 'name': 'Highway', 'distanceKm': 300, 'typicalTimeMin': 200},
                    {
                        'name': 'Free road',
                        'distanceKm': 320,
                        'typicalTimeMin': 260,
                        'isDefault': True,
                        'tolls': [{'nodeId': 12, 'distanceKm': 80}],
                    },
                ]
            }
        },
    )


class PathwayOptionResponse(CamelModel):
    id: int
    pathway_id: int
    name: Optional[str]
    description: Optional[str]
    distance_km: Optional[float]
    typical_time_min: Optional[int]
    avg_speed_kmh: Optional[float]
    is_default: bool
    is_pass_through: bool
    pass_through_time_min: Optional[int]
    sequence: Optional[int]
    active: bool
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    @classmethod
    def from_entity(cls, option: PathwayOption) -> 'PathwayOptionResponse':
        if option.id is None:
            raise ValueError('Pathway option ID should not be None after persistence.')

        return cls(
            id=option.id,
            pathway_id=option.pathway_id,
            name=option.name,
            description=option.description,
            distance_km=option.distance_km,
            typical_time_min=option.typical_time_min,
            avg_speed_kmh=option.avg_speed_kmh,
            is_default=option.is_default,
            is_pass_through=option.is_pass_through,
            pass_through_time_min=option.pass_through_time_min,
            sequence=option.sequence,
            active=option.active,
            created_at=option.created_at,
            updated_at=option.updated_at,
        )


# ============================ Pathways ============================


class PathwayCreateRequest(CamelModel):
    name: str
    code: str
    origin_node_id: int
    destination_node_id: int
    description: Optional[str] = None
    is_sellable: bool = False
    is_empty_trip: bool = False
    active: bool = False

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            'example': {
                'name': 'Mexico City - Puebla',
                'code': 'MEX-PUE',
                'originNodeId': 1,
                'destinationNodeId': 2,
                'isSellable': True,
            }
        },
    )


class PathwayUpdateRequest(CamelModel):
    name: Optional[str] = None
    code: Optional[str] = None
    description: Optional[str] = None
    origin_node_id: Optional[int] = None
    destination_node_id: Optional[int] = None
    is_sellable: Optional[bool] = None
    is_empty_trip: Optional[bool] = None
    active: Optional[bool] = None

    def to_changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True, by_alias=False)


class PathwayResponse(CamelModel):
    id: int
    name: str
    code: str
    description: Optional[str]
    origin_node_id: int
    destination_node_id: int
    is_sellable: bool
    is_empty_trip: bool
    active: bool
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    @classmethod
    def from_entity(cls, pathway: Pathway) -> 'PathwayResponse':
        if pathway.id is None:
            raise ValueError('Pathway ID should not be None after persistence.')

        return cls(
            id=pathway.id,
            name=pathway.name,
            code=pathway.code,
            description=pathway.description,
            origin_node_id=pathway.origin_node_id,
            destination_node_id=pathway.destination_node_id,
            is_sellable=pathway.is_sellable,
            is_empty_trip=pathway.is_empty_trip,
            active=pathway.active,
            created_at=pathway.created_at,
            updated_at=pathway.updated_at,
        )


class PathwayDetailResponse(PathwayResponse):
    options: List[PathwayOptionResponse]

    @classmethod
    def from_detail(cls, detail: PathwayDetail) -> 'PathwayDetailResponse':
        base = PathwayResponse.from_entity(detail.pathway)
        return cls(
            **base.model_dump(),
            options=[PathwayOptionResponse.from_entity(o) for o in detail.options],
        )
