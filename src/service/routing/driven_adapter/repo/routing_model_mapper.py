"""Conversions between routing ORM rows and domain entities"""

from src.service.routing.domain.entity.node_entity import Node
from src.service.routing.domain.entity.pathway_entity import Pathway
from src.service.routing.domain.entity.pathway_option_entity import PathwayOption
from src.service.routing.domain.entity.pathway_option_toll_entity import PathwayOptionToll
from src.service.routing.driven_adapter.model.node_model import NodeModel
from src.service.routing.driven_adapter.model.pathway_model import PathwayModel
from src.service.routing.driven_adapter.model.pathway_option_model import PathwayOptionModel
from src.service.routing.driven_adapter.model.pathway_option_toll_model import (
    PathwayOptionTollModel,
)


def node_model_to_entity(model: NodeModel) -> Node:
    return Node(id=model.id, name=model.name, code=model.code)


def pathway_model_to_entity(model: PathwayModel) -> Pathway:
    return Pathway(
        id=model.id,
        name=model.name,
        code=model.code,
        description=model.description,
        origin_node_id=model.origin_node_id,
        destination_node_id=model.destination_node_id,
        is_sellable=model.is_sellable,
        is_empty_trip=model.is_empty_trip,
        active=model.active,
        created_at=model.created_at,
        updated_at=model.updated_at,
        deleted_at=model.deleted_at,
    )


def copy_pathway_to_model(pathway: Pathway, model: PathwayModel) -> PathwayModel:
    model.name = pathway.name
    model.code = pathway.code
    model.description = pathway.description
    model.origin_node_id = pathway.origin_node_id
    model.destination_node_id = pathway.destination_node_id
    model.is_sellable = pathway.is_sellable
    model.is_empty_trip = pathway.is_empty_trip
    model.active = pathway.active
    model.deleted_at = pathway.deleted_at
    if pathway.updated_at is not None:
        model.updated_at = pathway.updated_at
    return model


def option_model_to_entity(model: PathwayOptionModel) -> PathwayOption:
    return PathwayOption(
        id=model.id,
        pathway_id=model.pathway_id,
        name=model.name,
        description=model.description,
        distance_km=model.distance_km,
        typical_time_min=model.typical_time_min,
        avg_speed_kmh=model.avg_speed_kmh,
        is_default=model.is_default,
        is_pass_through=model.is_pass_through,
        pass_through_time_min=model.pass_through_time_min,
        sequence=model.sequence,
        active=model.active,
        created_at=model.created_at,
        updated_at=model.updated_at,
        deleted_at=model.deleted_at,
    )


def copy_option_to_model(option: PathwayOption, model: PathwayOptionModel) -> PathwayOptionModel:
    model.pathway_id = option.pathway_id
    model.name = option.name
    model.description = option.description
    model.distance_km = option.distance_km
    model.typical_time_min = option.typical_time_min
    model.avg_speed_kmh = option.avg_speed_kmh
    model.is_default = option.is_default
    model.is_pass_through = option.is_pass_through
    model.pass_through_time_min = option.pass_through_time_min
    model.sequence = option.sequence
    model.active = option.active
    model.deleted_at = option.deleted_at
    if option.updated_at is not None:
        model.updated_at = option.updated_at
    return model


def toll_model_to_entity(model: PathwayOptionTollModel) -> PathwayOptionToll:
    return PathwayOptionToll(
        id=model.id,
        pathway_option_id=model.pathway_option_id,
        node_id=model.node_id,
        sequence=model.sequence,
        pass_time_min=model.pass_time_min,
        distance_km=model.distance_km,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def toll_entity_to_model(toll: PathwayOptionToll) -> PathwayOptionTollModel:
    return PathwayOptionTollModel(
        pathway_option_id=toll.pathway_option_id,
        node_id=toll.node_id,
        sequence=toll.sequence,
        pass_time_min=toll.pass_time_min,
        distance_km=toll.distance_km,
    )
