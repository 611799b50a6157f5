from typing import List, Optional

import attrs
import pytest

from src.service.routing.domain.entity.node_entity import Node
from src.service.routing.domain.entity.pathway_entity import Pathway
from src.service.routing.domain.entity.pathway_option_entity import PathwayOption
from src.service.routing.domain.entity.pathway_option_toll_entity import PathwayOptionToll
from src.service.routing.domain.value_object.option_sync_input import OptionSyncInput
from src.service.routing.domain.value_object.toll_input import TollInput


def build_pathway(*, origin_node_id: int = 1, destination_node_id: int = 2, **fields) -> Pathway:
    pathway = Pathway.create(
        name=fields.pop('name', 'Mexico City - Puebla'),
        code=fields.pop('code', 'MEX-PUE'),
        origin_node_id=origin_node_id,
        destination_node_id=destination_node_id,
    )
    return attrs.evolve(pathway, **fields)


def build_option(
    *,
    pathway_id: int,
    name: Optional[str] = 'Highway',
    distance_km: float = 120.0,
    typical_time_min: int = 90,
    **fields,
) -> PathwayOption:
    return PathwayOption.create(
        pathway_id=pathway_id,
        name=name,
        distance_km=distance_km,
        typical_time_min=typical_time_min,
        **fields,
    )


def sync_entry(name: str, **fields) -> OptionSyncInput:
    fields.setdefault('distance_km', 100.0)
    fields.setdefault('typical_time_min', 60)
    return OptionSyncInput(name=name, **fields)


@pytest.fixture
def option_factory():
    return build_option


@pytest.fixture
def pathway_factory():
    return build_pathway


@pytest.fixture
def entry():
    return sync_entry


@pytest.fixture
def seeded_nodes(uow) -> List[Node]:
    """Nodes 1..5 exist in the store"""
    return [
        uow.nodes.seed(Node(id=0, name=f'Terminal {i}', code=f'T{i}')) for i in range(1, 6)
    ]


@pytest.fixture
def seed_pathway(uow, seeded_nodes):
    """
    Persist a pathway plus options; the first option is the default.

    Returns (pathway, [options]).
    """

    def _seed(*, options: int = 0, active: bool = False, tolls_per_option: int = 0):
        pathway = uow.pathways.seed(build_pathway(active=active))
        stored: List[PathwayOption] = []
        for index in range(options):
            option = uow.pathway_options.seed(
                build_option(
                    pathway_id=pathway.id,
                    name=f'Option {index + 1}',
                    is_default=index == 0,
                    sequence=index + 1,
                )
            )
            stored.append(option)
            for sequence in range(1, tolls_per_option + 1):
                uow.pathway_option_tolls.seed(
                    PathwayOptionToll(
                        pathway_option_id=option.id,
                        node_id=sequence + 2,
                        sequence=sequence,
                        pass_time_min=sequence * 20,
                        distance_km=sequence * 25.0,
                    )
                )
        return pathway, stored

    return _seed


@pytest.fixture
def toll():
    def _toll(
        node_id: int, pass_time_min: Optional[int] = None, distance_km: Optional[float] = None
    ) -> TollInput:
        return TollInput(node_id=node_id, pass_time_min=pass_time_min, distance_km=distance_km)

    return _toll
