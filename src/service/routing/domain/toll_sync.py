"""
Toll list synchronization for a pathway option

Synchronization is destructive: the stored tolls are replaced by the new list,
numbered 1..N in list order.
"""

from typing import Iterable, List, Optional, Set

import attrs

from src.platform.exception.field_error_collector import FieldErrorCode, FieldErrorCollector
from src.service.routing.domain.entity.pathway_option_toll_entity import PathwayOptionToll
from src.service.routing.domain.pathway_option_rules import calculate_toll_pass_time
from src.service.routing.domain.value_object.toll_input import TollInput


CONSECUTIVE_DUPLICATE = 'Consecutive tolls cannot share the same node'
PASS_TIME_REQUIRED = 'Pass time is required when it cannot be derived from distance and speed'


def toll_node_not_found(node_id: int) -> str:
    return f'Toll node {node_id} not found'


def duplicate_toll_node(node_id: int) -> str:
    return f'Duplicate toll node {node_id} in option'


def collect_toll_structure_errors(
    tolls: List[TollInput], collector: FieldErrorCollector, *, prefix: str = ''
) -> None:
    """Repeated nodes anywhere in the list, and the same node twice in a row"""
    seen: Set[int] = set()
    for index, toll in enumerate(tolls):
        if toll.node_id in seen:
            collector.add_error(
                f'{prefix}tolls[{index}].nodeId',
                FieldErrorCode.DUPLICATE,
                duplicate_toll_node(toll.node_id),
                toll.node_id,
            )
        seen.add(toll.node_id)

        if index > 0 and tolls[index - 1].node_id == toll.node_id:
            collector.add_error(
                f'{prefix}tolls[{index}].nodeId',
                FieldErrorCode.BUSINESS_RULE_VIOLATION,
                CONSECUTIVE_DUPLICATE,
                toll.node_id,
            )


def collect_missing_node_errors(
    tolls: List[TollInput],
    existing_node_ids: Set[int],
    collector: FieldErrorCollector,
    *,
    prefix: str = '',
) -> None:
    for index, toll in enumerate(tolls):
        if toll.node_id not in existing_node_ids:
            collector.add_error(
                f'{prefix}tolls[{index}].nodeId',
                FieldErrorCode.NOT_FOUND,
                toll_node_not_found(toll.node_id),
                toll.node_id,
            )


def collect_pass_time_errors(
    tolls: List[TollInput],
    avg_speed_kmh: Optional[float],
    collector: FieldErrorCollector,
    *,
    prefix: str = '',
) -> None:
    for index, toll in enumerate(tolls):
        derivable = toll.distance_km is not None and bool(avg_speed_kmh)
        if toll.pass_time_min is None and not derivable:
            collector.add_error(
                f'{prefix}tolls[{index}].passTimeMin',
                FieldErrorCode.REQUIRED,
                PASS_TIME_REQUIRED,
                None,
            )
        elif toll.pass_time_min is not None and toll.pass_time_min < 0:
            collector.add_error(
                f'{prefix}tolls[{index}].passTimeMin',
                FieldErrorCode.OUT_OF_RANGE,
                'Pass time cannot be negative',
                toll.pass_time_min,
            )


def all_node_ids(toll_lists: Iterable[Optional[List[TollInput]]]) -> Set[int]:
    return {toll.node_id for tolls in toll_lists if tolls for toll in tolls}


def validate_tolls(
    tolls: List[TollInput], *, existing_node_ids: Set[int], avg_speed_kmh: Optional[float]
) -> None:
    """
    Raises:
        FieldValidationError: Unknown nodes, repeated nodes or missing pass times
    """
    collector = FieldErrorCollector()
    collect_missing_node_errors(tolls, existing_node_ids, collector)
    collect_toll_structure_errors(tolls, collector)
    collect_pass_time_errors(tolls, avg_speed_kmh, collector)
    collector.throw_if_errors()


def build_tolls(
    *, pathway_option_id: int, avg_speed_kmh: Optional[float], tolls: List[TollInput]
) -> List[PathwayOptionToll]:
    built: List[PathwayOptionToll] = []
    for sequence, toll in enumerate(tolls, start=1):
        pass_time_min = toll.pass_time_min
        if pass_time_min is None:
            assert toll.distance_km is not None and avg_speed_kmh
            pass_time_min = calculate_toll_pass_time(
                distance_km=toll.distance_km, avg_speed_kmh=avg_speed_kmh
            )
        built.append(
            PathwayOptionToll(
                pathway_option_id=pathway_option_id,
                node_id=toll.node_id,
                sequence=sequence,
                pass_time_min=pass_time_min,
                distance_km=toll.distance_km,
            )
        )
    return built


def recalculate_pass_times(
    tolls: List[PathwayOptionToll], *, avg_speed_kmh: float
) -> List[PathwayOptionToll]:
    """Tolls with a distance whose pass time changes at the new speed"""
    changed: List[PathwayOptionToll] = []
    for toll in tolls:
        if toll.distance_km is None:
            continue
        pass_time_min = calculate_toll_pass_time(
            distance_km=toll.distance_km, avg_speed_kmh=avg_speed_kmh
        )
        if pass_time_min != toll.pass_time_min:
            changed.append(attrs.evolve(toll, pass_time_min=pass_time_min))
    return changed
