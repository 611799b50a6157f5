"""
Bulk synchronization of a pathway's options

The caller sends the complete desired list. Entries with an id update that
option, entries without one create a new option, and current options missing
from the list are removed. Everything here is pure; the use case executes the
resulting plan inside one Unit of Work.
"""

from typing import List, Optional, Set

import attrs

from src.platform.exception.field_error_collector import FieldErrorCode, FieldErrorCollector
from src.service.routing.domain.entity.pathway_entity import Pathway
from src.service.routing.domain.entity.pathway_option_entity import PathwayOption
from src.service.routing.domain.pathway_rules import CANNOT_REMOVE_DEFAULT_OPTION
from src.service.routing.domain.toll_sync import (
    collect_missing_node_errors,
    collect_pass_time_errors,
    collect_toll_structure_errors,
)
from src.service.routing.domain.value_object.option_sync_input import OptionSyncInput


EMPTY_OPTIONS = 'At least one option is required'
MULTIPLE_DEFAULTS = 'Only one option can be marked as default'
CANNOT_REMOVE_ALL_OPTIONS = 'Cannot remove all options from an active pathway'


def _join(values: List) -> str:
    return ', '.join(str(v) for v in values)


@attrs.define
class OptionSyncPlan:
    to_create: List[OptionSyncInput] = attrs.field(factory=list)
    to_update: List[OptionSyncInput] = attrs.field(factory=list)
    to_delete: List[PathwayOption] = attrs.field(factory=list)

    @property
    def new_default(self) -> Optional[OptionSyncInput]:
        return next(
            (o for o in (*self.to_update, *self.to_create) if o.is_default is True), None
        )


def effective_speed(option: OptionSyncInput) -> Optional[float]:
    if option.avg_speed_kmh:
        return option.avg_speed_kmh
    if option.distance_km and option.typical_time_min and option.typical_time_min > 0:
        return round(option.distance_km * 60 / option.typical_time_min, 2)
    return None


def validate_bulk_sync_payload(
    *,
    pathway_id: int,
    options: List[OptionSyncInput],
    referenced_options: List[PathwayOption],
    existing_node_ids: Set[int],
) -> None:
    """
    Args:
        referenced_options: Stored options matching the ids in the payload, any pathway
        existing_node_ids: Nodes found among every toll node id in the payload

    Raises:
        FieldValidationError: Every payload violation at once
    """
    collector = FieldErrorCollector()

    if not options:
        collector.add_error('options', FieldErrorCode.REQUIRED, EMPTY_OPTIONS, None)

    default_count = sum(1 for o in options if o.is_default is True)
    if default_count > 1:
        collector.add_error(
            'options', FieldErrorCode.BUSINESS_RULE_VIOLATION, MULTIPLE_DEFAULTS, default_count
        )

    names = [o.name.strip().lower() for o in options if o.name]
    duplicated: List[str] = []
    for index, name in enumerate(names):
        if name in names[:index] and name not in duplicated:
            duplicated.append(name)
    if duplicated:
        collector.add_error(
            'options',
            FieldErrorCode.DUPLICATE,
            f'Duplicate option names: {_join(duplicated)}',
            duplicated,
        )

    ids_to_update = [o.id for o in options if o.id is not None]
    if ids_to_update:
        found = {o.id: o for o in referenced_options}
        missing = [i for i in ids_to_update if i not in found]
        if missing:
            collector.add_error(
                'options',
                FieldErrorCode.NOT_FOUND,
                f'Pathway options not found: {_join(missing)}',
                missing,
            )
        foreign = [i for i in ids_to_update if i in found and found[i].pathway_id != pathway_id]
        if foreign:
            collector.add_error(
                'options',
                FieldErrorCode.INVALID_REFERENCE,
                f'Options belong to a different pathway: {_join(foreign)}',
                foreign,
            )

    for index, option in enumerate(options):
        if option.tolls:
            prefix = f'options[{index}].'
            collect_missing_node_errors(option.tolls, existing_node_ids, collector, prefix=prefix)
            collect_toll_structure_errors(option.tolls, collector, prefix=prefix)
            collect_pass_time_errors(
                option.tolls, effective_speed(option), collector, prefix=prefix
            )

    collector.throw_if_errors()


def assign_default_option(
    options: List[OptionSyncInput], current_options: List[PathwayOption]
) -> None:
    """
    Settle is_default on the payload in place:
    1. an explicit default wins
    2. otherwise the current default stays if it is kept
    3. otherwise, with no current default, the first option becomes default

    A current default that is being removed without a replacement is left for
    ensure_minimum_options_and_default to reject.
    """
    explicit = next((o for o in options if o.is_default is True), None)
    if explicit is not None:
        for option in options:
            option.is_default = option is explicit
        return

    current_default = next((o for o in current_options if o.is_default), None)
    if current_default is not None:
        kept = next((o for o in options if o.id == current_default.id), None)
        if kept is not None:
            for option in options:
                option.is_default = option is kept
        return

    for index, option in enumerate(options):
        option.is_default = index == 0


def categorize_operations(
    options: List[OptionSyncInput], current_options: List[PathwayOption]
) -> OptionSyncPlan:
    plan = OptionSyncPlan()
    for option in options:
        if option.id is not None:
            plan.to_update.append(option)
        else:
            plan.to_create.append(option)

    input_ids = {o.id for o in options if o.id is not None}
    plan.to_delete = [o for o in current_options if o.id not in input_ids]
    return plan


def ensure_minimum_options_and_default(
    *, pathway: Pathway, current_options: List[PathwayOption], plan: OptionSyncPlan
) -> None:
    collector = FieldErrorCollector()

    final_count = len(current_options) - len(plan.to_delete) + len(plan.to_create)
    if pathway.active and final_count == 0:
        collector.add_error(
            'options', FieldErrorCode.BUSINESS_RULE_VIOLATION, CANNOT_REMOVE_ALL_OPTIONS, None
        )

    current_default = next((o for o in current_options if o.is_default), None)
    if current_default is not None and any(o.id == current_default.id for o in plan.to_delete):
        if plan.new_default is None:
            collector.add_error(
                'options',
                FieldErrorCode.BUSINESS_RULE_VIOLATION,
                CANNOT_REMOVE_DEFAULT_OPTION,
                current_default.id,
            )

    collector.throw_if_errors()
