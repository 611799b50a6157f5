"""
Pathway - directed connection between two nodes, driven through one or more options

[Business Invariants]
- origin and destination differ
- an empty trip is never sellable
- a pathway is born inactive and can only be activated once it has options
"""

from datetime import datetime, timezone
from typing import Any, Optional

import attrs

from src.platform.exception.field_error_collector import FieldErrorCode, FieldErrorCollector
from src.platform.logging.loguru_io import Logger


SAME_ORIGIN_DESTINATION = 'Origin and destination nodes cannot be the same'
EMPTY_TRIP_SELLABLE = 'Empty trip pathways cannot be sellable'
CREATION_ACTIVE = 'New pathways cannot be created as active. Add options first, then activate.'
ACTIVATION_WITHOUT_OPTIONS = 'Pathway cannot be activated without at least one option'

UPDATABLE_FIELDS = frozenset(
    {
        'name',
        'code',
        'description',
        'origin_node_id',
        'destination_node_id',
        'is_sellable',
        'is_empty_trip',
        'active',
    }
)


def collect_pathway_rule_errors(
    *,
    origin_node_id: int,
    destination_node_id: int,
    is_sellable: bool,
    is_empty_trip: bool,
    collector: FieldErrorCollector,
) -> None:
    if origin_node_id == destination_node_id:
        collector.add_error(
            'destinationNodeId',
            FieldErrorCode.INVALID_VALUE,
            SAME_ORIGIN_DESTINATION,
            destination_node_id,
        )
    if is_empty_trip and is_sellable:
        collector.add_error(
            'isSellable',
            FieldErrorCode.BUSINESS_RULE_VIOLATION,
            EMPTY_TRIP_SELLABLE,
            is_sellable,
        )


@attrs.define
class Pathway:
    name: str
    code: str
    origin_node_id: int
    destination_node_id: int
    description: Optional[str] = None
    is_sellable: bool = False
    is_empty_trip: bool = False
    active: bool = False
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        name: str,
        code: str,
        origin_node_id: int,
        destination_node_id: int,
        description: Optional[str] = None,
        is_sellable: bool = False,
        is_empty_trip: bool = False,
        active: bool = False,
    ) -> 'Pathway':
        collector = FieldErrorCollector()
        collect_pathway_rule_errors(
            origin_node_id=origin_node_id,
            destination_node_id=destination_node_id,
            is_sellable=is_sellable,
            is_empty_trip=is_empty_trip,
            collector=collector,
        )
        if active:
            collector.add_error(
                'active', FieldErrorCode.BUSINESS_RULE_VIOLATION, CREATION_ACTIVE, active
            )
        collector.throw_if_errors()

        now = datetime.now(timezone.utc)
        return cls(
            name=name,
            code=code,
            description=description,
            origin_node_id=origin_node_id,
            destination_node_id=destination_node_id,
            is_sellable=is_sellable,
            is_empty_trip=is_empty_trip,
            active=False,
            created_at=now,
            updated_at=now,
        )

    @Logger.io
    def apply_update(self, *, option_count: int, **changes: Any) -> 'Pathway':
        """
        Args:
            option_count: Options the pathway currently has, for the activation rule

        Raises:
            ValueError: Unknown field
            FieldValidationError: Rule violations on the merged state
        """
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f'Unknown pathway fields: {", ".join(sorted(unknown))}')

        merged = attrs.evolve(self, **changes)
        collector = FieldErrorCollector()
        collect_pathway_rule_errors(
            origin_node_id=merged.origin_node_id,
            destination_node_id=merged.destination_node_id,
            is_sellable=merged.is_sellable,
            is_empty_trip=merged.is_empty_trip,
            collector=collector,
        )
        if changes.get('active') is True and option_count == 0:
            collector.add_error(
                'active',
                FieldErrorCode.BUSINESS_RULE_VIOLATION,
                ACTIVATION_WITHOUT_OPTIONS,
                True,
            )
        collector.throw_if_errors()

        return attrs.evolve(merged, updated_at=datetime.now(timezone.utc))
