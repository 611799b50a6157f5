"""
Pathway Option - one alternative way of driving a pathway

[Business Invariants]
- distance_km and typical_time_min are positive; avg_speed_kmh follows from them
- is_pass_through requires pass_through_time_min > 0, and only then may it be set
- the default option of a pathway is active
"""

from datetime import datetime, timezone
from typing import Any, Optional

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.routing.domain.pathway_option_rules import calculate_metrics, validate_option_rules


UPDATABLE_FIELDS = frozenset(
    {
        'name',
        'description',
        'distance_km',
        'typical_time_min',
        'avg_speed_kmh',
        'is_pass_through',
        'pass_through_time_min',
        'sequence',
        'active',
    }
)


@attrs.define
class PathwayOption:
    pathway_id: int
    name: Optional[str] = None
    description: Optional[str] = None
    distance_km: Optional[float] = None
    typical_time_min: Optional[int] = None
    avg_speed_kmh: Optional[float] = None
    is_default: bool = False
    is_pass_through: bool = False
    pass_through_time_min: Optional[int] = None
    sequence: Optional[int] = None
    active: bool = True
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        pathway_id: int,
        name: Optional[str],
        distance_km: Optional[float],
        typical_time_min: Optional[int],
        avg_speed_kmh: Optional[float] = None,
        description: Optional[str] = None,
        is_default: bool = False,
        is_pass_through: bool = False,
        pass_through_time_min: Optional[int] = None,
        sequence: Optional[int] = None,
        active: bool = True,
    ) -> 'PathwayOption':
        validate_option_rules(
            is_pass_through=is_pass_through,
            pass_through_time_min=pass_through_time_min,
            is_default=is_default,
            active=active,
        )
        metrics = calculate_metrics(
            distance_km=distance_km,
            typical_time_min=typical_time_min,
            avg_speed_kmh=avg_speed_kmh,
        )

        now = datetime.now(timezone.utc)
        return cls(
            pathway_id=pathway_id,
            name=name,
            description=description,
            distance_km=metrics.distance_km,
            typical_time_min=metrics.typical_time_min,
            avg_speed_kmh=metrics.avg_speed_kmh,
            is_default=is_default,
            is_pass_through=is_pass_through,
            pass_through_time_min=pass_through_time_min,
            sequence=sequence,
            active=active,
            created_at=now,
            updated_at=now,
        )

    @Logger.io
    def apply_update(self, **changes: Any) -> 'PathwayOption':
        """
        Changing distance or time recomputes the average speed, unless the
        caller sends avg_speed_kmh explicitly.

        Raises:
            ValueError: Unknown field
            FieldValidationError: Rule violations on the merged state
        """
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f'Unknown pathway option fields: {", ".join(sorted(unknown))}')

        merged = attrs.evolve(self, **changes)
        validate_option_rules(
            is_pass_through=merged.is_pass_through,
            pass_through_time_min=merged.pass_through_time_min,
            is_default=merged.is_default,
            active=merged.active,
        )

        if 'distance_km' in changes or 'typical_time_min' in changes:
            metrics = calculate_metrics(
                distance_km=merged.distance_km,
                typical_time_min=merged.typical_time_min,
                avg_speed_kmh=changes.get('avg_speed_kmh'),
            )
            merged = attrs.evolve(
                merged,
                distance_km=metrics.distance_km,
                typical_time_min=metrics.typical_time_min,
                avg_speed_kmh=metrics.avg_speed_kmh,
            )

        return attrs.evolve(merged, updated_at=datetime.now(timezone.utc))

    def mark_default(self, is_default: bool) -> 'PathwayOption':
        return attrs.evolve(self, is_default=is_default, updated_at=datetime.now(timezone.utc))

    def soft_delete(self) -> 'PathwayOption':
        now = datetime.now(timezone.utc)
        return attrs.evolve(self, is_default=False, active=False, deleted_at=now, updated_at=now)
