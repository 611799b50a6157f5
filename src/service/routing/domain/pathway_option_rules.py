"""
Pathway option metrics and field rules

avg_speed_kmh is derived from distance and typical time unless given
explicitly; every check collects its violations before raising.
"""

import math
from typing import Optional

import attrs

from src.platform.exception.field_error_collector import FieldErrorCode, FieldErrorCollector


DISTANCE_REQUIRED = 'Distance is required and must be greater than 0'
TIME_REQUIRED = 'Typical time is required and must be greater than 0'
PASS_THROUGH_REQUIRES_TIME = 'Pass-through options require a pass-through time greater than 0'
PASS_THROUGH_TIME_WITHOUT_FLAG = 'Pass-through time can only be set on pass-through options'
DEFAULT_REQUIRES_ACTIVE = 'Default option must be active'


@attrs.frozen
class OptionMetrics:
    distance_km: float
    typical_time_min: int
    avg_speed_kmh: float


def calculate_metrics(
    *,
    distance_km: Optional[float],
    typical_time_min: Optional[int],
    avg_speed_kmh: Optional[float] = None,
) -> OptionMetrics:
    """
    Raises:
        FieldValidationError: Distance or time missing or not positive
    """
    collector = FieldErrorCollector()
    if not distance_km or distance_km <= 0:
        collector.add_error('distanceKm', FieldErrorCode.REQUIRED, DISTANCE_REQUIRED, distance_km)
    if not typical_time_min or typical_time_min <= 0:
        collector.add_error(
            'typicalTimeMin', FieldErrorCode.REQUIRED, TIME_REQUIRED, typical_time_min
        )
    collector.throw_if_errors()

    assert distance_km is not None and typical_time_min is not None
    if avg_speed_kmh is None:
        avg_speed_kmh = round(distance_km * 60 / typical_time_min, 2)

    return OptionMetrics(
        distance_km=distance_km,
        typical_time_min=typical_time_min,
        avg_speed_kmh=avg_speed_kmh,
    )


def collect_pass_through_errors(
    *,
    is_pass_through: Optional[bool],
    pass_through_time_min: Optional[int],
    collector: FieldErrorCollector,
) -> None:
    if is_pass_through is True and (not pass_through_time_min or pass_through_time_min <= 0):
        collector.add_error(
            'passThroughTimeMin',
            FieldErrorCode.REQUIRED,
            PASS_THROUGH_REQUIRES_TIME,
            pass_through_time_min,
        )
    if is_pass_through is False and pass_through_time_min is not None:
        collector.add_error(
            'passThroughTimeMin',
            FieldErrorCode.BUSINESS_RULE_VIOLATION,
            PASS_THROUGH_TIME_WITHOUT_FLAG,
            pass_through_time_min,
        )


def collect_default_active_errors(
    *, is_default: Optional[bool], active: Optional[bool], collector: FieldErrorCollector
) -> None:
    if is_default is True and active is False:
        collector.add_error(
            'active', FieldErrorCode.BUSINESS_RULE_VIOLATION, DEFAULT_REQUIRES_ACTIVE, active
        )


def validate_option_rules(
    *,
    is_pass_through: Optional[bool],
    pass_through_time_min: Optional[int],
    is_default: Optional[bool],
    active: Optional[bool],
) -> None:
    collector = FieldErrorCollector()
    collect_pass_through_errors(
        is_pass_through=is_pass_through,
        pass_through_time_min=pass_through_time_min,
        collector=collector,
    )
    collect_default_active_errors(is_default=is_default, active=active, collector=collector)
    collector.throw_if_errors()


def calculate_toll_pass_time(*, distance_km: float, avg_speed_kmh: float) -> int:
    """Minutes to reach a toll at the option's average speed, half rounded up"""
    return math.floor(distance_km / avg_speed_kmh * 60 + 0.5)
