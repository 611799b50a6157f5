"""
Unit tests for toll validation, numbering and pass-time recalculation
"""

import pytest

from src.platform.exception.exceptions import FieldValidationError
from src.platform.exception.field_error_collector import FieldErrorCode
from src.service.routing.domain.entity.pathway_option_toll_entity import PathwayOptionToll
from src.service.routing.domain.toll_sync import (
    CONSECUTIVE_DUPLICATE,
    PASS_TIME_REQUIRED,
    build_tolls,
    recalculate_pass_times,
    validate_tolls,
)


def stored_toll(toll_id: int, **fields) -> PathwayOptionToll:
    return PathwayOptionToll(
        pathway_option_id=1, node_id=toll_id + 2, sequence=toll_id, id=toll_id, **fields
    )


class TestValidateTolls:
    @pytest.mark.unit
    def test_valid_list(self, toll):
        validate_tolls(
            [toll(3, pass_time_min=10), toll(4, distance_km=40.0)],
            existing_node_ids={3, 4},
            avg_speed_kmh=80.0,
        )

    @pytest.mark.unit
    def test_empty_list_clears_tolls(self):
        validate_tolls([], existing_node_ids=set(), avg_speed_kmh=None)

    @pytest.mark.unit
    def test_unknown_node(self, toll, error_fields):
        with pytest.raises(FieldValidationError) as exc_info:
            validate_tolls([toll(3, 10), toll(99, 20)], existing_node_ids={3}, avg_speed_kmh=80.0)

        assert error_fields(exc_info.value) == ['tolls[1].nodeId']
        assert exc_info.value.errors[0].code == FieldErrorCode.NOT_FOUND

    @pytest.mark.unit
    def test_consecutive_repeat_reports_duplicate_and_adjacency(self, toll):
        with pytest.raises(FieldValidationError) as exc_info:
            validate_tolls([toll(3, 10), toll(3, 20)], existing_node_ids={3}, avg_speed_kmh=80.0)

        codes = [e.code for e in exc_info.value.errors]
        assert codes == [FieldErrorCode.DUPLICATE, FieldErrorCode.BUSINESS_RULE_VIOLATION]
        assert exc_info.value.errors[1].message == CONSECUTIVE_DUPLICATE

    @pytest.mark.unit
    def test_non_adjacent_repeat_is_duplicate_only(self, toll):
        with pytest.raises(FieldValidationError) as exc_info:
            validate_tolls(
                [toll(3, 10), toll(4, 20), toll(3, 30)],
                existing_node_ids={3, 4},
                avg_speed_kmh=80.0,
            )

        assert [e.code for e in exc_info.value.errors] == [FieldErrorCode.DUPLICATE]

    @pytest.mark.unit
    def test_pass_time_required_without_speed(self, toll, error_fields):
        with pytest.raises(FieldValidationError) as exc_info:
            validate_tolls([toll(3, distance_km=40.0)], existing_node_ids={3}, avg_speed_kmh=None)

        assert exc_info.value.message == PASS_TIME_REQUIRED
        assert error_fields(exc_info.value) == ['tolls[0].passTimeMin']


class TestBuildTolls:
    @pytest.mark.unit
    def test_sequence_follows_list_order_and_pass_time_derived(self, toll):
        built = build_tolls(
            pathway_option_id=7,
            avg_speed_kmh=80.0,
            tolls=[toll(5, pass_time_min=12), toll(3, distance_km=50.0)],
        )

        assert [(t.node_id, t.sequence, t.pass_time_min) for t in built] == [(5, 1, 12), (3, 2, 38)]
        assert {t.pathway_option_id for t in built} == {7}


class TestRecalculatePassTimes:
    @pytest.mark.unit
    def test_only_changed_tolls_with_distance(self):
        tolls = [
            stored_toll(1, pass_time_min=30, distance_km=50.0),
            stored_toll(2, pass_time_min=99),
            stored_toll(3, pass_time_min=10, distance_km=10.0),
        ]

        changed = recalculate_pass_times(tolls, avg_speed_kmh=100.0)

        # 50km -> 30 min unchanged, no distance skipped, 10km -> 6 min
        assert [(t.id, t.pass_time_min) for t in changed] == [(3, 6)]
