"""
Unit tests for bulk option sync planning: payload validation, default
assignment and the create/update/delete split
"""

import attrs
import pytest

from src.platform.exception.exceptions import FieldValidationError
from src.platform.exception.field_error_collector import FieldErrorCode
from src.service.routing.domain.pathway_option_sync import (
    CANNOT_REMOVE_ALL_OPTIONS,
    EMPTY_OPTIONS,
    MULTIPLE_DEFAULTS,
    assign_default_option,
    categorize_operations,
    effective_speed,
    ensure_minimum_options_and_default,
    validate_bulk_sync_payload,
)
from src.service.routing.domain.pathway_rules import CANNOT_REMOVE_DEFAULT_OPTION


@pytest.fixture
def current(option_factory):
    """Two stored options of pathway 1; id 1 is the default"""
    return [
        attrs.evolve(option_factory(pathway_id=1, name='Highway', is_default=True), id=1),
        attrs.evolve(option_factory(pathway_id=1, name='Free road'), id=2),
    ]


class TestValidateBulkSyncPayload:
    @pytest.mark.unit
    def test_empty_list(self):
        with pytest.raises(FieldValidationError) as exc_info:
            validate_bulk_sync_payload(
                pathway_id=1, options=[], referenced_options=[], existing_node_ids=set()
            )

        assert exc_info.value.message == EMPTY_OPTIONS

    @pytest.mark.unit
    def test_every_violation_reported_at_once(self, entry, current, option_factory, toll):
        # Given: two defaults, a case-insensitive duplicate name, an unknown id,
        # a foreign option and a toll on a missing node
        foreign = attrs.evolve(option_factory(pathway_id=2), id=30)
        options = [
            entry('Highway', is_default=True),
            entry(' highway ', is_default=True),
            entry('Ghost', id=99),
            entry('Borrowed', id=30),
            entry('Tolled', tolls=[toll(42, pass_time_min=5)]),
        ]

        # When
        with pytest.raises(FieldValidationError) as exc_info:
            validate_bulk_sync_payload(
                pathway_id=1,
                options=options,
                referenced_options=[foreign],
                existing_node_ids=set(),
            )

        # Then
        errors = exc_info.value.errors
        assert [e.code for e in errors] == [
            FieldErrorCode.BUSINESS_RULE_VIOLATION,
            FieldErrorCode.DUPLICATE,
            FieldErrorCode.NOT_FOUND,
            FieldErrorCode.INVALID_REFERENCE,
            FieldErrorCode.NOT_FOUND,
        ]
        assert errors[0].message == MULTIPLE_DEFAULTS
        assert errors[1].message == 'Duplicate option names: highway'
        assert errors[2].message == 'Pathway options not found: 99'
        assert errors[3].value == [30]
        assert errors[4].field == 'options[4].tolls[0].nodeId'

    @pytest.mark.unit
    def test_toll_pass_time_derived_from_entry_speed(self, entry, toll):
        validate_bulk_sync_payload(
            pathway_id=1,
            options=[entry('A', tolls=[toll(3, distance_km=20.0)])],
            referenced_options=[],
            existing_node_ids={3},
        )

    @pytest.mark.unit
    def test_effective_speed(self, entry):
        assert effective_speed(entry('A', avg_speed_kmh=90.0)) == 90.0
        assert effective_speed(entry('A', distance_km=100.0, typical_time_min=75)) == 80.0
        assert effective_speed(entry('A', distance_km=None)) is None


class TestAssignDefaultOption:
    @pytest.mark.unit
    def test_explicit_default_wins(self, entry, current):
        options = [entry('Highway', id=1), entry('New', is_default=True)]

        assign_default_option(options, current)

        assert [o.is_default for o in options] == [False, True]

    @pytest.mark.unit
    def test_kept_current_default_stays(self, entry, current):
        options = [entry('Free road', id=2), entry('Highway', id=1)]

        assign_default_option(options, current)

        assert [o.is_default for o in options] == [False, True]

    @pytest.mark.unit
    def test_first_option_when_nothing_is_default(self, entry):
        options = [entry('A'), entry('B')]

        assign_default_option(options, [])

        assert [o.is_default for o in options] == [True, False]

    @pytest.mark.unit
    def test_removed_default_left_unresolved(self, entry, current):
        options = [entry('Free road', id=2)]

        assign_default_option(options, current)

        assert options[0].is_default is None


class TestPlan:
    @pytest.mark.unit
    def test_categorize(self, entry, current):
        options = [entry('Highway', id=1), entry('Scenic')]

        plan = categorize_operations(options, current)

        assert [o.name for o in plan.to_create] == ['Scenic']
        assert [o.id for o in plan.to_update] == [1]
        assert [o.id for o in plan.to_delete] == [2]

    @pytest.mark.unit
    def test_removing_default_without_replacement(self, entry, current, pathway_factory):
        options = [entry('Free road', id=2)]
        assign_default_option(options, current)
        plan = categorize_operations(options, current)

        with pytest.raises(FieldValidationError) as exc_info:
            ensure_minimum_options_and_default(
                pathway=pathway_factory(), current_options=current, plan=plan
            )

        assert exc_info.value.message == CANNOT_REMOVE_DEFAULT_OPTION

    @pytest.mark.unit
    def test_removing_default_with_replacement(self, entry, current, pathway_factory):
        options = [entry('Free road', id=2, is_default=True)]
        assign_default_option(options, current)
        plan = categorize_operations(options, current)

        ensure_minimum_options_and_default(
            pathway=pathway_factory(active=True), current_options=current, plan=plan
        )

        assert plan.new_default is options[0]

    @pytest.mark.unit
    def test_active_pathway_keeps_at_least_one_option(self, current, pathway_factory):
        plan = categorize_operations([], current)

        with pytest.raises(FieldValidationError) as exc_info:
            ensure_minimum_options_and_default(
                pathway=pathway_factory(active=True), current_options=current, plan=plan
            )

        assert exc_info.value.errors[0].message == CANNOT_REMOVE_ALL_OPTIONS
