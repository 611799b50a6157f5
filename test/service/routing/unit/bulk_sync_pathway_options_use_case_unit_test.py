"""
Unit tests for BulkSyncPathwayOptionsUseCase

Covers the three-way split (create/update/delete), default handoff ordering,
toll handling per entry and all-or-nothing behavior on rejection.
"""

import pytest

from src.platform.exception.exceptions import FieldValidationError, NotFoundError
from src.service.routing.app.command.bulk_sync_pathway_options_use_case import (
    BulkSyncPathwayOptionsUseCase,
)
from src.service.routing.domain.pathway_option_sync import MULTIPLE_DEFAULTS
from src.service.routing.domain.pathway_rules import CANNOT_REMOVE_DEFAULT_OPTION


@pytest.fixture
def use_case(uow, fleet_metrics):
    return BulkSyncPathwayOptionsUseCase(uow=uow, fleet_metrics=fleet_metrics)


class TestBulkSyncPathwayOptions:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_create_update_delete_with_default_handoff(
        self, uow, use_case, seed_pathway, entry, toll, fleet_metrics
    ):
        # Given: option 1 (default) and option 2
        pathway, (first, second) = seed_pathway(options=2)

        # When: keep option 2 as the new default, add Scenic, drop option 1
        detail = await use_case.execute(
            pathway_id=pathway.id,
            options=[
                entry('Free road', id=second.id, is_default=True, tolls=[toll(3, 10)]),
                entry('Scenic', distance_km=200.0, typical_time_min=180),
            ],
        )

        # Then
        live = uow.pathway_options.live(pathway.id)
        assert [(o.name, o.sequence, o.is_default) for o in live] == [
            ('Free road', 1, True),
            ('Scenic', 2, False),
        ]
        assert uow.pathway_options.rows[first.id].deleted_at is not None
        assert [o.id for o in detail.options] == [o.id for o in live]
        assert [t.node_id for t in uow.pathway_option_tolls.for_option(second.id)] == [3]
        assert uow.commits == 1
        fleet_metrics.record_pathway_option_sync.assert_called_once_with(result='success')

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_first_sync_defaults_first_entry(self, uow, use_case, seed_pathway, entry):
        pathway, _ = seed_pathway()

        await use_case.execute(pathway_id=pathway.id, options=[entry('A'), entry('B')])

        live = uow.pathway_options.live(pathway.id)
        assert [(o.name, o.is_default) for o in live] == [('A', True), ('B', False)]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_current_default_kept_when_not_named(
        self, uow, use_case, seed_pathway, entry
    ):
        pathway, (first, second) = seed_pathway(options=2)

        await use_case.execute(
            pathway_id=pathway.id,
            options=[entry('New'), entry('Option 2', id=second.id), entry('Option 1', id=first.id)],
        )

        assert [o.id for o in uow.pathway_options.live(pathway.id) if o.is_default] == [first.id]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_omitted_tolls_are_kept_and_rescaled(self, uow, use_case, seed_pathway, entry):
        # Given: 120 km in 90 min with tolls at 25 km and 50 km
        pathway, (option,) = seed_pathway(options=1, tolls_per_option=2)

        # When: same distance in 60 min, tolls not sent
        await use_case.execute(
            pathway_id=pathway.id,
            options=[entry('Option 1', id=option.id, distance_km=120.0, typical_time_min=60)],
        )

        # Then
        tolls = uow.pathway_option_tolls.for_option(option.id)
        assert [t.pass_time_min for t in tolls] == [13, 25]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_empty_toll_list_clears(self, uow, use_case, seed_pathway, entry):
        pathway, (option,) = seed_pathway(options=1, tolls_per_option=2)

        await use_case.execute(
            pathway_id=pathway.id, options=[entry('Option 1', id=option.id, tolls=[])]
        )

        assert uow.pathway_option_tolls.for_option(option.id) == []

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_removing_default_without_replacement(
        self, uow, use_case, seed_pathway, entry, fleet_metrics
    ):
        pathway, (first, second) = seed_pathway(options=2)

        with pytest.raises(FieldValidationError) as exc_info:
            await use_case.execute(
                pathway_id=pathway.id, options=[entry('Option 2', id=second.id)]
            )

        assert exc_info.value.message == CANNOT_REMOVE_DEFAULT_OPTION
        assert uow.pathway_options.rows[first.id].deleted_at is None
        fleet_metrics.record_pathway_option_sync.assert_called_once_with(result='error')

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_rejected_payload_writes_nothing(self, uow, use_case, seed_pathway, entry):
        pathway, _ = seed_pathway(options=2)
        before = uow.pathway_options.snapshot()

        with pytest.raises(FieldValidationError) as exc_info:
            await use_case.execute(
                pathway_id=pathway.id,
                options=[entry('X', is_default=True), entry('Y', is_default=True)],
            )

        assert exc_info.value.message == MULTIPLE_DEFAULTS
        assert uow.pathway_options.snapshot() == before
        assert uow.commits == 0

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_failure_mid_write_rolls_back(self, uow, use_case, seed_pathway, entry):
        # Given: a pass-through update without its time fails after the create was written
        pathway, (first, second) = seed_pathway(options=2)
        before = uow.pathway_options.snapshot()

        # When
        with pytest.raises(FieldValidationError):
            await use_case.execute(
                pathway_id=pathway.id,
                options=[
                    entry('Option 1', id=first.id),
                    entry('New'),
                    entry('Option 2', id=second.id, is_pass_through=True),
                ],
            )

        # Then
        assert uow.pathway_options.snapshot() == before

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_missing_pathway(self, use_case, entry):
        with pytest.raises(NotFoundError):
            await use_case.execute(pathway_id=404, options=[entry('A')])
