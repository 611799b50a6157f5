"""
Integration tests for the seat configuration write path

Runs UpdateSeatConfigurationUseCase over SqlAlchemyUnitOfWork against a real
PostgreSQL database, then re-reads rows on a fresh session.
"""

from typing import Dict, Tuple
from unittest.mock import AsyncMock, patch

import pytest

from src.service.fleet.app.command.create_seat_diagram_use_case import CreateSeatDiagramUseCase
from src.service.fleet.app.command.create_seats_from_diagram_use_case import (
    CreateSeatsFromDiagramUseCase,
)
from src.service.fleet.app.command.update_seat_configuration_use_case import (
    UpdateSeatConfigurationUseCase,
)
from src.service.fleet.domain.entity.bus_seat_entity import BusSeat
from src.service.fleet.domain.entity.seat_diagram_entity import SeatDiagram
from src.service.fleet.domain.enum.seat_type import SeatType
from src.service.fleet.domain.value_object.floor_seats import FloorSeats
from src.service.fleet.driven_adapter.repo.bus_seat_command_repo_impl import (
    BusSeatCommandRepoImpl,
)


@pytest.fixture
def persisted_diagram(open_uow):
    """Diagram with 3 rows x (2 + 2) and its 12 generated seats"""

    async def _create() -> SeatDiagram:
        async with open_uow() as uow:
            diagram = await CreateSeatDiagramUseCase(uow).execute(
                name='Integration Diagram',
                max_capacity=12,
                num_floors=1,
                seats_per_floor=[
                    FloorSeats(floor_number=1, num_rows=3, seats_left=2, seats_right=2)
                ],
            )
        async with open_uow() as uow:
            await CreateSeatsFromDiagramUseCase(uow).execute(seat_diagram_id=diagram.id)
        return await _read_diagram(open_uow, diagram.id)

    return _create


@pytest.fixture
def reconcile(open_uow, fleet_metrics):
    async def _reconcile(seat_diagram_id: int, seats):
        async with open_uow() as uow:
            use_case = UpdateSeatConfigurationUseCase(uow=uow, fleet_metrics=fleet_metrics)
            return await use_case.execute(seat_diagram_id=seat_diagram_id, seats=seats)

    return _reconcile


async def _read_diagram(open_uow, seat_diagram_id: int) -> SeatDiagram:
    async with open_uow() as uow, uow:
        return await uow.seat_diagrams.get_by_id(seat_diagram_id=seat_diagram_id)


async def _read_seats(open_uow, seat_diagram_id: int) -> Dict[Tuple[int, int, int], BusSeat]:
    async with open_uow() as uow, uow:
        seats = await uow.bus_seats.list_by_diagram(seat_diagram_id=seat_diagram_id)
    return {seat.position_key: seat for seat in seats}


@pytest.mark.integration
class TestSeatConfigurationPersistence:
    @pytest.mark.asyncio
    async def test_reconciled_layout_is_read_back(
        self, open_uow, persisted_diagram, reconcile, seat_input
    ):
        # Given: 12 persisted seats
        diagram = await persisted_diagram()
        assert diagram.total_seats == 12

        # When: relabel two positions, restyle two and add one in the aisle
        result = await reconcile(
            diagram.id,
            [
                seat_input(0, 1, 'A1'),
                seat_input(1, 1, 'A2'),
                seat_input(3, 1, '3', seat_type=SeatType.VIP),
                seat_input(4, 1, '4', amenities=['wifi', 'usb']),
                seat_input(2, 2, 'AISLE'),
            ],
        )

        # Then
        assert (result.seats_created, result.seats_updated, result.seats_deactivated) == (1, 4, 8)
        assert result.total_active_seats == 5

        rows = await _read_seats(open_uow, diagram.id)
        assert len(rows) == 13
        active = {key: seat for key, seat in rows.items() if seat.active}
        assert set(active) == {(1, 0, 1), (1, 1, 1), (1, 3, 1), (1, 4, 1), (1, 2, 2)}
        assert active[(1, 0, 1)].seat_number == 'A1'
        assert active[(1, 3, 1)].seat_type == SeatType.VIP
        assert active[(1, 4, 1)].amenities == ['wifi', 'usb']
        assert active[(1, 0, 1)].meta['is_window'] is True
        assert active[(1, 2, 2)].meta == {
            'row_index': 2,
            'col_index': 2,
            'is_window': False,
            'is_legroom': False,
        }

        stored = await _read_diagram(open_uow, diagram.id)
        assert stored.total_seats == 5
        assert stored.is_modified is True
        assert stored.seats_per_floor == diagram.seats_per_floor

    @pytest.mark.asyncio
    async def test_identical_payload_advances_updated_at(
        self, open_uow, persisted_diagram, reconcile, seat_input
    ):
        # Given
        diagram = await persisted_diagram()
        payload = [seat_input(0, 1, '1'), seat_input(1, 1, '2')]
        await reconcile(diagram.id, payload)
        first_diagram = await _read_diagram(open_uow, diagram.id)
        first_seats = await _read_seats(open_uow, diagram.id)

        # When: the same payload again
        second = await reconcile(diagram.id, payload)

        # Then: nothing created or deactivated, but both timestamps moved
        assert (second.seats_created, second.seats_deactivated) == (0, 0)
        second_diagram = await _read_diagram(open_uow, diagram.id)
        second_seats = await _read_seats(open_uow, diagram.id)
        assert second_diagram.updated_at > first_diagram.updated_at
        assert second_seats[(1, 0, 1)].updated_at > first_seats[(1, 0, 1)].updated_at
        assert second_seats[(1, 4, 3)].updated_at == first_seats[(1, 4, 3)].updated_at

    @pytest.mark.asyncio
    async def test_failed_write_leaves_rows_unchanged(
        self, open_uow, persisted_diagram, reconcile, fleet_metrics, seat_input
    ):
        # Given: seat updates fail after the new aisle seat was flushed
        diagram = await persisted_diagram()
        seats_before = await _read_seats(open_uow, diagram.id)
        failure = RuntimeError('simulated write failure')

        # When
        with patch.object(
            BusSeatCommandRepoImpl, 'bulk_update', new=AsyncMock(side_effect=failure)
        ):
            with pytest.raises(RuntimeError) as exc_info:
                await reconcile(diagram.id, [seat_input(0, 1, 'A1'), seat_input(2, 1, 'NEW')])

        # Then
        assert exc_info.value is failure
        assert await _read_seats(open_uow, diagram.id) == seats_before
        stored = await _read_diagram(open_uow, diagram.id)
        assert (stored.total_seats, stored.is_modified, stored.updated_at) == (
            12,
            False,
            diagram.updated_at,
        )
        fleet_metrics.record_seat_reconciliation_error.assert_called_once()

    @pytest.mark.asyncio
    async def test_empty_payload_deactivates_every_row(
        self, open_uow, persisted_diagram, reconcile
    ):
        diagram = await persisted_diagram()

        result = await reconcile(diagram.id, [])

        assert result.seats_deactivated == 12
        rows = await _read_seats(open_uow, diagram.id)
        assert len(rows) == 12
        assert not any(seat.active for seat in rows.values())
        assert (await _read_diagram(open_uow, diagram.id)).total_seats == 0
