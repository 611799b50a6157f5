"""
HTTP contract tests for the seat diagram router; use cases are replaced
through FastAPI dependency overrides.
"""

from unittest.mock import AsyncMock

import attrs
import pytest

from src.platform.exception.exceptions import FieldError, FieldValidationError, NotFoundError
from src.service.fleet.app.command.create_seat_diagram_use_case import CreateSeatDiagramUseCase
from src.service.fleet.app.command.update_seat_configuration_use_case import (
    UpdateSeatConfigurationUseCase,
)
from src.service.fleet.app.dto.seat_configuration_result import SeatConfigurationResult
from src.service.fleet.app.query.get_seat_configuration_use_case import (
    GetSeatConfigurationUseCase,
)
from src.service.fleet.domain.enum.seat_type import SeatType
from src.service.fleet.domain.enum.space_type import SpaceType
from src.service.fleet.domain.seat_layout import build_seat_configuration


BASE = '/api/seat-diagrams'


@pytest.fixture
def mock_use_case() -> AsyncMock:
    return AsyncMock()


class TestUpdateSeatConfigurationEndpoint:
    @pytest.fixture(autouse=True)
    def _override(self, test_app, mock_use_case):
        test_app.dependency_overrides[UpdateSeatConfigurationUseCase.depends] = (
            lambda: mock_use_case
        )

    @pytest.mark.unit
    def test_camel_case_round_trip(self, client, mock_use_case):
        # Given
        mock_use_case.execute.return_value = SeatConfigurationResult(
            seats_created=1, seats_updated=1, seats_deactivated=10, total_active_seats=2
        )

        # When
        response = client.put(
            f'{BASE}/5/seat-configuration',
            json={
                'seats': [
                    {
                        'seatNumber': '1A',
                        'floorNumber': 1,
                        'position': {'x': 0, 'y': 1},
                        'seatType': 'PREMIUM',
                    },
                    {'floorNumber': 1, 'position': {'x': 2, 'y': 1}, 'spaceType': 'HALLWAY'},
                ]
            },
        )

        # Then
        assert response.status_code == 200
        assert response.json() == {
            'seatsCreated': 1,
            'seatsUpdated': 1,
            'seatsDeactivated': 10,
            'totalActiveSeats': 2,
        }
        kwargs = mock_use_case.execute.call_args.kwargs
        assert kwargs['seat_diagram_id'] == 5
        first, second = kwargs['seats']
        assert first.space_type == SpaceType.SEAT
        assert first.seat_type == SeatType.PREMIUM
        assert second.space_type == SpaceType.HALLWAY
        assert second.active is True

    @pytest.mark.unit
    def test_field_errors_are_reported_together(self, client, mock_use_case):
        mock_use_case.execute.side_effect = FieldValidationError(
            [
                FieldError('seats[0].position.x', 'OUT_OF_RANGE', 'Invalid column', 10),
                FieldError('seats[1].position.y', 'OUT_OF_RANGE', 'Invalid row', 9),
            ]
        )

        response = client.put(f'{BASE}/5/seat-configuration', json={'seats': []})

        assert response.status_code == 400
        body = response.json()
        assert body['detail'] == 'Invalid column; Invalid row'
        assert [e['field'] for e in body['errors']] == [
            'seats[0].position.x',
            'seats[1].position.y',
        ]

    @pytest.mark.unit
    def test_unknown_diagram_is_404(self, client, mock_use_case):
        mock_use_case.execute.side_effect = NotFoundError('Seat diagram 9999 not found')

        response = client.put(f'{BASE}/9999/seat-configuration', json={'seats': []})

        assert response.status_code == 404
        assert response.json() == {'detail': 'Seat diagram 9999 not found'}

    @pytest.mark.unit
    def test_malformed_body_is_400(self, client, mock_use_case):
        response = client.put(
            f'{BASE}/5/seat-configuration', json={'seats': [{'position': {'x': 0}}]}
        )

        assert response.status_code == 400
        mock_use_case.execute.assert_not_called()


class TestSeatDiagramEndpoints:
    @pytest.mark.unit
    def test_create_diagram(self, test_app, client, mock_use_case, diagram_factory):
        test_app.dependency_overrides[CreateSeatDiagramUseCase.depends] = lambda: mock_use_case
        mock_use_case.execute.return_value = attrs.evolve(diagram_factory(num_rows=10), id=1)

        response = client.post(
            BASE,
            json={
                'name': 'Test Diagram',
                'maxCapacity': 40,
                'seatsPerFloor': [
                    {'floorNumber': 1, 'numRows': 10, 'seatsLeft': 2, 'seatsRight': 2}
                ],
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body['id'] == 1
        assert body['totalSeats'] == 40
        assert body['isModified'] is False
        assert body['seatsPerFloor'][0]['numRows'] == 10

    @pytest.mark.unit
    def test_seat_configuration_grid(self, test_app, client, mock_use_case, diagram_factory):
        test_app.dependency_overrides[GetSeatConfigurationUseCase.depends] = lambda: mock_use_case
        diagram = attrs.evolve(diagram_factory(num_rows=2), id=1)
        mock_use_case.execute.return_value = build_seat_configuration(diagram, [])

        response = client.get(f'{BASE}/1/seat-configuration')

        assert response.status_code == 200
        body = response.json()
        assert body['totalSeats'] == 8
        first_row = body['floors'][0]['rows'][0]
        assert [cell['spaceType'] for cell in first_row] == [
            'seat',
            'seat',
            'hallway',
            'seat',
            'seat',
        ]
