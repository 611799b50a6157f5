"""
Unit tests for the shared app: exception mapping and common endpoints
"""

from fastapi import APIRouter
import pytest

from src.platform.exception.exceptions import ConflictError, NotFoundError


@pytest.fixture
def failing_client(test_app, client):
    """Client for an app with routes raising each mapped exception type"""
    router = APIRouter()

    @router.get('/not-found')
    async def not_found() -> None:
        raise NotFoundError('Seat diagram 1 not found')

    @router.get('/conflict')
    async def conflict() -> None:
        raise ConflictError('Seats already exist for this diagram')

    @router.get('/value-error')
    async def value_error() -> None:
        raise ValueError('Unknown seat diagram fields: colour')

    @router.get('/boom')
    async def boom() -> None:
        raise RuntimeError('database went away')

    test_app.include_router(router, prefix='/raise')
    return client


class TestExceptionHandlers:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        'path,status_code,detail',
        [
            ('/raise/not-found', 404, 'Seat diagram 1 not found'),
            ('/raise/conflict', 409, 'Seats already exist for this diagram'),
            ('/raise/value-error', 400, 'Unknown seat diagram fields: colour'),
            ('/raise/boom', 500, 'Internal server error'),
        ],
    )
    def test_status_mapping(self, failing_client, path, status_code, detail):
        response = failing_client.get(path)

        assert response.status_code == status_code
        assert response.json() == {'detail': detail}


class TestCommonEndpoints:
    @pytest.mark.unit
    def test_health(self, client):
        response = client.get('/health')

        assert response.status_code == 200
        assert response.json()['status'] == 'healthy'

    @pytest.mark.unit
    def test_metrics_exposed(self, client):
        response = client.get('/metrics')

        assert response.status_code == 200
        assert 'seat_configuration_reconciliations' in response.text
