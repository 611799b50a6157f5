"""
Test Configuration and Fixtures

This module provides:
- Environment setup before any application module reads settings
- A test FastAPI app and client; controller tests override use case dependencies
- Helpers for asserting on FieldValidationError payloads

Architecture:
- Unit tests (test/**/unit/): pure domain and use case tests over in-memory repositories
- Integration tests (test/**/integration/): real PostgreSQL, tables truncated per test
"""

# =============================================================================
# Environment setup MUST happen before any application import
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    os.environ.setdefault('POSTGRES_DB', 'fleet_inventory_test_db')
    os.environ.setdefault('DEBUG', 'false')

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ.setdefault('DB_POOL_SIZE', '2')
    os.environ.setdefault('DB_POOL_MAX_OVERFLOW', '2')


_early_setup_test_environment()

from collections.abc import AsyncGenerator, AsyncIterator, Callable, Generator  # noqa: E402
from contextlib import asynccontextmanager  # noqa: E402
from typing import AsyncContextManager, List  # noqa: E402

from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import text  # noqa: E402
from sqlalchemy.exc import DBAPIError  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402

from src.platform.app_factory import create_app  # noqa: E402
from src.platform.config.core_setting import settings  # noqa: E402
from src.platform.database.orm_db_setting import (  # noqa: E402
    Base,
    dispose_engine,
    get_engine,
    get_session_maker,
)
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork  # noqa: E402
from src.platform.exception.exceptions import FieldValidationError  # noqa: E402


@asynccontextmanager
async def _test_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """No database and no wiring: controller tests override every use case"""
    yield


@pytest.fixture
def test_app() -> Generator[FastAPI, None, None]:
    app = create_app(lifespan=_test_lifespan, title_suffix=' (Test)')
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(test_app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(test_app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def error_fields():
    """Field paths of a FieldValidationError, in report order"""

    def _fields(exc: FieldValidationError) -> List[str]:
        return [error.field for error in exc.errors]

    return _fields


# =============================================================================
# Pytest Hooks: integration tests get a clean database
# =============================================================================
def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if item.get_closest_marker('integration'):
            item.fixturenames.insert(0, 'clean_database')


# =============================================================================
# Database Setup and Cleanup
# =============================================================================
_schema_ready = False


def _import_models() -> None:
    """Register every table on Base.metadata"""
    import src.service.fleet.driven_adapter.model.bus_seat_model  # noqa: F401
    import src.service.fleet.driven_adapter.model.seat_diagram_model  # noqa: F401
    import src.service.routing.driven_adapter.model.node_model  # noqa: F401
    import src.service.routing.driven_adapter.model.pathway_model  # noqa: F401
    import src.service.routing.driven_adapter.model.pathway_option_model  # noqa: F401
    import src.service.routing.driven_adapter.model.pathway_option_toll_model  # noqa: F401


async def _ensure_test_database() -> None:
    test_db = settings.POSTGRES_DB
    postgres_url = settings.DATABASE_URL_ASYNC.replace(f'/{test_db}', '/postgres')
    engine = create_async_engine(postgres_url, isolation_level='AUTOCOMMIT', poolclass=NullPool)
    try:
        async with engine.connect() as conn:
            result = await conn.execute(
                text('SELECT 1 FROM pg_database WHERE datname = :name'), {'name': test_db}
            )
            if not result.fetchone():
                await conn.execute(text(f'CREATE DATABASE "{test_db}"'))
    finally:
        await engine.dispose()


async def _setup_test_database() -> None:
    global _schema_ready
    if _schema_ready:
        return

    await _ensure_test_database()
    _import_models()
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    _schema_ready = True


async def _clean_all_tables() -> None:
    tables = ', '.join(f'"{table.name}"' for table in Base.metadata.sorted_tables)
    async with get_engine().begin() as conn:
        await conn.execute(text(f'TRUNCATE {tables} RESTART IDENTITY CASCADE'))


@pytest.fixture(scope='function')
async def clean_database() -> AsyncGenerator[None, None]:
    try:
        await _setup_test_database()
        await _clean_all_tables()
    except (OSError, DBAPIError) as e:
        await dispose_engine()
        pytest.skip(f'PostgreSQL not reachable: {e}')

    yield

    await dispose_engine()


@pytest.fixture
def open_uow() -> Callable[[], AsyncContextManager[SqlAlchemyUnitOfWork]]:
    """
    A Unit of Work on its own session, like one request gets.

    Usage:
        async with open_uow() as uow:
            await SomeUseCase(uow).execute(...)
    """

    @asynccontextmanager
    async def _open() -> AsyncIterator[SqlAlchemyUnitOfWork]:
        async with get_session_maker()() as session:
            yield SqlAlchemyUnitOfWork(session)

    return _open
