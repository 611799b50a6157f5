"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.platform.metrics.fleet_metrics import metrics
from src.service.fleet.driven_adapter.repo.bus_seat_query_repo_impl import BusSeatQueryRepoImpl
from src.service.fleet.driven_adapter.repo.seat_diagram_query_repo_impl import (
    SeatDiagramQueryRepoImpl,
)
from src.service.routing.driven_adapter.repo.pathway_query_repo_impl import PathwayQueryRepoImpl


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database session factory for read-side repositories
    database = providers.Singleton(Database)

    # Query repositories (stateless - open a session per call)
    seat_diagram_query_repo = providers.Singleton(
        SeatDiagramQueryRepoImpl, session_factory=database.provided.session
    )
    bus_seat_query_repo = providers.Singleton(
        BusSeatQueryRepoImpl, session_factory=database.provided.session
    )
    pathway_query_repo = providers.Singleton(
        PathwayQueryRepoImpl, session_factory=database.provided.session
    )

    # Metrics
    fleet_metrics = providers.Object(metrics)


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
