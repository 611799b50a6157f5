"""
Production FastAPI Application

    granian --interface asgi src.main:app
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import create_db_and_tables, dispose_engine
from src.platform.logging.loguru_io import Logger

# Register every table on Base.metadata before create_all
from src.service.fleet.driven_adapter.model import bus_seat_model, seat_diagram_model  # noqa: F401
from src.service.routing.driven_adapter.model import (  # noqa: F401
    node_model,
    pathway_model,
    pathway_option_model,
    pathway_option_toll_model,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    Logger.base.info('🚀 [Fleet Service] Starting up...')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Fleet Service] Dependency injection wired')

    await create_db_and_tables()
    Logger.base.info('🗄️  [Fleet Service] Database tables ready')

    yield

    Logger.base.info('🛑 [Fleet Service] Shutting down...')

    await dispose_engine()
    Logger.base.info('🗄️  [Fleet Service] Database engine disposed')

    container.unwire()
    Logger.base.info('👋 [Fleet Service] Shutdown complete')


app = create_app(
    lifespan=lifespan,
    description='Fleet Inventory - seat diagrams, seat configuration and pathway options',
)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
