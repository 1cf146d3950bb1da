"""
Main Application - Main Layer

This module serves as the entry point for the FastAPI application.
It initializes the container, creates the FastAPI app, and includes
the API routers.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI

from homegraph_bridge.main.config import get_settings
from homegraph_bridge.main.container import app_lifespan, init_container
from homegraph_bridge.presentation.controllers import (
    devices_router,
    fulfillment_router,
    system_router,
)
from homegraph_bridge.shared import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

# Configure logging with basic settings first - before configuration is loaded
configure_logging()

# Load settings
settings = get_settings()

# Update logging with complete settings
update_logging_from_settings(settings)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan management.

    Uses the container's app_lifespan so the device catalog is loaded
    before the first request is served.
    """
    app.state.started_at = datetime.now(timezone.utc)
    logger.info("application.starting")

    async with app_lifespan() as container:
        app.state.container = container
        yield

    logger.info("application.stopped")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: The configured FastAPI application
    """
    settings = get_settings()

    init_container(settings)

    app = FastAPI(
        title=settings.service.title,
        description=settings.service.description,
        version=settings.service.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.include_router(fulfillment_router)
    app.include_router(devices_router)
    app.include_router(system_router)

    return app


app = create_app()
