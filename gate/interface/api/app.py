"""FastAPI application."""

import asyncio
from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI

from gate.application.sweeper import ExpirySweeper
from gate.config import Settings, SweeperSettings
from gate.interface.api.routes import auth, health, invitations
from gate.util.di.container import create_container, setup_di
from gate.util.logging import get_logger, setup_logging
from gate.util.observability import instrument_fastapi

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Run the expiry sweeper beside the server.

    The sweeper is stopped through an event on shutdown, after which the DI
    container is closed.
    """
    container: AsyncContainer = app.state.dishka_container
    sweeper_settings = await container.get(SweeperSettings)

    stop_event = asyncio.Event()
    sweeper_task = None
    if sweeper_settings.enabled:
        sweeper = ExpirySweeper(container, sweeper_settings)
        sweeper_task = asyncio.create_task(sweeper.run_forever(stop_event))
        logger.info("Expiry sweeper scheduled")

    try:
        yield
    finally:
        stop_event.set()
        if sweeper_task is not None:
            await sweeper_task
        await container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container is built
            when omitted
    """
    settings = Settings()
    setup_logging(settings)

    app_instance = FastAPI(
        title="Invite Gate API",
        description="Bearer token gate with invitation-only registration",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(invitations.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
