"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from horizon_admin.api.manager import router as manager_router
from horizon_admin.app_logging import configure_logging
from horizon_admin.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        settings = app.state.container.settings
        logger.info("Serving manager pages against %s", settings.base_api_url)
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Horizon Admin", lifespan=lifespan)
    app.state.container = container

    app.include_router(manager_router)

    @app.get("/")
    async def root() -> RedirectResponse:
        """Send visitors to the dashboard."""
        return RedirectResponse(url="/manager/dashboard")

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
