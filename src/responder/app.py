"""FastAPI application factory with an async lifespan that announces the bound port."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from responder import __version__
from responder.api.root import router as root_router
from responder.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log the listening port on startup and the stop on shutdown.

    The responder holds no resources, so there is nothing to open or close.
    """
    settings = get_settings()
    logger.info("Backend listening on port %d", settings.port)

    yield

    logger.info("Backend on port %d stopped", settings.port)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    This is the app factory. Uvicorn calls it with the --factory flag:
        uvicorn responder.app:create_app --factory
    """
    settings = get_settings()

    app = FastAPI(
        title="Backend Responder",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
    )

    app.include_router(root_router)

    return app
