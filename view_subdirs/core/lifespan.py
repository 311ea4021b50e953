"""Application lifespan management."""

import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from view_subdirs import __version__
from view_subdirs.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan - startup and shutdown events.

    Exceptions after yield are re-raised so the server sees them.
    """
    app.state.startup_time = time.time()

    log_with_context(
        logger,
        "info",
        "Starting View Subdirs application",
        version=__version__,
        views_dir=str(app.state.settings.views_dir),
        event_type="app_startup",
    )

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        log_with_context(
            logger,
            "info",
            "Shutting down View Subdirs application",
            uptime_seconds=int(time.time() - app.state.startup_time),
            request_count=app.state.request_count,
            event_type="app_shutdown",
        )
