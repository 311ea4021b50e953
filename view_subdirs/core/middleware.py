"""Middleware configuration."""

import time

from fastapi import FastAPI, Request

from view_subdirs.logging_config import get_logger, log_with_context
from view_subdirs.views.context import ViewContext

logger = get_logger(__name__)


def setup_middleware(app: FastAPI) -> None:
    """Configure all middleware for the application.

    Args:
        app: FastAPI application instance
    """

    @app.middleware("http")
    async def install_view_context(request: Request, call_next):
        """Give every request its own ViewContext with no view subdirectory."""
        request.state.view_context = ViewContext()
        app.state.request_count += 1

        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            log_with_context(
                logger,
                "error",
                "Request failed",
                method=request.method,
                path=request.url.path,
                error_type=type(e).__name__,
                view_subdir=request.state.view_context.view_subdir,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
                event_type="http_request_failed",
            )
            raise

        log_with_context(
            logger,
            "info",
            "Request handled",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            view_subdir=request.state.view_context.view_subdir,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
            event_type="http_request",
        )
        return response
