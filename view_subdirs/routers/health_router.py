"""Health endpoints."""

from datetime import UTC, datetime
from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from view_subdirs import __version__
from view_subdirs.models import DetailedHealthResponse, HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check endpoint."""
    return HealthResponse(status="ok", version=__version__)


@router.get("/health/ready", response_model=DetailedHealthResponse)
async def readiness_check(request: Request):
    """Readiness probe - can the application render views?

    **Returns:**
    - 200: Renderer is initialized and the views directory is present
    - 503: Otherwise
    """
    checks = {}

    renderer = getattr(request.app.state, "view_renderer", None)
    checks["view_renderer"] = "ok" if renderer is not None else "failed"

    views_dir = Path(request.app.state.settings.views_dir)
    checks["views_dir"] = "ok" if views_dir.is_dir() else f"missing: {views_dir}"

    all_healthy = all(result == "ok" for result in checks.values())

    return JSONResponse(
        status_code=200 if all_healthy else 503,
        content=DetailedHealthResponse(
            status="healthy" if all_healthy else "unhealthy",
            version=__version__,
            timestamp=datetime.now(UTC),
            checks=checks,
        ).model_dump(mode="json"),
    )
