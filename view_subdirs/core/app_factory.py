"""Application factory for creating and configuring the FastAPI app."""

from fastapi import FastAPI

from view_subdirs import __version__
from view_subdirs.config import Settings, get_settings
from view_subdirs.core.lifespan import lifespan
from view_subdirs.core.middleware import setup_middleware
from view_subdirs.middleware.error_handlers import register_error_handlers
from view_subdirs.routers import health_router, users_router, view_router
from view_subdirs.views.template_renderer import build_view_renderer


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use instead of the process-wide instance

    Returns:
        Configured FastAPI application instance

    Raises:
        ConfigurationException: If the views directory does not exist
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="View Subdirs",
        description="HTML views resolved from per-request view subdirectories.",
        version=__version__,
        lifespan=lifespan,
        license_info={
            "name": "MIT",
        },
    )

    app.state.settings = settings
    app.state.request_count = 0
    app.state.view_renderer = build_view_renderer(settings)

    setup_middleware(app)
    register_error_handlers(app)

    # View routes (HTML pages) - no prefix
    app.include_router(view_router.router, tags=["views"])
    app.include_router(users_router.router, prefix="/users", tags=["users"])

    app.include_router(health_router.router, tags=["health"])

    return app
