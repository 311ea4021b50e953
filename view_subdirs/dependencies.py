"""FastAPI dependencies for dependency injection."""

from fastapi import Request

from view_subdirs.views.context import ViewContext
from view_subdirs.views.template_renderer import ViewRenderer, get_request_view_context


async def get_view_renderer(request: Request) -> ViewRenderer:
    """
    Get the shared view renderer from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        The shared ViewRenderer instance.

    Raises:
        RuntimeError: If the view renderer is not initialized.
    """
    renderer: ViewRenderer | None = getattr(request.app.state, "view_renderer", None)

    if renderer is None:
        raise RuntimeError("View renderer not initialized.")

    return renderer


async def get_view_context(request: Request) -> ViewContext:
    """
    Get the ViewContext of the current request.

    Args:
        request: The FastAPI request object.

    Returns:
        The ViewContext installed by the view context middleware, or a new one
        if the request bypassed it.
    """
    return get_request_view_context(request)
