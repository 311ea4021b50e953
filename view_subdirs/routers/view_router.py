"""Page routes for serving HTML views from the views root."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from view_subdirs.dependencies import get_view_renderer
from view_subdirs.views.template_renderer import ViewRenderer

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def index(request: Request, renderer: ViewRenderer = Depends(get_view_renderer)):
    """Render the landing page."""
    return renderer.render(request, "index")
