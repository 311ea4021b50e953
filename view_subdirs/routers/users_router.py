"""User pages, rendered from the users view subdirectory."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from view_subdirs.dependencies import get_view_context, get_view_renderer
from view_subdirs.models import ErrorResponse
from view_subdirs.views.context import ViewContext
from view_subdirs.views.template_renderer import ViewRenderer

USERS_VIEW_SUBDIR = "users"

USERS = {
    1: {"id": 1, "name": "Ada Lovelace", "email": "ada@example.com"},
    2: {"id": 2, "name": "Alan Turing", "email": "alan@example.com"},
}


async def use_users_views(view: ViewContext = Depends(get_view_context)) -> None:
    """Resolve bare template names inside the users view subdirectory."""
    view.set_view_subdir(USERS_VIEW_SUBDIR)


router = APIRouter(
    dependencies=[Depends(use_users_views)],
    responses={404: {"model": ErrorResponse, "description": "Template not found"}},
)


@router.get("/list", response_class=HTMLResponse)
async def users_list(request: Request, renderer: ViewRenderer = Depends(get_view_renderer)):
    """Render lists/users; names with a slash ignore the view subdirectory."""
    return renderer.render(request, "lists/users", {"users": list(USERS.values())})


@router.get("/{user_id}", response_class=HTMLResponse)
async def user_profile(request: Request, user_id: int, renderer: ViewRenderer = Depends(get_view_renderer)):
    """Render users/profile, or users/not_found for unknown ids."""
    user = USERS.get(user_id)
    if user is None:
        return renderer.render(request, "not_found", {"user_id": user_id}, status_code=404)
    return renderer.render(request, "profile", {"user": user})


@router.get("/{user_id}/card", response_class=HTMLResponse)
async def user_card(
    request: Request,
    user_id: int,
    view: ViewContext = Depends(get_view_context),
    renderer: ViewRenderer = Depends(get_view_renderer),
):
    """Render the card view shared by every section."""
    # card.html lives in the views root
    view.set_view_subdir(None)
    return renderer.render(request, "card", {"user": USERS.get(user_id), "user_id": user_id})
