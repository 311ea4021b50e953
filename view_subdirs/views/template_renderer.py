"""Template rendering utilities for HTML views."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jinja2
from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from view_subdirs.config import Settings
from view_subdirs.exceptions import ConfigurationException, TemplateNotFoundException
from view_subdirs.logging_config import get_logger, log_with_context
from view_subdirs.views.context import ViewContext
from view_subdirs.views.subdirs import ViewSubdirRewriter

logger = get_logger(__name__)


@dataclass(frozen=True)
class RenderOptions:
    """Options passed through template path resolution."""

    view_context: ViewContext
    extension: str


TemplateRewriter = Callable[[Any, RenderOptions], str]


def get_request_view_context(request: Request) -> ViewContext:
    """Return the request's ViewContext, installing one if none exists yet."""
    view_context: ViewContext | None = getattr(request.state, "view_context", None)
    if view_context is None:
        view_context = ViewContext()
        request.state.view_context = view_context
    return view_context


class ViewRenderer:
    """Renders named views from a Jinja2 views directory.

    Template names go through ``template_path`` before they reach Jinja2:
    every rewriter in ``rewriters`` gets a chance to change the name, then the
    template extension is appended. Subclasses may override ``template_path``
    and call ``super()`` to add their own step.
    """

    def __init__(
        self,
        templates: Jinja2Templates,
        extension: str = "html",
        rewriters: Sequence[TemplateRewriter] = (),
    ):
        self.templates = templates
        self.extension = extension
        self.rewriters: list[TemplateRewriter] = list(rewriters)

    def add_rewriter(self, rewriter: TemplateRewriter) -> None:
        """Append a rewriter to the end of the resolution chain."""
        self.rewriters.append(rewriter)

    def template_path(self, template: Any, options: RenderOptions) -> str:
        """Map a requested template name to the path handed to the Jinja2 loader."""
        name = str(template)
        for rewriter in self.rewriters:
            name = rewriter(name, options)
        return f"{name}.{options.extension}"

    def render(
        self,
        request: Request,
        template: Any,
        context: dict[str, Any] | None = None,
        *,
        extension: str | None = None,
        status_code: int = 200,
    ) -> HTMLResponse:
        """Render a view for the current request.

        Args:
            request: FastAPI request object
            template: Template name, e.g. "profile" or "lists/users"
            context: Template context variables
            extension: Override the configured template extension
            status_code: HTTP status code of the response

        Returns:
            HTMLResponse with the rendered template

        Raises:
            TemplateNotFoundException: If the resolved template does not exist
        """
        options = RenderOptions(
            view_context=get_request_view_context(request),
            extension=extension or self.extension,
        )
        path = self.template_path(template, options)

        log_with_context(
            logger,
            "debug",
            "Resolved view template",
            template=str(template),
            resolved_path=path,
            view_subdir=options.view_context.view_subdir,
            event_type="view_resolved",
        )

        try:
            return self.templates.TemplateResponse(
                request,
                path,
                context or {},
                status_code=status_code,
            )
        except jinja2.TemplateNotFound as e:
            log_with_context(
                logger,
                "warning",
                "View template not found",
                template=str(template),
                resolved_path=path,
                missing=e.name,
                event_type="view_not_found",
            )
            raise TemplateNotFoundException(str(template), path, details={"missing": e.name}) from e


def build_view_renderer(settings: Settings) -> ViewRenderer:
    """Create the application's renderer with view subdirectory support.

    Args:
        settings: Settings instance providing views_dir and template_extension

    Raises:
        ConfigurationException: If views_dir is not a directory
    """
    views_dir = Path(settings.views_dir)
    if not views_dir.is_dir():
        raise ConfigurationException(
            f"Views directory does not exist: {views_dir}",
            details={"views_dir": str(views_dir)},
        )

    renderer = ViewRenderer(
        Jinja2Templates(directory=str(views_dir)),
        extension=settings.template_extension,
        rewriters=[ViewSubdirRewriter()],
    )
    log_with_context(
        logger,
        "info",
        "View renderer initialized",
        views_dir=str(views_dir),
        extension=settings.template_extension,
        event_type="view_renderer_ready",
    )
    return renderer
