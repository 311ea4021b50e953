"""View rendering module for HTML templates.

Routers declare which view subdirectory they render from through the
per-request ViewContext; the ViewRenderer resolves template names against it
and renders them with Jinja2.
"""

from view_subdirs.views.context import ViewContext
from view_subdirs.views.subdirs import ViewSubdirRewriter, resolve_template_path
from view_subdirs.views.template_renderer import RenderOptions, ViewRenderer, build_view_renderer

__all__ = [
    "RenderOptions",
    "ViewContext",
    "ViewRenderer",
    "ViewSubdirRewriter",
    "build_view_renderer",
    "resolve_template_path",
]
