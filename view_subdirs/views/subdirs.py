"""View subdirectory support for template name resolution.

Sites that outgrow a flat views directory can keep templates in
subdirectories. A handler picks the subdirectory once::

    @router.get("/users/{user_id}")
    async def profile(request: Request, view: ViewContext = Depends(get_view_context), ...):
        view.set_view_subdir("users")
        return renderer.render(request, "profile")      # views/users/profile.html

and any template name without a slash is looked up inside it. Names that
already contain a slash are used as given, so ``"lists/users"`` still renders
``views/lists/users.html``.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from view_subdirs.views.template_renderer import RenderOptions

# Jinja2 loaders split template names on "/" on every platform
PATH_SEPARATOR = "/"


def resolve_template_path(view_subdir: str | None, template: Any) -> str:
    """Prefix ``template`` with ``view_subdir`` when it has no path separator.

    Args:
        view_subdir: Active view subdirectory, or None when unset
        template: Requested template identifier (converted with str())

    Returns:
        Effective template name
    """
    name = str(template)
    if view_subdir is not None and PATH_SEPARATOR not in name:
        return f"{view_subdir}{PATH_SEPARATOR}{name}"
    return name


class ViewSubdirRewriter:
    """Template name rewriter that applies the request's view subdirectory.

    Installed in ViewRenderer's rewriter chain, it runs right before the name
    is mapped to a loader path, so the rewritten name is what Jinja2 loads and
    caches.
    """

    def __call__(self, template: Any, options: "RenderOptions") -> str:
        return resolve_template_path(options.view_context.view_subdir, template)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
