"""Per-request view state."""

from dataclasses import dataclass


@dataclass
class ViewContext:
    """View settings owned by a single request.

    A fresh instance is installed on ``request.state`` by the view context
    middleware, so nothing set here outlives the request that set it.
    """

    view_subdir: str | None = None

    def set_view_subdir(self, subdir: str | None) -> None:
        """Set the view subdirectory for bare template names.

        The value is used verbatim. Pass None to stop using a subdirectory.
        """
        self.view_subdir = subdir

    def reset(self) -> None:
        """Return to the state of a freshly started request."""
        self.view_subdir = None
