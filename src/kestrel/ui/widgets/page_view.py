# =============================================================================
# Page View Widget
# =============================================================================
# Paints the visible window of the current page inside a titled border.
#
# The widget keeps no copy of the page. Every repaint asks the navigator to
# project the page onto the current content height, so a terminal resize
# is picked up on the next frame without any extra bookkeeping.
# =============================================================================

from typing import TYPE_CHECKING

from rich.text import Text
from textual.app import RenderResult
from textual.widget import Widget

if TYPE_CHECKING:
    from kestrel.navigation import Navigator


class PageView(Widget):
    """
    Bordered view of the current page.

    Lines are never wrapped: one line record is one terminal row, so the
    scroll offset maps directly onto records.

    Usage:
        >>> view = PageView(navigator, id="page-view")
        >>> navigator.scroll_by(10)
        >>> view.refresh()
    """

    DEFAULT_CSS = """
    PageView {
        height: 1fr;
        border: round $primary;
        border-title-color: $accent;
        border-title-style: bold;
        padding: 0 1;
    }
    """

    def __init__(self, navigator: "Navigator", **kwargs) -> None:
        """
        Initialize the page view.

        Args:
            navigator: Source of the page and of selection/scroll state.
            **kwargs: Additional arguments passed to Widget.
        """
        super().__init__(**kwargs)
        self.navigator = navigator

    @property
    def viewport_height(self) -> int:
        """Rows available for page content."""
        return self.content_size.height

    def render(self) -> RenderResult:
        """Project the page for this frame."""
        projection = self.navigator.render(self.viewport_height)
        return Text("\n", no_wrap=True, overflow="ellipsis").join(projection.lines)
