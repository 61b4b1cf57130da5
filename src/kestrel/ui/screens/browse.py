# =============================================================================
# Browse Screen
# =============================================================================
# The primary view of Kestrel, showing:
#   - The current page in a bordered view titled with its address
#   - A status line with the selected link's target
#   - The footer with key bindings
#
# Every key binding maps onto one navigator transition. After a transition
# the page view is refreshed, which re-runs the projection for the current
# terminal size.
# =============================================================================

import logging

from rich.markup import escape
from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from kestrel.config import UIConfig
from kestrel.navigation import Navigator
from kestrel.ui.screens.open_url import OpenURLScreen
from kestrel.ui.widgets.page_view import PageView

logger = logging.getLogger(__name__)


def status_markup(navigator: Navigator) -> str:
    """
    Build the status line for the current page as Rich markup.

    Page-supplied text (link targets) is escaped, so brackets in an address
    are shown literally.
    """
    page = navigator.page
    link = navigator.selected_target()

    if not page.success:
        return "Load failed - press r to retry or o to open another address"
    if link is not None:
        position = escape(f"[{navigator.selected_link + 1}/{len(page.links)}]")
        return f"{position} {escape(link.target)}"
    return f"{len(page.links)} links, {page.total_lines} lines"


class BrowseScreen(Screen):
    """
    The page browsing screen.

    Keybindings:
        - Tab / Shift+Tab: Select next / previous link
        - Enter: Follow the selected link
        - j/k or arrows: Scroll by one step
        - PageDown/PageUp, Space/b: Scroll by one page step
        - o: Open an address
        - r: Reload the current page
    """

    # Tab and Enter take priority so focus handling never swallows them
    BINDINGS = [
        Binding("tab", "next_link", "Next Link", priority=True),
        Binding("shift+tab", "prev_link", "Prev Link", priority=True),
        Binding("enter", "follow_link", "Follow", priority=True),
        Binding("down", "scroll_down", "Down", show=False),
        Binding("j", "scroll_down", "Down", show=False),
        Binding("up", "scroll_up", "Up", show=False),
        Binding("k", "scroll_up", "Up", show=False),
        Binding("pagedown", "page_down", "Page Down", show=False),
        Binding("space", "page_down", "Page Down", show=False),
        Binding("pageup", "page_up", "Page Up", show=False),
        Binding("b", "page_up", "Page Up", show=False),
        Binding("o", "open_url", "Open"),
        Binding("r", "reload", "Reload"),
    ]

    CSS = """
    #status-line {
        height: 1;
        background: $surface-darken-2;
        color: $text-muted;
        padding: 0 1;
    }
    """

    def __init__(
        self,
        navigator: Navigator,
        ui_config: UIConfig | None = None,
        start_url: str = "",
    ) -> None:
        """
        Initialize the browse screen.

        Args:
            navigator: The navigation state machine to drive.
            ui_config: Scroll step settings.
            start_url: Address loaded when the screen is mounted.
        """
        super().__init__()
        self.navigator = navigator
        self.ui_config = ui_config or UIConfig()
        self._start_url = start_url

    def compose(self) -> ComposeResult:
        """
        Compose the browse screen layout.

        +--------------------------------------------------+
        |                    Header                         |
        +-- https://example.com/ ---------------------------+
        |                                                  |
        |                  Page View                        |
        |                                                  |
        +--------------------------------------------------+
        | Status                                            |
        +--------------------------------------------------+
        |                    Footer                         |
        +--------------------------------------------------+
        """
        yield Header()
        yield PageView(self.navigator, id="page-view")
        yield Static("", id="status-line")
        yield Footer()

    def on_mount(self) -> None:
        """Load the start page."""
        if self._start_url:
            self.navigate(self._start_url)
        else:
            self._refresh_page()

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def navigate(self, url: str) -> None:
        """Go to url and repaint. Blocks until the fetch completes."""
        self.navigator.set_url(url)
        self._refresh_page()

    def _refresh_page(self) -> None:
        """Update title, status line and page view after any transition."""
        page_view = self.query_one("#page-view", PageView)
        page_view.border_title = self.navigator.url or "kestrel"
        self.app.sub_title = self.navigator.url
        page_view.refresh()
        self._update_status()

    def _update_status(self) -> None:
        """Show the selected link, or a summary of the page."""
        self.query_one("#status-line", Static).update(status_markup(self.navigator))

    # -------------------------------------------------------------------------
    # Action Handlers
    # -------------------------------------------------------------------------

    def action_next_link(self) -> None:
        """Select the next link."""
        self.navigator.cycle_forward()
        self._refresh_page()

    def action_prev_link(self) -> None:
        """Select the previous link."""
        self.navigator.cycle_backward()
        self._refresh_page()

    def action_follow_link(self) -> None:
        """Follow the selected link."""
        if self.navigator.activate_selection():
            self._refresh_page()

    def action_scroll_down(self) -> None:
        self.navigator.scroll_by(self.ui_config.scroll_step)
        self._refresh_page()

    def action_scroll_up(self) -> None:
        self.navigator.scroll_by(-self.ui_config.scroll_step)
        self._refresh_page()

    def action_page_down(self) -> None:
        self.navigator.scroll_by(self.ui_config.page_step)
        self._refresh_page()

    def action_page_up(self) -> None:
        self.navigator.scroll_by(-self.ui_config.page_step)
        self._refresh_page()

    def action_reload(self) -> None:
        """Fetch the current page again."""
        logger.info(f"Reloading {self.navigator.url}")
        self.navigator.reload()
        self._refresh_page()

    def action_open_url(self) -> None:
        """Ask for an address and go there."""

        def handle_result(address: str | None) -> None:
            if address:
                self.navigate(address)

        self.app.push_screen(OpenURLScreen(self.navigator.url), handle_result)
