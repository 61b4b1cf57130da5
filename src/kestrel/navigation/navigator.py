# =============================================================================
# Navigator
# =============================================================================
# The navigation state machine. It owns the single cached page and the
# selection/scroll state on it, and applies user actions to them.
#
# There is only one state (idle). Navigating fetches synchronously and
# comes back to idle with either the new page or a one-line error page:
#
#   set_url(url) ──fetch──> flatten ──> swap page, reset selection/scroll
#                    │
#                    └─ TransportError / AddressError / ParseError
#                           ──> swap in error page, reset selection/scroll
#
# The page is swapped as a whole only after it has been fully built, so the
# old page stays on screen until the new one is ready.
# =============================================================================

import logging
from typing import Callable

from kestrel.core import (
    AddressError,
    Link,
    NavigationState,
    PageState,
    ParseError,
    TransportError,
)
from kestrel.net.address import parse_address
from kestrel.rendering.flatten import flatten_document
from kestrel.rendering.projector import LinkStyles, Projection, project

logger = logging.getLogger(__name__)

# Takes an address, returns the body or raises TransportError
Fetcher = Callable[[str], bytes]


class Navigator:
    """
    Drives selection, scrolling and link following for one page at a time.

    Usage:
        >>> nav = Navigator(HTTPClient(config.network))
        >>> nav.set_url("https://example.com/")
        >>> nav.cycle_forward()
        >>> nav.activate_selection()

    Attributes:
        page: The cached page.
        state: Selection and scroll position on that page.
        styles: Styles used when projecting the page.
        running: False once quit() has been called.
    """

    def __init__(self, fetch: Fetcher, styles: LinkStyles | None = None) -> None:
        """
        Initialize the navigator with an empty page.

        Args:
            fetch: Transport used for every navigation.
            styles: Link styles for render().
        """
        self._fetch = fetch
        self.styles = styles or LinkStyles()
        self.page = PageState()
        self.state = NavigationState()
        self.running = True

    # -------------------------------------------------------------------------
    # Page Access
    # -------------------------------------------------------------------------

    @property
    def url(self) -> str:
        return self.page.url

    @property
    def links(self) -> tuple[Link, ...]:
        return self.page.links

    @property
    def selected_link(self) -> int | None:
        return self.state.selected_link

    @property
    def scroll_offset(self) -> int:
        return self.state.scroll_offset

    def selected_target(self) -> Link | None:
        """Returns the selected link, or None if nothing is selected."""
        index = self.state.selected_link
        if index is None or index >= len(self.page.links):
            return None
        return self.page.links[index]

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def set_url(self, url: str) -> bool:
        """
        Navigate to url unless it is already the current page.

        Returns:
            True if a fetch was performed.
        """
        if url == self.page.url:
            return False
        self._load(url)
        return True

    def reload(self) -> None:
        """Fetch the current address again."""
        if self.page.url:
            self._load(self.page.url)

    def cycle_forward(self) -> None:
        """Select the next link, wrapping to the first."""
        count = len(self.page.links)
        if not count:
            return
        current = self.state.selected_link
        self.state.selected_link = 0 if current is None else (current + 1) % count

    def cycle_backward(self) -> None:
        """Select the previous link, wrapping to the last."""
        count = len(self.page.links)
        if not count:
            return
        current = self.state.selected_link
        self.state.selected_link = (count - 1) if current is None else (current - 1) % count

    def activate_selection(self) -> bool:
        """
        Follow the selected link.

        Returns:
            True if a fetch was performed.
        """
        link = self.selected_target()
        if link is None:
            return False
        logger.info(f"Following link {self.state.selected_link}: {link.target}")
        return self.set_url(link.target)

    def scroll_by(self, delta: int) -> None:
        """Scroll by delta lines; stops at the top, bottom is clamped on render."""
        self.state.scroll_offset = max(0, self.state.scroll_offset + delta)

    def quit(self) -> None:
        self.running = False

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render(self, viewport_height: int) -> Projection:
        """
        Project the page onto a viewport and keep the clamped offset.

        Args:
            viewport_height: Rows available for content this frame.
        """
        projection = project(
            self.page.lines,
            self.state.selected_link,
            viewport_height,
            self.state.scroll_offset,
            self.styles,
        )
        self.state.scroll_offset = projection.scroll_offset
        return projection

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def _load(self, url: str) -> None:
        """Build the page for url and swap it in."""
        page = self._build_page(url)
        self.page = page
        self.state.reset()
        logger.info(
            f"Loaded {url}: {len(page.links)} links, {len(page.lines)} lines"
            + ("" if page.success else " (error page)")
        )

    def _build_page(self, url: str) -> PageState:
        """Fetch and flatten url, or build an error page describing why not."""
        try:
            content = self._fetch(url)
            base = parse_address(url)
            result = flatten_document(content, base)
        except TransportError as e:
            logger.warning(f"Fetch failed for {url}: {e}")
            return PageState.error_page(url, f"Error fetching URL: {e}")
        except AddressError as e:
            logger.warning(f"Bad address {url}: {e}")
            return PageState.error_page(url, f"Invalid address: {e}")
        except ParseError as e:
            logger.warning(f"Could not parse {url}: {e}")
            return PageState.error_page(url, f"Error parsing document: {e}")

        return result.to_page(url)
