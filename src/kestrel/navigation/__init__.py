# =============================================================================
# Navigation Module
# =============================================================================
# The navigation state machine: current page, selected link, scroll offset,
# and the transitions driven by key presses.
# =============================================================================

from kestrel.navigation.navigator import Fetcher, Navigator

__all__ = ["Navigator", "Fetcher"]
