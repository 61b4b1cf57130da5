# =============================================================================
# UI Screens
# =============================================================================
# Full-screen views for the application.
#
#   - BrowseScreen: The page view with status line and key bindings
#   - OpenURLScreen: Modal dialog for typing an address
# =============================================================================

from kestrel.ui.screens.browse import BrowseScreen
from kestrel.ui.screens.open_url import OpenURLScreen

__all__ = ["BrowseScreen", "OpenURLScreen"]
