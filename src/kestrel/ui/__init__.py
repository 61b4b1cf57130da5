# =============================================================================
# UI Module
# =============================================================================
# Textual-based user interface for Kestrel.
#
# Structure:
#   - screens/: Full-screen views (browse) and modal dialogs (open address)
#   - widgets/: The page view that paints the projected page
# =============================================================================

# Screen exports
from kestrel.ui.screens.browse import BrowseScreen
from kestrel.ui.screens.open_url import OpenURLScreen

# Widget exports
from kestrel.ui.widgets.page_view import PageView

__all__ = [
    "BrowseScreen",
    "OpenURLScreen",
    "PageView",
]
