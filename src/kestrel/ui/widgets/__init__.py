# =============================================================================
# UI Widgets
# =============================================================================
# Reusable UI components for Kestrel.
#
#   - PageView: Bordered, titled view of the visible part of the page
# =============================================================================

from kestrel.ui.widgets.page_view import PageView

__all__ = ["PageView"]
