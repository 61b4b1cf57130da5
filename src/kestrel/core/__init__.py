# =============================================================================
# Kestrel Core Module
# =============================================================================
# This module contains the core domain models for Kestrel. The modules in
# this package import nothing outside the standard library, so the net and
# rendering layers can depend on them without import cycles.
#
# The core models represent the fundamental concepts of a text browser:
#   - Link: A resolved hyperlink target plus its visible label
#   - LineRecord: One line of the flattened document (plain or linked)
#   - PageState: The single cached page (url, link table, lines)
#   - NavigationState: Selection and scroll position on that page
# =============================================================================

from kestrel.core.errors import AddressError, BrowseError, ParseError, TransportError
from kestrel.core.page import FlattenResult, LineRecord, Link, NavigationState, PageState

__all__ = [
    "Link",
    "LineRecord",
    "PageState",
    "NavigationState",
    "FlattenResult",
    "BrowseError",
    "TransportError",
    "AddressError",
    "ParseError",
]
