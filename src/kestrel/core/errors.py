# =============================================================================
# Error Taxonomy
# =============================================================================
# Every failure that can happen while navigating to a page maps onto one of
# these. The navigator catches BrowseError at its boundary and turns it into
# a one-line error page, so none of them ever ends the process.
# =============================================================================


class BrowseError(Exception):
    """Base exception for anything that goes wrong loading a page."""
    pass


class TransportError(BrowseError):
    """Raised when the network request fails or returns a non-2xx status."""
    pass


class AddressError(BrowseError):
    """Raised when a base or target address cannot be parsed or resolved."""
    pass


class ParseError(BrowseError):
    """Raised when fetched content cannot be turned into a document tree."""
    pass
