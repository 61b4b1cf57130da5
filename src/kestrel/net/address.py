# =============================================================================
# Address Handling
# =============================================================================
# Parses the address of the loaded page and resolves link destinations
# against it.
#
# Resolution rules:
#   - A destination with a scheme (http:, https:, mailto:, ...) is absolute
#     and passes through untouched.
#   - Anything else is joined against the base address.
#   - If joining fails, the raw attribute value is used as the target; a bad
#     link never aborts flattening of the rest of the page.
# =============================================================================

import logging
from urllib.parse import urljoin, urlsplit

from kestrel.core import AddressError

logger = logging.getLogger(__name__)

# Schemes that are meaningless without a host part
_HOST_SCHEMES = {"http", "https", "ftp"}


def parse_address(address: str) -> str:
    """
    Validate an address so it can serve as a base for relative links.

    Args:
        address: The address to check.

    Returns:
        The address, unchanged.

    Raises:
        AddressError: If the address has no scheme, lacks a host where one
                      is required, or cannot be split at all.
    """
    try:
        parts = urlsplit(address)
    except ValueError as e:
        raise AddressError(f"{address!r}: {e}") from e

    if not parts.scheme:
        raise AddressError(f"{address!r}: relative address without a base")

    if parts.scheme.lower() in _HOST_SCHEMES and not parts.hostname:
        raise AddressError(f"{address!r}: empty host")

    return address


def join_address(base: str, relative: str) -> str:
    """
    Join a relative reference against a base address.

    Args:
        base: Absolute base address (see parse_address).
        relative: Reference to resolve, e.g. "page2" or "/x".

    Returns:
        The resolved absolute address.

    Raises:
        AddressError: If the reference cannot be resolved.
    """
    try:
        return urljoin(base, relative)
    except ValueError as e:
        raise AddressError(f"Cannot resolve {relative!r} against {base!r}: {e}") from e


def is_absolute(destination: str) -> bool:
    """Returns True if the destination carries its own scheme."""
    try:
        return bool(urlsplit(destination).scheme)
    except ValueError:
        return False


def resolve_link(base: str, destination: str) -> str:
    """
    Resolve a link destination, degrading to the raw value on failure.

    Example:
        >>> resolve_link("http://e.com/dir/index.html", "page2")
        'http://e.com/dir/page2'
    """
    if is_absolute(destination):
        return destination

    try:
        return join_address(base, destination)
    except AddressError as e:
        logger.debug(f"Keeping unresolved link target: {e}")
        return destination
