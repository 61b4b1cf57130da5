# =============================================================================
# Network Module
# =============================================================================
# Everything that deals with addresses and the wire:
#   - address: parsing base addresses and resolving link destinations
#   - client: blocking HTTP fetches via requests
# =============================================================================

from kestrel.net.address import join_address, parse_address, resolve_link
from kestrel.net.client import HTTPClient

__all__ = ["HTTPClient", "parse_address", "join_address", "resolve_link"]
