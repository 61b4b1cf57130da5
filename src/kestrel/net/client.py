# =============================================================================
# HTTP Client
# =============================================================================
# Blocking HTTP transport built on requests.
#
# Key responsibilities:
#   - One GET per navigation, no background or concurrent requests
#   - Treat any non-2xx status as a failure (the body is discarded)
#   - Map every requests exception onto TransportError
#
# The navigator never sees requests types; it only gets bytes or a
# TransportError.
# =============================================================================

import logging
from typing import TYPE_CHECKING

import requests

from kestrel.core import TransportError

if TYPE_CHECKING:
    from kestrel.config import NetworkConfig

# Set up logging for this module
logger = logging.getLogger(__name__)


class HTTPClient:
    """
    Fetches documents over HTTP(S).

    Usage:
        >>> client = HTTPClient(config.network)
        >>> body = client.fetch("https://example.com/")

    Attributes:
        config: Network configuration (timeout, user agent).
    """

    def __init__(
        self,
        config: "NetworkConfig",
        session: requests.Session | None = None,
    ) -> None:
        """
        Initialize the HTTP client.

        Args:
            config: Network configuration.
            session: Optional pre-built session (mainly for tests).
        """
        self.config = config
        self._session = session or requests.Session()
        self._session.headers["User-Agent"] = config.user_agent

    def fetch(self, url: str) -> bytes:
        """
        Fetch the body of a document.

        Args:
            url: Address to request.

        Returns:
            Raw response body.

        Raises:
            TransportError: On malformed URLs, connection failures,
                            timeouts and non-2xx responses.
        """
        logger.info(f"Fetching {url}")

        try:
            response = self._session.get(url, timeout=self.config.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning(f"Request to {url} failed: {e}")
            raise TransportError(str(e)) from e

        body = response.content
        logger.debug(f"Fetched {url}: status {response.status_code}, {len(body)} bytes")
        return body

    def __call__(self, url: str) -> bytes:
        return self.fetch(url)

    def close(self) -> None:
        """Release pooled connections."""
        self._session.close()
