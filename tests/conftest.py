# =============================================================================
# Pytest Configuration and Fixtures
# =============================================================================
# Shared fixtures for the Kestrel test suite.
# =============================================================================

import pytest
import tempfile
from pathlib import Path

from kestrel.core import TransportError
from kestrel.navigation import Navigator


class FakeFetcher:
    """
    Stand-in transport serving canned pages.

    Unknown addresses raise TransportError, like an unreachable host.
    Every requested address is recorded in `requests`.
    """

    def __init__(self, pages: dict[str, bytes | str]) -> None:
        self.pages = pages
        self.requests: list[str] = []

    def __call__(self, url: str) -> bytes:
        self.requests.append(url)
        if url not in self.pages:
            raise TransportError(f"Could not connect to {url}")
        body = self.pages[url]
        return body.encode("utf-8") if isinstance(body, str) else body


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_html():
    """A small page with plain text, blocks and a mix of links."""
    return """
    <!DOCTYPE html>
    <html>
    <head>
        <title>Sample</title>
    </head>
    <body>
        <h1>Welcome</h1>
        <p>Read the <a href="/docs/intro.html">introduction</a> first.</p>
        <ul>
            <li><a href="guide.html">Guide</a></li>
            <li><a href="https://other.example.org/">Elsewhere</a></li>
            <li><a>No destination</a></li>
        </ul>
        <div>Footer <!-- not shown --> text</div>
    </body>
    </html>
    """


@pytest.fixture
def site(sample_html):
    """Pages served by the fake fetcher."""
    return {
        "http://example.com/index.html": sample_html,
        "http://example.com/docs/intro.html": (
            "<body><p>Intro</p><a href='../index.html'>Back</a></body>"
        ),
        "http://example.com/guide.html": "<body><p>The guide</p></body>",
    }


@pytest.fixture
def fetcher(site):
    """Fake transport over the sample site."""
    return FakeFetcher(site)


@pytest.fixture
def navigator(fetcher):
    """Navigator wired to the fake transport, nothing loaded yet."""
    return Navigator(fetcher)
