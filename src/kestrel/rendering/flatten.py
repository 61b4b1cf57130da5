# =============================================================================
# Markup Flattener
# =============================================================================
# Walks a parsed HTML tree and turns it into a flat list of line records,
# collecting hyperlinks into a link table on the way.
#
# Rules:
#   - <a href=...>: resolve the destination, take all descendant text as
#     the label, emit one linked record. Children are NOT walked again, so
#     nested anchors and markup inside a link only contribute label text.
#   - <a> without href: dropped entirely, children included.
#   - Any other element: walk children in document order, then emit an
#     empty record if the element is a block (forces a line break).
#   - Text: each non-empty line of a text node becomes a plain record.
#
# The walk is a pure function of (tree, base address).
# =============================================================================

import logging

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PageElement, PreformattedString

from kestrel.core import FlattenResult, LineRecord, Link, ParseError
from kestrel.net.address import resolve_link

logger = logging.getLogger(__name__)


class MarkupFlattener:
    """
    Flattens an element tree into line records and a link table.

    A flattener instance holds the output of a single walk; use flatten()
    to run one on a fresh instance.

    Usage:
        >>> soup = parse_document(b"<body><p>Hi <a href='/x'>there</a></p></body>")
        >>> result = MarkupFlattener("http://e.com/").run(soup.body)
        >>> [line.text for line in result.lines]
        ['Hi', 'there', '']
    """

    # Elements that end with a line break
    BLOCK_ELEMENTS = {"p", "div", "br", "li", "ul", "ol", "section", "article"}

    def __init__(self, base_address: str) -> None:
        self.base_address = base_address
        self._result = FlattenResult()

    def run(self, root: Tag | None) -> FlattenResult:
        """
        Flatten the tree rooted at root.

        Args:
            root: Element to start from (normally <body>). None yields an
                  empty result.

        Returns:
            The link table and line records for this tree.
        """
        if root is not None:
            self._walk(root)
        return self._result

    def _walk(self, root: Tag) -> None:
        """
        Depth-first walk in document order.

        Uses an explicit stack so nesting depth is not bounded by the
        interpreter's recursion limit. Each element is pushed twice: once to
        visit its children and once, below them, to close it.
        """
        stack: list[tuple[PageElement, bool]] = [(root, False)]

        while stack:
            node, closing = stack.pop()

            if closing:
                if node.name in self.BLOCK_ELEMENTS:
                    self._result.lines.append(LineRecord.blank())
                continue

            if isinstance(node, NavigableString):
                self._add_text(node)
                continue

            if not isinstance(node, Tag):
                continue

            if node.name == "a":
                self._add_anchor(node)
                continue

            stack.append((node, True))
            stack.extend((child, False) for child in reversed(node.contents))

    def _add_text(self, node: NavigableString) -> None:
        """Emit plain records for a text node."""
        # Comments, doctypes, CDATA and the like are not page text
        if isinstance(node, PreformattedString):
            return

        for line in str(node).splitlines():
            text = line.strip()
            if text:
                self._result.lines.append(LineRecord.plain(text))

    def _add_anchor(self, element: Tag) -> None:
        """Emit a link for an anchor, or nothing if it has no href/label."""
        href = element.get("href")
        if href is None:
            return

        # A repeated attribute can come back as a list with some parsers
        if isinstance(href, list):
            href = " ".join(href)

        label = " ".join(" ".join(element.stripped_strings).split())
        if not label:
            return

        target = resolve_link(self.base_address, href)
        index = len(self._result.links)
        self._result.links.append(Link(target=target, label=label))
        self._result.lines.append(LineRecord(text=label, link_index=index))


def parse_document(content: bytes | str) -> BeautifulSoup:
    """
    Parse raw HTML into a BeautifulSoup tree.

    Raises:
        ParseError: If the parser gives up on the input.
    """
    try:
        return BeautifulSoup(content, "lxml")
    except Exception as e:
        raise ParseError(str(e)) from e


def flatten(root: Tag | None, base_address: str) -> FlattenResult:
    """
    Flatten an element tree against a base address.

    Args:
        root: Element to start from, or None for an empty result.
        base_address: Address used to resolve relative links.

    Returns:
        FlattenResult with the link table and line records.
    """
    result = MarkupFlattener(base_address).run(root)
    logger.debug(
        f"Flattened {base_address}: {len(result.links)} links, {len(result.lines)} lines"
    )
    return result


def flatten_document(content: bytes | str, base_address: str) -> FlattenResult:
    """
    Parse a document and flatten its <body>.

    Raises:
        ParseError: If parsing fails.
    """
    soup = parse_document(content)
    return flatten(soup.body, base_address)
