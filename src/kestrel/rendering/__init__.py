# =============================================================================
# Rendering Module
# =============================================================================
# Turns HTML into something a terminal can show.
#
# The rendering pipeline:
#   1. Parse the fetched bytes into a BeautifulSoup tree (lxml)
#   2. Flatten <body> into line records plus a link table
#   3. Every frame, project the records onto the viewport with link styling
# =============================================================================

from kestrel.rendering.flatten import MarkupFlattener, flatten, flatten_document, parse_document
from kestrel.rendering.projector import LinkStyles, Projection, project

__all__ = [
    "MarkupFlattener",
    "flatten",
    "flatten_document",
    "parse_document",
    "LinkStyles",
    "Projection",
    "project",
]
