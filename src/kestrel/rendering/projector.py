# =============================================================================
# Render Projector
# =============================================================================
# Maps the flattened page onto the visible window of the terminal.
#
# This runs every frame, even when nothing changed, because the viewport
# height can change between frames (terminal resize). It has no side
# effects: the caller decides what to do with the clamped scroll offset.
# =============================================================================

from collections.abc import Sequence
from dataclasses import dataclass, field

from rich.style import Style
from rich.text import Text

from kestrel.core import LineRecord


@dataclass(frozen=True)
class LinkStyles:
    """
    Styles applied to linked line records.

    Attributes:
        link: Style of an unselected link.
        selected: Style of the selected link.
        plain: Style of plain text.
    """
    link: Style = field(default_factory=lambda: Style.parse("blue underline"))
    selected: Style = field(default_factory=lambda: Style.parse("bold white on blue"))
    plain: Style = field(default_factory=Style.null)

    @classmethod
    def from_strings(cls, link: str, selected: str) -> "LinkStyles":
        """
        Build styles from Rich style definitions.

        Raises:
            rich.errors.StyleSyntaxError: If a definition is invalid.
        """
        return cls(link=Style.parse(link), selected=Style.parse(selected))


@dataclass(frozen=True)
class Projection:
    """
    The visible part of a page.

    Attributes:
        lines: Styled lines to paint, top to bottom.
        scroll_offset: Offset actually used, after clamping.
        max_scroll: Largest valid offset for this page and viewport.
    """
    lines: list[Text]
    scroll_offset: int
    max_scroll: int


def max_scroll_for(total_lines: int, viewport_height: int) -> int:
    """Largest offset that still fills the viewport."""
    return max(0, total_lines - max(0, viewport_height))


def style_record(
    record: LineRecord,
    selected_link: int | None,
    styles: LinkStyles,
) -> Text:
    """Style a single line record."""
    if record.link_index is None:
        return Text(record.text, style=styles.plain)
    if record.link_index == selected_link:
        return Text(record.text, style=styles.selected)
    return Text(record.text, style=styles.link)


def project(
    lines: Sequence[LineRecord],
    selected_link: int | None,
    viewport_height: int,
    scroll_offset: int,
    styles: LinkStyles | None = None,
) -> Projection:
    """
    Compute the window of styled lines visible in the viewport.

    Args:
        lines: All line records of the page.
        selected_link: Index of the selected link, if any.
        viewport_height: Rows available for content.
        scroll_offset: Requested offset; may be out of range.
        styles: Link styles, defaults if omitted.

    Returns:
        Projection holding min(viewport_height, len(lines)) styled lines
        starting at the clamped offset.
    """
    styles = styles or LinkStyles()
    height = max(0, viewport_height)

    max_scroll = max_scroll_for(len(lines), height)
    offset = min(max(0, scroll_offset), max_scroll)

    window = [
        style_record(record, selected_link, styles)
        for record in lines[offset:offset + height]
    ]
    return Projection(lines=window, scroll_offset=offset, max_scroll=max_scroll)
