# =============================================================================
# Page Model
# =============================================================================
# Represents a single rendered page: the link table discovered while
# flattening it, and the ordered line records that make up its text.
#
# Only one page is ever cached. When a navigation completes (successfully
# or not), a brand new PageState replaces the old one as a whole — nothing
# here is mutated in place.
# =============================================================================

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Link:
    """
    A hyperlink discovered while flattening a page.

    Attributes:
        target: Absolute, resolved address the link points to. Falls back to
                the raw attribute value when it could not be resolved.
        label: Trimmed visible text of the anchor. Never empty.
    """
    target: str
    label: str

    def __str__(self) -> str:
        return f"{self.label} <{self.target}>"


@dataclass(frozen=True)
class LineRecord:
    """
    One line of a flattened document.

    A record is either plain text (link_index is None) or the label of a
    link, in which case link_index is that link's position in the page's
    link table.

    Attributes:
        text: The text shown on this line. May be empty (a block break).
        link_index: Index into the link table, or None for plain text.
    """
    text: str
    link_index: int | None = None

    @property
    def is_link(self) -> bool:
        """Returns True if this record refers to a link."""
        return self.link_index is not None

    @classmethod
    def plain(cls, text: str) -> "LineRecord":
        """Build a plain text record."""
        return cls(text=text)

    @classmethod
    def blank(cls) -> "LineRecord":
        """Build the empty record used as a block break."""
        return cls(text="")


@dataclass(frozen=True)
class PageState:
    """
    The cached page: where it came from, its links, and its lines.

    Construction validates that every linked record points at an existing
    entry of the link table, so lookups made later can never fail.

    Attributes:
        url: Address the page was requested from.
        links: Link table, indexed by discovery order.
        lines: Flattened document, top to bottom.
        error: Human-readable message when this is an error page.
    """
    url: str = ""
    links: tuple[Link, ...] = ()
    lines: tuple[LineRecord, ...] = ()
    error: str | None = None

    def __post_init__(self) -> None:
        # Accept any sequence from callers but store immutable tuples
        object.__setattr__(self, "links", tuple(self.links))
        object.__setattr__(self, "lines", tuple(self.lines))

        for record in self.lines:
            if record.link_index is None:
                continue
            if not 0 <= record.link_index < len(self.links):
                raise ValueError(
                    f"Line record {record.text!r} refers to link "
                    f"{record.link_index}, but the page has {len(self.links)} links"
                )

    @classmethod
    def error_page(cls, url: str, message: str) -> "PageState":
        """
        Build the one-line, link-free page shown when navigation fails.

        Args:
            url: Address that failed to load.
            message: Message to display as the only line.
        """
        return cls(url=url, lines=(LineRecord.plain(message),), error=message)

    @property
    def success(self) -> bool:
        """Returns True unless this is an error page."""
        return self.error is None

    @property
    def total_lines(self) -> int:
        return len(self.lines)


@dataclass
class NavigationState:
    """
    Where the user is on the current page.

    Attributes:
        selected_link: Index of the highlighted link, or None.
        scroll_offset: Lines scrolled from the top. Never negative; the upper
                       bound is applied by the render projector each frame.
    """
    selected_link: int | None = None
    scroll_offset: int = 0

    def reset(self) -> None:
        """Clear selection and scroll back to the top."""
        self.selected_link = None
        self.scroll_offset = 0


@dataclass
class FlattenResult:
    """
    Output of flattening one document.

    Attributes:
        links: Link table in discovery order.
        lines: Line records in document order.
    """
    links: list[Link] = field(default_factory=list)
    lines: list[LineRecord] = field(default_factory=list)

    def to_page(self, url: str) -> PageState:
        """Freeze this result into a PageState for the given address."""
        return PageState(url=url, links=tuple(self.links), lines=tuple(self.lines))
