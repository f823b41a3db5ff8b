"""Page Buffer Module

Placed fragments, the buffer collecting them for the page being built, and
the immutable Page a buffer is committed into.
"""
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from ..logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class TextFragment:
    """One glyph written at (x, y); y is the baseline."""

    x: float
    y: float
    glyph: str
    font_weight: Optional[str] = None
    font_size: Optional[float] = None


@dataclass(frozen=True)
class ImageFragment:
    """One image placed with its top-left corner at (x, y)."""

    x: float
    y: float
    height: float
    href: str
    alt: str = ""
    width: Optional[float] = None


Fragment = Union[TextFragment, ImageFragment]


@dataclass(frozen=True)
class Page:
    """A committed page. Never modified after it is created."""

    index: int
    fragments: Tuple[Fragment, ...]
    svg: str

    def __str__(self) -> str:
        return self.svg


class PageBuffer:
    """Collects fragments for the page currently being built.

    Fragments written during an add_content call are pending until the call
    flushes them, so a caller never sees half of a content item in the buffer.
    """

    def __init__(self):
        self._pending: List[Fragment] = []
        self._fragments: List[Fragment] = []

    def add(self, fragment: Fragment) -> None:
        self._pending.append(fragment)

    def flush(self) -> None:
        """Move pending fragments into the page buffer."""
        self._fragments.extend(self._pending)
        self._pending = []

    def discard_pending(self) -> None:
        """Drop fragments written since the last flush."""
        self._pending = []

    @property
    def fragments(self) -> Tuple[Fragment, ...]:
        """Flushed fragments of the current page."""
        return tuple(self._fragments)

    def is_empty(self) -> bool:
        return not self._fragments and not self._pending

    def commit(self, index: int, writer) -> Optional[Page]:
        """
        Render the buffered fragments into a finalized page and clear the buffer.

        Args:
            index: Position of the new page in the document
            writer: SvgWriter that renders the page template

        Returns:
            The committed Page, or None when the buffer is empty (no blank pages)
        """
        self.flush()
        if not self._fragments:
            return None

        fragments = tuple(self._fragments)
        self._fragments = []
        page = Page(index=index, fragments=fragments, svg=writer.render_page(fragments))
        logger.debug(f"Committed page {index} with {len(fragments)} fragments")
        return page
