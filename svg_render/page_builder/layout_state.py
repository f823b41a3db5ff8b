"""Layout State Module

Everything the layout routines mutate, held in one value: the cursor, the
page buffer, the committed pages and the warnings of the run. Routines get
the state passed in explicitly instead of reaching into the builder.
"""
from typing import List, Optional

from ..exceptions import InputWarning
from ..logging_config import get_logger
from ..render_options import RenderOptions
from .cursor import LayoutCursor, PageGeometry
from .page_buffer import ImageFragment, Page, PageBuffer, TextFragment
from .svg_writer import SvgWriter

logger = get_logger(__name__)


class LayoutState:
    """Mutable layout state of one engine instance.

    Attributes:
        geometry: Content box of every page
        cursor: Write position on the page being built
        buffer: Fragments of the page being built
        pages: Committed pages, in order
        warnings: InputWarnings reported so far
        line_height: Base line height (font_size x line_height_ratio)
        content_index: Index of the content item being laid out
    """

    def __init__(self, options: RenderOptions, writer: Optional[SvgWriter] = None):
        self.options = options
        self.geometry = PageGeometry.from_options(options)
        self.writer = writer or SvgWriter(options)
        self.cursor = LayoutCursor(x=self.geometry.left, y=self.geometry.top)
        self.buffer = PageBuffer()
        self.pages: List[Page] = []
        self.warnings: List[InputWarning] = []
        self.line_height = options.line_height
        self.content_index: Optional[int] = None

    def new_line(self, line_height: float, indent: float = 0) -> None:
        self.cursor.new_line(line_height, self.geometry.left, indent)

    def overflows(self, line_height: float, ahead: float = 0) -> bool:
        """True when a line of `line_height`, `ahead` px below the cursor, passes the bottom boundary."""
        return self.cursor.y + ahead + line_height > self.geometry.bottom

    def commit_page(self) -> Optional[Page]:
        """Commit the buffer into a new page; no-op when nothing was placed."""
        page = self.buffer.commit(len(self.pages), self.writer)
        if page is not None:
            self.pages.append(page)
        return page

    def page_break(self) -> None:
        """Commit the current page and move the cursor to the top of a fresh one."""
        self.commit_page()
        self.cursor.reset(self.geometry.left, self.geometry.top)

    def emit_text(
        self,
        glyph: str,
        font_weight: Optional[str] = None,
        font_size: Optional[float] = None,
    ) -> None:
        self.buffer.add(TextFragment(
            x=self.cursor.x,
            y=self.cursor.y,
            glyph=glyph,
            font_weight=font_weight,
            font_size=font_size,
        ))

    def emit_image(self, fragment: ImageFragment) -> None:
        self.buffer.add(fragment)

    def warn(self, reason: str, content_type: str = "") -> InputWarning:
        """Record a non-fatal problem with the current content item."""
        warning = InputWarning(reason, content_index=self.content_index, content_type=content_type)
        self.warnings.append(warning)
        logger.warning(str(warning))
        return warning
