"""Page Builder Module

Orchestrates SVG page layout by coordinating specialized components:
- LayoutAnalyzer: Character classes, break policy, heading sizes
- TextFlow: Character by character text placement and centered paragraphs
- ContentRenderer: Image, table, and list layout
- LayoutState: Cursor, page buffer and committed pages
- SvgWriter: Page template and fragment markup

One builder lays out one content stream (a chapter) from start to end.
Independent chapters use independent builders; nothing is shared between them.
"""
import asyncio
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from ..content import (
    CenterParagraph,
    Content,
    Heading,
    Image,
    OrderedList,
    Paragraph,
    Table,
    UnorderedList,
    content_from_dict,
)
from ..exceptions import (
    ConcurrentLayoutError,
    ContentParseError,
    InputWarning,
    RenderStateError,
)
from ..logging_config import get_logger
from ..render_options import RenderOptions
from .content_renderer import ContentRenderer
from .font_metrics import FontMetricsProvider, ReportLabFontMetrics
from .layout_analyzer import LayoutAnalyzer
from .layout_state import LayoutState
from .page_buffer import Page
from .text_flow import ParagraphStyle, TextFlow

logger = get_logger(__name__)


class SvgPageBuilder:
    """Lay out a content stream into fixed-size SVG pages.

    Usage:
        builder = SvgPageBuilder({"width": 1000, "height": 700, "padding": "40"})
        for content in contents:
            await builder.add_content(content)
        pages = builder.finalize()

    Calls must not interleave: each add_content has to complete (all its width
    queries included) before the next one starts. finalize() ends the run.
    """

    def __init__(
        self,
        options: Union[RenderOptions, Dict[str, Any], None] = None,
        metrics: Optional[FontMetricsProvider] = None,
    ):
        """
        Initialize page builder.

        Args:
            options: RenderOptions, or a dict overlaid on the default options
            metrics: Font metrics provider; ReportLab metrics when omitted

        Raises:
            ConfigurationError: If the options are invalid (e.g. padding with more than 4 values)
        """
        if not isinstance(options, RenderOptions):
            options = RenderOptions.from_dict(options)
        self.options = options
        self.metrics = metrics or ReportLabFontMetrics()

        self.analyzer = LayoutAnalyzer()
        self.state = LayoutState(options)
        self.text_flow = TextFlow(options, self.metrics, self.analyzer)
        self.content_renderer = ContentRenderer(self.text_flow)

        self._content_count = 0
        self._busy = False
        self._failed = False
        self._finalized = False

    @property
    def line_height(self) -> float:
        """Base line height (font_size x line_height_ratio)."""
        return self.state.line_height

    @property
    def pages(self) -> Tuple[Page, ...]:
        """Pages committed so far."""
        return tuple(self.state.pages)

    @property
    def warnings(self) -> List[InputWarning]:
        """Non-fatal problems reported so far; the elements concerned were skipped."""
        return list(self.state.warnings)

    def _ensure_usable(self) -> None:
        if self._finalized:
            raise RenderStateError("finalize() was called, start a new builder for more content")
        if self._failed:
            raise RenderStateError("a previous add_content failed, the layout has to be restarted")
        if self._busy:
            raise ConcurrentLayoutError("add_content called while another add_content is running")

    async def add_content(self, content: Union[Content, Dict[str, Any]]) -> None:
        """
        Lay out one content item.

        Pending fragments are flushed into the page buffer when the call
        returns, pages that overflowed on the way are committed.

        Args:
            content: A content dataclass, or its dictionary form

        Raises:
            MetricFailure: If a character width cannot be resolved; the builder
                           is unusable afterwards (so is it after a cancelled call)
            RenderStateError: If the builder was finalized or has failed
            ConcurrentLayoutError: If another add_content is still running
        """
        self._ensure_usable()
        self._busy = True
        self.state.content_index = self._content_count
        self._content_count += 1
        try:
            await self._dispatch(content)
        except (Exception, asyncio.CancelledError):
            # half of the item may be in the buffer, the page can no longer be committed
            self._failed = True
            self.state.buffer.discard_pending()
            raise
        finally:
            self._busy = False
        self.state.buffer.flush()

    async def add_contents(self, contents: Iterable[Union[Content, Dict[str, Any]]]) -> None:
        """Lay out content items in order."""
        for content in contents:
            await self.add_content(content)

    async def render(self, contents: Iterable[Union[Content, Dict[str, Any]]]) -> List[Page]:
        """Lay out a whole content stream and finalize it."""
        await self.add_contents(contents)
        return self.finalize()

    def finalize(self) -> List[Page]:
        """
        Commit the page being built and return every page in order.

        Idempotent: later calls return the same pages without committing again.

        Returns:
            List of committed pages
        """
        if not self._finalized:
            if self._busy:
                raise ConcurrentLayoutError("finalize called while add_content is running")
            if self._failed:
                raise RenderStateError("a previous add_content failed, the layout has to be restarted")
            self.state.commit_page()
            self._finalized = True
            logger.debug(f"Finalized {len(self.state.pages)} pages")
        return list(self.state.pages)

    async def _dispatch(self, content: Union[Content, Dict[str, Any]]) -> None:
        if isinstance(content, dict):
            try:
                content = content_from_dict(content)
            except ContentParseError as e:
                self.state.warn(str(e), str(content.get("type", "")))
                return

        state = self.state
        if isinstance(content, Paragraph):
            state.new_line(state.line_height)
            await self.text_flow.flow(state, content.text, ParagraphStyle(line_height=state.line_height))
        elif isinstance(content, Heading):
            await self._add_heading(content)
        elif isinstance(content, Image):
            await self.content_renderer.add_image(state, content)
        elif isinstance(content, CenterParagraph):
            await self.text_flow.add_center_paragraph(state, content.text)
        elif isinstance(content, Table):
            await self.content_renderer.add_table(state, content)
        elif isinstance(content, UnorderedList):
            await self.content_renderer.add_list(state, content.items)
        elif isinstance(content, OrderedList):
            state.warn("ordered lists are not supported", content.type.value)
        else:
            state.warn(f"unsupported content {type(content).__name__}", type(content).__name__)

    async def _add_heading(self, heading: Heading) -> None:
        """Bold text at the scaled heading size, on a line of its own height."""
        font_size = self.analyzer.heading_font_size(heading.level, self.options.font_size)
        line_height = font_size * self.options.line_height_ratio
        self.state.new_line(line_height)
        await self.text_flow.flow(
            self.state,
            heading.text,
            ParagraphStyle(line_height=line_height, font_size=font_size, font_weight="bold"),
        )
