"""Text Flow Module

Character by character placement of text: line breaking, hyphenation,
page breaking and centered paragraphs.
"""
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from ..config import HYPHEN
from ..exceptions import MetricFailure
from ..render_options import RenderOptions
from .font_metrics import FontMetricsProvider
from .layout_analyzer import BreakAction, LayoutAnalyzer
from .layout_state import LayoutState


@dataclass(frozen=True)
class ParagraphStyle:
    """Style of one run of flowed text.

    font_size and font_weight are only written to the page when set; the svg
    root carries the base font size.
    """

    line_height: float
    font_size: Optional[float] = None
    font_weight: Optional[str] = None
    # x offset of every line of the run, relative to the left padding
    indent: float = 0


class TextFlow:
    """Lays text out on the layout state, one character at a time.

    Every width query is awaited before the cursor is touched, so the state is
    exactly as it was left while a measurement is pending.
    """

    def __init__(self, options: RenderOptions, metrics: FontMetricsProvider,
                 analyzer: Optional[LayoutAnalyzer] = None):
        self.options = options
        self.metrics = metrics
        self.analyzer = analyzer or LayoutAnalyzer()

    async def measure_char(self, char: str, font_size: Optional[float] = None,
                           font_weight: Optional[str] = None) -> float:
        """
        Width of one character at the given (or base) font size.

        Raises:
            MetricFailure: If the provider fails or returns an unusable width
        """
        font_family = self.options.font_family
        font_size = font_size or self.options.font_size
        try:
            metric = await self.metrics.measure(char, font_family, font_size, font_weight)
        except MetricFailure:
            raise
        except Exception as e:
            raise MetricFailure(char, font_family, font_size, str(e)) from e

        width = getattr(metric, "width", None)
        if isinstance(width, bool) or not isinstance(width, (int, float)) \
                or math.isnan(width) or math.isinf(width) or width < 0:
            raise MetricFailure(char, font_family, font_size, f"invalid width {width!r}")
        return width

    async def measure_text(self, text: str, font_size: Optional[float] = None,
                           font_weight: Optional[str] = None) -> float:
        total = 0.0
        for char in text:
            total += await self.measure_char(char, font_size, font_weight)
        return total

    async def flow(self, state: LayoutState, text: str, style: ParagraphStyle) -> None:
        """
        Place `text` starting at the cursor.

        The caller has already moved the cursor to the start of the first line.
        Lines wrap at the right content boundary following
        LayoutAnalyzer.break_action; whenever the next line would pass the
        bottom boundary the page is committed and the line restarts at the
        top of a new page.

        Args:
            state: Layout state to write into
            text: Text to place; '\\n' forces a line break
            style: Size, weight, line height and indent of the run
        """
        line_height = style.line_height
        right = state.geometry.right
        prev_char = None

        for char in text:
            if char == "\n":
                state.new_line(line_height, style.indent)
                prev_char = char
                continue

            char_width = await self.measure_char(char, style.font_size, style.font_weight)

            if state.cursor.x + char_width > right:
                action = self.analyzer.break_action(prev_char, char)
                if action is BreakAction.TRIM_SPACE:
                    state.new_line(line_height, style.indent)
                    prev_char = char
                    continue
                elif action is BreakAction.HANG_PUNCTUATION:
                    self._emit(state, char, style)
                    state.cursor.x += char_width
                    prev_char = char
                    continue
                elif action is BreakAction.HYPHENATE:
                    self._emit(state, HYPHEN, style)
                state.new_line(line_height, style.indent)

            if state.overflows(line_height):
                state.page_break()
                state.new_line(line_height, style.indent)

            self._emit(state, char, style)
            state.cursor.x += char_width
            prev_char = char

    def _emit(self, state: LayoutState, char: str, style: ParagraphStyle) -> None:
        state.emit_text(self.analyzer.substitute_glyph(char), style.font_weight, style.font_size)

    async def split_center_text(self, text: str, content_width: float) -> Tuple[str, str, float]:
        """
        Split text into a left-flowing prefix and the centered tail.

        Characters are accumulated greedily; each time the next character would
        exceed `content_width` the accumulated run moves to the prefix and a new
        run starts. Only the last run is centered, even when the text has
        several natural segments.

        Args:
            text: Text of the centered paragraph
            content_width: Width available for a line

        Returns:
            Tuple of (prefix, tail, tail width)
        """
        prefix = ""
        run = ""
        run_width = 0.0
        for char in text:
            char_width = 0.0 if char == "\n" else await self.measure_char(char)
            if run_width + char_width > content_width:
                prefix += run
                run = char
                run_width = char_width
            else:
                run += char
                run_width += char_width
        return prefix, run, run_width

    async def add_center_paragraph(self, state: LayoutState, text: str) -> None:
        """Flow the prefix as a normal paragraph, then the tail centered on its own line."""
        content_width = state.geometry.content_width
        line_height = state.line_height
        prefix, tail, tail_width = await self.split_center_text(text, content_width)

        if prefix:
            state.new_line(line_height)
            await self.flow(state, prefix, ParagraphStyle(line_height=line_height))

        indent = max(0.0, (content_width - tail_width) / 2)
        state.new_line(line_height, indent)
        await self.flow(state, tail, ParagraphStyle(line_height=line_height))
