"""Page Builder Package

This package lays content streams out into fixed-size SVG pages:

Core Classes:
- SvgPageBuilder: Main orchestrator class (from builder.py)
- TextFlow: Character by character text flow and centered paragraphs
- ContentRenderer: Image, table, and list layout
- LayoutAnalyzer: Character classes and line break policy
- LayoutState: Cursor, page buffer, committed pages and warnings
- SvgWriter: Page template and fragment markup

Font Metrics:
- FontMetricsProvider: Contract of the character width service
- ReportLabFontMetrics: Widths from ReportLab font tables (via FontManager)
- MonospaceFontMetrics: Fixed advance widths
"""

from .builder import SvgPageBuilder
from .content_renderer import ContentRenderer
from .cursor import LayoutCursor, PageGeometry
from .font_manager import FontManager
from .font_metrics import (
    CharMetric,
    FontMetricsProvider,
    MonospaceFontMetrics,
    ReportLabFontMetrics,
)
from .layout_analyzer import BreakAction, LayoutAnalyzer
from .layout_state import LayoutState
from .page_buffer import Fragment, ImageFragment, Page, PageBuffer, TextFragment
from .svg_writer import SvgWriter
from .text_flow import ParagraphStyle, TextFlow

__all__ = [
    # Main builder class
    'SvgPageBuilder',

    # Component classes
    'TextFlow',
    'ContentRenderer',
    'LayoutAnalyzer',
    'BreakAction',
    'LayoutState',
    'LayoutCursor',
    'PageGeometry',
    'PageBuffer',
    'SvgWriter',
    'ParagraphStyle',

    # Pages and fragments
    'Page',
    'Fragment',
    'TextFragment',
    'ImageFragment',

    # Font metrics
    'FontManager',
    'CharMetric',
    'FontMetricsProvider',
    'ReportLabFontMetrics',
    'MonospaceFontMetrics',
]
