"""svg-render

Lays e-book content (paragraphs, headings, images, centered text, tables,
nested lists) out into fixed-size SVG pages, character by character.

Main entry points:
- SvgPageBuilder: the layout engine (async, one instance per content stream)
- SvgRenderPipeline: orchestration for hosts, returns a RenderResult and never raises
"""

from .content import (
    CenterParagraph,
    Content,
    ContentType,
    Heading,
    Image,
    OrderedList,
    Paragraph,
    Table,
    UnorderedList,
    content_from_dict,
    contents_from_dicts,
)
from .exceptions import (
    ConcurrentLayoutError,
    ConfigurationError,
    ContentParseError,
    InputWarning,
    MetricFailure,
    PipelineStepError,
    RenderStateError,
    SvgRenderError,
)
from .page_builder import (
    CharMetric,
    FontMetricsProvider,
    MonospaceFontMetrics,
    Page,
    ReportLabFontMetrics,
    SvgPageBuilder,
)
from .pipeline import SvgRenderPipeline
from .render_options import RenderOptions
from .render_result import RenderResult

__version__ = "0.1.0"

__all__ = [
    # Engine and pipeline
    'SvgPageBuilder',
    'SvgRenderPipeline',
    'RenderOptions',
    'RenderResult',
    'Page',

    # Content model
    'Content',
    'ContentType',
    'Paragraph',
    'Heading',
    'Image',
    'CenterParagraph',
    'Table',
    'UnorderedList',
    'OrderedList',
    'content_from_dict',
    'contents_from_dicts',

    # Font metrics
    'CharMetric',
    'FontMetricsProvider',
    'ReportLabFontMetrics',
    'MonospaceFontMetrics',

    # Errors
    'SvgRenderError',
    'ConfigurationError',
    'ContentParseError',
    'InputWarning',
    'MetricFailure',
    'RenderStateError',
    'ConcurrentLayoutError',
    'PipelineStepError',
]
