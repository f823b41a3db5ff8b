"""Custom Exception Hierarchy

Exception hierarchy for svg-render providing granular exception types for
configuration, content and layout failures.
"""
from typing import Optional


class SvgRenderError(Exception):
    """Base exception for all svg-render errors.

    This is the root of the exception hierarchy. Catching this exception
    will catch all custom exceptions raised by the package.
    """
    pass


# Validation Errors
class ValidationError(SvgRenderError):
    """Raised when input validation fails."""
    pass


class ConfigurationError(ValidationError):
    """Raised when render options are invalid (e.g. padding with more than 4 values).

    Fatal at construction time: the engine instance is never created.
    """
    pass


class ContentParseError(ValidationError):
    """Raised when a content dictionary cannot be turned into a content item."""

    def __init__(self, field: str, reason: str):
        self.field = field
        super().__init__(f"Failed to parse content field '{field}': {reason}")


# Non-fatal element issues
class InputWarning(SvgRenderError):
    """A non-fatal issue with a single content element.

    Never raised by the engine. Instances are collected on the engine (and on
    the pipeline result) and the offending element is skipped.
    """

    def __init__(self, reason: str, content_index: Optional[int] = None, content_type: str = ""):
        self.reason = reason
        self.content_index = content_index
        self.content_type = content_type
        location = f"content #{content_index}" if content_index is not None else "content"
        if content_type:
            location += f" ({content_type})"
        super().__init__(f"{location} skipped: {reason}")


# Rendering Errors
class RenderingError(SvgRenderError):
    """Base class for layout and rendering errors."""
    pass


class MetricFailure(RenderingError):
    """Raised when the font metrics provider cannot resolve a character width.

    The in-progress page is undefined afterwards; the whole content stream has
    to be laid out again with a fresh engine.
    """

    def __init__(self, char: str, font_family: str, font_size: float, reason: str):
        self.char = char
        self.font_family = font_family
        self.font_size = font_size
        super().__init__(
            f"Could not measure {char!r} ({font_family}, {font_size}px): {reason}"
        )


class RenderStateError(RenderingError):
    """Raised when an engine is used after finalize() or after a failed run."""
    pass


class ConcurrentLayoutError(RenderingError):
    """Raised when add_content is called while another call is still running."""
    pass


# Pipeline Errors
class PipelineError(SvgRenderError):
    """Base class for pipeline orchestration errors."""
    pass


class PipelineStepError(PipelineError):
    """Raised when a specific pipeline step fails.

    This wraps the underlying exception while preserving the pipeline context.
    """

    def __init__(self, step_name: str, original_exception: Exception):
        self.step_name = step_name
        self.original_exception = original_exception
        super().__init__(
            f"Pipeline step '{step_name}' failed: {str(original_exception)}"
        )
