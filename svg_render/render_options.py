"""Render Options Dataclass

Configuration options for the SVG page layout engine.
"""
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional, Sequence, Union

from .config import (
    DEFAULT_RENDER_OPTIONS,
    OPTION_ALIASES,
    STYLE_URL_FORBIDDEN,
    STYLE_VALUE_FORBIDDEN,
)
from .exceptions import ConfigurationError
from .utils import parse_padding


@dataclass
class RenderOptions:
    """Configuration options for SVG page layout.

    Attributes:
        width: Page width in px
        height: Page height in px
        font_family: CSS font-family list used for measuring and for the svg root
        font_size: Base font size in px
        image_root: Base path that relative image sources are joined onto
        line_height_ratio: Line height as a multiple of the font size
        padding: CSS shorthand with 1-4 values, as a string ("10 20") or a sequence

        # SVG Style
        opacity: Page opacity, only written when 0 <= opacity < 1
        background_color: Fill of the background rectangle
        border_radius: Corner radius in px, only written when > 0
        selection_bg_color: Background color of selected text
        selection_color: Fill of selected text, omitted when empty
        cursor: CSS cursor keyword
        remote_font_css_url: Optional stylesheet imported by every page

        # Derived (populated from padding)
        padding_top, padding_right, padding_bottom, padding_left
    """

    width: float = DEFAULT_RENDER_OPTIONS["width"]
    height: float = DEFAULT_RENDER_OPTIONS["height"]
    font_family: str = DEFAULT_RENDER_OPTIONS["font_family"]
    font_size: float = DEFAULT_RENDER_OPTIONS["font_size"]
    image_root: str = DEFAULT_RENDER_OPTIONS["image_root"]
    line_height_ratio: float = DEFAULT_RENDER_OPTIONS["line_height_ratio"]
    padding: Union[str, int, Sequence[int]] = DEFAULT_RENDER_OPTIONS["padding"]

    # SVG Style
    opacity: float = DEFAULT_RENDER_OPTIONS["opacity"]
    background_color: str = DEFAULT_RENDER_OPTIONS["background_color"]
    border_radius: float = DEFAULT_RENDER_OPTIONS["border_radius"]
    selection_bg_color: str = DEFAULT_RENDER_OPTIONS["selection_bg_color"]
    selection_color: str = DEFAULT_RENDER_OPTIONS["selection_color"]
    cursor: str = DEFAULT_RENDER_OPTIONS["cursor"]
    remote_font_css_url: str = DEFAULT_RENDER_OPTIONS["remote_font_css_url"]

    # Derived
    padding_top: int = field(init=False, default=0)
    padding_right: int = field(init=False, default=0)
    padding_bottom: int = field(init=False, default=0)
    padding_left: int = field(init=False, default=0)

    def __post_init__(self):
        """Validate options and expand the padding shorthand."""
        for name in ("width", "height", "font_size", "line_height_ratio"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                raise ConfigurationError(f"{name} must be a positive number, got {value!r}")

        # written verbatim into the <style> block of every page
        for name in ("cursor", "selection_bg_color", "selection_color", "remote_font_css_url"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ConfigurationError(f"{name} must be a string, got {value!r}")
            forbidden = STYLE_URL_FORBIDDEN if name == "remote_font_css_url" else STYLE_VALUE_FORBIDDEN
            bad = sorted(set(value) & forbidden)
            if bad:
                raise ConfigurationError(f"{name} must not contain {''.join(bad)!r}, got {value!r}")

        (
            self.padding_top,
            self.padding_right,
            self.padding_bottom,
            self.padding_left,
        ) = parse_padding(self.padding)

        if self.content_width <= 0:
            raise ConfigurationError(
                f"padding {self.padding!r} leaves no horizontal room on a {self.width}px wide page"
            )
        if self.height - self.padding_top - self.padding_bottom <= 0:
            raise ConfigurationError(
                f"padding {self.padding!r} leaves no vertical room on a {self.height}px high page"
            )

    @property
    def content_width(self) -> float:
        """Page width minus left and right padding."""
        return self.width - self.padding_left - self.padding_right

    @property
    def line_height(self) -> float:
        """Base line height (font_size x line_height_ratio)."""
        return self.font_size * self.line_height_ratio

    @classmethod
    def from_dict(cls, overrides: Optional[Dict[str, Any]] = None) -> "RenderOptions":
        """Build options from a dict, overlaying the supplied values on the defaults.

        camelCase names used by the reader UI are accepted as aliases.

        Raises:
            ConfigurationError: On unknown option names or invalid values
        """
        allowed = {f.name for f in fields(cls) if f.init}
        values = {}
        for key, value in (overrides or {}).items():
            name = OPTION_ALIASES.get(key, key)
            if name not in allowed:
                raise ConfigurationError(f"Unknown render option '{key}'")
            values[name] = value
        return cls(**values)
