"""SVG Writer Module

Produces the markup of a page: the fixed page template (svg root, style
block, background rectangle) and one element per placed fragment.
"""
import hashlib
from typing import Iterable

from ..config import SVG_ID_LENGTH, SVG_ID_PLACEHOLDER, SVG_ID_PREFIX, SVG_PLACEHOLDER
from ..render_options import RenderOptions
from ..utils import escape_attribute, format_number
from .page_buffer import Fragment, ImageFragment, TextFragment


class SvgWriter:
    """Renders fragments and page documents for one set of render options."""

    def __init__(self, options: RenderOptions):
        self.options = options
        self.template = self.generate_template()

    def text_element(self, fragment: TextFragment) -> str:
        """
        Markup of a text fragment. The glyph is written as is: escaping
        happened in glyph substitution.

        Examples:
            '<text x="40" y="70">a</text>'
            '<text x="40" y="100" style="font-weight:bold;font-size:40px;">C</text>'
        """
        style_parts = []
        if fragment.font_weight:
            style_parts.append(f"font-weight:{fragment.font_weight};")
        if fragment.font_size:
            style_parts.append(f"font-size:{format_number(fragment.font_size)}px;")
        style = f' style="{"".join(style_parts)}"' if style_parts else ""
        return (
            f'<text x="{format_number(fragment.x)}" y="{format_number(fragment.y)}"{style}>'
            f"{fragment.glyph}</text>"
        )

    def image_element(self, fragment: ImageFragment) -> str:
        width = f' width="{format_number(fragment.width)}"' if fragment.width else ""
        alt = f' alt="{escape_attribute(fragment.alt)}"' if fragment.alt else ""
        return (
            f'<image x="{format_number(fragment.x)}" y="{format_number(fragment.y)}"{width} '
            f'height="{format_number(fragment.height)}" href="{escape_attribute(fragment.href)}"{alt}/>'
        )

    def fragment_element(self, fragment: Fragment) -> str:
        if isinstance(fragment, ImageFragment):
            return self.image_element(fragment)
        return self.text_element(fragment)

    def generate_background(self) -> str:
        o = self.options
        return (
            f'<rect width="{format_number(o.width)}" height="{format_number(o.height)}" '
            f'fill="{escape_attribute(o.background_color)}" pointer-events="none"/>'
        )

    def generate_style(self, svg_id: str) -> str:
        """Style block scoped to one svg element id."""
        o = self.options

        svg_style = ""
        if o.remote_font_css_url:
            svg_style += f'@import url("{escape_attribute(o.remote_font_css_url)}");'
        svg_style += f"#{svg_id}{{cursor:{o.cursor};"
        if 0 <= o.opacity < 1:
            svg_style += f"opacity:{format_number(o.opacity)};"
        if o.border_radius > 0:
            svg_style += f"border-radius:{format_number(o.border_radius)}px;"
        svg_style += "}"

        selection_style = f"#{svg_id} text::selection{{background-color:{o.selection_bg_color};"
        if o.selection_color:
            selection_style += f"fill:{o.selection_color};"
        selection_style += "}"
        return f"<style>{svg_style}{selection_style}</style>"

    def generate_template(self) -> str:
        """
        The fixed page template: fragments go in place of SVG_PLACEHOLDER and
        the element id in place of SVG_ID_PLACEHOLDER.
        """
        o = self.options
        width = format_number(o.width)
        height = format_number(o.height)
        return (
            f'<svg id="{SVG_ID_PLACEHOLDER}" xmlns="http://www.w3.org/2000/svg" version="1.1" '
            f'font-size="{format_number(o.font_size)}px" viewBox="0 0 {width} {height}" '
            f'width="{width}px" height="{height}px" font-family="{escape_attribute(o.font_family)}">'
            f"{self.generate_style(SVG_ID_PLACEHOLDER)}"
            f"{self.generate_background()}"
            f"{SVG_PLACEHOLDER}</svg>"
        )

    def render_page(self, fragments: Iterable[Fragment]) -> str:
        """
        Render a finalized page document.

        The element id is a hash of the page content, so identical input gives
        byte-identical output while distinct pages still get distinct style scopes.
        """
        body = "".join(self.fragment_element(fragment) for fragment in fragments)
        digest = hashlib.sha1(body.encode("utf-8")).hexdigest()[:SVG_ID_LENGTH]
        svg_id = f"{SVG_ID_PREFIX}{digest}"
        return self.template.replace(SVG_ID_PLACEHOLDER, svg_id).replace(SVG_PLACEHOLDER, body)
