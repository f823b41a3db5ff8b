"""Cursor and Page Geometry

The write cursor and the content box it moves in.

Coordinate system: origin at the top-left corner of the page, y grows
downwards, and a text fragment's y is its baseline (SVG <text> semantics).
"""
from dataclasses import dataclass

from ..render_options import RenderOptions


@dataclass(frozen=True)
class PageGeometry:
    """Content box of a page, derived once from the render options."""

    width: float
    height: float
    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_options(cls, options: RenderOptions) -> "PageGeometry":
        """
        Build the content box from page size and padding.

        Examples:
            >>> PageGeometry.from_options(RenderOptions(width=1000, height=700, padding="40"))
            PageGeometry(width=1000, height=700, left=40, top=40, right=960, bottom=660)
        """
        return cls(
            width=options.width,
            height=options.height,
            left=options.padding_left,
            top=options.padding_top,
            right=options.width - options.padding_right,
            bottom=options.height - options.padding_bottom,
        )

    @property
    def content_width(self) -> float:
        return self.right - self.left

    @property
    def content_height(self) -> float:
        return self.bottom - self.top


@dataclass
class LayoutCursor:
    """Current write position and active line height on the page being built."""

    x: float
    y: float
    line_height: float = 0

    def new_line(self, line_height: float, left: float, indent: float = 0) -> None:
        """Move to the start of the next line, `line_height` further down."""
        self.x = max(0, left + indent)
        self.y += line_height
        self.line_height = line_height

    def reset(self, left: float, top: float) -> None:
        """Return to the top-left corner of the content box (after a page break)."""
        self.x = left
        self.y = top
        self.line_height = 0
