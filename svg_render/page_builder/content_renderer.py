"""Content Renderer Module

Handles layout of non-paragraph content (images, tables, lists) on the
shared layout state.
"""
from typing import Sequence

from ..config import IMAGE_ADVANCE_LINES, IMAGE_BLOCK_LINES
from ..content import Image, OrderedList, Paragraph, Table, UnorderedList
from ..utils import compose_image_path
from .layout_state import LayoutState
from .page_buffer import ImageFragment
from .text_flow import ParagraphStyle, TextFlow


class ContentRenderer:
    """Lays out images, tables and lists, delegating their text to TextFlow."""

    def __init__(self, text_flow: TextFlow):
        """
        Initialize content renderer.

        Args:
            text_flow: TextFlow shared with the page builder (same options and metrics)
        """
        self.text_flow = text_flow
        self.options = text_flow.options

    async def add_image(self, state: LayoutState, image: Image) -> None:
        """
        Place an image block, plus its caption when present.

        The block is IMAGE_BLOCK_LINES base lines high and sits above the
        cursor after an advance of IMAGE_ADVANCE_LINES lines. When it does not
        fit (keeping one more line for the caption), the page is committed and
        the block goes to the top of the next page.

        With both width and height known the image is scaled to the block height
        and centered in the content box; otherwise it starts at the cursor x.
        """
        src = (image.src or "").strip()
        if not src:
            state.warn("image has no usable source", image.type.value)
            return

        line_height = state.line_height
        block_height = IMAGE_BLOCK_LINES * line_height
        caption_room = line_height if image.caption else 0

        state.new_line(IMAGE_ADVANCE_LINES * line_height)
        if state.cursor.y + caption_room > state.geometry.bottom:
            state.page_break()
            state.new_line(IMAGE_ADVANCE_LINES * line_height)

        render_x = state.cursor.x
        render_width = None
        if image.width and image.height and image.width > 0 and image.height > 0:
            render_width = image.width * block_height / image.height
            content_width = state.geometry.content_width
            render_x = state.geometry.left + max(0.0, (content_width - render_width) / 2)

        state.emit_image(ImageFragment(
            x=render_x,
            y=state.cursor.y - block_height,
            height=block_height,
            href=compose_image_path(self.options.image_root, src),
            alt=image.alt or "",
            width=render_width,
        ))

        if image.caption:
            await self.text_flow.add_center_paragraph(state, image.caption)

    async def add_table(self, state: LayoutState, table: Table) -> None:
        """
        Lay a table out as a uniform grid.

        Every column is content_width / column_count wide whatever its text;
        each cell is centered in its column by its measured width. A row that
        would pass the bottom boundary starts a new page.
        """
        column_count = table.column_count
        if column_count == 0:
            state.warn("table has no cells", table.type.value)
            return

        line_height = state.line_height
        cell_width = state.geometry.content_width / column_count
        style = ParagraphStyle(line_height=line_height)

        for row in table.rows:
            # the row's own line must fit, not just the current one
            if state.overflows(line_height, ahead=line_height):
                state.page_break()
            state.new_line(line_height)
            for i, cell in enumerate(row):
                cell_text_width = await self.text_flow.measure_text(cell)
                offset = i * cell_width + max(0.0, (cell_width - cell_text_width) / 2)
                state.new_line(0, offset)
                await self.text_flow.flow(state, cell, style)

    async def add_list(self, state: LayoutState, items: Sequence, depth: int = 0) -> None:
        """
        Lay out an unordered list.

        Each nesting level indents by one base font size. Paragraph items flow
        at their indent (wrapped lines keep it), nested unordered lists recurse.
        Ordered lists and images inside a list have no layout rule: they are
        reported and skipped.
        """
        line_height = state.line_height
        indent = depth * self.options.font_size

        for item in items:
            if isinstance(item, Paragraph):
                state.new_line(line_height, indent)
                await self.text_flow.flow(
                    state, item.text, ParagraphStyle(line_height=line_height, indent=indent)
                )
            elif isinstance(item, UnorderedList):
                await self.add_list(state, item.items, depth + 1)
            elif isinstance(item, OrderedList):
                state.warn("ordered lists are not supported", item.type.value)
            else:
                item_type = getattr(item, "type", None)
                name = item_type.value if item_type is not None else type(item).__name__
                state.warn(f"{name} is not supported inside a list", name)
