#!/usr/bin/env python3
"""Tests for image, table and list layout.

Same geometry as test_layout_rendering.py: content box 10..190 on both axes,
30px lines, 10px characters.
"""
import logging
import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from conftest import glyphs
from svg_render import Image, OrderedList, Paragraph, Table, UnorderedList
from svg_render.page_builder import ImageFragment


# ============================================================================
# Images
# ============================================================================

@pytest.mark.asyncio
async def test_image_without_size_is_placed_at_cursor(builder):
    await builder.add_content(Image("pic.png", alt="a picture"))
    fragment = builder.finalize()[0].fragments[0]

    assert isinstance(fragment, ImageFragment)
    # advance 3.5 lines (105) from the top, block of 3 lines (90) above the cursor
    assert (fragment.x, fragment.y, fragment.height) == (10, 25, 90)
    assert fragment.width is None
    assert fragment.href == "images/pic.png"
    assert fragment.alt == "a picture"


@pytest.mark.asyncio
async def test_image_with_size_is_scaled_and_centered(builder):
    await builder.add_content(Image("pic.png", width=100, height=100))
    fragment = builder.finalize()[0].fragments[0]

    assert fragment.width == 90
    assert fragment.height == 90
    # (180 - 90) / 2 from the left padding
    assert fragment.x == 55


@pytest.mark.asyncio
async def test_image_that_does_not_fit_starts_a_new_page(builder):
    await builder.add_content(Paragraph("a"))
    await builder.add_content(Image("one.png"))
    await builder.add_content(Image("two.png"))
    pages = builder.finalize()

    assert len(pages) == 2
    assert [f.href for f in pages[0].fragments if isinstance(f, ImageFragment)] == ["images/one.png"]
    second = pages[1].fragments[0]
    assert (second.href, second.y) == ("images/two.png", 25)


@pytest.mark.asyncio
async def test_image_caption_is_centered_below(builder):
    await builder.add_content(Image("pic.png", caption="Cap"))
    fragments = builder.finalize()[0].fragments

    assert isinstance(fragments[0], ImageFragment)
    caption = fragments[1:]
    assert glyphs(caption) == ["C", "a", "p"]
    # line below the image block, indent (180 - 30) / 2
    assert (caption[0].x, caption[0].y) == (85, 145)


@pytest.mark.asyncio
async def test_image_caption_needs_room_on_the_page(builder):
    await builder.add_content(Paragraph("a"))
    await builder.add_content(Paragraph("b"))
    await builder.add_content(Image("pic.png", caption="Cap"))
    pages = builder.finalize()

    # cursor at 70, image bottom at 175 leaves no line for the caption
    assert len(pages) == 2
    assert isinstance(pages[1].fragments[0], ImageFragment)


@pytest.mark.asyncio
async def test_image_without_source_is_skipped_with_warning(builder):
    await builder.add_content(Image("  "))
    await builder.add_content(Paragraph("a"))
    fragments = builder.finalize()[0].fragments

    assert glyphs(fragments) == ["a"]
    assert fragments[0].y == 40
    assert len(builder.warnings) == 1
    assert builder.warnings[0].content_index == 0
    assert builder.warnings[0].content_type == "image"


@pytest.mark.asyncio
async def test_image_markup(builder):
    await builder.add_content(Image("pic.png", alt='say "hi"', width=100, height=100))
    svg = builder.finalize()[0].svg

    assert '<image x="55" y="25" width="90" height="90" href="images/pic.png" alt="say &quot;hi&quot;"/>' in svg


# ============================================================================
# Tables
# ============================================================================

@pytest.mark.asyncio
async def test_table_columns_are_uniform_and_cells_centered(builder):
    await builder.add_content(Table((("a", "bb", "ccc"), ("dddd", "e", "ff"))))
    fragments = builder.finalize()[0].fragments

    first_glyph_x = {}
    for fragment in fragments:
        first_glyph_x.setdefault((fragment.y, fragment.glyph[0]), fragment.x)

    # column width 180 / 3 = 60
    assert first_glyph_x[(40, "a")] == 10 + 25
    assert first_glyph_x[(40, "b")] == 10 + 60 + 20
    assert first_glyph_x[(40, "c")] == 10 + 120 + 15
    assert first_glyph_x[(70, "d")] == 10 + 10
    assert first_glyph_x[(70, "e")] == 10 + 60 + 25
    assert first_glyph_x[(70, "f")] == 10 + 120 + 20


@pytest.mark.asyncio
async def test_table_cell_wider_than_column_starts_at_column(builder):
    await builder.add_content(Table((("x" * 8, "y", "z"),)))
    fragments = builder.finalize()[0].fragments

    # 80px of text in a 60px column
    assert fragments[0].x == 10
    y_fragment = [f for f in fragments if f.glyph == "y"][0]
    assert y_fragment.x == 10 + 60 + 25


@pytest.mark.asyncio
async def test_table_rows_break_across_pages(builder):
    await builder.add_content(Table(tuple((str(i),) for i in range(7))))
    pages = builder.finalize()

    assert len(pages) == 2
    assert glyphs(pages[0].fragments) == ["0", "1", "2", "3", "4"]
    assert glyphs(pages[1].fragments) == ["5", "6"]
    assert [f.y for f in pages[1].fragments] == [40, 70]


@pytest.mark.asyncio
async def test_empty_table_is_skipped_with_warning(builder):
    await builder.add_content(Table(()))
    assert builder.finalize() == []
    assert builder.warnings[0].content_type == "table"


# ============================================================================
# Lists
# ============================================================================

@pytest.mark.asyncio
async def test_nested_list_indents_one_font_size_per_level(builder):
    await builder.add_content(UnorderedList((
        Paragraph("a"),
        UnorderedList((
            Paragraph("b"),
            UnorderedList((Paragraph("c"),)),
        )),
        Paragraph("d"),
    )))
    fragments = builder.finalize()[0].fragments

    assert [(f.glyph, f.x, f.y) for f in fragments] == [
        ("a", 10, 40),
        ("b", 30, 70),
        ("c", 50, 100),
        ("d", 10, 130),
    ]


@pytest.mark.asyncio
async def test_wrapped_list_item_keeps_indent(builder):
    await builder.add_content(UnorderedList((UnorderedList((Paragraph("哈" * 20),)),)))
    fragments = builder.finalize()[0].fragments

    first_line = [f for f in fragments if f.y == 40]
    second_line = [f for f in fragments if f.y == 70]
    assert len(first_line) == 16
    assert second_line[0].x == 30


@pytest.mark.asyncio
async def test_ordered_list_is_skipped_with_warning(builder):
    await builder.add_content(OrderedList((Paragraph("one"),)))
    await builder.add_content(UnorderedList((OrderedList((Paragraph("two"),)), Paragraph("three"))))
    fragments = builder.finalize()[0].fragments

    assert "".join(glyphs(fragments)) == "three"
    assert [w.content_type for w in builder.warnings] == ["ol", "ol"]
    assert [w.content_index for w in builder.warnings] == [0, 1]


@pytest.mark.asyncio
async def test_image_inside_list_is_skipped_with_warning(builder):
    await builder.add_content(UnorderedList((Image("pic.png"), Paragraph("ok"))))
    fragments = builder.finalize()[0].fragments

    assert "".join(glyphs(fragments)) == "ok"
    assert builder.warnings[0].content_type == "image"


@pytest.mark.asyncio
async def test_skipped_element_is_logged(builder, caplog):
    with caplog.at_level(logging.WARNING, logger="svg_render"):
        await builder.add_content(OrderedList((Paragraph("one"),)))

    assert "content #0 (ol) skipped" in caplog.text
