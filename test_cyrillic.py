#!/usr/bin/env python3
"""
Tests for Cyrillic text layout.

Cyrillic letters are not Latin letters for the break policy: words break at
the boundary without a hyphen, and glyphs are written unchanged.

Usage:
    pytest test_cyrillic.py
"""
import os
import sys

import pytest

# Add current directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from conftest import FixedWidthMetrics, glyphs
from svg_render import Heading, MonospaceFontMetrics, Paragraph, SvgPageBuilder
from svg_render.page_builder import FontManager
from svg_render.page_builder.font_manager import TRUETYPE_FAMILIES

PROVERBS = [
    "Литовские пословицы и поговорки",
    "Много рук поднимут и тяжкую ношу.",
    "Жизнь — счастье в труде.",
]
ALPHABET = "АБВГДЕЁЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯ"


@pytest.mark.asyncio
async def test_cyrillic_breaks_without_hyphen(builder):
    await builder.add_content(Paragraph("Б" * 19))
    fragments = builder.finalize()[0].fragments

    assert glyphs(fragments) == ["Б"] * 19
    assert (fragments[18].x, fragments[18].y) == (10, 70)


@pytest.mark.asyncio
async def test_cyrillic_glyphs_are_preserved():
    # wide enough that no line wraps
    builder = SvgPageBuilder({"width": 1000, "height": 400, "padding": "10"}, FixedWidthMetrics())
    await builder.add_content(Heading(3, "Тест кириллицы"))
    for proverb in PROVERBS:
        await builder.add_content(Paragraph(proverb))
    await builder.add_content(Paragraph(ALPHABET))

    text = "".join(glyphs(fragment for page in builder.finalize() for fragment in page.fragments))
    expected = "Тест кириллицы" + "".join(PROVERBS) + ALPHABET
    assert text.replace("&#160;", " ") == expected


@pytest.mark.asyncio
async def test_cyrillic_svg_is_unicode():
    builder = SvgPageBuilder({"width": 600, "height": 300, "padding": "20"}, MonospaceFontMetrics())
    await builder.add_content(Paragraph(ALPHABET))
    svg = builder.finalize()[0].svg

    assert ">Ж</text>" in svg
    assert ">Я</text>" in svg


@pytest.mark.skipif(
    not any(os.path.exists(path) for path in TRUETYPE_FAMILIES["dejavu sans"][1]),
    reason="DejaVu Sans is not installed",
)
def test_cyrillic_capable_font_is_preferred_over_helvetica():
    font_name = FontManager().get_font_name("Some Missing Font")

    # Helvetica cannot measure Cyrillic accurately
    assert font_name == "DejaVuSans"
