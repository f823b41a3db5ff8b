"""
Pytest configuration and shared fixtures for svg-render tests.
"""
import asyncio
import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from svg_render.page_builder import CharMetric, FontMetricsProvider, SvgPageBuilder


class FixedWidthMetrics(FontMetricsProvider):
    """Every character is half the font size wide (10px at 20px) unless listed in `widths`."""

    def __init__(self, ratio: float = 0.5, widths: dict = None):
        self.ratio = ratio
        self.widths = widths or {}
        self.calls = []

    async def measure(self, char, font_family, font_size, font_weight=None):
        self.calls.append((char, font_family, font_size, font_weight))
        if char in self.widths:
            return CharMetric(width=self.widths[char])
        return CharMetric(width=font_size * self.ratio)


class SuspendingMetrics(FixedWidthMetrics):
    """Yields to the event loop on every lookup, like an out-of-process measurement."""

    async def measure(self, char, font_family, font_size, font_weight=None):
        await asyncio.sleep(0)
        return await super().measure(char, font_family, font_size, font_weight)


class FailingMetrics(FixedWidthMetrics):
    """Fails on one character."""

    def __init__(self, failing_char: str = "x"):
        super().__init__()
        self.failing_char = failing_char

    async def measure(self, char, font_family, font_size, font_weight=None):
        if char == self.failing_char:
            raise RuntimeError("font not loaded")
        return await super().measure(char, font_family, font_size, font_weight)


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def small_options():
    """200x200 page, 10px padding: content box x 10..190, y 10..190, 30px lines, 10px characters."""
    return {
        "width": 200,
        "height": 200,
        "padding": "10",
        "font_size": 20,
        "line_height_ratio": 1.5,
    }


@pytest.fixture
def metrics():
    return FixedWidthMetrics()


@pytest.fixture
def builder(small_options, metrics):
    return SvgPageBuilder(small_options, metrics)


def glyphs(fragments):
    """Glyph of every text fragment, in order."""
    return [f.glyph for f in fragments if hasattr(f, "glyph")]


def all_fragments(builder_or_pages):
    pages = builder_or_pages if isinstance(builder_or_pages, list) else builder_or_pages.finalize()
    return [fragment for page in pages for fragment in page.fragments]
