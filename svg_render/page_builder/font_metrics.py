"""Font Metrics Module

The character width lookup service the layout engine depends on, and two
implementations of it.

The engine awaits every lookup, so a provider may do slow or out-of-process
work (font loading, a headless browser) without the engine knowing. A
provider must be deterministic: the same arguments always give the same width.
"""
import unicodedata
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from reportlab.pdfbase import pdfmetrics

from .font_manager import FontManager

BOLD_WEIGHTS = ("bold", "bolder")


def is_bold(font_weight: Optional[str]) -> bool:
    """True for 'bold'/'bolder' and numeric weights of 600 and above."""
    if not font_weight:
        return False
    weight = str(font_weight).strip().lower()
    if weight in BOLD_WEIGHTS:
        return True
    return weight.isdigit() and int(weight) >= 600


@dataclass(frozen=True)
class CharMetric:
    """Rendered size of one character."""

    width: float


class FontMetricsProvider:
    """Contract of the font metrics service.

    Subclasses implement measure(); measure_text() is derived from it.
    """

    async def measure(
        self,
        char: str,
        font_family: str,
        font_size: float,
        font_weight: Optional[str] = None,
    ) -> CharMetric:
        """
        Measure one character.

        Args:
            char: A single character
            font_family: CSS font-family list
            font_size: Font size in px
            font_weight: Optional CSS font weight ('bold', '700', ...)

        Returns:
            CharMetric with the advance width in px
        """
        raise NotImplementedError

    async def measure_text(
        self,
        text: str,
        font_family: str,
        font_size: float,
        font_weight: Optional[str] = None,
    ) -> float:
        """Sum of the widths of every character of `text`, measured one by one."""
        total = 0.0
        for char in text:
            metric = await self.measure(char, font_family, font_size, font_weight)
            total += metric.width
        return total


class ReportLabFontMetrics(FontMetricsProvider):
    """Measures characters with ReportLab's font tables.

    Family lists are resolved through FontManager; widths are cached per
    (character, font, size) since the engine asks for the same glyphs over and over.
    """

    def __init__(self, font_manager: Optional[FontManager] = None):
        """
        Initialize the provider.

        Args:
            font_manager: Optional FontManager (e.g. with extra fonts registered)
        """
        self.font_manager = font_manager or FontManager()
        self._cache: Dict[Tuple[str, str, float], float] = {}

    def font_name_for(self, font_family: str, font_weight: Optional[str] = None) -> str:
        return self.font_manager.get_font_name(font_family, bold=is_bold(font_weight))

    async def measure(
        self,
        char: str,
        font_family: str,
        font_size: float,
        font_weight: Optional[str] = None,
    ) -> CharMetric:
        font_name = self.font_name_for(font_family, font_weight)
        key = (char, font_name, font_size)
        width = self._cache.get(key)
        if width is None:
            width = pdfmetrics.stringWidth(char, font_name, font_size)
            self._cache[key] = width
        return CharMetric(width=width)


class MonospaceFontMetrics(FontMetricsProvider):
    """Fixed advance widths, with East Asian wide characters taking a full em.

    Needs no font files, which makes it the provider of choice for previews
    and for reproducing layouts on machines with different installed fonts.
    """

    def __init__(self, advance_ratio: float = 0.6, wide_ratio: float = 1.0, bold_ratio: float = 1.0):
        self.advance_ratio = advance_ratio
        self.wide_ratio = wide_ratio
        self.bold_ratio = bold_ratio

    async def measure(
        self,
        char: str,
        font_family: str,
        font_size: float,
        font_weight: Optional[str] = None,
    ) -> CharMetric:
        if unicodedata.combining(char):
            return CharMetric(width=0.0)
        if unicodedata.east_asian_width(char) in ("W", "F"):
            ratio = self.wide_ratio
        else:
            ratio = self.advance_ratio
        if is_bold(font_weight):
            ratio *= self.bold_ratio
        return CharMetric(width=font_size * ratio)
