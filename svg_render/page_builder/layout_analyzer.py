"""Layout Analyzer Module

Handles the static layout decisions of the text flow:
- Character classification (Latin letter, space, punctuation)
- Line break policy when a character overflows the right boundary
- Glyph substitution before a character is written
- Heading font size scaling
"""
from enum import Enum
from typing import Optional

from ..config import GLYPH_MAP, HEADING_RATIOS, LATIN_LETTERS, PUNCTUATION, SPACES


class BreakAction(Enum):
    """What to do with a character that does not fit on the current line."""

    # Break the line and drop the character
    TRIM_SPACE = "trim_space"
    # Write a hyphen, break, then place the character on the new line
    HYPHENATE = "hyphenate"
    # Write the character past the boundary and keep the line
    HANG_PUNCTUATION = "hang_punctuation"
    # Break, then place the character on the new line
    BREAK = "break"


class LayoutAnalyzer:
    """Classifies characters and decides line breaks for the text flow."""

    @staticmethod
    def is_latin_letter(char: Optional[str]) -> bool:
        return char is not None and char in LATIN_LETTERS

    @staticmethod
    def is_space(char: Optional[str]) -> bool:
        return char is not None and char in SPACES

    @staticmethod
    def is_punctuation(char: Optional[str]) -> bool:
        return char is not None and char in PUNCTUATION

    def break_action(self, prev_char: Optional[str], char: str) -> BreakAction:
        """
        Decide how to break when `char` overflows the right content boundary.

        Rules, in order:
        1. An overflowing space ends the line and is consumed, so no line
           starts with a leading space.
        2. Two Latin letters straddling the boundary get a hyphen.
        3. Punctuation after a Latin letter hangs past the boundary;
           punctuation never opens a line.
        4. Anything else (CJK, digits, symbols) breaks without a hyphen.

        Args:
            prev_char: Character written before `char` in the same text, or None
            char: The overflowing character

        Returns:
            The BreakAction to apply
        """
        if self.is_space(char):
            return BreakAction.TRIM_SPACE
        if self.is_latin_letter(prev_char) and self.is_latin_letter(char):
            return BreakAction.HYPHENATE
        if self.is_latin_letter(prev_char) and self.is_punctuation(char):
            return BreakAction.HANG_PUNCTUATION
        return BreakAction.BREAK

    @staticmethod
    def substitute_glyph(char: str) -> str:
        """Return the markup written for `char` (escapes and visual normalization)."""
        return GLYPH_MAP.get(char, char)

    @staticmethod
    def heading_font_size(level: int, base_font_size: float) -> float:
        """
        Font size of a heading.

        Args:
            level: Heading level 1-6
            base_font_size: Body font size in px

        Returns:
            base_font_size x ratio[level], ratios strictly decreasing with level
        """
        return base_font_size * HEADING_RATIOS[level]
