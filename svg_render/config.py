"""Configuration Constants

Constants for the SVG page rendering engine.
"""
import os
import string

# Default Render Options (overlaid by caller-supplied options)
DEFAULT_RENDER_OPTIONS = {
    "width": 1474,
    "height": 743,
    "font_family": "Lucida Console, Courier, monospace",
    "font_size": 20,
    "image_root": "./images",
    "line_height_ratio": 1.5,
    "padding": "40",
    # svg style
    "opacity": 1,
    "background_color": "#f0f0f0",
    "border_radius": 0,
    "selection_bg_color": "#b4d5ea",
    "selection_color": "",
    "cursor": "default",
    "remote_font_css_url": "",
}

# Option names used by the reader UI
OPTION_ALIASES = {
    "fontFamily": "font_family",
    "fontSize": "font_size",
    "imageRoot": "image_root",
    "lineHeightRatio": "line_height_ratio",
    "backgroundColor": "background_color",
    "borderRadius": "border_radius",
    "selectionbgColor": "selection_bg_color",
    "selectionBgColor": "selection_bg_color",
    "selectionColor": "selection_color",
    "remoteFontCSSURL": "remote_font_css_url",
}

# Heading font size ratios relative to the base font size
HEADING_RATIOS = {
    1: 2.0,
    2: 1.5,
    3: 1.17,
    4: 1.0,
    5: 0.83,
    6: 0.67,
}

# Image block geometry, in multiples of the base line height
IMAGE_BLOCK_LINES = 3
IMAGE_ADVANCE_LINES = 3.5

# Character classes
LATIN_LETTERS = frozenset(string.ascii_letters)
# ASCII whitespace; every member except the newline is written as a no-break space
ASCII_SPACES = string.whitespace
SPACES = frozenset(ASCII_SPACES + "\u00a0\u2002\u2003\u3000")
PUNCTUATION = frozenset(
    ",.;:!?'\")]}"
    "\u2019\u201d\u2026\u2014\u2013"
    # full-width and CJK
    "\uff0c\u3002\uff1b\uff1a\uff01\uff1f\u3001\uff09\u300d\u300f\u300b\u3009"
)
HYPHEN = "-"

# Glyph substitution applied right before a character is written to the page
GLYPH_MAP = {
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
    **{char: "&#160;" for char in ASCII_SPACES if char != "\n"},
}

# Characters that would end a CSS value or the <style> element
STYLE_VALUE_FORBIDDEN = frozenset('<>";{}&')
# URLs may carry ";" and "&" (font query strings); "&" is written as an entity
STYLE_URL_FORBIDDEN = frozenset('<>"')

# Page template placeholders
SVG_PLACEHOLDER = "##{content}##"
SVG_ID_PLACEHOLDER = "##{id}##"
SVG_ID_PREFIX = "svg"
SVG_ID_LENGTH = 7

# Progress Steps (for host progress tracking)
PROGRESS_STEPS = {
    "VALIDATE": 0.02,
    "PARSE": 0.05,
    "READ_IMAGE_SIZES": 0.10,
    "LAYOUT_START": 0.15,
    "LAYOUT_END": 0.95,
    "COMPLETE": 1.0,
}

# Logging
LOG_LEVEL = os.getenv("SVG_RENDER_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
