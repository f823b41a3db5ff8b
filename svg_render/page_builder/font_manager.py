"""Font Manager Module

Handles font registration and resolution of CSS font-family lists to fonts
ReportLab can measure.
"""
import os
from typing import Dict, List, Optional, Tuple

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from ..exceptions import ConfigurationError
from ..logging_config import get_logger

logger = get_logger(__name__)

# Bundled fonts directory (highest priority when present)
BUNDLED_FONT_DIR = os.path.join(os.path.dirname(__file__), '..', '..', 'fonts')

# Families available as TrueType files: family -> (font name, regular paths, bold paths)
TRUETYPE_FAMILIES: Dict[str, Tuple[str, List[str], List[str]]] = {
    'dejavu sans': (
        'DejaVuSans',
        [
            os.path.join(BUNDLED_FONT_DIR, 'DejaVuSans.ttf'),
            '/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf',
            '/usr/share/fonts/dejavu/DejaVuSans.ttf',
        ],
        [
            os.path.join(BUNDLED_FONT_DIR, 'DejaVuSans-Bold.ttf'),
            '/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf',
            '/usr/share/fonts/dejavu/DejaVuSans-Bold.ttf',
        ],
    ),
    'dejavu sans mono': (
        'DejaVuSansMono',
        [
            os.path.join(BUNDLED_FONT_DIR, 'DejaVuSansMono.ttf'),
            '/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf',
            '/usr/share/fonts/dejavu/DejaVuSansMono.ttf',
        ],
        [
            os.path.join(BUNDLED_FONT_DIR, 'DejaVuSansMono-Bold.ttf'),
            '/usr/share/fonts/truetype/dejavu/DejaVuSansMono-Bold.ttf',
            '/usr/share/fonts/dejavu/DejaVuSansMono-Bold.ttf',
        ],
    ),
    'liberation sans': (
        'LiberationSans',
        ['/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf'],
        ['/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf'],
    ),
}

# Families mapped onto the ReportLab standard fonts: family -> (regular, bold)
STANDARD_FAMILIES: Dict[str, Tuple[str, str]] = {
    'courier': ('Courier', 'Courier-Bold'),
    'courier new': ('Courier', 'Courier-Bold'),
    'lucida console': ('Courier', 'Courier-Bold'),
    'monospace': ('Courier', 'Courier-Bold'),
    'helvetica': ('Helvetica', 'Helvetica-Bold'),
    'arial': ('Helvetica', 'Helvetica-Bold'),
    'sans-serif': ('Helvetica', 'Helvetica-Bold'),
    'times': ('Times-Roman', 'Times-Bold'),
    'times new roman': ('Times-Roman', 'Times-Bold'),
    'serif': ('Times-Roman', 'Times-Bold'),
}

FALLBACK_FONTS = ('Helvetica', 'Helvetica-Bold')


def split_font_family(font_family: str) -> List[str]:
    """
    Split a CSS font-family list into lowercase family names.

    Examples:
        >>> split_font_family("'Lucida Console', Courier, monospace")
        ['lucida console', 'courier', 'monospace']
    """
    families = []
    for name in font_family.split(','):
        name = name.strip().strip('"\'').strip().lower()
        if name:
            families.append(name)
    return families


class FontManager:
    """Registers TrueType fonts with ReportLab and resolves CSS family lists.

    This class handles:
    - Font path lookups across bundled and system locations
    - Font registration with ReportLab (regular and bold variants)
    - Mapping of common/generic family names to the standard PDF fonts
    - Caching of resolved family lists

    A family list resolves to the first family that is available; when none
    is, a Unicode capable TrueType font is preferred over Helvetica.
    """

    def __init__(self, extra_fonts: Optional[Dict[str, Tuple[str, Optional[str]]]] = None):
        """
        Initialize FontManager.

        Args:
            extra_fonts: Optional mapping of family name -> (regular .ttf path, bold .ttf path or None)
                         registered before anything else
        """
        self._families: Dict[str, Tuple[str, str]] = {}
        self._missing: set = set()
        self._resolved: Dict[Tuple[str, bool], str] = {}

        for family, (regular_path, bold_path) in (extra_fonts or {}).items():
            self.register_font(family, regular_path, bold_path)

    def register_font(self, family: str, regular_path: str, bold_path: Optional[str] = None) -> Tuple[str, str]:
        """
        Register a TrueType family with ReportLab.

        Args:
            family: CSS family name the font is looked up by
            regular_path: Path of the regular .ttf file
            bold_path: Optional path of the bold .ttf file; the regular font is
                       used for bold text when missing

        Returns:
            Tuple of (regular font name, bold font name)

        Raises:
            ConfigurationError: If the regular font cannot be registered
        """
        key = family.strip().lower()
        font_name = ''.join(part.capitalize() for part in key.split())
        try:
            pdfmetrics.registerFont(TTFont(font_name, regular_path))
        except Exception as e:
            raise ConfigurationError(f"Failed to register font {regular_path}: {e}")

        bold_name = font_name
        if bold_path and os.path.exists(bold_path):
            try:
                pdfmetrics.registerFont(TTFont(f"{font_name}-Bold", bold_path))
                bold_name = f"{font_name}-Bold"
            except Exception as e:
                logger.warning(f"Failed to register bold font {bold_path}: {e}")

        self._families[key] = (font_name, bold_name)
        logger.debug(f"Registered font family '{family}' as {font_name}/{bold_name}")
        return self._families[key]

    def _load_truetype_family(self, family: str) -> Optional[Tuple[str, str]]:
        """Register a known TrueType family from the first existing path."""
        if family in self._families:
            return self._families[family]
        if family in self._missing or family not in TRUETYPE_FAMILIES:
            return None

        font_name, regular_paths, bold_paths = TRUETYPE_FAMILIES[family]
        for font_path in regular_paths:
            logger.debug(f"Checking font path: {font_path}")
            if not os.path.exists(font_path):
                continue
            try:
                pdfmetrics.registerFont(TTFont(font_name, font_path))
            except Exception as e:
                logger.debug(f"Failed to register font {font_path}: {e}")
                continue

            bold_name = font_name
            for bold_path in bold_paths:
                if os.path.exists(bold_path):
                    try:
                        pdfmetrics.registerFont(TTFont(f"{font_name}-Bold", bold_path))
                        bold_name = f"{font_name}-Bold"
                        break
                    except Exception as e:
                        logger.debug(f"Failed to register bold font {bold_path}: {e}")
            if bold_name == font_name:
                logger.warning(f"Bold variant of '{family}' not found, using regular font for bold text")

            self._families[family] = (font_name, bold_name)
            logger.debug(f"Registered font '{family}' from: {font_path}")
            return self._families[family]

        self._missing.add(family)
        return None

    def _lookup(self, family: str) -> Optional[Tuple[str, str]]:
        found = self._load_truetype_family(family)
        if found:
            return found
        return STANDARD_FAMILIES.get(family)

    def get_font_name(self, font_family: str, bold: bool = False) -> str:
        """
        Resolve a CSS font-family list to a registered ReportLab font name.

        Args:
            font_family: CSS font-family list, e.g. "Lucida Console, Courier, monospace"
            bold: If True, return the bold variant

        Returns:
            Font name suitable for pdfmetrics.stringWidth (e.g. 'Courier-Bold')
        """
        cache_key = (font_family, bold)
        if cache_key in self._resolved:
            return self._resolved[cache_key]

        fonts = None
        for family in split_font_family(font_family):
            fonts = self._lookup(family)
            if fonts:
                break

        if fonts is None:
            fonts = self._load_truetype_family('dejavu sans')
            if fonts is None:
                logger.warning(
                    f"No font found for '{font_family}', measuring with Helvetica "
                    "(non Latin-1 characters will not be measured accurately)"
                )
                fonts = FALLBACK_FONTS

        font_name = fonts[1] if bold else fonts[0]
        self._resolved[cache_key] = font_name
        return font_name
