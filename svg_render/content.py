"""Content Model

Layout units handed over by the e-book extractor. Pure data: every layout
decision lives in the page builder.

The dictionary form mirrors what the extractor emits:

    {"type": "paragraph", "text": "..."}
    {"type": "heading2", "heading": "..."}
    {"type": "image", "src": "cover.jpg", "alt": "", "width": 600, "height": 800, "caption": "..."}
    {"type": "centerparagraph", "text": "..."}
    {"type": "table", "table": [["a", "b"], ["c", "d"]]}
    {"type": "ul", "list": [{"type": "paragraph", "text": "..."}, {"type": "ul", "list": [...]}]}
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from .exceptions import ContentParseError


class ContentType(str, Enum):
    PARAGRAPH = "paragraph"
    HEADING1 = "heading1"
    HEADING2 = "heading2"
    HEADING3 = "heading3"
    HEADING4 = "heading4"
    HEADING5 = "heading5"
    HEADING6 = "heading6"
    IMAGE = "image"
    CENTER_PARAGRAPH = "centerparagraph"
    TABLE = "table"
    UL = "ul"
    OL = "ol"


HEADING_TYPES = {
    ContentType.HEADING1: 1,
    ContentType.HEADING2: 2,
    ContentType.HEADING3: 3,
    ContentType.HEADING4: 4,
    ContentType.HEADING5: 5,
    ContentType.HEADING6: 6,
}


@dataclass(frozen=True)
class Paragraph:
    text: str
    type: ContentType = field(default=ContentType.PARAGRAPH, init=False)


@dataclass(frozen=True)
class Heading:
    level: int
    text: str
    type: ContentType = field(default=ContentType.HEADING1, init=False)

    def __post_init__(self):
        if self.level not in range(1, 7):
            raise ContentParseError("level", f"heading level must be 1-6, got {self.level!r}")
        object.__setattr__(self, "type", ContentType(f"heading{self.level}"))


@dataclass(frozen=True)
class Image:
    src: str
    alt: str = ""
    width: Optional[float] = None
    height: Optional[float] = None
    caption: Optional[str] = None
    type: ContentType = field(default=ContentType.IMAGE, init=False)


@dataclass(frozen=True)
class CenterParagraph:
    text: str
    type: ContentType = field(default=ContentType.CENTER_PARAGRAPH, init=False)


@dataclass(frozen=True)
class Table:
    rows: Tuple[Tuple[str, ...], ...]
    type: ContentType = field(default=ContentType.TABLE, init=False)

    @property
    def column_count(self) -> int:
        return max((len(row) for row in self.rows), default=0)


@dataclass(frozen=True)
class UnorderedList:
    """Bulleted list; items are Paragraph or nested UnorderedList."""
    items: Tuple["ListItem", ...]
    type: ContentType = field(default=ContentType.UL, init=False)


@dataclass(frozen=True)
class OrderedList:
    """Numbered list. Parsed so it can be reported, but it has no layout rule."""
    items: Tuple["ListItem", ...]
    type: ContentType = field(default=ContentType.OL, init=False)


ListItem = Union[Paragraph, UnorderedList, OrderedList, Image]
Content = Union[Paragraph, Heading, Image, CenterParagraph, Table, UnorderedList, OrderedList]


def _require_str(item: Dict[str, Any], *keys: str) -> str:
    for key in keys:
        value = item.get(key)
        if value is not None:
            if not isinstance(value, str):
                raise ContentParseError(key, f"expected a string, got {type(value).__name__}")
            return value
    raise ContentParseError(keys[0], "missing")


def _optional_number(item: Dict[str, Any], key: str) -> Optional[float]:
    value = item.get(key)
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ContentParseError(key, f"expected a number, got {value!r}")


def _parse_items(item: Dict[str, Any]) -> Tuple[ListItem, ...]:
    raw_items = item.get("list", item.get("items"))
    if not isinstance(raw_items, list):
        raise ContentParseError("list", "expected a list of items")
    return tuple(content_from_dict(child) for child in raw_items)


def content_from_dict(item: Dict[str, Any]) -> Content:
    """
    Convert one extractor dictionary into a content item.

    Args:
        item: Dictionary with a "type" key and the fields of that type

    Returns:
        The matching content dataclass

    Raises:
        ContentParseError: If the type is unknown or a field is missing/malformed
    """
    if not isinstance(item, dict):
        raise ContentParseError("type", f"expected a dict, got {type(item).__name__}")

    raw_type = item.get("type")
    if isinstance(raw_type, ContentType):
        content_type = raw_type
    else:
        try:
            content_type = ContentType(str(raw_type).lower())
        except ValueError:
            raise ContentParseError("type", f"unknown content type {raw_type!r}")

    if content_type == ContentType.PARAGRAPH:
        return Paragraph(_require_str(item, "text"))
    elif content_type in HEADING_TYPES:
        return Heading(HEADING_TYPES[content_type], _require_str(item, "heading", "text"))
    elif content_type == ContentType.IMAGE:
        caption = item.get("caption")
        return Image(
            src=_require_str(item, "src"),
            alt=item.get("alt") or "",
            width=_optional_number(item, "width"),
            height=_optional_number(item, "height"),
            caption=str(caption) if caption else None,
        )
    elif content_type == ContentType.CENTER_PARAGRAPH:
        return CenterParagraph(_require_str(item, "text"))
    elif content_type == ContentType.TABLE:
        rows = item.get("table", item.get("rows"))
        if not isinstance(rows, list) or not all(isinstance(row, list) for row in rows):
            raise ContentParseError("table", "expected a list of rows")
        return Table(tuple(tuple(str(cell) for cell in row) for row in rows))
    elif content_type == ContentType.UL:
        return UnorderedList(_parse_items(item))
    return OrderedList(_parse_items(item))


def contents_from_dicts(items: List[Dict[str, Any]]) -> List[Content]:
    """Convert a whole extractor output; raises on the first malformed item."""
    return [content_from_dict(item) for item in items]
