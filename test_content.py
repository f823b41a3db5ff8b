#!/usr/bin/env python3
"""Tests for the content model and its dictionary form."""
import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from svg_render import (
    CenterParagraph,
    ContentParseError,
    ContentType,
    Heading,
    Image,
    OrderedList,
    Paragraph,
    Table,
    UnorderedList,
    content_from_dict,
    contents_from_dicts,
)


def test_paragraph_from_dict():
    assert content_from_dict({"type": "paragraph", "text": "hello"}) == Paragraph("hello")


@pytest.mark.parametrize("level", range(1, 7))
def test_heading_from_dict(level):
    heading = content_from_dict({"type": f"heading{level}", "heading": "Title"})

    assert heading == Heading(level, "Title")
    assert heading.type == ContentType(f"heading{level}")


def test_heading_accepts_text_field():
    assert content_from_dict({"type": "heading2", "text": "Title"}) == Heading(2, "Title")


def test_heading_level_out_of_range():
    with pytest.raises(ContentParseError):
        Heading(7, "Too deep")


def test_image_from_dict():
    image = content_from_dict({
        "type": "image",
        "src": "cover.jpg",
        "alt": "Cover",
        "width": "600",
        "height": 800,
        "caption": "The cover",
    })

    assert image == Image("cover.jpg", alt="Cover", width=600.0, height=800.0, caption="The cover")


def test_image_without_size():
    image = content_from_dict({"type": "image", "src": "a.png", "width": ""})

    assert image.width is None
    assert image.height is None
    assert image.caption is None


def test_image_with_bad_size():
    with pytest.raises(ContentParseError) as exc_info:
        content_from_dict({"type": "image", "src": "a.png", "width": "wide"})
    assert exc_info.value.field == "width"


def test_center_paragraph_from_dict():
    assert content_from_dict({"type": "centerparagraph", "text": "END"}) == CenterParagraph("END")


def test_table_from_dict():
    table = content_from_dict({"type": "table", "table": [["a", "b", "c"], ["d", 1]]})

    assert table == Table((("a", "b", "c"), ("d", "1")))
    assert table.column_count == 3


def test_nested_lists_from_dict():
    content = content_from_dict({
        "type": "ul",
        "list": [
            {"type": "paragraph", "text": "one"},
            {"type": "ul", "list": [{"type": "paragraph", "text": "two"}]},
            {"type": "ol", "items": [{"type": "paragraph", "text": "three"}]},
        ],
    })

    assert content == UnorderedList((
        Paragraph("one"),
        UnorderedList((Paragraph("two"),)),
        OrderedList((Paragraph("three"),)),
    ))


def test_type_is_case_insensitive_and_accepts_enum():
    assert content_from_dict({"type": "Paragraph", "text": "a"}) == Paragraph("a")
    assert content_from_dict({"type": ContentType.PARAGRAPH, "text": "a"}) == Paragraph("a")


@pytest.mark.parametrize("item, field", [
    ({"type": "poem", "text": "x"}, "type"),
    ({"text": "no type"}, "type"),
    ({"type": "paragraph"}, "text"),
    ({"type": "paragraph", "text": 12}, "text"),
    ({"type": "table", "table": "a,b"}, "table"),
    ({"type": "ul", "list": "a"}, "list"),
])
def test_malformed_items(item, field):
    with pytest.raises(ContentParseError) as exc_info:
        content_from_dict(item)
    assert exc_info.value.field == field


def test_non_dict_item():
    with pytest.raises(ContentParseError):
        content_from_dict(["paragraph", "text"])


def test_contents_from_dicts_keeps_order():
    contents = contents_from_dicts([
        {"type": "heading1", "heading": "Chapter"},
        {"type": "paragraph", "text": "body"},
    ])

    assert contents == [Heading(1, "Chapter"), Paragraph("body")]


def test_content_is_immutable():
    paragraph = Paragraph("a")
    with pytest.raises(AttributeError):
        paragraph.text = "b"
