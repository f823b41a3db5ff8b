"""Utilities Module

Helper functions shared by the render options, the layout engine and the SVG writer.
"""
import posixpath
from typing import List, Sequence, Tuple, Union
from xml.sax.saxutils import escape

from .exceptions import ConfigurationError

URL_PREFIXES = ("http://", "https://", "data:", "file://")


def parse_padding(padding: Union[str, int, float, Sequence]) -> Tuple[int, int, int, int]:
    """
    Expand CSS-style padding shorthand into (top, right, bottom, left).

    Accepts a space separated string ("10 20"), a single number, or a
    sequence of 1-4 values.

    Args:
        padding: Padding shorthand

    Returns:
        Tuple of (top, right, bottom, left)

    Raises:
        ConfigurationError: If there are no values, more than 4 values,
            or a value is not an integer

    Examples:
        >>> parse_padding("40")
        (40, 40, 40, 40)
        >>> parse_padding([10, 20, 30])
        (10, 20, 30, 20)
    """
    if isinstance(padding, str):
        tokens = padding.split()
    elif isinstance(padding, (int, float)) and not isinstance(padding, bool):
        tokens = [padding]
    else:
        tokens = list(padding)

    if len(tokens) > 4:
        raise ConfigurationError(
            f'padding should be 1-4 values with " " separated, got {len(tokens)}: {padding!r}'
        )
    if not tokens:
        raise ConfigurationError("padding should be 1-4 values, got none")

    values: List[int] = []
    for token in tokens:
        try:
            values.append(int(token))
        except (TypeError, ValueError):
            raise ConfigurationError(f"padding value {token!r} is not an integer")

    if len(values) == 1:
        return values[0], values[0], values[0], values[0]
    elif len(values) == 2:
        return values[0], values[1], values[0], values[1]
    elif len(values) == 3:
        return values[0], values[1], values[2], values[1]
    return values[0], values[1], values[2], values[3]


def format_number(value: float) -> str:
    """
    Format a coordinate for SVG output.

    Whole numbers are written without a fractional part so that output
    stays stable regardless of int/float arithmetic.

    Examples:
        >>> format_number(40.0)
        '40'
        >>> format_number(52.5)
        '52.5'
    """
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def escape_attribute(value: str) -> str:
    """Escape a string for use inside a double quoted XML attribute."""
    return escape(str(value), {'"': "&quot;"})


def compose_image_path(image_root: str, src: str) -> str:
    """
    Join an image source onto the image root.

    Pure string composition: nothing is resolved against the working
    directory or checked on disk. URLs and data URIs are returned verbatim.

    Args:
        image_root: Base path for relative image sources
        src: Image source from the content stream

    Returns:
        Normalized image reference
    """
    if src.startswith(URL_PREFIXES):
        return src
    src = src.replace("\\", "/")
    if posixpath.isabs(src) or not image_root:
        return posixpath.normpath(src)
    return posixpath.normpath(posixpath.join(image_root.replace("\\", "/"), src))
