"""SVG file reader.

Reads a single file and splits it into an SvgEntry. Only the presence of
an ``<svg ...>...</svg>`` span is checked; there is no XML parsing.
"""

from __future__ import annotations

import re
from pathlib import Path

from glyph_core.errors import InvalidFileError, InvalidFileReason
from glyph_core.models import CLOSE_TAG, OPEN_TAG, SvgEntry

SVG_PATTERN = re.compile(r"<svg\s*[^>]*?>([\s\S]*?)</svg>")


def parse_svg(text: str) -> SvgEntry | None:
    """Split SVG text into an entry.

    Anything before the first ``<svg`` tag or after the ``</svg>`` that
    closes the root element is treated as a comment and dropped. Trailing
    XML comments are skipped when looking for that closing tag. Exactly
    one leading ``<svg`` and one trailing ``</svg>`` are then removed;
    attributes of the root tag stay at the start of the content.

    Args:
        text: Full file text.

    Returns:
        SvgEntry, or None if the text has no ``<svg>...</svg>`` span.

    Example:
        >>> parse_svg('<svg viewBox="0 0 1 1"><g/></svg>').content
        ' viewBox="0 0 1 1"><g/>'
    """
    match = SVG_PATTERN.search(text)
    if match is None:
        return None

    svg = strip_trailing_comments(text[match.start() :])
    end = svg.rfind(CLOSE_TAG)
    if end == -1:
        return None

    svg = svg[: end + len(CLOSE_TAG)]
    content = svg.removeprefix(OPEN_TAG).removesuffix(CLOSE_TAG)
    return SvgEntry(content=content)


def strip_trailing_comments(text: str) -> str:
    """Remove whitespace and ``<!-- ... -->`` comments from the end of text.

    Example:
        >>> strip_trailing_comments("<svg></svg>\\n<!-- old </svg> -->\\n")
        '<svg></svg>'
    """
    text = text.rstrip()
    while text.endswith("-->"):
        start = text.rfind("<!--")
        if start == -1:
            break
        text = text[:start].rstrip()
    return text


def read_svg(path: Path, key: str) -> SvgEntry:
    """Read and parse one SVG file.

    Args:
        path: Path of the SVG file.
        key: Library key of the file, used in error messages.

    Returns:
        Parsed SvgEntry.

    Raises:
        InvalidFileError: If the file cannot be read (unreadable), is not
            valid UTF-8 (invalid_chars) or has no svg span (invalid_format).
    """
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise InvalidFileError(
            key,
            InvalidFileReason.UNREADABLE,
            internal_details=f"{path}: {e}",
        ) from e

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidFileError(
            key,
            InvalidFileReason.INVALID_CHARS,
            internal_details=f"{path}: {e}",
        ) from e

    entry = parse_svg(text)
    if entry is None:
        raise InvalidFileError(key, InvalidFileReason.INVALID_FORMAT)
    return entry
