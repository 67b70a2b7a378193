"""Shared pytest fixtures for glyph-core tests.

Provides SVG directory trees written into tmp_path and a structlog
configuration that prints to stdout for capsys.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import pytest
import structlog

X_SVG = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><path d="M6 18L18 6M6 6l12 12"/></svg>'
LIST_SVG = '<svg xmlns="http://www.w3.org/2000/svg"><path d="M4 6h16M4 12h16M4 18h16"/></svg>\n'
CUBE_SVG = """<?xml version="1.0" encoding="UTF-8"?>
<!-- cube icon -->
<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 20 20">
  <path d="M10 2L2 6v8l8 4 8-4V6z"/>
</svg>
"""


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Configure structlog to output to stdout for test capture."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,
    )


@pytest.fixture
def write_svg() -> Callable[[Path, str, str | bytes], Path]:
    """Factory fixture writing one file below a root directory.

    Returns:
        Function taking (root, relative_path, content) and returning the path.
    """

    def _write(root: Path, relative: str, content: str | bytes) -> Path:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def svg_root(tmp_path: Path, write_svg: Callable[[Path, str, str | bytes], Path]) -> Path:
    """Create an SVG tree with x.svg, nested/list.svg and more/cube.svg.

    Returns:
        Path to the root directory.
    """
    root = tmp_path / "svgs"
    write_svg(root, "x.svg", X_SVG)
    write_svg(root, "nested/list.svg", LIST_SVG)
    write_svg(root, "more/cube.svg", CUBE_SVG)
    write_svg(root, "more/readme.txt", "not an icon")
    return root


@pytest.fixture
def invalid_root(tmp_path: Path, write_svg: Callable[[Path, str, str | bytes], Path]) -> Path:
    """Create a root holding one .svg file with no svg span.

    Returns:
        Path to the root directory.
    """
    root = tmp_path / "svg_invalid"
    write_svg(root, "invalid.svg", "<html><body>not an svg</body></html>")
    return root
