"""Shared test fixtures for glyph-cli tests.

Provides CliRunner fixtures, SVG trees and compiled artifacts for
testing CLI commands.
"""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

X_SVG = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><path d="M6 18L18 6"/></svg>'
MENU_SVG = '<svg xmlns="http://www.w3.org/2000/svg"><path d="M4 6h16M4 12h16"/></svg>\n'


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click test runner."""
    return CliRunner()


@pytest.fixture
def isolated_runner(cli_runner: CliRunner) -> Generator[CliRunner, None, None]:
    """Create a Click test runner with an isolated filesystem.

    Yields:
        CliRunner instance whose working directory is a fresh temp dir.
    """
    with cli_runner.isolated_filesystem():
        yield cli_runner


@pytest.fixture
def svg_root(tmp_path: Path) -> Path:
    """Create an SVG tree with x.svg and heroicons/menu.svg.

    Returns:
        Path to the root directory.
    """
    root = tmp_path / "svg"
    (root / "heroicons").mkdir(parents=True)
    (root / "x.svg").write_text(X_SVG)
    (root / "heroicons" / "menu.svg").write_text(MENU_SVG)
    return root


@pytest.fixture
def library_json(svg_root: Path, tmp_path: Path) -> Path:
    """Compile svg_root into an artifact.

    Returns:
        Path to the written library.json.
    """
    from glyph_core import compile_library, write_library

    return write_library(compile_library(svg_root), tmp_path / "build" / "library.json")
