"""Tests for glyph list command."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from glyph_cli.commands.list_keys import list_keys


class TestListCommand:
    """Tests for list command."""

    def test_list_table(self, cli_runner: CliRunner, library_json: Path) -> None:
        result = cli_runner.invoke(list_keys, ["--library", str(library_json)])

        assert result.exit_code == 0, result.output
        assert "heroicons/menu" in result.output
        assert "2 SVG files" in result.output

    def test_list_json(self, cli_runner: CliRunner, library_json: Path) -> None:
        result = cli_runner.invoke(list_keys, ["--library", str(library_json), "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["keys"] == ["heroicons/menu", "x"]
        assert data["metadata"]["source_hash"]

    def test_missing_library(self, isolated_runner: CliRunner) -> None:
        result = isolated_runner.invoke(list_keys, [])

        assert result.exit_code == 2

    def test_undecodable_library(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """A corrupt artifact is reported as invalid, without a traceback."""
        path = tmp_path / "library.json"
        path.write_bytes(b"\xff\xfe{}")

        result = cli_runner.invoke(list_keys, ["--library", str(path)])

        assert result.exit_code == 1
        assert "invalid" in result.output
        assert not isinstance(result.exception, UnicodeDecodeError)
