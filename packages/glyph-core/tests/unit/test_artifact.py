"""Unit tests for library artifact persistence."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from glyph_core.artifact import load_library, write_library
from glyph_core.compiler import compile_library
from glyph_core.errors import ArtifactError
from glyph_core.renderer import render_strict


class TestWriteLibrary:
    """Tests for write_library()."""

    def test_writes_json(self, svg_root: Path, tmp_path: Path) -> None:
        output = write_library(compile_library(svg_root), tmp_path / "out" / "library.json")

        data = json.loads(output.read_text())
        assert set(data["entries"]) == {"x", "nested/list", "more/cube"}
        assert data["entries"]["x"]["open_tag"] == "<svg"
        assert data["metadata"]["source_hash"]

    def test_output_is_reproducible(self, svg_root: Path, tmp_path: Path) -> None:
        """The same tree produces byte-identical artifacts."""
        first = write_library(compile_library(svg_root), tmp_path / "a.json")
        second = write_library(compile_library(svg_root), tmp_path / "b.json")

        assert first.read_bytes() == second.read_bytes()


class TestLoadLibrary:
    """Tests for load_library()."""

    def test_round_trip_renders_identically(self, svg_root: Path, tmp_path: Path) -> None:
        library = compile_library(svg_root)
        loaded = load_library(write_library(library, tmp_path / "library.json"))

        assert loaded == library
        for key in library.keys():
            attrs = {"class": "icon", "aria_hidden": "true"}
            assert render_strict(loaded, key, attrs) == render_strict(library, key, attrs)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ArtifactError, match="not found") as exc_info:
            load_library(tmp_path / "missing.json")

        assert exc_info.value.missing

    def test_invalid_content(self, tmp_path: Path) -> None:
        path = tmp_path / "library.json"
        path.write_text(json.dumps({"entries": {"x": {"open_tag": "<div", "content": ""}}}))

        with pytest.raises(ArtifactError, match="invalid"):
            load_library(path)

    def test_not_json(self, tmp_path: Path) -> None:
        path = tmp_path / "library.json"
        path.write_text("not json at all")

        with pytest.raises(ArtifactError):
            load_library(path)

    def test_not_utf8(self, tmp_path: Path) -> None:
        """Undecodable bytes are an invalid artifact, not a decode error."""
        path = tmp_path / "library.json"
        path.write_bytes(b"\xff\xfe{}")

        with pytest.raises(ArtifactError, match="invalid") as exc_info:
            load_library(path)

        assert not exc_info.value.missing
