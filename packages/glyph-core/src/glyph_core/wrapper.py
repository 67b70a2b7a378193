"""Bound SVG wrapper.

SvgWrapper compiles one root once and exposes render functions bound to
the resulting library, so application code does not pass the library
around:

    assets/svg
    ├── logo.svg
    └── misc
        ├── header.svg
        └── footer.svg

    SVG = SvgWrapper("assets/svg", base_dir=Path(__file__).parent)

    SVG.render_strict("logo")
    SVG.render_strict("misc/header", {"class": "w-6 h-auto mr-2"})
"""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path

from glyph_core.artifact import load_library
from glyph_core.compiler import Compiler, find_svg_files
from glyph_core.models import Library
from glyph_core.renderer import Attrs, RenderResult, render, render_strict

logger = logging.getLogger(__name__)


def hash_paths(root: Path, include_hidden: bool = False) -> str:
    """Hash the sorted list of SVG paths under root.

    Args:
        root: Compile root.
        include_hidden: Whether hidden files are part of the library.

    Returns:
        Hex-encoded SHA-256 of the newline-joined path list.
    """
    paths = find_svg_files(root, include_hidden=include_hidden)
    joined = "\n".join(path.as_posix() for path in paths)
    return hashlib.sha256(joined.encode("utf-8")).hexdigest()


class SvgWrapper:
    """Render functions bound to a library compiled from a fixed root.

    Attributes:
        root: Absolute compile root, or None when bound to an artifact.
        include_hidden: Whether hidden files were compiled.
        library: The bound Library.
    """

    def __init__(
        self,
        root: Path | str,
        base_dir: Path | str | None = None,
        include_hidden: bool = False,
    ) -> None:
        """Compile root and bind the result.

        Args:
            root: SVG root directory.
            base_dir: Directory relative roots resolve against. Defaults
                to the current working directory.
            include_hidden: Compile hidden files too.

        Raises:
            CompileError: If compiling the root fails.
        """
        base = Path(base_dir) if base_dir is not None else Path.cwd()
        self.root: Path | None = (base / Path(root).expanduser()).resolve()
        self.include_hidden = include_hidden
        self.library = Compiler(include_hidden=include_hidden).compile(self.root)
        self._paths_hash: str | None = hash_paths(self.root, include_hidden)

    @classmethod
    def from_library(cls, library: Library) -> SvgWrapper:
        """Bind an already compiled library.

        The wrapper has no root, so needs_recompile() is always False.
        """
        wrapper = cls.__new__(cls)
        wrapper.root = None
        wrapper.include_hidden = False
        wrapper.library = library
        wrapper._paths_hash = None
        return wrapper

    @classmethod
    def from_artifact(cls, path: Path | str) -> SvgWrapper:
        """Bind a library loaded from a JSON artifact.

        Raises:
            ArtifactError: If the artifact is missing or invalid.
        """
        return cls.from_library(load_library(path))

    def render(self, key: str, attrs: Attrs = None) -> RenderResult:
        """Render an SVG from the bound library."""
        return render(self.library, key, attrs)

    def render_strict(self, key: str, attrs: Attrs = None) -> str:
        """Render an SVG from the bound library, raising if missing."""
        return render_strict(self.library, key, attrs)

    def needs_recompile(self) -> bool:
        """Check whether SVG files were added, removed or renamed.

        Only the set of paths is compared, not file contents; build tools
        watch contents themselves.
        """
        if self.root is None or self._paths_hash is None:
            return False
        if not self.root.is_dir():
            return True
        return hash_paths(self.root, self.include_hidden) != self._paths_hash

    def recompile(self) -> SvgWrapper:
        """Return a new wrapper compiled from the same root.

        Raises:
            ValueError: If the wrapper is bound to a prebuilt library.
            CompileError: If compiling the root fails.
        """
        if self.root is None:
            raise ValueError("Wrapper bound to a prebuilt library cannot be recompiled")

        logger.info("Recompiling SVG library from %s", self.root)
        return SvgWrapper(self.root, include_hidden=self.include_hidden)

    def __repr__(self) -> str:
        return f"SvgWrapper(root={self.root!s}, entries={len(self.library)})"
