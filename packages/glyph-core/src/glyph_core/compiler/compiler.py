"""Compiler class for glyph.

This module implements the Compiler that walks a directory of SVG files
and produces an immutable Library:

- Resolve the root and check it is a directory
- Find every *.svg file under it
- Derive each file's key from its relative path
- Reject keys already present in the input library or earlier in the pass
- Parse each file into an SvgEntry

A failed pass raises and returns nothing; the input library is never
modified.
"""

from __future__ import annotations

import logging
from pathlib import Path

from glyph_core.compiler.keys import find_svg_files, get_key
from glyph_core.compiler.reader import read_svg
from glyph_core.errors import DuplicateKeyError, RootNotFoundError
from glyph_core.models import Library, SvgEntry

logger = logging.getLogger(__name__)


class Compiler:
    """Compile a directory of SVG files into a Library.

    The folder and its subfolders are traversed and every valid *.svg file
    is added with a key equal to its relative path minus ".svg". Compiling
    "assets/svg" with a file "assets/svg/heroicons/calendar.svg" yields the
    key "heroicons/calendar".

    Passes can be chained by feeding one result into the next call; a key
    that already exists is a DuplicateKeyError, never an overwrite.

    Example:
        >>> compiler = Compiler()
        >>> library = compiler.compile("assets/svg")
        >>>
        >>> # Compile multiple folders
        >>> library = compiler.compile("assets/svg_b", library=compiler.compile("assets/svg_a"))
    """

    def __init__(self, include_hidden: bool = False) -> None:
        """Initialize the Compiler.

        Args:
            include_hidden: Also compile dot-files and files inside
                dot-directories. Hidden entries are skipped by default.
        """
        self.include_hidden = include_hidden

    def compile(
        self,
        root: Path | str,
        library: Library | None = None,
    ) -> Library:
        """Compile every SVG file under root.

        Args:
            root: Directory to compile.
            library: Optional library to extend. Its keys count as taken.

        Returns:
            New Library holding the input entries plus the compiled ones.

        Raises:
            RootNotFoundError: If root is not an existing directory.
            DuplicateKeyError: If two files (or a file and the input
                library) resolve to the same key.
            InvalidFileError: If a file is unreadable, not UTF-8, or has
                no <svg>...</svg> span.
        """
        base = library if library is not None else Library()
        root_path = Path(root).expanduser().resolve()

        if not root_path.is_dir():
            raise RootNotFoundError(str(root_path))

        entries: dict[str, SvgEntry] = dict(base.entries)
        paths = find_svg_files(root_path, include_hidden=self.include_hidden)

        for path in paths:
            key = get_key(path, root_path)
            if key in entries:
                raise DuplicateKeyError(
                    key,
                    internal_details=f"{path} collides with an existing entry",
                )

            logger.debug("Compiling %s as %s", path, key)
            entries[key] = read_svg(path, key)

        logger.info(
            "Compiled %d SVG files from %s (library size %d)",
            len(paths),
            root_path,
            len(entries),
        )

        return Library.build(
            entries,
            roots=(*base.metadata.roots, root_path.as_posix()),
        )


def compile_library(
    root: Path | str,
    library: Library | None = None,
    *,
    include_hidden: bool = False,
) -> Library:
    """Compile a directory of SVG files into a Library.

    Convenience wrapper around Compiler.compile().

    Args:
        root: Directory to compile.
        library: Optional library to extend.
        include_hidden: Also compile hidden files.

    Returns:
        New Library.

    Example:
        >>> library = compile_library("assets/svg_a")
        >>> library = compile_library("assets/svg_b", library)
    """
    return Compiler(include_hidden=include_hidden).compile(root, library=library)
