"""Key derivation and SVG file discovery.

Keys are the relative path of a file under the compile root, with the
path separator normalized to "/", surrounding separators stripped and
the ".svg" suffix removed:

    assets/svg/heroicons/calendar.svg  ->  "heroicons/calendar"
"""

from __future__ import annotations

from pathlib import Path

SVG_SUFFIX = ".svg"


def get_key(path: Path, root: Path) -> str:
    """Derive the library key for an SVG file.

    Args:
        path: Path of the SVG file (inside root).
        root: Compile root.

    Returns:
        Slash-separated key without the ".svg" suffix.

    Example:
        >>> get_key(Path("/a/svg/nested/list.svg"), Path("/a/svg"))
        'nested/list'
    """
    relative = path.relative_to(root).as_posix()
    return relative.strip("/").removesuffix(SVG_SUFFIX)


def is_hidden(path: Path, root: Path) -> bool:
    """Check whether any component of path below root starts with ".".

    Args:
        path: Path inside root.
        root: Compile root.

    Returns:
        True if the file or one of its parent directories is hidden.
    """
    return any(part.startswith(".") for part in path.relative_to(root).parts)


def find_svg_files(root: Path, include_hidden: bool = False) -> list[Path]:
    """Find every SVG file under root, recursively.

    Only regular files whose name ends in the case-sensitive suffix
    ".svg" are returned. Results are sorted so repeated passes visit
    files in the same order.

    Args:
        root: Directory to traverse.
        include_hidden: Include dot-files and files in dot-directories.

    Returns:
        Sorted list of SVG file paths.
    """
    paths = [
        path
        for path in root.rglob("*")
        if path.name.endswith(SVG_SUFFIX) and path.is_file()
    ]
    if not include_hidden:
        paths = [path for path in paths if not is_hidden(path, root)]
    return sorted(paths)
