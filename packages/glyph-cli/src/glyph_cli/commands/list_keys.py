"""glyph list command - Show the keys of a library artifact."""

from __future__ import annotations

from pathlib import Path

import click

from glyph_cli.errors import handle_glyph_error
from glyph_cli.output import echo_json, print_keys


@click.command("list")
@click.option(
    "-l",
    "--library",
    "library_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=Path(".glyph") / "library.json",
    show_default=True,
    help="Library artifact to list.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print keys and metadata as JSON.",
)
def list_keys(library_path: Path, as_json: bool) -> None:
    """List the SVG keys in a compiled library.

    Examples:

        glyph list

        glyph list --library build/icons.json --json
    """
    from glyph_core import GlyphError, load_library

    try:
        library = load_library(library_path)
    except GlyphError as e:
        handle_glyph_error(e, "List")

    if as_json:
        echo_json(
            {
                "keys": library.keys(),
                "metadata": library.metadata.model_dump(mode="json"),
            }
        )
    else:
        print_keys(library.keys(), title=f"{len(library)} SVG files")
