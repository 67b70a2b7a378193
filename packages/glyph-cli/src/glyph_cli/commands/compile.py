"""glyph compile command - Build a library artifact from SVG folders."""

from __future__ import annotations

from pathlib import Path

import click
from rich.markup import escape

from glyph_cli.errors import handle_glyph_error, handle_permission_error
from glyph_cli.output import info, success


@click.command("compile")
@click.argument("roots", nargs=-1, type=click.Path(file_okay=False, path_type=Path))
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to glyph.yaml [default: $GLYPH_CONFIG or ./glyph.yaml]",
)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Artifact path [default: .glyph/library.json]",
)
@click.option(
    "--include-hidden",
    is_flag=True,
    default=False,
    help="Also compile dot-files and files in dot-directories.",
)
def compile_cmd(
    roots: tuple[Path, ...],
    config_path: Path | None,
    output_path: Path | None,
    include_hidden: bool,
) -> None:
    """Compile SVG folders into a library artifact.

    Roots are compiled in order and chained; a key found in two roots is
    an error. Without ROOTS the roots are read from glyph.yaml.

    Examples:

        glyph compile assets/svg

        glyph compile assets/svg vendor/heroicons --output build/icons.json

        glyph compile --config frontend/glyph.yaml
    """
    # Import here to avoid heavy imports at CLI startup
    from glyph_core import (
        DEFAULT_ARTIFACT_PATH,
        Compiler,
        GlyphConfig,
        GlyphError,
        Library,
        resolve_config_path,
        write_library,
    )

    try:
        if roots:
            root_list = list(roots)
            output = output_path or DEFAULT_ARTIFACT_PATH
            hidden = include_hidden
        else:
            config = GlyphConfig.from_yaml(resolve_config_path(config_path))
            root_list = list(config.roots)
            output = output_path or config.output
            hidden = include_hidden or config.include_hidden

        compiler = Compiler(include_hidden=hidden)
        library = Library()
        for root in root_list:
            library = compiler.compile(root, library=library)
            info(f"Compiled {escape(str(root))}")

    except GlyphError as e:
        handle_glyph_error(e, "Compilation")

    try:
        artifact = write_library(library, output)
    except PermissionError:
        handle_permission_error(str(output), "write")

    success(f"Compiled {len(library)} SVG files to {escape(str(artifact))}")
