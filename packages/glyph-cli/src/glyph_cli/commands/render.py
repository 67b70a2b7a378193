"""glyph render command - Render one SVG from a library artifact."""

from __future__ import annotations

from pathlib import Path

import click

from glyph_cli.errors import EXIT_USER_ERROR, CLIError, handle_glyph_error, parse_attr_option
from glyph_cli.output import echo_markup


def _parse_attrs(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> list[tuple[str, str]]:
    return [parse_attr_option(value) for value in values]


@click.command()
@click.argument("key")
@click.option(
    "-l",
    "--library",
    "library_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=Path(".glyph") / "library.json",
    show_default=True,
    help="Library artifact to render from.",
)
@click.option(
    "-a",
    "--attr",
    "attrs",
    multiple=True,
    callback=_parse_attrs,
    help="Attribute as name=value; repeatable, rendered in order.",
)
@click.option(
    "--fallback",
    default=None,
    help="Markup to print instead of failing when KEY is missing.",
)
def render(
    key: str,
    library_path: Path,
    attrs: list[tuple[str, str]],
    fallback: str | None,
) -> None:
    """Render an SVG from a compiled library.

    Attributes are inserted right after `<svg`; underscores in names
    become hyphens.

    Examples:

        glyph render heroicons/menu

        glyph render heroicons/menu -a class="h-5 w-5" -a aria_hidden=true
    """
    # Import here to avoid heavy imports at CLI startup
    from glyph_core import GlyphError, load_library
    from glyph_core import render as render_svg

    try:
        library = load_library(library_path)
    except GlyphError as e:
        handle_glyph_error(e, "Render")

    result = render_svg(library, key, attrs)
    if result.ok:
        echo_markup(result.unwrap())
    elif fallback is not None:
        echo_markup(fallback)
    else:
        raise CLIError(result.error or f"SVG {key} not found", exit_code=EXIT_USER_ERROR)
