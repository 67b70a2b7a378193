"""glyph schema command - Export JSON Schema."""

from __future__ import annotations

from pathlib import Path

import click
from rich.markup import escape

from glyph_cli.errors import handle_permission_error
from glyph_cli.output import success


@click.group()
def schema() -> None:
    """Export JSON Schema files.

    **Commands:**

    - `glyph schema export` - Export the library artifact JSON Schema
    - `glyph schema export-config` - Export the glyph.yaml JSON Schema
    """
    pass


@schema.command("export")
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=Path("schemas") / "library.schema.json",
    show_default=True,
    help="Output path.",
)
def export_schema(output_path: Path) -> None:
    """Export the library artifact JSON Schema.

    Examples:

        glyph schema export

        glyph schema export --output build/library.schema.json
    """
    from glyph_core import export_library_schema

    try:
        export_library_schema(output_path)
    except PermissionError:
        handle_permission_error(str(output_path), "write")

    success(f"Schema exported to {escape(str(output_path))}")


@schema.command("export-config")
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=Path("schemas") / "glyph.schema.json",
    show_default=True,
    help="Output path.",
)
def export_config(output_path: Path) -> None:
    """Export the glyph.yaml JSON Schema for IDE autocomplete."""
    from glyph_core import export_config_schema

    try:
        export_config_schema(output_path)
    except PermissionError:
        handle_permission_error(str(output_path), "write")

    success(f"Schema exported to {escape(str(output_path))}")
