"""CLI entry point for glyph.

The main group loads subcommands lazily so that ``glyph --help`` does not
import glyph-core and its dependencies.
"""

from __future__ import annotations

import importlib
from typing import Any

import click
import rich_click as rclick

from glyph_cli import __version__
from glyph_cli.output import set_no_color

rclick.rich_click.TEXT_MARKUP = "markdown"
rclick.rich_click.SHOW_ARGUMENTS = True
rclick.rich_click.GROUP_ARGUMENTS_OPTIONS = True


class LazyGroup(rclick.RichGroup):
    """Click group that imports commands only when they are invoked.

    Attributes:
        lazy_subcommands: Mapping of command names to "module.attribute" paths.
    """

    def __init__(
        self,
        *args: Any,
        lazy_subcommands: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize LazyGroup.

        Args:
            *args: Positional arguments for parent class.
            lazy_subcommands: Mapping of command name to module path.
                Format: {"render": "glyph_cli.commands.render.render"}
            **kwargs: Keyword arguments for parent class.
        """
        super().__init__(*args, **kwargs)
        self.lazy_subcommands: dict[str, str] = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        """Return the sorted names of eager and lazy commands."""
        commands = set(super().list_commands(ctx))
        commands.update(self.lazy_subcommands.keys())
        return sorted(commands)

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Get a command by name, importing it on first use.

        Args:
            ctx: Click context.
            cmd_name: Name of the command to get.

        Returns:
            Click Command instance, or None if not found.
        """
        cmd = super().get_command(ctx, cmd_name)  # type: ignore[arg-type]
        if cmd is not None:
            return cmd

        if cmd_name not in self.lazy_subcommands:
            return None

        module_name, attr_name = self.lazy_subcommands[cmd_name].rsplit(".", 1)
        mod = importlib.import_module(module_name)
        return getattr(mod, attr_name)  # type: ignore[no-any-return]


LAZY_COMMANDS = {
    "compile": "glyph_cli.commands.compile.compile_cmd",
    "render": "glyph_cli.commands.render.render",
    "list": "glyph_cli.commands.list_keys.list_keys",
    "schema": "glyph_cli.commands.schema.schema",
}


@click.command(cls=LazyGroup, lazy_subcommands=LAZY_COMMANDS)
@click.version_option(version=__version__, prog_name="glyph")
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output.",
    is_eager=True,
    expose_value=False,
    callback=lambda ctx, param, value: set_no_color(value) if value else None,
)
def cli() -> None:
    """Glyph - inline SVG icons without runtime file I/O.

    Compile a folder of SVG files into a library artifact at build time,
    then render icons from it with extra attributes.

    **Getting Started:**

    - `glyph compile assets/svg` - Build .glyph/library.json
    - `glyph list` - Show the compiled keys
    - `glyph render heroicons/menu -a class="h-5 w-5"` - Render one icon
    - `glyph schema export` - Export the artifact JSON Schema
    """
    pass


if __name__ == "__main__":
    cli()
