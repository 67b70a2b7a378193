"""Rich console output utilities for glyph-cli.

Status lines go through a Rich console that honors NO_COLOR and the
--no-color flag. Rendered SVG markup is written raw with click.echo so
Rich never reinterprets brackets or wraps long lines.
"""

from __future__ import annotations

import json
import os
from collections.abc import Iterable
from typing import Any

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

# Rich respects NO_COLOR itself; the flag is also read here for --no-color parity
_force_no_color = os.environ.get("NO_COLOR") is not None


def create_console(no_color: bool = False) -> Console:
    """Create a Rich Console instance with appropriate color settings.

    Args:
        no_color: If True, disable colored output. Also respects NO_COLOR env var.

    Returns:
        Configured Console instance.
    """
    disabled = no_color or _force_no_color
    return Console(
        force_terminal=False if disabled else None,
        no_color=disabled,
        soft_wrap=True,
    )


console = create_console()


def success(message: str, **kwargs: Any) -> None:
    """Print a success message with green checkmark.

    Example:
        >>> success("Compiled 42 SVG files to .glyph/library.json")
        ✓ Compiled 42 SVG files to .glyph/library.json
    """
    console.print(f"[green]✓[/green] {message}", **kwargs)


def error(message: str, **kwargs: Any) -> None:
    """Print an error message with red X.

    Example:
        >>> error('SVG "cube" is duplicated')
        ✗ SVG "cube" is duplicated
    """
    console.print(f"[red]✗[/red] {message}", **kwargs)


def info(message: str, **kwargs: Any) -> None:
    """Print an informational message."""
    console.print(message, **kwargs)


def echo_markup(markup: str) -> None:
    """Write rendered SVG markup verbatim to stdout."""
    click.echo(markup)


def echo_json(data: Any) -> None:
    """Write JSON to stdout unwrapped and uncolored, for scripts."""
    click.echo(json.dumps(data, indent=2))


def print_keys(keys: Iterable[str], title: str | None = None) -> None:
    """Print library keys as a table.

    Args:
        keys: Keys to list, in display order.
        title: Optional table title (e.g. the artifact path).
    """
    table = Table(title=title)
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Folder", style="dim")

    for key in keys:
        folder, _, _ = key.rpartition("/")
        table.add_row(escape(key), escape(folder) or "-")

    console.print(table)


def set_no_color(no_color: bool) -> None:
    """Update the global console to enable/disable colors.

    Args:
        no_color: If True, disable colored output.
    """
    global console
    console = create_console(no_color=no_color)
