"""CLI error handling for glyph-cli.

Wraps glyph-core exceptions into user-friendly messages with exit codes.
"""

from __future__ import annotations

from typing import NoReturn

import click
from rich.markup import escape

from glyph_cli.output import error

# Exit codes following sysexits.h convention
EXIT_USER_ERROR = 1  # User error (invalid SVG, duplicate key, missing key)
EXIT_SYSTEM_ERROR = 2  # System error (missing input, permissions, write failure)


class CLIError(click.ClickException):
    """CLI-specific exception with exit code support.

    Attributes:
        message: User-facing error message.
        exit_code: Exit code for the CLI (default: 1).
    """

    def __init__(self, message: str, exit_code: int = EXIT_USER_ERROR) -> None:
        """Initialize CLIError.

        Args:
            message: User-facing error message.
            exit_code: Exit code for the CLI.
        """
        super().__init__(message)
        self.exit_code = exit_code

    def show(self, file: object = None) -> None:
        """Display the error message using Rich formatting.

        Args:
            file: Output file (unused, for Click compatibility).
        """
        error(escape(self.format_message()))


def exit_code_for(err: Exception) -> int:
    """Map a glyph-core exception to a CLI exit code.

    Missing inputs (root, artifact, config file) are system errors;
    everything caused by input content is a user error.

    Args:
        err: Exception raised by glyph-core.

    Returns:
        EXIT_SYSTEM_ERROR or EXIT_USER_ERROR.
    """
    from glyph_core import ArtifactError, ConfigurationError, RootNotFoundError

    if isinstance(err, RootNotFoundError):
        return EXIT_SYSTEM_ERROR
    if isinstance(err, (ArtifactError, ConfigurationError)) and err.missing:
        return EXIT_SYSTEM_ERROR
    return EXIT_USER_ERROR


def handle_glyph_error(err: Exception, action: str) -> NoReturn:
    """Raise a CLIError for a glyph-core exception.

    Args:
        err: Exception raised by glyph-core.
        action: What failed, e.g. "Compilation".

    Raises:
        CLIError: Always raises with the formatted message.
    """
    raise CLIError(f"{action} failed: {err}", exit_code=exit_code_for(err)) from None


def handle_permission_error(path: str, operation: str = "access") -> NoReturn:
    """Handle permission errors.

    Args:
        path: Path that caused the permission error.
        operation: Operation that failed (read, write, etc.).

    Raises:
        CLIError: Always raises with formatted error message.
    """
    raise CLIError(
        f"Permission denied: Cannot {operation} {path}",
        exit_code=EXIT_SYSTEM_ERROR,
    )


def parse_attr_option(value: str) -> tuple[str, str]:
    """Parse a ``name=value`` attribute option.

    Args:
        value: Raw option value.

    Returns:
        (name, value) pair. The value may itself contain "=".

    Raises:
        click.BadParameter: If the option has no "=" or an empty name.

    Example:
        >>> parse_attr_option("class=h-5 w-5")
        ('class', 'h-5 w-5')
    """
    name, sep, attr_value = value.partition("=")
    if not sep or not name:
        raise click.BadParameter(f"expected name=value, got {value!r}")
    return name, attr_value
