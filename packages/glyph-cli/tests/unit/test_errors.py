"""Unit tests for glyph_cli.errors module."""

from __future__ import annotations

import click
import pytest

from glyph_cli.errors import (
    EXIT_SYSTEM_ERROR,
    EXIT_USER_ERROR,
    CLIError,
    exit_code_for,
    handle_glyph_error,
    handle_permission_error,
    parse_attr_option,
)


class TestCLIError:
    """Tests for CLIError exception."""

    def test_cli_error_message(self) -> None:
        error = CLIError("Test error message")
        assert error.message == "Test error message"
        assert error.exit_code == EXIT_USER_ERROR

    def test_cli_error_custom_exit_code(self) -> None:
        error = CLIError("Test error", exit_code=EXIT_SYSTEM_ERROR)
        assert error.exit_code == EXIT_SYSTEM_ERROR


class TestExitCodes:
    """Tests for mapping glyph-core errors to exit codes."""

    def test_missing_inputs_are_system_errors(self) -> None:
        from glyph_core import ArtifactError, ConfigurationError, RootNotFoundError

        assert exit_code_for(RootNotFoundError("/x")) == EXIT_SYSTEM_ERROR
        assert exit_code_for(ArtifactError("gone", missing=True)) == EXIT_SYSTEM_ERROR
        assert exit_code_for(ConfigurationError("gone", missing=True)) == EXIT_SYSTEM_ERROR

    def test_exit_code_ignores_message_text(self) -> None:
        """Only the missing flag selects a system error."""
        from glyph_core import ArtifactError, ConfigurationError

        assert exit_code_for(ArtifactError("Library artifact not found: a")) == EXIT_USER_ERROR
        assert exit_code_for(ConfigurationError("not found in roots")) == EXIT_USER_ERROR

    def test_content_errors_are_user_errors(self) -> None:
        from glyph_core import DuplicateKeyError, InvalidFileError, InvalidFileReason

        assert exit_code_for(DuplicateKeyError("a")) == EXIT_USER_ERROR
        assert (
            exit_code_for(InvalidFileError("a", InvalidFileReason.INVALID_FORMAT))
            == EXIT_USER_ERROR
        )

    def test_handle_glyph_error(self) -> None:
        from glyph_core import DuplicateKeyError

        with pytest.raises(CLIError) as exc_info:
            handle_glyph_error(DuplicateKeyError("cube"), "Compilation")

        assert exc_info.value.message == 'Compilation failed: SVG "cube" is duplicated'
        assert exc_info.value.exit_code == EXIT_USER_ERROR

    def test_handle_permission_error(self) -> None:
        with pytest.raises(CLIError) as exc_info:
            handle_permission_error("/root/out.json", "write")

        assert "Permission denied" in exc_info.value.message
        assert exc_info.value.exit_code == EXIT_SYSTEM_ERROR


class TestParseAttrOption:
    """Tests for parse_attr_option()."""

    def test_simple(self) -> None:
        assert parse_attr_option("class=icon") == ("class", "icon")

    def test_value_with_equals(self) -> None:
        assert parse_attr_option("x-data={open=false}") == ("x-data", "{open=false}")

    def test_empty_value(self) -> None:
        assert parse_attr_option("hidden=") == ("hidden", "")

    @pytest.mark.parametrize("value", ["novalue", "=value"])
    def test_invalid(self, value: str) -> None:
        with pytest.raises(click.BadParameter):
            parse_attr_option(value)


def test_cli_error_shows_brackets(capsys: pytest.CaptureFixture[str]) -> None:
    """Messages are printed literally, not as Rich markup."""
    CLIError('SVG "icons[dark]/moon" is duplicated').show()
    captured = capsys.readouterr()
    assert 'SVG "icons[dark]/moon" is duplicated' in captured.out
