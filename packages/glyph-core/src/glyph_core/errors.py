"""Custom exception hierarchy for glyph-core.

This module defines the exception classes used throughout glyph:
- GlyphError: Base exception for all glyph-related errors
- CompileError: Raised when a compile pass fails (fatal for that pass)
- RenderError: Raised when an SVG cannot be rendered
- ConfigurationError: Raised when glyph.yaml cannot be loaded
- ArtifactError: Raised when a compiled library artifact cannot be loaded

User-facing messages are safe to display. Technical details are logged
internally via structlog and never become part of the message.
"""

from __future__ import annotations

import json
from enum import Enum

import structlog

logger = structlog.get_logger(__name__)


def quote(value: str) -> str:
    """Quote a string the way glyph shows keys and attribute values.

    Args:
        value: String to quote.

    Returns:
        JSON string literal, e.g. ``"heroicons/menu"``.
    """
    return json.dumps(value, ensure_ascii=False)


class GlyphError(Exception):
    """Base exception for glyph.

    All glyph exceptions inherit from this class. User-facing messages
    are safe to display; technical details are logged internally.

    Args:
        user_message: Safe message to display to the user.
        internal_details: Optional technical details for logging. This is
            logged internally but NEVER exposed in the message.

    Example:
        >>> raise GlyphError(
        ...     "Library could not be built",
        ...     internal_details="PermissionError on assets/svg/logo.svg",
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        """Initialize GlyphError with user message and optional internal details.

        Args:
            user_message: Safe message to display to the user.
            internal_details: Technical details for internal logging only.
        """
        super().__init__(user_message)
        self.user_message = user_message

        if internal_details:
            logger.error(
                "glyph_error",
                error_type=self.__class__.__name__,
                user_message=user_message,
                internal_details=internal_details,
            )


class CompileError(GlyphError):
    """Raised when a compile pass fails.

    Compile errors are fatal for the pass that raised them: no partial
    library is ever returned. Callers should treat them as a build failure.
    """

    pass


class RootNotFoundError(CompileError):
    """Raised when the compile root is not an existing directory.

    Attributes:
        root: Absolute path of the missing root.
    """

    def __init__(self, root: str, *, internal_details: str | None = None) -> None:
        super().__init__(
            f"SVG root at {root} does not exist",
            internal_details=internal_details,
        )
        self.root = root


class DuplicateKeyError(CompileError):
    """Raised when two SVG files resolve to the same key.

    The key may collide with the library passed into the pass or with
    a file compiled earlier in the same pass.

    Attributes:
        key: The duplicated key.

    Example:
        >>> raise DuplicateKeyError("heroicons/menu")
        # User sees: SVG "heroicons/menu" is duplicated
    """

    def __init__(self, key: str, *, internal_details: str | None = None) -> None:
        super().__init__(
            f"SVG {quote(key)} is duplicated",
            internal_details=internal_details,
        )
        self.key = key


class InvalidFileReason(str, Enum):
    """Why an SVG file was rejected by the compiler."""

    INVALID_CHARS = "invalid_chars"
    INVALID_FORMAT = "invalid_format"
    UNREADABLE = "unreadable"


class InvalidFileError(CompileError):
    """Raised when an SVG file cannot be parsed into an entry.

    Attributes:
        key: Key of the rejected file.
        reason: Failure reason (invalid_chars, invalid_format or unreadable).

    Example:
        >>> raise InvalidFileError("broken", InvalidFileReason.INVALID_FORMAT)
        # User sees: SVG "broken" is invalid due to invalid_format
    """

    def __init__(
        self,
        key: str,
        reason: InvalidFileReason,
        *,
        internal_details: str | None = None,
    ) -> None:
        super().__init__(
            f"SVG {quote(key)} is invalid due to {reason.value}",
            internal_details=internal_details,
        )
        self.key = key
        self.reason = reason


class RenderError(GlyphError):
    """Raised when rendering fails at request time."""

    pass


class SvgNotFoundError(RenderError):
    """Raised when a key is not present in the library.

    Attributes:
        key: The missing key.

    Example:
        >>> raise SvgNotFoundError("missing")
        # User sees: SVG "missing" not found in library
    """

    def __init__(self, key: str) -> None:
        super().__init__(f"SVG {quote(key)} not found in library")
        self.key = key


class ConfigurationError(GlyphError):
    """Raised when glyph.yaml parsing or validation fails.

    Provides file path and field context for actionable error messages.

    Attributes:
        file_path: Path to the configuration file (if known).
        field_path: Dot-separated path to the invalid field (e.g., "roots.0").
        missing: True when the configuration file does not exist.

    Example:
        >>> raise ConfigurationError(
        ...     "Invalid value",
        ...     file_path="glyph.yaml",
        ...     field_path="include_hidden",
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        file_path: str | None = None,
        field_path: str | None = None,
        missing: bool = False,
        internal_details: str | None = None,
    ) -> None:
        """Initialize ConfigurationError with context.

        Args:
            user_message: Safe message to display to the user.
            file_path: Path to the configuration file (optional).
            field_path: Dot-separated path to the field (optional).
            missing: Whether the file itself is absent.
            internal_details: Technical details for internal logging only.
        """
        context_parts: list[str] = []
        if file_path:
            context_parts.append(f"in {file_path}")
        if field_path:
            context_parts.append(f"field '{field_path}'")

        if context_parts:
            full_message = f"{user_message} ({', '.join(context_parts)})"
        else:
            full_message = user_message

        super().__init__(full_message, internal_details=internal_details)

        self.file_path = file_path
        self.field_path = field_path
        self.missing = missing


class ArtifactError(GlyphError):
    """Raised when a compiled library artifact cannot be read or validated.

    Attributes:
        missing: True when the artifact file does not exist.
    """

    def __init__(
        self,
        user_message: str,
        *,
        missing: bool = False,
        internal_details: str | None = None,
    ) -> None:
        super().__init__(user_message, internal_details=internal_details)
        self.missing = missing
