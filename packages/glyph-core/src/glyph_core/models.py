"""Library models for glyph-core.

This module defines the compiled representation shared by the Compiler
and the Renderer:
- SvgEntry: One parsed SVG split into (open_tag, content, close_tag)
- LibraryMetadata: Provenance of a compiled library
- Library: Immutable mapping from key to SvgEntry

A Library is produced once by one or more compile passes and is read-only
afterwards. It serializes to JSON so it can be shipped as a build artifact.
"""

from __future__ import annotations

import hashlib
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from glyph_core.errors import DuplicateKeyError

GLYPH_CORE_VERSION = "0.1.0"

OPEN_TAG = "<svg"
CLOSE_TAG = "</svg>"


class SvgEntry(BaseModel):
    """A parsed SVG file.

    The compiler strips only the literal ``<svg`` and ``</svg>`` markers,
    so any attributes from the source file's own root tag stay at the
    start of ``content``.

    Attributes:
        open_tag: Always ``"<svg"`` (no closing ``>``).
        content: Everything between the two markers.
        close_tag: Always ``"</svg>"``.

    Example:
        >>> entry = SvgEntry(content=' viewBox="0 0 24 24"><path d="M0"/>')
        >>> entry.as_tuple()
        ('<svg', ' viewBox="0 0 24 24"><path d="M0"/>', '</svg>')
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    open_tag: Literal["<svg"] = Field(
        default=OPEN_TAG,
        description="Literal opening marker without '>'",
    )
    content: str = Field(
        ...,
        description="Original root attributes and inner markup",
    )
    close_tag: Literal["</svg>"] = Field(
        default=CLOSE_TAG,
        description="Literal closing tag",
    )

    def as_tuple(self) -> tuple[str, str, str]:
        """Return the entry as an (open_tag, content, close_tag) triple."""
        return (self.open_tag, self.content, self.close_tag)


def compute_source_hash(entries: Mapping[str, SvgEntry]) -> str:
    """Compute a deterministic SHA-256 hash over library entries.

    Args:
        entries: Mapping of key to entry.

    Returns:
        Hex-encoded SHA-256 hash, independent of insertion order.
    """
    digest = hashlib.sha256()
    for key in sorted(entries):
        digest.update(key.encode("utf-8"))
        digest.update(b"\0")
        digest.update(entries[key].content.encode("utf-8"))
        digest.update(b"\0")
    return digest.hexdigest()


class LibraryMetadata(BaseModel):
    """Provenance of a compiled library.

    Attributes:
        glyph_version: Version of glyph-core that produced the library.
        roots: Absolute roots compiled into the library, in pass order.
        source_hash: SHA-256 hash over sorted keys and entry content.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    glyph_version: str = Field(
        default=GLYPH_CORE_VERSION,
        min_length=1,
        description="Version of glyph-core that produced the library",
    )
    roots: tuple[str, ...] = Field(
        default=(),
        description="Absolute compile roots in pass order",
    )
    source_hash: str = Field(
        default_factory=lambda: compute_source_hash({}),
        min_length=1,
        description="SHA-256 hash over sorted keys and entry content",
    )


class Library(BaseModel):
    """Immutable compiled table mapping keys to SVG entries.

    Keys are relative paths of the source files with the ``.svg`` suffix
    removed (e.g. ``"heroicons/calendar"``). No operation mutates a
    Library; compiling again or merging builds a new one.

    Example:
        >>> library = Compiler().compile("assets/svg")
        >>> "heroicons/menu" in library
        True
        >>> library.get("heroicons/menu").open_tag
        '<svg'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    entries: Mapping[str, SvgEntry] = Field(
        default_factory=dict,
        validate_default=True,
        description="Compiled entries keyed by relative path without suffix",
    )
    metadata: LibraryMetadata = Field(
        default_factory=LibraryMetadata,
        description="Library provenance",
    )

    @field_validator("entries", mode="after")
    @classmethod
    def freeze_entries(cls, v: Mapping[str, SvgEntry]) -> Mapping[str, SvgEntry]:
        """Store entries behind a read-only view of a private copy."""
        return MappingProxyType(dict(v))

    @field_serializer("entries")
    def serialize_entries(self, v: Mapping[str, SvgEntry]) -> dict[str, SvgEntry]:
        return dict(v)

    @classmethod
    def build(
        cls,
        entries: Mapping[str, SvgEntry],
        roots: Iterable[str] = (),
    ) -> Library:
        """Build a Library from entries, computing its metadata.

        Args:
            entries: Mapping of key to entry.
            roots: Compile roots that produced the entries.

        Returns:
            New Library instance.
        """
        entries = dict(entries)
        return cls(
            entries=entries,
            metadata=LibraryMetadata(
                roots=tuple(roots),
                source_hash=compute_source_hash(entries),
            ),
        )

    def get(self, key: str) -> SvgEntry | None:
        """Look up an entry by key, returning None when absent."""
        return self.entries.get(key)

    def keys(self) -> list[str]:
        """Return all keys in sorted order."""
        return sorted(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def merge(self, other: Library) -> Library:
        """Merge another library into a new one.

        Equivalent to chaining compile passes: a key present in both
        libraries is a duplicate, never an overwrite.

        Args:
            other: Library to merge after this one.

        Returns:
            New Library containing the union of both.

        Raises:
            DuplicateKeyError: If any key appears in both libraries.
        """
        for key in sorted(other.entries):
            if key in self.entries:
                raise DuplicateKeyError(key)

        return Library.build(
            {**self.entries, **other.entries},
            roots=self.metadata.roots + other.metadata.roots,
        )
