"""Library artifact persistence.

A compiled Library is written as JSON at build time and loaded once at
process start, so request-time rendering does no SVG file I/O:

    write_library(compile_library("assets/svg"), ".glyph/library.json")
    LIBRARY = load_library(".glyph/library.json")
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from glyph_core.errors import ArtifactError
from glyph_core.models import Library

logger = logging.getLogger(__name__)

DEFAULT_ARTIFACT_PATH = Path(".glyph") / "library.json"


def write_library(library: Library, path: Path | str) -> Path:
    """Write a library to a JSON artifact.

    Args:
        library: Library to serialize.
        path: Output file path. Parent directories are created as needed.

    Returns:
        Path of the written artifact.
    """
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(library.model_dump_json(indent=2), encoding="utf-8")

    logger.info("Wrote %d SVG entries to %s", len(library), output_path)
    return output_path


def load_library(path: Path | str) -> Library:
    """Load a library from a JSON artifact.

    Args:
        path: Artifact file path.

    Returns:
        Validated Library instance.

    Raises:
        ArtifactError: If the file is missing or not a valid library.
    """
    artifact_path = Path(path)
    if not artifact_path.is_file():
        raise ArtifactError(f"Library artifact not found: {artifact_path}", missing=True)

    try:
        library = Library.model_validate_json(artifact_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ArtifactError(
            f"Library artifact could not be read: {artifact_path}",
            internal_details=str(e),
        ) from e
    except (UnicodeDecodeError, PydanticValidationError) as e:
        raise ArtifactError(
            f"Library artifact is invalid: {artifact_path}",
            internal_details=str(e),
        ) from e

    logger.debug("Loaded %d SVG entries from %s", len(library), artifact_path)
    return library
