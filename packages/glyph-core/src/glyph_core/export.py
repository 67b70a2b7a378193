"""JSON Schema export for glyph artifacts.

This module exports JSON Schema Draft 2020-12 schemas from the Pydantic
models so that non-Python build steps can validate library artifacts and
glyph.yaml files.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from glyph_core.config import GlyphConfig
from glyph_core.models import Library

SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"
SCHEMA_BASE_URI = "https://glyph.dev/schemas"


def export_library_schema(
    output_path: Path | str | None = None,
) -> dict[str, Any]:
    """Export Library JSON Schema for cross-language validation.

    Args:
        output_path: Optional path to write schema file. If provided,
            creates parent directories as needed.

    Returns:
        Dictionary containing the JSON Schema.

    Example:
        >>> schema = export_library_schema()
        >>> schema["title"]
        'Library'
    """
    return _export_schema(Library, "library.schema.json", output_path)


def export_config_schema(
    output_path: Path | str | None = None,
) -> dict[str, Any]:
    """Export GlyphConfig (glyph.yaml) JSON Schema for IDE autocomplete.

    Args:
        output_path: Optional path to write schema file.

    Returns:
        Dictionary containing the JSON Schema.
    """
    return _export_schema(GlyphConfig, "glyph.schema.json", output_path)


def _export_schema(
    model: type[BaseModel],
    file_name: str,
    output_path: Path | str | None,
) -> dict[str, Any]:
    schema = model.model_json_schema()

    schema["$schema"] = SCHEMA_DIALECT
    schema["$id"] = f"{SCHEMA_BASE_URI}/{file_name}"

    if "additionalProperties" not in schema:
        schema["additionalProperties"] = False

    if output_path is not None:
        _write_schema_file(schema, output_path)

    return schema


def _write_schema_file(schema: dict[str, Any], path: Path | str) -> None:
    """Write schema to JSON file.

    Args:
        schema: Schema dictionary to write.
        path: Output file path.
    """
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(schema, indent=2))
