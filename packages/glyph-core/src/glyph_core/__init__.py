"""glyph-core: Compile SVG directories and render icons inline.

This package provides:
- Compiler: Walk a directory of *.svg files into an immutable Library
- render / render_strict: Serialize a Library entry with extra attributes
- write_library / load_library: Ship a compiled Library as a JSON artifact
- SvgWrapper: Render functions bound to one compiled root
- GlyphConfig: glyph.yaml build configuration
"""

from __future__ import annotations

__version__ = "0.1.0"

# Artifact persistence
from glyph_core.artifact import DEFAULT_ARTIFACT_PATH, load_library, write_library

# Compiler
from glyph_core.compiler import Compiler, compile_library, get_key, parse_svg

# Configuration
from glyph_core.config import CONFIG_ENV_VAR, GlyphConfig, resolve_config_path

# Error types
from glyph_core.errors import (
    ArtifactError,
    CompileError,
    ConfigurationError,
    DuplicateKeyError,
    GlyphError,
    InvalidFileError,
    InvalidFileReason,
    RenderError,
    RootNotFoundError,
    SvgNotFoundError,
)

# JSON Schema exports
from glyph_core.export import export_config_schema, export_library_schema

# Models
from glyph_core.models import Library, LibraryMetadata, SvgEntry

# Renderer
from glyph_core.renderer import RenderResult, render, render_attrs, render_strict
from glyph_core.wrapper import SvgWrapper

__all__ = [
    "__version__",
    # Compiler
    "Compiler",
    "compile_library",
    "get_key",
    "parse_svg",
    # Renderer
    "render",
    "render_strict",
    "render_attrs",
    "RenderResult",
    "SvgWrapper",
    # Models
    "Library",
    "LibraryMetadata",
    "SvgEntry",
    # Artifacts
    "DEFAULT_ARTIFACT_PATH",
    "write_library",
    "load_library",
    "export_library_schema",
    "export_config_schema",
    # Configuration
    "GlyphConfig",
    "CONFIG_ENV_VAR",
    "resolve_config_path",
    # Errors
    "GlyphError",
    "CompileError",
    "RootNotFoundError",
    "DuplicateKeyError",
    "InvalidFileError",
    "InvalidFileReason",
    "RenderError",
    "SvgNotFoundError",
    "ConfigurationError",
    "ArtifactError",
]
