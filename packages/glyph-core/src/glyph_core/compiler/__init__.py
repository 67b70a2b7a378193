"""Compiler module for glyph.

This module exports the Compiler class and its helpers:
- Compiler: Main compiler class
- compile_library: Functional shortcut for Compiler().compile()
- get_key / find_svg_files: Key derivation and file discovery
- parse_svg / read_svg: Per-file parsing into SvgEntry
"""

from __future__ import annotations

from glyph_core.compiler.compiler import Compiler, compile_library
from glyph_core.compiler.keys import SVG_SUFFIX, find_svg_files, get_key, is_hidden
from glyph_core.compiler.reader import SVG_PATTERN, parse_svg, read_svg

__all__: list[str] = [
    # Compiler class
    "Compiler",
    "compile_library",
    # Keys and discovery
    "SVG_SUFFIX",
    "get_key",
    "is_hidden",
    "find_svg_files",
    # Parsing
    "SVG_PATTERN",
    "parse_svg",
    "read_svg",
]
