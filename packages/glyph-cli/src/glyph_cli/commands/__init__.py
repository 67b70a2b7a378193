"""CLI command modules.

Commands are loaded lazily by glyph_cli.main.LazyGroup.
"""

from __future__ import annotations

__all__: list[str] = []
