"""glyph-cli: Command line interface for glyph.

Compile SVG directories into library artifacts and render icons from them.
"""

from __future__ import annotations

__version__ = "0.1.0"
