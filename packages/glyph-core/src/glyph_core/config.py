"""glyph.yaml configuration.

A glyph.yaml file lists the SVG roots to compile (in order) and where
to write the library artifact:

    roots:
      - assets/svg
      - vendor/heroicons
    output: .glyph/library.json
    include_hidden: false

Relative paths resolve against the directory holding glyph.yaml.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from glyph_core.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Environment variable pointing at an explicit glyph.yaml
CONFIG_ENV_VAR = "GLYPH_CONFIG"

# Standard config file name
CONFIG_FILE_NAME = "glyph.yaml"


def resolve_config_path(path: Path | str | None = None) -> Path:
    """Resolve which glyph.yaml to load.

    Order: explicit path, then GLYPH_CONFIG, then ./glyph.yaml.

    Args:
        path: Explicit config path, if any.

    Returns:
        Path to the config file (not checked for existence).
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        logger.debug("Using config from %s=%s", CONFIG_ENV_VAR, env_path)
        return Path(env_path)

    return Path(CONFIG_FILE_NAME)


class GlyphConfig(BaseModel):
    """Build configuration for compiling an SVG library.

    Attributes:
        roots: Directories to compile, chained in order.
        output: Artifact path for the compiled library.
        include_hidden: Compile dot-files and dot-directories too.

    Example:
        >>> config = GlyphConfig.from_yaml("glyph.yaml")
        >>> config.roots
        [PosixPath('/project/assets/svg')]
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    roots: list[Path] = Field(
        ...,
        min_length=1,
        description="SVG root directories, compiled in order",
    )
    output: Path = Field(
        default=Path(".glyph") / "library.json",
        description="Path of the compiled library artifact",
    )
    include_hidden: bool = Field(
        default=False,
        description="Compile hidden files and directories",
    )

    def resolve_paths(self, base_dir: Path) -> GlyphConfig:
        """Return a copy with relative paths resolved against base_dir."""
        return self.model_copy(
            update={
                "roots": [_resolve(base_dir, root) for root in self.roots],
                "output": _resolve(base_dir, self.output),
            }
        )

    @classmethod
    def from_yaml(cls, path: Path | str) -> GlyphConfig:
        """Load and validate GlyphConfig from a YAML file.

        Args:
            path: Path to glyph.yaml.

        Returns:
            Validated GlyphConfig with paths resolved against the file's
            directory.

        Raises:
            ConfigurationError: If the file is missing, is not valid YAML,
                or fails schema validation.
        """
        path = Path(path)
        if not path.is_file():
            raise ConfigurationError(
                "Configuration file not found", file_path=str(path), missing=True
            )

        try:
            with path.open("r", encoding="utf-8") as f:
                data: Any = yaml.safe_load(f)
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise ConfigurationError(
                "Invalid YAML",
                file_path=str(path),
                internal_details=str(e),
            ) from e

        try:
            config = cls.model_validate(data or {})
        except PydanticValidationError as e:
            first = e.errors()[0]
            raise ConfigurationError(
                first["msg"],
                file_path=str(path),
                field_path=".".join(str(loc) for loc in first["loc"]) or None,
                internal_details=str(e),
            ) from e

        logger.info("Loaded configuration from %s", path)
        return config.resolve_paths(path.resolve().parent)


def _resolve(base_dir: Path, path: Path) -> Path:
    path = path.expanduser()
    return path if path.is_absolute() else (base_dir / path).resolve()
