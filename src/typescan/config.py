"""Configuration loading and validation."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated, Any

import pydantic
import yaml
from pydantic import BaseModel, ConfigDict
from pydantic.functional_validators import AfterValidator

from typescan.errors import ConfigError, ConfigNotFoundError

__all__ = ["Config", "ScanSettings", "DEFAULT_EXTENSIONS"]

DEFAULT_EXTENSIONS: tuple[str, ...] = (".py", ".pyc")


class Config:
    """Configuration accessor with dot-path key support."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def load(cls, yaml_path: str | Path) -> Config:
        """Load configuration from a YAML file.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the YAML is invalid or is not a mapping.
        """
        yaml_path = str(yaml_path)
        if not os.path.isfile(yaml_path):
            raise ConfigNotFoundError(config_path=yaml_path)

        with open(yaml_path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(message=f"Invalid YAML in {yaml_path}: {e}") from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(message=f"Config must be a mapping, got {type(data).__name__}")
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key."""
        parts = key.split(".")
        current: Any = self._data
        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current


def _normalize_extensions(extensions: tuple[str, ...]) -> tuple[str, ...]:
    if not extensions:
        raise ValueError("at least one extension is required")
    normalized = []
    for ext in extensions:
        ext = ext.strip().lower()
        if not ext or ext == ".":
            raise ValueError("extensions must not be empty")
        normalized.append(ext if ext.startswith(".") else f".{ext}")
    return tuple(normalized)


class ScanSettings(BaseModel):
    """Settings read from the ``scanning`` section of a :class:`Config`.

    Attributes:
        base_dir: Directory scanned by ``add_modules_from_directory()`` when no
            path is given. ``None`` means the application base directory.
        extensions: File suffixes treated as loadable modules, lowercase.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    base_dir: Path | None = None
    extensions: Annotated[tuple[str, ...], AfterValidator(_normalize_extensions)] = DEFAULT_EXTENSIONS

    @classmethod
    def from_config(cls, config: Config | None) -> ScanSettings:
        """Build settings from ``config``, falling back to defaults.

        Raises:
            ConfigError: If the ``scanning`` section is not valid.
        """
        if config is None:
            return cls()
        section = config.get("scanning", {})
        if section is None:
            return cls()
        if not isinstance(section, dict):
            raise ConfigError(message=f"'scanning' must be a mapping, got {type(section).__name__}")
        try:
            return cls.model_validate(section)
        except pydantic.ValidationError as e:
            raise ConfigError(message=f"Invalid 'scanning' settings: {e}") from e
