"""Load entity registry config from TOML (e.g. entregistry.toml).

Config file is looked up in order:
  1. The path passed to load_registry_config() (if any)
  2. Path in ENTREGISTRY_CONFIG env var (if set)
  3. entregistry.toml in the current working directory

Settings are read from the [entregistry] table. If no file is found, built-in
defaults are used (no key prefix, WARNING log level).
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

CONFIG_ENV_VAR = "ENTREGISTRY_CONFIG"
CONFIG_FILENAME = "entregistry.toml"


class RegistryConfig(BaseModel):
    """Configuration for an entity registry.

    Attributes:
        key_prefix: Prepended to every minted key, to keep keys from
            independent registries apart (e.g. "doc1:").
        log_level: Standard logging level name for the registry logger.
    """

    model_config = {"frozen": True}

    key_prefix: str = Field("", description="Prefix prepended to minted keys")
    log_level: str = Field("WARNING", description="Logging level name for registry logs")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        name = value.upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Unknown log level {value!r}")
        return name


def _default_config_paths(path: str | Path | None) -> list[Path]:
    """Return paths to check for the config file (first existing wins)."""
    paths: list[Path] = []
    if path is not None:
        paths.append(Path(path))
    if os.environ.get(CONFIG_ENV_VAR):
        paths.append(Path(os.environ[CONFIG_ENV_VAR]))
    paths.append(Path.cwd() / CONFIG_FILENAME)
    return paths


def load_registry_config(path: str | Path | None = None) -> RegistryConfig:
    """Load registry config from a TOML file.

    Unreadable or malformed files are skipped. Values of the wrong type in
    the [entregistry] table raise a pydantic ValidationError.
    """
    for candidate in _default_config_paths(path):
        if not candidate.is_file():
            continue
        try:
            with open(candidate, "rb") as f:
                data = tomllib.load(f)
        except (OSError, ValueError):
            continue
        section = data.get("entregistry")
        if isinstance(section, dict):
            return RegistryConfig(**section)
        return RegistryConfig()
    return RegistryConfig()
