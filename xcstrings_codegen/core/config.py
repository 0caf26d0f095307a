"""
Configuration for xcstrings-codegen runs.

Settings are layered, lowest priority first:
- field defaults below
- environment variables with the XCSTRINGS_ prefix (a .env file is read too)
- an optional config file (JSON or YAML) using the plugin's camelCase keys
- explicit overrides, usually CLI flags

The config file keeps the key names of StringsCatalogPluginConfig.json so
existing package configs work unchanged:

    {"input": "Resources/Localizable.xcstrings", "name": "Strings",
     "separator": ".", "commentsLocale": "en"}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from xcstrings_codegen.generator import GeneratorConfig
from xcstrings_codegen.generator.naming import SWIFT_KEYWORDS
from xcstrings_codegen.logging import logger
from xcstrings_codegen.utils.yaml_io import read_yaml

DEFAULT_CONFIG_FILE = "StringsCatalogPluginConfig.json"

ACCESS_LEVELS = ("public", "package", "internal", "fileprivate", "private")

# Config-file key -> Settings field. Later entries win when both spellings
# are present ("typeName" over "name", "commentsLocale" over "locale").
_FILE_KEYS: tuple[tuple[str, str], ...] = (
    ("input", "INPUT"),
    ("outputDir", "OUTPUT_DIR"),
    ("output", "OUTPUT"),
    ("table", "TABLE"),
    ("name", "TYPE_NAME"),
    ("typeName", "TYPE_NAME"),
    ("access", "ACCESS"),
    ("locale", "LOCALE"),
    ("commentsLocale", "LOCALE"),
    ("separator", "SEPARATOR"),
)

_PATH_FIELDS = ("INPUT", "OUTPUT_DIR")


class Settings(BaseSettings):
    """Generator settings loaded from environment variables (.env supported)."""

    model_config = SettingsConfigDict(
        env_prefix="XCSTRINGS_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    # -------------------------------------------------------------------------
    # Input / output
    # -------------------------------------------------------------------------
    INPUT: Path = Path("localization.xcstrings")
    OUTPUT_DIR: Path = Path("Generated")
    OUTPUT: str = "L10n.swift"

    # -------------------------------------------------------------------------
    # Generated code
    # -------------------------------------------------------------------------
    TABLE: str = "localization"
    TYPE_NAME: str = "L10n"
    ACCESS: str = "public"
    SEPARATOR: str = "_"

    # -------------------------------------------------------------------------
    # Catalog reading
    # -------------------------------------------------------------------------
    # Locale whose localized value is surfaced as the accessor comment
    LOCALE: str = "en"

    @field_validator("SEPARATOR")
    @classmethod
    def check_separator(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError(f"separator must be exactly one character, got {value!r}")
        return value

    @field_validator("TYPE_NAME")
    @classmethod
    def check_type_name(cls, value: str) -> str:
        if not value.isidentifier():
            raise ValueError(f"type name must be a valid identifier, got {value!r}")
        if value in SWIFT_KEYWORDS:
            raise ValueError(f"type name must not be a Swift keyword, got {value!r}")
        return value

    @field_validator("ACCESS")
    @classmethod
    def check_access(cls, value: str) -> str:
        if value not in ACCESS_LEVELS:
            raise ValueError(f"access must be one of {', '.join(ACCESS_LEVELS)}; got {value!r}")
        return value

    @property
    def output_path(self) -> Path:
        return self.OUTPUT_DIR / self.OUTPUT

    def generator_config(self) -> GeneratorConfig:
        """Immutable core config for one generation run."""
        return GeneratorConfig(
            separator=self.SEPARATOR,
            table=self.TABLE,
            type_name=self.TYPE_NAME,
            access=self.ACCESS,
            comments_locale=self.LOCALE,
        )

    def as_dict(self) -> dict[str, Any]:
        """Plain, serializable view of the effective settings."""
        data = self.model_dump()
        return {k: str(v) if isinstance(v, Path) else v for k, v in data.items()}


def _read_config_file(path: Path) -> dict[str, Any]:
    """
    Read a JSON or YAML config file.

    A broken config file is not fatal: a warning is logged and defaults
    are used instead.
    """
    try:
        if path.suffix.lower() in {".yaml", ".yml"}:
            data = read_yaml(path)
        else:
            data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError, yaml.YAMLError) as exc:
        logger.warning("config_file_unreadable", path=str(path), error=str(exc))
        return {}

    if not isinstance(data, dict):
        logger.warning("config_file_unreadable", path=str(path), error="root is not an object")
        return {}
    return data


def settings_from_file(path: Path) -> dict[str, Any]:
    """
    Translate a config file into Settings field values.

    Relative `input` and `outputDir` paths resolve against the directory
    holding the config file.
    """
    raw = _read_config_file(path)
    values: dict[str, Any] = {}
    for file_key, field_name in _FILE_KEYS:
        value = raw.get(file_key)
        if value is None:
            continue
        if not isinstance(value, str):
            logger.warning("config_value_ignored", key=file_key, path=str(path))
            continue
        values[field_name] = value

    for field_name in _PATH_FIELDS:
        if field_name in values:
            p = Path(values[field_name])
            values[field_name] = p if p.is_absolute() else path.parent / p
    return values


def load_settings(config_path: Path | None = None, **overrides: Any) -> Settings:
    """
    Build Settings from environment, config file and overrides.

    With no `config_path`, StringsCatalogPluginConfig.json in the current
    directory is used when it exists. Overrides set to None are ignored so
    unset CLI flags do not mask lower layers.
    """
    if config_path is None:
        candidate = Path.cwd() / DEFAULT_CONFIG_FILE
        config_path = candidate if candidate.is_file() else None

    values: dict[str, Any] = {}
    if config_path is not None:
        values.update(settings_from_file(Path(config_path)))
    values.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**values)
