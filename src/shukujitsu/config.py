"""
Shukujitsu Settings

Defaults, overlaid by an optional YAML settings file, overlaid by
SHUKUJITSU_* environment variables.

Example settings file:

    log_level: DEBUG
    log_format: text
    max_range_days: 3660
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

from .exceptions import ConfigError

ENV_PREFIX = "SHUKUJITSU_"
CONFIG_PATH_ENV = f"{ENV_PREFIX}CONFIG"

LOG_FORMATS = ("json", "text")
_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the CLI and HTTP service."""

    log_level: str = "INFO"
    log_format: str = "json"
    docs_enabled: bool = True
    # Largest interval the API / CLI will scan (about 100 years)
    max_range_days: int = 36600
    host: str = "127.0.0.1"
    port: int = 8000

    def __post_init__(self) -> None:
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigError(
                message=f"Unknown log level: {self.log_level}",
                value=self.log_level,
            )
        if self.log_format not in LOG_FORMATS:
            raise ConfigError(
                message=f"log_format must be one of {', '.join(LOG_FORMATS)}",
                value=self.log_format,
            )
        if self.max_range_days < 1:
            raise ConfigError(
                message="max_range_days must be positive",
                value=str(self.max_range_days),
            )


def _coerce(name: str, raw: Any, default: Any) -> Any:
    """Convert a raw YAML/env value to the type of the field default."""
    if isinstance(default, bool):
        if isinstance(raw, bool):
            return raw
        text = str(raw).strip().lower()
        if text in _TRUE:
            return True
        if text in _FALSE:
            return False
        raise ConfigError(message=f"{name} must be a boolean", value=str(raw))
    if isinstance(default, int):
        try:
            return int(raw)
        except (TypeError, ValueError) as e:
            raise ConfigError(message=f"{name} must be an integer", value=str(raw)) from e
    return str(raw)


def _apply(settings: Settings, values: Mapping[str, Any]) -> Settings:
    defaults = {f.name: f.default for f in fields(Settings)}
    unknown = sorted(set(values) - set(defaults))
    if unknown:
        raise ConfigError(
            message=f"Unknown setting(s): {', '.join(unknown)}",
            details={"unknown": unknown},
        )
    changes = {
        name: _coerce(name, raw, defaults[name])
        for name, raw in values.items()
    }
    return replace(settings, **changes)


def load_settings_file(path: Union[str, Path]) -> dict[str, Any]:
    """Read a YAML settings file into a mapping."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(message=f"Cannot read settings file: {e}", value=str(path)) from e
    except yaml.YAMLError as e:
        raise ConfigError(message=f"Invalid YAML in settings file: {e}", value=str(path)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(message="Settings file must contain a mapping", value=str(path))
    return data


def settings_from_env(environ: Optional[Mapping[str, str]] = None) -> dict[str, str]:
    """Collect SHUKUJITSU_<FIELD> variables for known fields."""
    environ = os.environ if environ is None else environ
    values = {}
    for f in fields(Settings):
        key = f"{ENV_PREFIX}{f.name.upper()}"
        if key in environ:
            values[f.name] = environ[key]
    return values


def load_settings(
    path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """
    Build settings from defaults, a settings file and the environment.

    Args:
        path: YAML settings file; falls back to $SHUKUJITSU_CONFIG
        environ: Environment mapping (defaults to os.environ)

    Raises:
        ConfigError: If the file or any value is invalid
    """
    environ = os.environ if environ is None else environ
    settings = Settings()

    path = path or environ.get(CONFIG_PATH_ENV)
    if path:
        settings = _apply(settings, load_settings_file(path))

    return _apply(settings, settings_from_env(environ))
