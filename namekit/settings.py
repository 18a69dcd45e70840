#!/usr/bin/env python3
"""Settings loader for namekit."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any
import os

import yaml

from .errors import ConfigurationError

PACKAGE_DIR = Path(__file__).resolve().parent
CONFIG_DIR = PACKAGE_DIR / "configs"
APP_CONFIG_PATH = CONFIG_DIR / "app.yaml"
CONFIG_ENV_VAR = "NAMEKIT_CONFIG"


def config_path() -> Path:
    """Active config file: $NAMEKIT_CONFIG if set, else the bundled app.yaml."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return resolve_path(override, base=Path.cwd())
    return APP_CONFIG_PATH


@lru_cache(maxsize=4)
def _load(path: Path) -> dict:
    if not path.exists():
        raise ConfigurationError(f"Missing app config: {path}")
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid app config {path}: {e}") from e
    if data is not None and not isinstance(data, dict):
        raise ConfigurationError(f"App config {path} must be a mapping")
    return data or {}


def load_app_config() -> dict:
    return _load(config_path())


def get_setting(path: str, default: Any = None) -> Any:
    """Get nested setting by dotted path."""
    data = load_app_config()
    current: Any = data
    for part in path.split('.'):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return default if current is None else current


def resolve_path(value: str, base: Path | None = None) -> Path:
    """Resolve a path string relative to the active config file (unless absolute)."""
    if value is None:
        raise ValueError("path value is required")
    expanded = os.path.expanduser(str(value))
    path = Path(expanded)
    if not path.is_absolute():
        base = base or config_path().parent
        path = (base / path).resolve()
    return path


def get_path_setting(path: str) -> Path | None:
    """Path-valued setting, resolved against the directory of its config file."""
    value = get_setting(path)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"Setting {path} must be a path, got {value!r}")
    return resolve_path(value)


def clear_cache() -> None:
    """Forget loaded config files (used after changing $NAMEKIT_CONFIG)."""
    _load.cache_clear()


__all__ = [
    "load_app_config",
    "get_setting",
    "resolve_path",
    "get_path_setting",
    "config_path",
    "clear_cache",
    "APP_CONFIG_PATH",
    "CONFIG_ENV_VAR",
]
