"""Configuration: defaults, an optional YAML file, environment overrides."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from corkboard.constants import BRANCH_NAME
from corkboard.controller import SAVE_MODES
from corkboard.errors import ConfigError
from corkboard.store import STORES

CONFIG_FILE = "corkboard.yaml"
ENV_PREFIX = "CORKBOARD_"

DEFAULTS: dict[str, Any] = {
    "store": "git",
    "path": ".",
    "branch": BRANCH_NAME,
    "save-mode": "detached",
    "log-level": "WARNING",
    "log-file": "",
}

_CHOICES = {
    "store": STORES,
    "save-mode": SAVE_MODES,
    "log-level": ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
}


def _python_key(key: str) -> str:
    """Convert config-style key (hyphenated) to Python-style (underscored)."""
    return key.replace("-", "_")


def _config_key(python_key: str) -> str:
    """Convert Python-style key (underscored) to config-style (hyphenated)."""
    return python_key.replace("_", "-")


def _coerce(key: str, raw: Any) -> Any:
    """Coerce a value to a string and check it against the allowed choices."""
    value = str(raw)
    if key == "log-level":
        value = value.upper()
    choices = _CHOICES.get(key)
    if choices and value not in choices:
        raise ConfigError(f"{key}: {value!r} is not one of {', '.join(choices)}")
    return value


@dataclass
class Config:
    store: str = DEFAULTS["store"]
    path: str = DEFAULTS["path"]
    branch: str = DEFAULTS["branch"]
    save_mode: str = DEFAULTS["save-mode"]
    log_level: str = DEFAULTS["log-level"]
    log_file: str = DEFAULTS["log-file"]

    @property
    def level(self) -> int:
        return getattr(logging, self.log_level)


def _read_file(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"{path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping")
    return data


def _read_env(environ) -> dict[str, Any]:
    result = {}
    for key in DEFAULTS:
        env_key = ENV_PREFIX + _python_key(key).upper()
        if env_key in environ:
            result[key] = environ[env_key]
    return result


def load_config(
    path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
    environ=None,
) -> Config:
    """Build a Config from defaults, file, environment and overrides (lowest to highest).

    path defaults to ./corkboard.yaml and is skipped when absent. An
    explicitly given path must exist. Override keys may use either
    hyphens or underscores; None values are ignored.
    """
    environ = os.environ if environ is None else environ
    values = dict(DEFAULTS)

    if path is None:
        candidate = Path(CONFIG_FILE)
        file_values = _read_file(candidate) if candidate.is_file() else {}
    else:
        candidate = Path(path)
        if not candidate.is_file():
            raise ConfigError(f"config file not found: {candidate}")
        file_values = _read_file(candidate)

    for source in (file_values, _read_env(environ), overrides or {}):
        for raw_key, raw in source.items():
            key = _config_key(str(raw_key))
            if key not in DEFAULTS:
                raise ConfigError(f"unknown config key {raw_key!r}")
            if raw is None:
                continue
            values[key] = _coerce(key, raw)

    return Config(**{_python_key(k): v for k, v in values.items()})
