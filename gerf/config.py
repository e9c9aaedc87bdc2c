"""Configuration: defaults, then ``config.json`` in the config dir, then env vars."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import click

from .errors import ConfigError, ResourceError
from .policy import SizePolicy

APP_NAME = "gerf"
CONFIG_FILE_NAME = "config.json"

DEFAULT_MAX_SIZE = 4 * (1 << 30)  # 4 GiB
DEFAULT_WARN_SIZE = 64 * (1 << 10)  # 64 KiB
DEFAULT_PATH = "gerf.txt"

ENV_CONFIG_DIR = "GERF_CONFIG_DIR"
ENV_VARS = {
    "max_size": "GERF_MAX_SIZE",
    "warn_size": "GERF_WARN_SIZE",
    "default_path": "GERF_DEFAULT_PATH",
    "log_level": "GERF_LOG_LEVEL",
}
_INT_FIELDS = {"max_size", "warn_size"}


@dataclass
class GerfConfig:
    config_dir: Path
    max_size: int = DEFAULT_MAX_SIZE
    warn_size: int = DEFAULT_WARN_SIZE
    default_path: str = DEFAULT_PATH
    log_level: str = "INFO"

    def policy(self) -> SizePolicy:
        return SizePolicy(max_size=self.max_size, warn_size=self.warn_size)


def default_config_dir(env: Optional[Mapping[str, str]] = None) -> Path:
    env = os.environ if env is None else env
    custom = env.get(ENV_CONFIG_DIR)
    if custom and custom.strip():
        return Path(custom)
    return Path(click.get_app_dir(APP_NAME))


def ensure_config_dir(path: Path) -> Path:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ResourceError(f"Unable to find or create a config directory: {e}") from e
    return path


def _coerce(name: str, value: Any, source: str) -> Any:
    if name in _INT_FIELDS:
        if isinstance(value, bool):
            raise ConfigError(f"{source}: '{name}' must be an integer, got {value!r}")
        try:
            number = int(value)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"{source}: '{name}' must be an integer, got {value!r}") from e
        if number < 0:
            raise ConfigError(f"{source}: '{name}' must not be negative")
        return number
    if not isinstance(value, str):
        raise ConfigError(f"{source}: '{name}' must be a string, got {value!r}")
    if name == "log_level":
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ConfigError(f"{source}: unknown log level {value!r}")
    return value


def _read_config_file(path: Path) -> Dict[str, Any]:
    if not path.is_file():
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Unable to read config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")
    known = {f.name for f in fields(GerfConfig)} - {"config_dir"}
    unknown = set(data) - known
    if unknown:
        raise ConfigError(f"Unknown keys in {path}: {', '.join(sorted(unknown))}")
    return {k: _coerce(k, v, str(path)) for k, v in data.items()}


def load_config(config_dir: Optional[Path] = None, env: Optional[Mapping[str, str]] = None) -> GerfConfig:
    env = os.environ if env is None else env
    config_dir = Path(config_dir) if config_dir is not None else default_config_dir(env)
    config = GerfConfig(config_dir=config_dir)

    overrides = _read_config_file(config_dir / CONFIG_FILE_NAME)
    for name, var in ENV_VARS.items():
        raw = env.get(var)
        if raw is not None and raw.strip():
            overrides[name] = _coerce(name, raw.strip(), var)

    config = replace(config, **overrides)
    # raises ConfigError when warn_size > max_size
    config.policy()
    return config
