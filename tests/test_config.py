#!/usr/bin/env python3
"""Config layering: defaults, config.json, environment."""

import json

import pytest

from gerf.config import (
    DEFAULT_MAX_SIZE,
    DEFAULT_PATH,
    DEFAULT_WARN_SIZE,
    default_config_dir,
    ensure_config_dir,
    load_config,
)
from gerf.errors import ConfigError, ResourceError


def test_defaults(tmp_path):
    config = load_config(tmp_path, env={})
    assert config.config_dir == tmp_path
    assert config.max_size == DEFAULT_MAX_SIZE
    assert config.warn_size == DEFAULT_WARN_SIZE == 64 * 1024
    assert config.default_path == DEFAULT_PATH == "gerf.txt"
    assert config.log_level == "INFO"
    policy = config.policy()
    assert policy.max_size == DEFAULT_MAX_SIZE


def test_config_file(tmp_path):
    (tmp_path / "config.json").write_text(json.dumps({"warn_size": 10, "default_path": "out.txt"}))
    config = load_config(tmp_path, env={})
    assert config.warn_size == 10
    assert config.default_path == "out.txt"
    assert config.max_size == DEFAULT_MAX_SIZE


def test_env_overrides_file(tmp_path):
    (tmp_path / "config.json").write_text(json.dumps({"warn_size": 10, "max_size": 100}))
    config = load_config(tmp_path, env={"GERF_WARN_SIZE": "50", "GERF_LOG_LEVEL": "debug"})
    assert config.warn_size == 50
    assert config.max_size == 100
    assert config.log_level == "DEBUG"


def test_blank_env_is_ignored(tmp_path):
    config = load_config(tmp_path, env={"GERF_MAX_SIZE": "  "})
    assert config.max_size == DEFAULT_MAX_SIZE


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[1, 2]",
        json.dumps({"max_size": "lots"}),
        json.dumps({"max_size": True}),
        json.dumps({"warn_size": -1}),
        json.dumps({"colour": "red"}),
        json.dumps({"default_path": 3}),
        json.dumps({"max_size": 10, "warn_size": 20}),
    ],
)
def test_bad_config_file(tmp_path, content):
    (tmp_path / "config.json").write_text(content)
    with pytest.raises(ConfigError):
        load_config(tmp_path, env={})


def test_bad_env(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path, env={"GERF_MAX_SIZE": "big"})
    with pytest.raises(ConfigError):
        load_config(tmp_path, env={"GERF_LOG_LEVEL": "chatty"})


def test_default_config_dir_from_env(tmp_path):
    assert default_config_dir({"GERF_CONFIG_DIR": str(tmp_path)}) == tmp_path
    assert default_config_dir({}).name.lower() == "gerf"


def test_ensure_config_dir(tmp_path):
    target = tmp_path / "a" / "b"
    assert ensure_config_dir(target) == target
    assert target.is_dir()


def test_ensure_config_dir_failure(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x")
    with pytest.raises(ResourceError):
        ensure_config_dir(blocker / "sub")
