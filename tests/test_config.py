"""Tests for TOML configuration."""

from pathlib import Path

import pytest

from context_server.config import (
    CONFIG_FILENAME,
    DEFAULT_SERVER_NAME,
    ServerConfig,
    get_home_directory,
    load_config,
    load_or_default_config,
    save_config,
)


def test_home_from_env(isolated_home):
    assert get_home_directory() == isolated_home


def test_home_default(monkeypatch):
    monkeypatch.delenv("CONTEXT_SERVER_HOME")
    assert get_home_directory() == Path.home() / ".context-server"


def test_defaults_when_missing(tmp_path):
    config = load_or_default_config(tmp_path)
    assert config.server_name == DEFAULT_SERVER_NAME
    assert config.seed_samples is True
    assert config.log_dir is None
    assert not (tmp_path / CONFIG_FILENAME).exists()


def test_load_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path)


def test_save_and_load(tmp_path):
    home = tmp_path / "cfg"
    save_config(ServerConfig(
        path=home, server_name="ctx", seed_samples=False, log_dir=tmp_path / "logs",
    ))
    config = load_config(home)
    assert config.server_name == "ctx"
    assert config.seed_samples is False
    assert config.log_dir == tmp_path / "logs"


def test_partial_file(tmp_path):
    (tmp_path / CONFIG_FILENAME).write_text('[server]\nseed_samples = false\n')
    config = load_or_default_config(tmp_path)
    assert config.seed_samples is False
    assert config.server_name == DEFAULT_SERVER_NAME


def test_newer_version_rejected(tmp_path):
    (tmp_path / CONFIG_FILENAME).write_text('[config]\nversion = 99\n')
    with pytest.raises(ValueError, match="newer than supported"):
        load_config(tmp_path)


def test_seed_samples_must_be_bool(tmp_path):
    (tmp_path / CONFIG_FILENAME).write_text('[server]\nseed_samples = "no"\n')
    with pytest.raises(ValueError, match="seed_samples"):
        load_config(tmp_path)
