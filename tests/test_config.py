"""Tests for treechanges configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from treechanges.config import TreeChangesConfig


def test_defaults(clean_env):
    config = TreeChangesConfig()

    assert config.directories == []
    assert config.include_masks == []
    assert config.exclude_masks == []
    assert config.recurse is True
    assert config.interval == 1.0
    assert config.log_level == "INFO"
    assert config.log_file is None
    assert config.status_path is None


def test_environment_overrides(clean_env, monkeypatch):
    monkeypatch.setenv("TREECHANGES_DIRECTORIES", '["/srv/a", "/srv/b"]')
    monkeypatch.setenv("TREECHANGES_EXCLUDE_MASKS", '["\\\\.tmp$"]')
    monkeypatch.setenv("TREECHANGES_RECURSE", "false")
    monkeypatch.setenv("TREECHANGES_INTERVAL", "2.5")
    monkeypatch.setenv("TREECHANGES_LOG_LEVEL", "debug")

    config = TreeChangesConfig()

    assert config.directories == [Path("/srv/a"), Path("/srv/b")]
    assert config.exclude_masks == [r"\.tmp$"]
    assert config.recurse is False
    assert config.interval == 2.5
    assert config.log_level == "DEBUG"


def test_env_file(clean_env, tmp_path: Path):
    (tmp_path / ".env").write_text("TREECHANGES_INTERVAL=7\n")

    assert TreeChangesConfig().interval == 7


@pytest.mark.parametrize("interval", [0, -1])
def test_interval_must_be_positive(clean_env, interval):
    with pytest.raises(ValidationError):
        TreeChangesConfig(interval=interval)
