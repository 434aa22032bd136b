"""Shared pytest fixtures for aliencfg tests."""

import logging

import pytest

from aliencfg.models.config_store import ConfigStore

SAMPLE_CFG = """\
Jump_Key:32
Jump_Key_hold:false
Sprint_Key:340
Sprint_Key_hold:true
Fly_Key:-1
Fly_Key_hold:false
Zoom_Key:-3
Zoom_Key_hold:true
Theme:dark:blue
"""


@pytest.fixture(autouse=True)
def isolate_config_dir(tmp_path, monkeypatch):
    """Point the config directory at a temp dir so tests never touch ~/.config."""
    config_dir = tmp_path / "aliencfg-config"
    monkeypatch.setenv("ALIENCFG_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("ALIENCFG_KEY_SCHEME", raising=False)
    monkeypatch.delenv("ALIENCFG_LOG_LEVEL", raising=False)
    yield config_dir

    # Release file handlers the CLI attached so tmp dirs can be removed
    logger = logging.getLogger("aliencfg")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def sample_text():
    return SAMPLE_CFG


@pytest.fixture
def sample_store():
    return ConfigStore.load(SAMPLE_CFG)


@pytest.fixture
def write_cfg(tmp_path):
    """Write CFG text to a file under tmp_path and return its path."""

    def _write(name, text):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
