"""Unit tests for vaultreader.utils and home directory handling."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from vaultreader.utils import configure_logging as logging_state
from vaultreader.utils.expand_path import expand_path
from vaultreader.utils.get_home_dir import get_home_dir
from vaultreader.utils.get_logger import get_logger

pytestmark = pytest.mark.unit


def test_get_home_dir_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("VAULTREADER_HOME", str(tmp_path / "home"))
    assert get_home_dir() == tmp_path / "home"
    assert get_home_dir("config.json") == tmp_path / "home" / "config.json"


def test_get_home_dir_default(tmp_path, monkeypatch):
    monkeypatch.delenv("VAULTREADER_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert get_home_dir() == tmp_path / ".vaultreader"


def test_expand_path(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert expand_path("~/notes") == tmp_path / "notes"
    assert expand_path("relative").is_absolute()


def test_get_logger_namespace():
    assert get_logger("vault").name == "vaultreader.vault"


@pytest.fixture
def clean_vaultreader_logger(monkeypatch):
    logger = logging.getLogger("vaultreader")
    handlers = list(logger.handlers)
    level = logger.level
    monkeypatch.setattr(logging_state, "_CONFIGURED", False)
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.setLevel(level)


def test_configure_logging_writes_rotating_file(tmp_path: Path, clean_vaultreader_logger):
    logging_state.configure_logging(home=tmp_path, level="WARN")
    handlers = [h for h in clean_vaultreader_logger.handlers if isinstance(h, RotatingFileHandler)]
    assert len(handlers) == 1
    assert clean_vaultreader_logger.level == logging.WARNING

    logging.getLogger("vaultreader.test").warning("something happened")
    handlers[0].flush()
    assert "something happened" in (tmp_path / "vaultreader.log").read_text()


def test_configure_logging_runs_once(tmp_path: Path, clean_vaultreader_logger):
    logging_state.configure_logging(home=tmp_path)
    logging_state.configure_logging(home=tmp_path)
    assert sum(isinstance(h, RotatingFileHandler) for h in clean_vaultreader_logger.handlers) == 1
