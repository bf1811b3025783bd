"""Tests for setup_logging."""
import logging
from logging.handlers import RotatingFileHandler

import pytest

from wavebar.logging_setup import LEVEL_ENV_VAR, resolve_level, setup_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield root
    for h in list(root.handlers):
        if h not in before:
            root.removeHandler(h)
            h.close()
    for h in before:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)


def test_console_only(root_logger, monkeypatch):
    monkeypatch.delenv(LEVEL_ENV_VAR, raising=False)
    setup_logging("debug")
    assert root_logger.level == logging.DEBUG
    assert len(root_logger.handlers) == 1


def test_file_handler(root_logger, tmp_path, monkeypatch):
    monkeypatch.delenv(LEVEL_ENV_VAR, raising=False)
    log_file = tmp_path / "wavebar.log"
    setup_logging("info", log_file=log_file)
    assert any(isinstance(h, RotatingFileHandler) for h in root_logger.handlers)
    logging.getLogger("wavebar.test").info("hello")
    for h in root_logger.handlers:
        h.flush()
    assert "hello" in log_file.read_text()


def test_env_override(root_logger, monkeypatch):
    monkeypatch.setenv(LEVEL_ENV_VAR, "WARNING")
    setup_logging("debug")
    assert root_logger.level == logging.WARNING


def test_repeat_setup_does_not_duplicate(root_logger, monkeypatch):
    monkeypatch.delenv(LEVEL_ENV_VAR, raising=False)
    setup_logging()
    setup_logging()
    assert len(root_logger.handlers) == 1


@pytest.mark.parametrize("name,expected", [("debug", logging.DEBUG), ("Error", logging.ERROR), ("loud", logging.INFO)])
def test_resolve_level(monkeypatch, name, expected):
    monkeypatch.delenv(LEVEL_ENV_VAR, raising=False)
    assert resolve_level(name) == expected
