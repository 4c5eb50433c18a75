"""Tests for logging setup."""

import logging

import pytest

from scattergram.logging_config import setup_logging


@pytest.fixture(autouse=True)
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def test_explicit_level_wins(monkeypatch):
    monkeypatch.setenv("SCATTERGRAM_LOG_LEVEL", "ERROR")
    logger = setup_logging("scattergram", "debug")
    assert logger.name == "scattergram"
    assert logging.getLogger().level == logging.DEBUG


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv("SCATTERGRAM_LOG_LEVEL", "info")
    setup_logging("scattergram")
    assert logging.getLogger().level == logging.INFO


def test_defaults_to_warning(monkeypatch):
    monkeypatch.delenv("SCATTERGRAM_LOG_LEVEL", raising=False)
    setup_logging("scattergram")
    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("urllib3").level == logging.WARNING


def test_unknown_level_falls_back_to_warning():
    setup_logging("scattergram", "chatty")
    assert logging.getLogger().level == logging.WARNING
