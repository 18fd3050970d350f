from __future__ import annotations

import logging

import pytest

from spiderchart.boot import configure_logging


@pytest.fixture(autouse=True)
def _restore_root_level():
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_explicit_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SPIDERCHART_LOG_LEVEL", "ERROR")
    assert configure_logging(level="debug") == logging.DEBUG
    assert logging.getLogger().level == logging.DEBUG


def test_level_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SPIDERCHART_LOG_LEVEL", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "info")
    assert configure_logging() == logging.INFO

    monkeypatch.setenv("SPIDERCHART_LOG_LEVEL", "error")
    assert configure_logging() == logging.ERROR


@pytest.mark.parametrize("value", ["chatty", "", "  "])
def test_unknown_level_falls_back_to_warning(value: str, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SPIDERCHART_LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert configure_logging(level=value) == logging.WARNING


def test_numeric_level() -> None:
    assert configure_logging(level="15") == 15
    assert configure_logging(level=logging.ERROR) == logging.ERROR
