from __future__ import annotations

import json
import logging

import pytest
from pythonjsonlogger import jsonlogger

from rank_browser.logging_config import configure_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def _only_formatter(root: logging.Logger) -> logging.Formatter:
    assert len(root.handlers) == 1
    return root.handlers[0].formatter


def _make_record() -> logging.LogRecord:
    return logging.LogRecord("rank_browser.test", logging.INFO, __file__, 1, "Advanced window", None, None)


def test_json_is_the_default(root_logger, monkeypatch):
    monkeypatch.delenv("RANK_BROWSER_LOG_FORMAT", raising=False)

    configure_logging()

    formatter = _only_formatter(root_logger)
    assert isinstance(formatter, jsonlogger.JsonFormatter)
    payload = json.loads(formatter.format(_make_record()))
    assert payload["message"] == "Advanced window"
    assert payload["name"] == "rank_browser.test"


def test_env_var_selects_plain(root_logger, monkeypatch):
    monkeypatch.setenv("RANK_BROWSER_LOG_FORMAT", "PLAIN")

    configure_logging(level=logging.DEBUG)

    formatter = _only_formatter(root_logger)
    assert not isinstance(formatter, jsonlogger.JsonFormatter)
    assert "[INFO] rank_browser.test: Advanced window" in formatter.format(_make_record())
    assert root_logger.level == logging.DEBUG


def test_force_format_overrides_env(root_logger, monkeypatch):
    monkeypatch.setenv("RANK_BROWSER_LOG_FORMAT", "plain")

    configure_logging(force_format="json")

    assert isinstance(_only_formatter(root_logger), jsonlogger.JsonFormatter)


def test_repeated_calls_do_not_stack_handlers(root_logger):
    configure_logging(force_format="plain")
    configure_logging(force_format="plain")

    assert len(root_logger.handlers) == 1
