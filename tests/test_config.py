"""Tests for environment-driven configuration."""

from __future__ import annotations

import logging

from json_checker.config import CheckerConfig


def test_from_env_defaults(monkeypatch):
    for name in ("LOG_LEVEL", "PRINT_LEVEL", "LOCALE", "DOC_FILE", "NAMESPACE", "HOVER_LANGUAGE"):
        monkeypatch.delenv(f"JSON_CHECKER_{name}", raising=False)

    config = CheckerConfig.from_env()

    assert config == CheckerConfig()
    assert config.namespace == "minecraft"
    assert config.doc_file is None


def test_from_env_overrides(monkeypatch):
    monkeypatch.setenv("JSON_CHECKER_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("JSON_CHECKER_NAMESPACE", "acme")
    monkeypatch.setenv("JSON_CHECKER_DOC_FILE", "/tmp/docs.json")

    config = CheckerConfig.from_env()

    assert config.log_level == "DEBUG"
    assert config.namespace == "acme"
    assert config.doc_file == "/tmp/docs.json"


def test_set_logging_splits_streams():
    logger = CheckerConfig(log_level="DEBUG", print_level="WARNING").set_logging()

    try:
        assert logger.name == "json_checker"
        assert logger.level == logging.DEBUG
        assert [h.level for h in logger.handlers] == [logging.DEBUG, logging.WARNING]
        assert logger.handlers[0].filter(logging.makeLogRecord({"levelno": logging.INFO}))
        assert not logger.handlers[0].filter(logging.makeLogRecord({"levelno": logging.WARNING}))
    finally:
        logger.handlers.clear()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)
