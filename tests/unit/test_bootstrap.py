"""Test bootstrap configuration and structured logging setup."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from domain_shared.bootstrap import configure
from domain_shared.observability.logger import get_logger, setup_logging


@pytest.fixture
def restore_logging():
    """Put root logging and structlog back the way the test found them."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()


class TestSetupLogging:
    def test_sets_root_level(self, restore_logging):
        setup_logging(level="WARNING")
        assert logging.getLogger().level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self, restore_logging):
        setup_logging(level="nonsense")
        assert logging.getLogger().level == logging.INFO

    def test_json_output(self, restore_logging, capsys):
        setup_logging(level="INFO", format="json")
        logging.getLogger("domain_shared.test").info("hello %s", "world")

        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "hello world"
        assert record["level"] == "info"
        assert record["component"] == "domain_shared"
        assert record["logger"] == "domain_shared.test"

    def test_structlog_logger(self, restore_logging, capsys):
        setup_logging(level="INFO", format="json")
        get_logger("domain_shared.test").info("page_served", number=2)

        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "page_served"
        assert record["number"] == 2


class TestConfigure:
    def test_returns_settings_and_configures_logging(self, restore_logging):
        settings = configure(
            overrides={
                "observability": {"log_level": "DEBUG", "log_format": "console"},
                "pagination": {"default_page_size": 3},
            }
        )
        assert settings.pagination.default_page_size == 3
        assert logging.getLogger().level == logging.DEBUG
