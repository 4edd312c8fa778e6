"""Tests for structured logging setup."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
import structlog

from php_bridge.logging.structured import setup_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


class TestSetupLogging:
    def test_level_applied(self, restore_logging) -> None:
        setup_logging(level="debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_defaults_to_info(self, restore_logging) -> None:
        setup_logging(level="chatty")
        assert logging.getLogger().level == logging.INFO

    def test_json_file_output(self, restore_logging, tmp_path: Path) -> None:
        log_file = tmp_path / "bridge.log"
        setup_logging(level="INFO", fmt="json", log_file=str(log_file))
        logging.getLogger("php_bridge.timezone.resolver").error(
            "getOffset failed for %s: %s", "Europe/London", "boom"
        )
        for handler in logging.getLogger().handlers:
            handler.flush()
        record = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert record["event"] == "getOffset failed for Europe/London: boom"
        assert record["level"] == "error"
        assert record["logger"] == "php_bridge.timezone.resolver"

    def test_console_format(self, restore_logging) -> None:
        setup_logging(fmt="console")
        handler = logging.getLogger().handlers[0]
        assert isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)
