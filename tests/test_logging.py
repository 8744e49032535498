"""Tests for structured logging functionality."""

from __future__ import annotations

import json
import logging
import logging.handlers
import sys

import pytest

from financeflow.config import BaseConfig
from financeflow.logging_config import JSONFormatter, get_logger, setup_logging


@pytest.fixture
def config(tmp_path, monkeypatch):
    monkeypatch.setenv("FINANCEFLOW_DATA_DIR", str(tmp_path))
    return BaseConfig()


def _record(**overrides) -> logging.LogRecord:
    fields = dict(
        name="financeflow.test",
        level=logging.INFO,
        pathname="test.py",
        lineno=42,
        msg="Test message",
        args=(),
        exc_info=None,
    )
    fields.update(overrides)
    record = logging.LogRecord(**fields)
    record.module = "test_module"
    record.funcName = "test_function"
    return record


def test_json_formatter():
    """JSONFormatter emits the core fields as JSON."""
    log_data = json.loads(JSONFormatter().format(_record()))

    assert log_data["level"] == "INFO"
    assert log_data["logger"] == "financeflow.test"
    assert log_data["message"] == "Test message"
    assert log_data["module"] == "test_module"
    assert log_data["function"] == "test_function"
    assert log_data["line"] == 42
    assert "timestamp" in log_data
    assert "extra" not in log_data


def test_json_formatter_with_exception():
    try:
        raise ValueError("Test error")
    except ValueError:
        exc_info = sys.exc_info()

    log_data = json.loads(
        JSONFormatter().format(_record(level=logging.ERROR, msg="Error occurred", exc_info=exc_info))
    )

    assert log_data["exception"]["type"] == "ValueError"
    assert "Test error" in log_data["exception"]["message"]
    assert log_data["exception"]["traceback"] is not None


def test_json_formatter_collects_extra_fields():
    record = _record()
    record.user_id = 7
    record.card_id = 3

    log_data = json.loads(JSONFormatter().format(record))
    assert log_data["extra"] == {"user_id": 7, "card_id": 3}


def test_setup_logging(config, tmp_path):
    """Logging setup writes JSON lines to a rotating file under the data dir."""
    config.DEV_MODE = True
    logger = setup_logging(config)

    assert logger.name == "financeflow"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 2  # Console + File

    log_file = tmp_path / "logs" / "financeflow.log"
    assert log_file.exists()

    get_logger("services.savings").info("Applied delta", extra={"user_id": 1, "delta": 50.0})
    for handler in logger.handlers:
        handler.flush()

    entries = [json.loads(line) for line in log_file.read_text().splitlines() if line.strip()]
    assert entries[0]["message"] == "Logging initialized"
    assert entries[-1]["logger"] == "financeflow.services.savings"
    assert entries[-1]["extra"] == {"user_id": 1, "delta": 50.0}


def test_setup_logging_is_idempotent(config):
    setup_logging(config)
    logger = setup_logging(config)
    assert len(logger.handlers) == 2


def test_get_logger():
    assert get_logger("module1").name == "financeflow.module1"
    assert get_logger("financeflow.services.amortization").name == "financeflow.services.amortization"
    assert get_logger("financeflow").name == "financeflow"


@pytest.mark.parametrize("dev_mode", [True, False])
def test_logging_levels_by_mode(config, dev_mode):
    """Console logging level adjusts based on dev mode."""
    config.DEV_MODE = dev_mode

    logger = setup_logging(config)

    console_handler = next(
        handler
        for handler in logger.handlers
        if isinstance(handler, logging.StreamHandler)
        and not isinstance(handler, logging.handlers.RotatingFileHandler)
    )
    expected_level = logging.INFO if dev_mode else logging.WARNING
    assert console_handler.level == expected_level
