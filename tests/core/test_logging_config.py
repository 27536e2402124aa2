"""Tests for logging configuration."""

import json
import logging

import pytest

from stitch.core import logging_config
from stitch.core.logging_config import JsonFormatter, configure_logging, get_logger


@pytest.fixture
def clean_root_logger(monkeypatch):
    """Restore the root logger after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    monkeypatch.setattr(logging_config, "_configured", False)
    for name in ("STITCH_LOG_LEVEL", "STITCH_LOG_FORMAT", "STITCH_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def make_record(message="node_dropped: id=n1", **extra):
    record = logging.LogRecord("stitch.test", logging.WARNING, __file__, 1, message, (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def test_fields(self):
        """Records become one JSON object with the standard fields."""
        data = json.loads(JsonFormatter().format(make_record()))
        assert data["level"] == "WARNING"
        assert data["logger"] == "stitch.test"
        assert data["message"] == "node_dropped: id=n1"
        assert "timestamp" in data
        assert "extra" not in data

    def test_extra_fields(self):
        """Values passed through extra= are nested under extra."""
        data = json.loads(JsonFormatter().format(make_record(subject="c1")))
        assert data["extra"] == {"subject": "c1"}


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_level_and_handler(self, clean_root_logger):
        """The root logger gets the level and a single stderr handler."""
        configure_logging(level="debug")
        assert clean_root_logger.level == logging.DEBUG
        assert len(clean_root_logger.handlers) == 1

    def test_environment_defaults(self, clean_root_logger, monkeypatch):
        """Unset arguments come from the environment."""
        monkeypatch.setenv("STITCH_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("STITCH_LOG_FORMAT", "json")
        configure_logging()
        assert clean_root_logger.level == logging.ERROR
        assert isinstance(clean_root_logger.handlers[0].formatter, JsonFormatter)

    def test_second_call_ignored(self, clean_root_logger):
        """Later calls are ignored unless forced."""
        configure_logging(level="INFO")
        configure_logging(level="DEBUG")
        assert clean_root_logger.level == logging.INFO
        configure_logging(level="DEBUG", force=True)
        assert clean_root_logger.level == logging.DEBUG

    def test_log_file(self, clean_root_logger, tmp_path):
        """A log file adds a second handler writing to it."""
        path = tmp_path / "stitch.log"
        configure_logging(level="INFO", file_path=str(path))
        get_logger("stitch.test").info("flow_compiled: nodes=2")
        for handler in clean_root_logger.handlers:
            handler.flush()
        assert "flow_compiled: nodes=2" in path.read_text()

    def test_unknown_level(self, clean_root_logger):
        """Unknown level names are rejected."""
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging(level="LOUD")
