"""Tests for logging configuration."""

import json
import logging

import pytest

from fieldtransform.core.logging import StructuredFormatter, configure_logging


@pytest.fixture
def package_logger():
    """Restore the package logger after each test."""
    logger = logging.getLogger("fieldtransform")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


def make_record(message, **extra):
    record = logging.LogRecord(
        name="fieldtransform.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    """Tests for StructuredFormatter."""

    def test_plain_message(self):
        assert StructuredFormatter().format(make_record("hello")) == "[INFO] hello"

    def test_context_rendered(self):
        record = make_record("Loaded", context={"module": "mine.py", "count": 2})
        assert StructuredFormatter().format(record) == "[INFO] module=mine.py count=2 Loaded"

    def test_transform_and_field(self):
        record = make_record("Built", transform_type="date", field_name="created")
        assert StructuredFormatter().format(record) == "[INFO] transform=date field=created Built"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_level_and_handler(self, package_logger):
        configure_logging("debug")

        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1
        assert isinstance(package_logger.handlers[0].formatter, StructuredFormatter)

    def test_unknown_level_defaults_to_info(self, package_logger):
        configure_logging("chatty")
        assert package_logger.level == logging.INFO

    def test_reconfigure_replaces_handler(self, package_logger):
        configure_logging()
        configure_logging()
        assert len(package_logger.handlers) == 1

    def test_json_format(self, package_logger, capsys):
        configure_logging(json_format=True)

        logging.getLogger("fieldtransform.test").info("structured")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        assert json.loads(line)["message"] == "structured"
