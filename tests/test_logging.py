"""Tests for the debug logging of VersionValue."""

import logging

import pytest
from semval.error_handling import InvalidFormat
from semval.version import VersionValue

LOGGER_NAME = "semval.version"


def debug_records(caplog):
    return [record for record in caplog.records if record.name == LOGGER_NAME]


class TestLogging:
    """Test cases for the records emitted on the semval.version logger."""

    def test_set_version_logs_debug(self, caplog):
        """Test that a successful parse emits one DEBUG record."""
        version = VersionValue()
        caplog.clear()
        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            version.set_version("v1.2.3-rc.1")
        records = debug_records(caplog)
        assert len(records) == 1
        assert records[0].levelno == logging.DEBUG
        assert "v1.2.3-rc.1" in records[0].getMessage()

    def test_reset_logs_debug(self, caplog):
        """Test that a reset emits its own DEBUG record besides the parse."""
        version = VersionValue(3, 2, 1)
        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            version.reset()
        messages = [record.getMessage() for record in debug_records(caplog)]
        assert any(message.startswith("Resetting version 3.2.1") for message in messages)
        assert all(record.levelno == logging.DEBUG for record in debug_records(caplog))

    def test_failed_set_version_logs_nothing(self, caplog):
        """Test that errors are raised, not logged."""
        version = VersionValue(1, 0, 0)
        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            with pytest.raises(InvalidFormat):
                version.set_version("1.0")
        assert debug_records(caplog) == []
