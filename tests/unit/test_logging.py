"""Unit tests for logging configuration."""

import io
import logging

import pytest
import structlog

from spoticus.utils.logging import configure_logging


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestConfigureLogging:
    """Tests for structlog setup."""

    def test_filters_below_level(self, capsys):
        configure_logging("WARNING")
        logger = structlog.get_logger("spoticus.test")

        logger.info("hidden event")
        logger.warning("visible event", user="U1")

        out = capsys.readouterr().out
        assert "hidden event" not in out
        assert "visible event" in out
        assert "user" in out

    def test_accepts_numeric_level(self, capsys):
        configure_logging(logging.DEBUG)
        structlog.get_logger("spoticus.test").debug("debug event")
        assert "debug event" in capsys.readouterr().out

    def test_unknown_level_name_falls_back_to_info(self, capsys):
        configure_logging("CHATTY")
        logger = structlog.get_logger("spoticus.test")
        logger.debug("debug event")
        logger.info("info event")

        out = capsys.readouterr().out
        assert "debug event" not in out
        assert "info event" in out

    def test_writes_to_given_stream(self, capsys):
        stream = io.StringIO()
        configure_logging("INFO", stream=stream)

        structlog.get_logger("spoticus.test").info("routed event")

        assert "routed event" in stream.getvalue()
        assert "routed event" not in capsys.readouterr().out
