"""Tests for core logging module."""

import logging
from io import StringIO

import pytest

from .lib import get_logger, setup_logging


class TestLogging:
    """Test core logging API."""

    @pytest.mark.unit
    def test_get_logger(self) -> None:
        """Verify logger instance creation."""
        logger = get_logger("test")
        assert logger.name == "test"
        assert isinstance(logger, logging.Logger)

    @pytest.mark.unit
    def test_get_logger_default_name(self) -> None:
        """Verify default logger name."""
        logger = get_logger()
        assert logger.name == "prism"

    @pytest.mark.unit
    def test_setup_logging_writes_to_stream(self) -> None:
        """Messages at or above the level reach the configured stream."""
        stream = StringIO()
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            setup_logging(level=logging.DEBUG, stream=stream)
            get_logger("test_setup").debug("test message")
            assert "test_setup - DEBUG - test message" in stream.getvalue()
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)

    @pytest.mark.unit
    def test_setup_logging_filters_below_level(self) -> None:
        """Messages below the level are dropped."""
        stream = StringIO()
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            setup_logging(level=logging.WARNING, stream=stream)
            get_logger("test_quiet").info("hidden")
            assert "hidden" not in stream.getvalue()
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
