"""Tests for logging utilities."""

import logging
from io import StringIO

from densepath.graphs import DenseGraph, floyd_warshall
from densepath.logging import (
    configure_logging,
    get_logger,
    set_log_level,
)


def test_get_logger_returns_logger():
    """Test that get_logger returns a logger instance."""
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "densepath.test_module"


def test_get_logger_keeps_package_names():
    """Test that module names already under densepath are not prefixed twice."""
    logger = get_logger("densepath.graphs.core")
    assert logger.name == "densepath.graphs.core"


def test_get_logger_default_name():
    """Test that get_logger without a name returns the package logger."""
    assert get_logger().name == "densepath"


def test_get_logger_caching():
    """Test that get_logger caches loggers."""
    logger1 = get_logger("test_module")
    logger2 = get_logger("test_module")
    assert logger1 is logger2


def test_get_logger_different_modules():
    """Test that different modules get different loggers."""
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_configure_logging():
    """Test configure_logging redirects output to the given stream."""
    stream = StringIO()
    logger = get_logger("test_module")
    try:
        configure_logging(level=logging.DEBUG, stream=stream)
        logger.debug("Debug message")

        output = stream.getvalue()
        assert "Debug message" in output
        assert "[DEBUG] densepath.test_module" in output
    finally:
        configure_logging(level=logging.WARNING)


def test_configure_logging_replaces_handler():
    """Test configure_logging leaves one handler with the requested format."""
    stream = StringIO()
    logger = get_logger("test_module")
    try:
        configure_logging(level="INFO", format_string="%(levelname)s|%(message)s", stream=stream)
        configure_logging(level="INFO", format_string="%(levelname)s|%(message)s", stream=stream)
        logger.info("resized")

        assert len(logger.handlers) == 1
        assert stream.getvalue() == "INFO|resized\n"
    finally:
        configure_logging(level=logging.WARNING)


def test_set_log_level_string():
    """Test that set_log_level accepts string levels."""
    logger = get_logger("test_module")
    try:
        set_log_level("DEBUG")
        assert logger.level == logging.DEBUG

        set_log_level("ERROR")
        assert logger.level == logging.ERROR
    finally:
        set_log_level(logging.WARNING)


def test_logger_does_not_propagate():
    """Test that loggers don't propagate to root logger."""
    logger = get_logger("test_module")
    assert logger.propagate is False


def test_negative_cycle_is_logged(negative_cycle_graph: DenseGraph):
    """Test that the solver reports a negative cycle at WARNING level."""
    stream = StringIO()
    try:
        configure_logging(level=logging.WARNING, stream=stream)
        floyd_warshall(negative_cycle_graph)
        assert "negative cycle detected" in stream.getvalue()
    finally:
        configure_logging(level=logging.WARNING)
