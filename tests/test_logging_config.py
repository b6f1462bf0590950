"""Tests for logging_config.setup_logging."""

import logging
import os
from logging.handlers import RotatingFileHandler

from logging_config import setup_logging


def _close(logger):
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []


def test_creates_service_log_file(tmp_path):
    """The service writes to <log_dir>/<service>.log."""
    logger = setup_logging("factorial_test_service", tmp_path)
    try:
        logger.info("computed 5!")
        for handler in logger.handlers:
            handler.flush()

        content = (tmp_path / "factorial_test_service.log").read_text(encoding="utf-8")
        assert "computed 5!" in content
        assert "factorial_test_service - INFO" in content
    finally:
        _close(logger)


def test_repeated_setup_does_not_stack_handlers(tmp_path):
    """Calling setup twice keeps one file and one console handler."""
    setup_logging("factorial_repeat_service", tmp_path)
    logger = setup_logging("factorial_repeat_service", tmp_path)
    try:
        assert len(logger.handlers) == 2
        assert sum(isinstance(h, RotatingFileHandler) for h in logger.handlers) == 1
    finally:
        _close(logger)


def test_all_log_handler_added_once(tmp_path):
    """The shared all.log handler is attached to the root logger only once."""
    first = setup_logging("factorial_one", tmp_path)
    second = setup_logging("factorial_two", tmp_path)
    root_logger = logging.getLogger()
    all_log = os.path.abspath(tmp_path / "all.log")
    try:
        matching = [
            h for h in root_logger.handlers
            if isinstance(h, RotatingFileHandler) and h.baseFilename == str(all_log)
        ]
        assert len(matching) == 1
    finally:
        _close(first)
        _close(second)
        for handler in list(root_logger.handlers):
            if isinstance(handler, RotatingFileHandler) and handler.baseFilename == str(all_log):
                root_logger.removeHandler(handler)
                handler.close()
