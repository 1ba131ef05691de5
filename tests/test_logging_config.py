"""Tests for logging_config."""

import logging
from logging.handlers import RotatingFileHandler

from logging_config import read_recent_lines, setup_logging


def test_console_only_when_no_log_dir():
    logger = setup_logging("factorial_test_console", log_dir=None)
    assert len(logger.handlers) == 1
    assert not isinstance(logger.handlers[0], RotatingFileHandler)


def test_file_handler_writes_to_log_dir(tmp_path):
    logger = setup_logging("factorial_test_file", log_dir=tmp_path, level="debug")
    assert logger.level == logging.DEBUG

    logger.info("computed 5! = %d", 120)
    for handler in logger.handlers:
        handler.flush()

    lines = read_recent_lines("factorial_test_file", log_dir=tmp_path)
    assert len(lines) == 1
    assert "factorial_test_file - INFO - computed 5! = 120" in lines[0]

    for handler in logger.handlers:
        handler.close()


def test_repeated_setup_does_not_duplicate_handlers(tmp_path):
    setup_logging("factorial_test_repeat", log_dir=tmp_path)
    logger = setup_logging("factorial_test_repeat", log_dir=tmp_path)
    assert len(logger.handlers) == 2
    for handler in logger.handlers:
        handler.close()


def test_read_recent_lines_tail(tmp_path):
    (tmp_path / "svc.log").write_text("".join(f"line {i}\n" for i in range(10)), encoding="utf-8")
    assert read_recent_lines("svc", log_dir=tmp_path, lines=3) == ["line 7\n", "line 8\n", "line 9\n"]


def test_read_recent_lines_missing_file(tmp_path):
    assert read_recent_lines("absent", log_dir=tmp_path) == []
