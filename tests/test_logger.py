"""Tests for the logging setup."""

import logging
import os
from logging.handlers import RotatingFileHandler

from src.logger import configure_logging


def _file_handlers(root_logger):
    return [h for h in root_logger.handlers if isinstance(h, RotatingFileHandler)]


def test_configure_logging_attaches_rotating_file_handler(tmp_path):
    logs_dir = tmp_path / "logs"

    root_logger = configure_logging(str(logs_dir), "INFO")

    file_handlers = _file_handlers(root_logger)
    assert len(file_handlers) == 1
    handler = file_handlers[0]
    assert handler.baseFilename == str(logs_dir / "app.log")
    assert handler.maxBytes == 1024 * 1024 * 5
    assert handler.backupCount == 5
    assert os.path.isdir(logs_dir)
    assert root_logger.level == logging.INFO


def test_configure_logging_replaces_default_console_handler(tmp_path):
    root_logger = logging.getLogger()
    fallback = logging.StreamHandler()
    fallback._door_default = True
    root_logger.addHandler(fallback)

    configure_logging(str(tmp_path / "logs"), "INFO")

    assert fallback not in root_logger.handlers


def test_configure_logging_twice_does_not_duplicate_handlers(tmp_path):
    configure_logging(str(tmp_path / "first"), "INFO")
    root_logger = configure_logging(str(tmp_path / "second"), "DEBUG")

    file_handlers = _file_handlers(root_logger)
    assert [h.baseFilename for h in file_handlers] == [
        str(tmp_path / "second" / "app.log")
    ]
    configured = [h for h in root_logger.handlers if getattr(h, "_door_configured", False)]
    assert len(configured) == 2
    assert root_logger.level == logging.DEBUG


def test_log_records_reach_the_file(tmp_path):
    logs_dir = tmp_path / "logs"
    configure_logging(str(logs_dir), "INFO")

    logging.getLogger("door.test").info("auto-close fired")

    assert "auto-close fired" in (logs_dir / "app.log").read_text()
