"""
This module provides the logging setup for the door status service.

When the app in api.py starts (its lifespan, under `python api.py` or
`uvicorn api:app`), configure_logging() attaches a rotating file handler
(logs/app.log) and a console handler to the root logger. Modules that
import `logger` from here then share that setup.

If a module using this logger is imported where api.py has not configured
global logging (the CLI client, tests), setup_logger() installs a default
console handler so log output stays visible.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from src import config

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(pathname)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(logs_dir=config.LOGS_DIR, level=config.LOG_LEVEL):
    # Create logs directory if it doesn't exist
    if not os.path.exists(logs_dir):
        os.makedirs(logs_dir)

    log_formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    log_file = os.path.join(logs_dir, "app.log")

    # File Handler
    file_handler = RotatingFileHandler(
        log_file, maxBytes=1024 * 1024 * 5, backupCount=5
    )
    file_handler.setFormatter(log_formatter)
    file_handler.setLevel(level)

    # Console Handler
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(log_formatter)
    console_handler.setLevel(level)

    file_handler._door_configured = True
    console_handler._door_configured = True

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    # Drop the fallback console handler installed by setup_logger() and any
    # handlers from an earlier configure_logging() call
    for handler in list(root_logger.handlers):
        if getattr(handler, "_door_default", False) or getattr(
            handler, "_door_configured", False
        ):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)
    return root_logger


def setup_logger():
    logger = logging.getLogger()  # Get root logger

    # Only configure if no handlers are present, to avoid overriding api.py setup
    if not logger.hasHandlers():
        logger.setLevel(config.LOG_LEVEL)

        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        console_handler._door_default = True
        logger.addHandler(console_handler)
        logger.debug(
            "Default console logging configured by src.logger because no handlers were present."
        )

    return logger


logger = setup_logger()
