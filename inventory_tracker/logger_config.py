# inventory_tracker/logger_config.py

import logging
import os
from logging.handlers import RotatingFileHandler

from inventory_tracker.core.config import settings

LOG_FORMAT = "%(asctime)s.%(msecs)03d - %(filename)s - %(funcName)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def setup_logger(name: str, level: str = "DEBUG", log_file: str = "") -> logging.Logger:
    """Console logging always; a rotating file as well when ``log_file`` is set."""
    app_logger = logging.getLogger(name)
    app_logger.setLevel(level.upper())

    # Importing twice must not double every line
    if app_logger.handlers:
        return app_logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=3)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(logging.INFO)
        app_logger.addHandler(file_handler)

    app_logger.propagate = False
    return app_logger


logger = setup_logger(
    os.getenv("APP_LOGGER_NAME", "inventory_tracker"),
    level=settings.LOG_LEVEL,
    log_file=settings.LOG_FILE,
)
