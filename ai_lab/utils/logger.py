# ai_lab/utils/logger.py

import logging
import sys
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str, level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    Create or retrieve a logger with optional file logging.

    Args:
        name (str): Name of the logger.
        level (str, optional): Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        log_file (str, optional): Path to log file. If None, logs only to console.

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:  # Avoid adding duplicate handlers
        numeric_level = getattr(logging, str(level).upper(), logging.INFO)
        logger.setLevel(numeric_level)

        formatter = logging.Formatter(LOG_FORMAT)
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if log_file:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger


def configure_package_logging(level: str, log_file: Optional[str] = None) -> None:
    """
    Apply the configured level (and optional log file) to every ai_lab logger created so far.

    Module loggers are created at import time with the default level, so the
    CLI calls this once the YAML config is loaded.

    Args:
        level (str): Logging level name. Unknown names fall back to INFO.
        log_file (str, optional): Extra file destination for all ai_lab loggers.
    """
    numeric_level = getattr(logging, str(level).upper(), logging.INFO)
    file_handler = None
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    for name, logger in list(logging.root.manager.loggerDict.items()):
        if not (name.startswith("ai_lab") and isinstance(logger, logging.Logger)):
            continue
        logger.setLevel(numeric_level)
        if file_handler is not None and logger.handlers:
            logger.addHandler(file_handler)
