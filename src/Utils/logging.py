"""
Logging utilities for the file service.

This module sets up the root logger with a rotating log file and console output.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from Configuration import FileServiceConfig


def setup_logging(
    log_dir: str,
    log_level: int = logging.INFO,
    log_file_name: str = FileServiceConfig.DEFAULT_LOG_FILE_NAME,
    max_bytes: int = 10 * 1024 * 1024,  # 10 MB
    backup_count: int = 10
) -> str:
    """
    Set up logging with rotation.

    Args:
        log_dir: The directory to store log files in, created if missing
        log_level: The logging level (default: logging.INFO)
        log_file_name: The name of the log file
        max_bytes: The maximum size of each log file in bytes (default: 10 MB)
        backup_count: The number of rotated files to keep (default: 10)

    Returns:
        The path of the log file
    """
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, log_file_name)

    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    console_formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s"
    )

    file_handler = RotatingFileHandler(
        log_file, maxBytes=max_bytes, backupCount=backup_count, encoding='utf-8'
    )
    file_handler.setFormatter(file_formatter)

    # Console output goes to stderr so command output on stdout stays clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    logging.debug(f"Logging configured with level {logging.getLevelName(log_level)}")
    logging.debug(f"Log file: {log_file}")
    return log_file


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name.

    Args:
        name: The name of the logger

    Returns:
        A logger instance
    """
    return logging.getLogger(name)
