"""
Logging configuration for the playoff bracket engine.
"""
import logging
import sys
from pathlib import Path
from typing import Optional

import config


def setup_logging(
    name: str = "playoff_bracket",
    level: Optional[str] = None,
    log_file: Optional[Path] = None
) -> logging.Logger:
    """
    Set up logging for the CLI and the engine modules.

    Args:
        name: Logger name. The root logger is configured when empty.
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config.LOG_LEVEL
        log_file: Optional file path for log output

    Returns:
        Configured logger instance
    """
    if level is None:
        level = config.LOG_LEVEL

    logger = logging.getLogger(name or None)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Remove existing handlers to avoid duplicates
    logger.handlers = []

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
