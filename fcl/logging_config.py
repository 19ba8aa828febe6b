"""Centralized logging configuration for FCL scoring."""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


def setup_logging(
    log_dir: Optional[Path] = None,
    level: int = logging.INFO,
    log_to_file: bool = False,
    log_to_console: bool = True,
) -> logging.Logger:
    """
    Configure the 'fcl' logger.

    Console output is kept short ('LEVEL: message'); the optional log file
    gets timestamps and source locations.

    Args:
        log_dir: Directory for log files (default: ./logs)
        level: Logging level (default: INFO)
        log_to_file: Whether to write a timestamped log file (default: False)
        log_to_console: Whether to log to stderr (default: True)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger('fcl')
    logger.setLevel(level)
    logger.handlers = []

    if log_to_file:
        log_dir = log_dir or Path('logs')
        log_dir.mkdir(parents=True, exist_ok=True)

        log_file = log_dir / f'fcl_{datetime.now().strftime("%Y%m%d_%H%M%S")}.log'
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S',
            )
        )
        logger.addHandler(file_handler)

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str = 'fcl') -> logging.Logger:
    """Get a logger in the 'fcl' hierarchy."""
    return logging.getLogger(name)
