"""
Configure logging for the sarasara package.
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Union

PACKAGE_LOGGER = "sarasara"

def setup_logger(
    name: str = PACKAGE_LOGGER,
    level: Union[int, str] = logging.INFO,
    log_dir: Optional[str] = None,
    log_to_console: bool = True,
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'
) -> logging.Logger:
    """
    Set up a logger with file and console handlers.

    Child loggers obtained through get_logger() propagate to the logger
    configured here, so calling this once for the package logger is enough.

    Args:
        name: Logger name
        level: Logging level, as a number or a level name such as "DEBUG"
        log_dir: Directory for log files (None to disable file logging)
        log_to_console: Whether to log to console
        log_format: Format string for log messages

    Returns:
        Configured logger
    """
    if isinstance(level, str):
        level_name = level
        level = logging.getLevelName(level_name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level_name}")

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Clear any existing handlers
    logger.handlers.clear()

    formatter = logging.Formatter(log_format)

    # Add file handler if log_dir is specified
    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path / f"{name}.log")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Add console handler if requested
    if log_to_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger

def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
