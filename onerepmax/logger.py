"""Logging for the onerepmax package.

The package logger is configured once at import from ONEREPMAX_LOG_LEVEL and
ONEREPMAX_LOG_FILE. A bad level there raises ValueError naming the variable.
"""
import logging
import sys
from functools import wraps
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

from .config import log_file, log_level

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _resolve_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def _console_handler(formatter: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    return handler


def _file_handler(path: str, formatter: logging.Formatter) -> logging.Handler:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    # 5MB per file, three backups
    handler = RotatingFileHandler(path, maxBytes=5_000_000, backupCount=3, encoding='utf-8')
    handler.setFormatter(formatter)
    return handler


def setup_logger(
    name: str = "onerepmax",
    level: Union[str, int] = "INFO",
    log_file: Optional[str] = None,
    console: bool = True
) -> logging.Logger:
    """Configure and return a logger, replacing any handlers it already has.

    Args:
        name: Logger name (default: "onerepmax")
        level: Level name or number; unknown names raise ValueError
        log_file: Rotating log file path. If None, nothing is written to disk.
        console: Whether to log to stdout (default: True)

    Example:
        >>> logger = setup_logger(level="DEBUG", log_file="logs/onerepmax.log")
    """
    logger = logging.getLogger(name)
    logger.setLevel(_resolve_level(level))
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    if console:
        logger.addHandler(_console_handler(formatter))
    if log_file:
        logger.addHandler(_file_handler(log_file, formatter))
    return logger


logger = setup_logger(level=log_level(), log_file=log_file())


def log_function_call(func):
    """Decorator logging estimator calls at DEBUG and exceptions at ERROR.

    Messages use lazy %-formatting so nothing is rendered while DEBUG is off.
    Exceptions are re-raised unchanged.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        func_name = func.__name__
        logger.debug("Calling %s with args=%r, kwargs=%r", func_name, args, kwargs)
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.error("%s raised %s: %s", func_name, type(e).__name__, e)
            raise
        logger.debug("%s returned %r", func_name, result)
        return result

    return wrapper
