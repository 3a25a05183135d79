"""
Logging Utilities
=================

The loader only logs through module loggers under ``yaml_env_config``.
setup_logging() attaches handlers to that package logger, so an application
can see what was merged or skipped without touching its own root logging.
A loaded configuration can be passed straight in; its `logging` section
(level, file, max_file_size, backup_count) takes precedence over the arguments.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

PACKAGE_LOGGER_NAME = "yaml_env_config"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

_SIZE_UNITS = {'KB': 1024, 'MB': 1024 ** 2, 'GB': 1024 ** 3}

# Handlers added by setup_logging, replaced on each call
_installed_handlers: List[logging.Handler] = []


def setup_logging(
    config: Optional[Dict[str, Any]] = None,
    level: Union[str, int] = "INFO",
    log_file: Optional[str] = None,
    max_file_size: str = "10MB",
    backup_count: int = 5,
    propagate: bool = False
) -> logging.Logger:
    """
    Send loader log records to stderr and, optionally, a rotating file.

    Calling it again replaces the handlers of the previous call; handlers
    added by the application are left alone.

    Args:
        config: Loaded configuration; its `logging` section overrides the other args
        level: Level name or number for the package logger
        log_file: Log file path, parent directories are created
        max_file_size: Rotation size (e.g. '10MB', '512KB' or plain bytes)
        backup_count: Number of rotated files to keep
        propagate: Whether records also reach the root logger

    Returns:
        The package logger
    """
    section = (config or {}).get('logging') or {}
    level = section.get('level', level)
    log_file = section.get('file', log_file)
    max_file_size = section.get('max_file_size', max_file_size)
    backup_count = section.get('backup_count', backup_count)

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(_resolve_level(level))
    logger.propagate = propagate

    while _installed_handlers:
        handler = _installed_handlers.pop()
        logger.removeHandler(handler)
        handler.close()

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=_parse_size(max_file_size),
            backupCount=backup_count,
            encoding='utf-8'
        ))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        _installed_handlers.append(handler)

    logger.debug(f"Loader logging at {logging.getLevelName(logger.level)}, file: {log_file}")
    return logger


def _resolve_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def _parse_size(size: Union[str, int]) -> int:
    """Parse '10MB' style sizes to bytes; bare numbers are bytes."""
    text = str(size).upper().strip()
    unit = text[-2:]
    if unit in _SIZE_UNITS:
        return int(float(text[:-2]) * _SIZE_UNITS[unit])
    return int(text)


def get_logger(name: str) -> logging.Logger:
    """Get a logger below the package logger (``yaml_env_config.<name>``)."""
    if name == PACKAGE_LOGGER_NAME or name.startswith(f"{PACKAGE_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER_NAME}.{name}")
