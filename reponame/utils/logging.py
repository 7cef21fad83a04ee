"""
Logging for reponame.

All package loggers hang off the ``reponame`` logger, which owns its own
handlers and does not propagate to the root logger. Its level comes from
an explicit argument, then ``$REPONAME_LOG_LEVEL``, then INFO.
"""

import logging
import os
from typing import List, Optional

from .constants import DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL, LOG_FORMAT

ROOT_LOGGER_NAME = "reponame"


def resolve_level(level: Optional[str] = None) -> int:
    """
    Turn a level name into a logging level number.

    Unknown names, and names of ``logging`` attributes that are not
    levels, resolve to INFO.
    """
    if level is None:
        level = os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _build_handlers(log_level: int, log_file: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    (Re)configure the ``reponame`` logger.

    Existing handlers are closed and replaced, so repeated calls never
    duplicate output.

    Args:
        level: Level name such as DEBUG or WARNING
        log_file: Also write records to this file
    """
    log_level = resolve_level(level)
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(log_level)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    for handler in _build_handlers(log_level, log_file):
        package_logger.addHandler(handler)

    package_logger.propagate = False


def configure_logging(config=None) -> None:
    """
    Apply the ``logging`` section of a configuration.

    Args:
        config: A ``ReponameConfig``; defaults to the global configuration
    """
    if config is None:
        from .config import get_config

        config = get_config()
    section = config.logging
    setup_logging(
        level=section.level,
        log_file=section.log_file if section.enable_file_logging else None,
    )


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` under the ``reponame`` hierarchy."""
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


setup_logging()
