"""
Logging Configuration

Attaches handlers to the 'composedoc' logger namespace according to the
editor settings. Library modules only create loggers; this is called once
by the application entry point.
"""

import logging
import sys
from typing import List, Optional, TextIO, Union

from .config import EditorSettings

PACKAGE_LOGGER = "composedoc"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"

# Marks handlers installed here, so reconfiguring leaves foreign handlers alone
_HANDLER_TAG = "_composedoc_handler"


def resolve_level(level: Union[str, int]) -> int:
    """
    Turn a level name or number into a logging level.

    Raises:
        ValueError: if the name is not a known logging level
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def _build_handlers(settings: EditorSettings, stream: TextIO) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(stream)]
    if settings.log_file:
        handlers.append(logging.FileHandler(settings.log_file, mode='w', encoding='utf-8'))
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_TAG, True)
    return handlers


def setup_logging(settings: Optional[EditorSettings] = None,
                  stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Configure the package logger from editor settings.

    Calling it again replaces the handlers of the previous call.

    Args:
        settings: Supplies log_level and log_file; defaults if omitted
        stream: Console stream, stdout if omitted

    Returns:
        The configured 'composedoc' logger
    """
    settings = settings or EditorSettings()
    level = resolve_level(settings.log_level)
    logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            logger.removeHandler(handler)
            handler.close()

    logger.setLevel(level)
    for handler in _build_handlers(settings, stream or sys.stdout):
        logger.addHandler(handler)

    target = f" and {settings.log_file}" if settings.log_file else ""
    logger.info(f"Logging at {logging.getLevelName(level)} to console{target}")
    return logger
