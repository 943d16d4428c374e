#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Logging setup for the html-to-text command line.

The library itself only creates module loggers under ``html_to_text`` and
never installs handlers. ``configure_logging`` attaches console and optional
file handlers to that package logger, replacing the ones it attached on an
earlier call, so records from other libraries keep their own configuration.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "html_to_text"

CONSOLE_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# set on handlers installed here so a later call can find and replace them
_HANDLER_MARK = "_html_to_text_cli"


def resolve_level(log_level: int | str) -> int:
    """Map a level name such as ``"debug"`` to its number, defaulting to INFO."""
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def _drop_installed_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            logger.removeHandler(handler)
            handler.close()


def _install(logger: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_MARK, True)
    logger.addHandler(handler)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Attach command-line handlers to the ``html_to_text`` logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g. ``"INFO"``)
    log_file : str, optional
        Path of a file that receives a copy of the log output
    trace_mode : bool, default False
        Include timestamps and logger names in each record
    stream : TextIO, optional
        Console stream, ``sys.stderr`` when omitted

    Returns
    -------
    logging.Logger
        The configured package logger

    Notes
    -----
    A log file that cannot be opened is reported as a warning on the console
    and otherwise ignored.

    """
    level = resolve_level(log_level)
    logger = logging.getLogger(PACKAGE_LOGGER)
    _drop_installed_handlers(logger)
    logger.setLevel(level)

    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(CONSOLE_FORMAT)

    _install(logger, logging.StreamHandler(stream if stream is not None else sys.stderr), level, formatter)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as e:
            logger.warning("Could not open log file %s: %s", log_file, e)
        else:
            _install(logger, file_handler, level, formatter)
            logger.debug("Writing log to %s", log_file)

    return logger
