"""Logging setup for applications embedding rdoc2html.

Library modules only create loggers under the ``rdoc2html`` namespace and
never install handlers themselves. ``configure_logging`` attaches handlers to
that namespace alone, so an application's root logger is left untouched.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "rdoc2html"

# Marks handlers installed here so a later call can replace them
_HANDLER_FLAG = "_rdoc2html_handler"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    stream: Optional[TextIO] = None,
    propagate: bool = False,
) -> logging.Logger:
    """Route rdoc2html log records to a stream and, optionally, a file.

    Handlers installed by an earlier call are closed and replaced. Handlers
    added to the package logger by anyone else are kept.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g., "DEBUG"). Unknown names
        fall back to INFO.
    log_file : str, optional
        Path of a file to tee log output to. A file that cannot be opened is
        reported as a warning and otherwise ignored.
    trace_mode : bool, default False
        When true, emit timestamps and logger names, e.g.
        ``rdoc2html.renderers._list_stack``, for debugging list handling.
    stream : TextIO, optional
        Console stream; defaults to ``sys.stderr``.
    propagate : bool, default False
        Whether records also reach the root logger's handlers.

    Returns
    -------
    logging.Logger
        The configured ``rdoc2html`` logger.

    """
    resolved_level = _resolve_level(log_level)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(resolved_level)
    package_logger.propagate = propagate
    for handler in list(package_logger.handlers):
        if getattr(handler, _HANDLER_FLAG, False):
            package_logger.removeHandler(handler)
            handler.close()

    format_str = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s" if trace_mode else "%(levelname)s: %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S" if trace_mode else None
    formatter = logging.Formatter(format_str, datefmt=date_format)

    handlers: list[logging.Handler] = [logging.StreamHandler(stream if stream is not None else sys.stderr)]
    file_error: Optional[OSError] = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            file_error = exc

    for handler in handlers:
        setattr(handler, _HANDLER_FLAG, True)
        handler.setLevel(resolved_level)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    if file_error is not None:
        package_logger.warning("Could not create log file %s: %s", log_file, file_error)
    elif log_file:
        package_logger.info("Logging to file: %s", log_file)

    return package_logger
