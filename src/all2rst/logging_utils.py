#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Logging setup for the all2rst command line tool.

Library code only creates module loggers (``logging.getLogger(__name__)``)
and never installs handlers. The CLI calls :func:`configure_logging` once to
attach a console handler, and optionally a file handler, to the ``all2rst``
package logger.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "all2rst"

DEFAULT_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# marks handlers installed here so reconfiguring replaces only those
_HANDLER_TAG = "_all2rst_handler"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level!r}")
    return level


def _tagged(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_TAG, True)
    return handler


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Attach console and file handlers to the ``all2rst`` logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g., "INFO").
    log_file : str, optional
        Also append records to this file.
    trace_mode : bool, default False
        Include timestamps and logger names in every record.

    Returns
    -------
    logging.Logger
        The configured package logger.

    Raises
    ------
    ValueError
        If ``log_level`` names no logging level.

    """
    level = _resolve_level(log_level)
    formatter = (
        logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT) if trace_mode else logging.Formatter(DEFAULT_FORMAT)
    )

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in [h for h in logger.handlers if getattr(h, _HANDLER_TAG, False)]:
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(level)
    logger.propagate = False
    logger.addHandler(_tagged(logging.StreamHandler(sys.stderr), level, formatter))

    if log_file:
        try:
            logger.addHandler(_tagged(logging.FileHandler(log_file, mode="a", encoding="utf-8"), level, formatter))
        except OSError as exc:
            logger.warning(f"Could not open log file {log_file}: {exc}")
        else:
            logger.debug(f"Logging to file: {log_file}")

    return logger
