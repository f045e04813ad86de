"""Logging and error reporting shared by all add-in modules."""

from __future__ import annotations

import logging
import traceback

from ... import config

_logger = logging.getLogger(config.ADDIN_NAME)


def log(message: str, level: int = logging.INFO, force_console: bool = False) -> None:
    """Write a message to the add-in log.

    Debug messages are dropped unless DEBUG is on in config. Errors and
    ``force_console`` messages are always emitted.

    Args:
        message: Text to log
        level: A ``logging`` level
        force_console: Emit even debug-level messages
    """
    if level < logging.INFO and not (config.DEBUG or force_console):
        return
    _logger.log(max(level, logging.INFO) if force_console else level, message)


def handle_error(name: str) -> None:
    """Log the exception currently being handled with its traceback.

    Call from an ``except`` block whose error must not abort the
    update cycle.

    Args:
        name: Where the error happened, shown in the log header
    """
    log('===== Error =====', logging.ERROR)
    log(f'{name}\n{traceback.format_exc()}', logging.ERROR)
