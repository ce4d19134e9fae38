"""Logging utility for geodirect"""

__all__ = ['LOGGER', 'warn_once']

import logging
from typing import Set

LOG_FORMAT = '[%(levelname)s] %(name)s: %(message)s'


def _package_logger(name: str) -> logging.Logger:
    """Creates the package logger, writing WARNING and above to stderr"""
    logger = logging.getLogger(name)
    logger.setLevel(logging.WARNING)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger


LOGGER = _package_logger('geodirect')

_WARNINGS: Set[str] = set()


def warn_once(warning: str):
    """Logs a warning on the package logger, unless the same message was already logged"""
    if warning in _WARNINGS:
        return

    LOGGER.warning(warning)
    _WARNINGS.add(warning)
