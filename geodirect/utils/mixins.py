"""Utility mixin classes"""

__all__ = ['LoggingMixin']

import logging
from typing import Optional


class LoggingMixin:  # pylint: disable=too-few-public-methods
    """
    Attaches a logger named after the concrete class (``<module>.<class>``), so
    records emitted by package classes propagate to the ``geodirect`` logger.
    """
    logger: logging.Logger

    def __init__(self, logstr: Optional[str] = None):
        _class = self.__class__
        name = f'{_class.__module__}.{_class.__name__}'
        if logstr:
            name += f'.{logstr}'

        self.logger = logging.getLogger(name)
