"""Utility functions"""

from .log import setup_logging, DEFAULT_LOG_FORMAT

__all__ = [
    'setup_logging',
    'DEFAULT_LOG_FORMAT',
]
