"""
Utilities package for console and debug-file logging.
"""

from .logger import StatLogger

__all__ = [
    'StatLogger'
]
