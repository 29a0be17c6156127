"""
Utils module for cellquill.
"""

from .logger import get_logger, resolve_level, setup_logging

__all__ = [
    "get_logger",
    "resolve_level",
    "setup_logging",
]
