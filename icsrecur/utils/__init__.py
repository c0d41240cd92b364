"""Utility functions and helpers package."""

from .logging import get_log_level, get_logger, setup_logging

__all__ = [
    "get_log_level",
    "get_logger",
    "setup_logging",
]
