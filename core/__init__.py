"""
Core module containing configuration, logging, errors and wiring.
"""

from .config import Settings, get_settings
from .exceptions import CleanTasksError, ConflictError, ValidationError
from .logger import format_exception_short, logger

__all__ = [
    "Settings",
    "get_settings",
    "logger",
    "format_exception_short",
    "CleanTasksError",
    "ValidationError",
    "ConflictError",
]
