"""
Internal package.
Contains API routes, schemas, dependencies and error handlers.
"""

from . import api

__all__ = [
    "api",
]
