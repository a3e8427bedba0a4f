"""
Domain layer: entities and enumerations.
"""

from .entities import (
    Category,
    Task,
    TaskPriority,
    TaskStatus,
    normalize_name,
    utcnow,
)

__all__ = [
    "Category",
    "Task",
    "TaskPriority",
    "TaskStatus",
    "normalize_name",
    "utcnow",
]
