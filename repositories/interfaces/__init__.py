"""
Repository Interfaces.
"""

from .category_repository_interface import ICategoryRepository
from .task_repository_interface import ITaskRepository

__all__ = [
    "ICategoryRepository",
    "ITaskRepository",
]
