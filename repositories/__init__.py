"""
Repository layer for data access.
Implements Repository Pattern and follows Single Responsibility Principle.
"""

from .base_repository import BaseRepository
from .category_repository import InMemoryCategoryRepository
from .task_repository import InMemoryTaskRepository

__all__ = [
    "BaseRepository",
    "InMemoryCategoryRepository",
    "InMemoryTaskRepository",
]
