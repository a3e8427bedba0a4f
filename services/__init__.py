"""
Service layer implementing business logic.
Follows Service Layer Pattern and Single Responsibility Principle.
"""

from .category_service import CategoryService
from .task_service import TaskService

__all__ = [
    "CategoryService",
    "TaskService",
]
