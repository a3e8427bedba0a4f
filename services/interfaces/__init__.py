"""
Service Interfaces.
"""

from .category_service_interface import ICategoryService
from .task_service_interface import ITaskService

__all__ = [
    "ICategoryService",
    "ITaskService",
]
