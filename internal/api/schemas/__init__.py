"""
API Schemas (Request/Response Models).
"""

from .category_schemas import (
    CategoryResponse,
    CreateCategoryRequest,
    UpdateCategoryRequest,
)
from .common_schemas import HealthResponse, StandardResponse
from .task_schemas import CreateTaskRequest, TaskResponse, UpdateTaskRequest

__all__ = [
    # Common schemas
    "StandardResponse",
    "HealthResponse",
    # Category schemas
    "CreateCategoryRequest",
    "UpdateCategoryRequest",
    "CategoryResponse",
    # Task schemas
    "CreateTaskRequest",
    "UpdateTaskRequest",
    "TaskResponse",
]
