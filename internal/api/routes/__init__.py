"""
API Routes.
"""

from .category_routes import router as category_router
from .health_routes import router as health_router
from .task_routes import router as task_router

__all__ = [
    "category_router",
    "health_router",
    "task_router",
]
