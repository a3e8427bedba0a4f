"""
API Dependencies.
"""

from .service_dependencies import (
    get_category_service,
    get_container,
    get_task_service,
)

__all__ = [
    "get_container",
    "get_category_service",
    "get_task_service",
]
