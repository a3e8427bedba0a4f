"""
Service Dependencies.

Repositories live in the application's container for the process lifetime;
services are stateless and built per request.
"""

from fastapi import Depends, Request

from core.container import Container
from repositories.interfaces import ICategoryRepository, ITaskRepository
from services import CategoryService, TaskService
from services.interfaces import ICategoryService, ITaskService


def get_container(request: Request) -> Container:
    """Get the container attached to the running application."""
    return request.app.state.container


def get_category_service(container: Container = Depends(get_container)) -> ICategoryService:
    """Get Category Service instance."""
    return CategoryService(container.resolve(ICategoryRepository))


def get_task_service(container: Container = Depends(get_container)) -> ITaskService:
    """Get Task Service instance."""
    return TaskService(
        container.resolve(ITaskRepository),
        container.resolve(ICategoryRepository),
    )
