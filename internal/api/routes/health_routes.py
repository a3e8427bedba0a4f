"""
Health Check API Routes.
"""

from fastapi import APIRouter, Depends

from core import get_settings
from core.container import Container
from internal.api.dependencies import get_container
from internal.api.schemas import HealthResponse, StandardResponse
from internal.api.utils import success_response
from repositories.interfaces import ICategoryRepository, ITaskRepository

router = APIRouter(tags=["Health"])


@router.get(
    "/",
    response_model=StandardResponse,
    summary="Root Endpoint",
    description="Get basic API information",
    operation_id="get_root",
)
async def root():
    """
    Root endpoint.

    Returns service name, version, and current status.
    """
    settings = get_settings()
    return success_response(
        message="API service is running",
        data={
            "service": settings.app_name,
            "version": settings.app_version,
            "status": "running",
        },
    )


@router.get(
    "/health",
    response_model=StandardResponse,
    summary="Health Check",
    description="Check service health",
    operation_id="health_check",
)
async def health_check(container: Container = Depends(get_container)):
    """
    Health check endpoint.

    **Returns:**
    - Overall health status (healthy)
    - Service name and version
    - Number of stored tasks and categories
    """
    settings = get_settings()

    health_data = HealthResponse(
        status="healthy",
        service=settings.app_name,
        version=settings.app_version,
        tasks=container.resolve(ITaskRepository).count(),
        categories=container.resolve(ICategoryRepository).count(),
    )

    return success_response(message="Service is healthy", data=health_data.model_dump())
