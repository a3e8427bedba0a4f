"""
Common API schemas shared across different endpoints.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class StandardResponse(BaseModel):
    """
    Standard API response envelope.

    - error_code: 0 = success, 1 = error
    - message: Success or error message
    - data: Response data (optional)
    """

    error_code: int = 0
    message: str
    data: Optional[Any] = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "error_code": 0,
                    "message": "Service is healthy",
                    "data": {"status": "healthy"},
                },
                {
                    "error_code": 1,
                    "message": "A category named 'Work' already exists",
                    "data": {"code": "CONFLICT"},
                },
            ]
        }
    )


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
    service: str
    version: str
    tasks: int
    categories: int

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "status": "healthy",
                    "service": "CleanTasks API",
                    "version": "1.0.0",
                    "tasks": 12,
                    "categories": 3,
                }
            ]
        }
    )
