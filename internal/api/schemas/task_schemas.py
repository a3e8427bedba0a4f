"""
Pydantic schemas for Task API.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from domain import TaskPriority, TaskStatus


class CreateTaskRequest(BaseModel):
    """Request model for task creation."""

    title: str = Field(default="", description="Task title (must not be blank)")
    description: str = Field(default="", description="Task description")
    priority: TaskPriority = Field(
        default=TaskPriority.NONE, description="Priority (0=None .. 4=Critical)"
    )
    category_id: Optional[UUID] = Field(
        default=None, description="Optional ID of an existing category"
    )
    due_date: Optional[datetime] = Field(
        default=None, description="Optional due date (naive values are UTC)"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "title": "Quarterly report",
                    "description": "Draft and send to finance",
                    "priority": 3,
                    "category_id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
                    "due_date": "2025-03-31T17:00:00Z",
                }
            ]
        }
    )


class UpdateTaskRequest(CreateTaskRequest):
    """Request model for task update. Replaces every mutable field."""

    status: TaskStatus = Field(default=TaskStatus.PENDING, description="Task status")

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "title": "Quarterly report",
                    "description": "Waiting on numbers",
                    "priority": 4,
                    "status": "IN_PROGRESS",
                    "category_id": None,
                    "due_date": "2025-04-02T17:00:00Z",
                }
            ]
        }
    )


class TaskResponse(BaseModel):
    """Response model for a task."""

    id: UUID
    title: str
    description: str
    priority: TaskPriority
    status: TaskStatus
    category_id: Optional[UUID] = None
    created_at: datetime
    due_date: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
