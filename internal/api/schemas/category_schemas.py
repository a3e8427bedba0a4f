"""
Pydantic schemas for Category API.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class CreateCategoryRequest(BaseModel):
    """Request model for category creation."""

    name: str = Field(default="", description="Category name, unique ignoring case")
    description: str = Field(default="", description="Category description")

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [{"name": "Work", "description": "Work-related tasks"}]
        }
    )


class UpdateCategoryRequest(CreateCategoryRequest):
    """Request model for category update."""


class CategoryResponse(BaseModel):
    """Response model for a category."""

    id: UUID
    name: str
    description: str

    model_config = ConfigDict(from_attributes=True)
