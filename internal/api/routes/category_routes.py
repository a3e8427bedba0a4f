"""
Category API Routes.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from core.logger import logger
from internal.api.dependencies import get_category_service
from internal.api.schemas import (
    CategoryResponse,
    CreateCategoryRequest,
    UpdateCategoryRequest,
)
from services.interfaces import ICategoryService

router = APIRouter(prefix="/categories", tags=["Categories"])

_ERROR_RESPONSES = {
    400: {"description": "Validation error - blank name"},
    409: {"description": "Conflict - another category already has this name"},
}


def _not_found(category_id: UUID) -> HTTPException:
    logger.warning(f"API: Category not found: id={category_id}")
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Category not found: {category_id}",
    )


@router.get(
    "",
    response_model=List[CategoryResponse],
    summary="List Categories",
)
async def list_categories(service: ICategoryService = Depends(get_category_service)):
    """Return all categories."""
    categories = await service.get_all()
    logger.info(f"API: Categories listed: count={len(categories)}")
    return [CategoryResponse.model_validate(category) for category in categories]


@router.get(
    "/{category_id}",
    response_model=CategoryResponse,
    summary="Get Category",
    responses={404: {"description": "Category not found"}},
)
async def get_category(
    category_id: UUID, service: ICategoryService = Depends(get_category_service)
):
    """Return a category by ID, or 404."""
    category = await service.get_by_id(category_id)
    if category is None:
        raise _not_found(category_id)
    return CategoryResponse.model_validate(category)


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Category",
    responses=_ERROR_RESPONSES,
)
async def create_category(
    body: CreateCategoryRequest,
    request: Request,
    response: Response,
    service: ICategoryService = Depends(get_category_service),
):
    """
    Create a category.

    **Returns:** the created category, with a `Location` header pointing at it.
    """
    logger.info(f"API: Create category request: name={body.name!r}")
    category = await service.create(name=body.name, description=body.description)
    response.headers["Location"] = str(
        request.url_for("get_category", category_id=str(category.id)).path
    )
    return CategoryResponse.model_validate(category)


@router.put(
    "/{category_id}",
    response_model=CategoryResponse,
    summary="Update Category",
    responses={404: {"description": "Category not found"}, **_ERROR_RESPONSES},
)
async def update_category(
    category_id: UUID,
    body: UpdateCategoryRequest,
    service: ICategoryService = Depends(get_category_service),
):
    """Replace a category's name and description."""
    logger.info(f"API: Update category request: id={category_id}, name={body.name!r}")
    category = await service.update(
        category_id, name=body.name, description=body.description
    )
    if category is None:
        raise _not_found(category_id)
    return CategoryResponse.model_validate(category)


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Category",
    responses={404: {"description": "Category not found"}},
)
async def delete_category(
    category_id: UUID, service: ICategoryService = Depends(get_category_service)
):
    """
    Delete a category.

    Tasks referencing the category keep their `category_id`.
    """
    if not await service.delete(category_id):
        raise _not_found(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
