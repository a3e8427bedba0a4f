"""
Service for category business logic.
Implements Service Layer Pattern - validates input and orchestrates the repository.
"""

from typing import List, Optional
from uuid import UUID

from core.exceptions import ConflictError, ValidationError
from core.logger import format_exception_short, logger
from domain import Category
from repositories.interfaces import ICategoryRepository

from .interfaces import ICategoryService


def _require_name(name: Optional[str]) -> None:
    if name is None or not name.strip():
        raise ValidationError("Category name must not be empty", field="name")


class CategoryService(ICategoryService):
    """
    Service handling category business logic.

    Enforces non-blank names and case-insensitive name uniqueness. The
    uniqueness check and the write are a single atomic repository call.
    """

    def __init__(self, category_repository: ICategoryRepository):
        self.repository = category_repository

    async def get_by_id(self, category_id: UUID) -> Optional[Category]:
        category = self.repository.get(category_id)
        if category is None:
            logger.debug(f"Category not found: id={category_id}")
        return category

    async def get_all(self) -> List[Category]:
        return self.repository.get_all()

    async def create(self, name: str, description: str = "") -> Category:
        try:
            _require_name(name)

            category = Category(name=name, description=description or "")
            holder = self.repository.add_unique(category)
            if holder is not None:
                raise ConflictError(f"A category named '{holder.name}' already exists")

            logger.info(f"Category created: id={category.id}, name={category.name}")
            return category

        except (ValidationError, ConflictError) as e:
            logger.warning(f"Category creation rejected: {e}")
            raise

        except Exception as e:
            logger.error(format_exception_short(e, "Failed to create category"))
            raise

    async def update(
        self, category_id: UUID, name: str, description: str = ""
    ) -> Optional[Category]:
        try:
            category = self.repository.get(category_id)
            if category is None:
                logger.warning(f"Category not found for update: id={category_id}")
                return None

            _require_name(name)

            category.name = name
            category.description = description or ""
            try:
                holder = self.repository.update_unique(category)
            except KeyError:
                # Deleted between read and write
                logger.warning(f"Category vanished during update: id={category_id}")
                return None

            if holder is not None:
                raise ConflictError(f"A category named '{holder.name}' already exists")

            logger.info(f"Category updated: id={category.id}, name={category.name}")
            return category

        except (ValidationError, ConflictError) as e:
            logger.warning(f"Category update rejected: id={category_id}: {e}")
            raise

        except Exception as e:
            logger.error(format_exception_short(e, f"Failed to update category {category_id}"))
            raise

    async def delete(self, category_id: UUID) -> bool:
        deleted = self.repository.delete(category_id)
        if deleted:
            logger.info(f"Category deleted: id={category_id}")
        else:
            logger.warning(f"Category not found for delete: id={category_id}")
        return deleted
