"""
Interface for Category Service.
Defines the contract that all category services must implement.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from domain import Category


class ICategoryService(ABC):
    """Interface for category service operations."""

    @abstractmethod
    async def get_by_id(self, category_id: UUID) -> Optional[Category]:
        """
        Get category by ID.

        Args:
            category_id: ID of the category

        Returns:
            Optional[Category]: Category if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_all(self) -> List[Category]:
        """Get all categories."""
        pass

    @abstractmethod
    async def create(self, name: str, description: str = "") -> Category:
        """
        Create a new category.

        Args:
            name: Category name, unique ignoring case
            description: Optional description

        Returns:
            Category: Created category

        Raises:
            ValidationError: If name is blank
            ConflictError: If another category already has the name
        """
        pass

    @abstractmethod
    async def update(
        self, category_id: UUID, name: str, description: str = ""
    ) -> Optional[Category]:
        """
        Replace a category's name and description.

        Args:
            category_id: ID of the category
            name: New name
            description: New description

        Returns:
            Optional[Category]: Updated category, None if not found

        Raises:
            ValidationError: If name is blank
            ConflictError: If a different category already has the name
        """
        pass

    @abstractmethod
    async def delete(self, category_id: UUID) -> bool:
        """
        Delete a category. Tasks referencing it are left untouched.

        Returns:
            bool: True if the category existed
        """
        pass
