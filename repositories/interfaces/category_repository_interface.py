"""
Interface for Category Repository.
Defines the contract that all category repositories must implement.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from domain import Category


class ICategoryRepository(ABC):
    """Interface for category repository operations."""

    @abstractmethod
    def get(self, category_id: UUID) -> Optional[Category]:
        """
        Find a category by ID.

        Args:
            category_id: ID of the category

        Returns:
            Optional[Category]: Category if found, None otherwise
        """
        pass

    @abstractmethod
    def get_all(self) -> List[Category]:
        """Get all stored categories."""
        pass

    @abstractmethod
    def get_by_name(self, name: str) -> Optional[Category]:
        """
        Find a category by name, ignoring case.

        Args:
            name: Category name

        Returns:
            Optional[Category]: Category if found, None otherwise
        """
        pass

    @abstractmethod
    def add(self, category: Category) -> Category:
        """Store a category, overwriting any entry with the same ID."""
        pass

    @abstractmethod
    def add_unique(self, category: Category) -> Optional[Category]:
        """
        Store a category unless its name is already taken.

        Check and insert happen atomically.

        Args:
            category: Category to store

        Returns:
            Optional[Category]: The category already holding the name (and
            nothing is stored), or None when the category was stored
        """
        pass

    @abstractmethod
    def update(self, category: Category) -> Optional[Category]:
        """Replace an existing category. None if no category had that ID."""
        pass

    @abstractmethod
    def update_unique(self, category: Category) -> Optional[Category]:
        """
        Replace an existing category unless another one holds its name.

        Args:
            category: Category carrying the ID to replace

        Returns:
            Optional[Category]: The other category holding the name (and
            nothing is changed), or None when the update was applied

        Raises:
            KeyError: If no category has that ID
        """
        pass

    @abstractmethod
    def delete(self, category_id: UUID) -> bool:
        """Delete a category. True if one was removed."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored categories."""
        pass
