"""
Repository for categories.
Follows Single Responsibility Principle - only handles category data access.
"""

from typing import Dict, Optional, Set
from uuid import UUID

from core.logger import logger
from domain import Category, normalize_name

from .base_repository import BaseRepository
from .interfaces import ICategoryRepository


class InMemoryCategoryRepository(BaseRepository[Category], ICategoryRepository):
    """
    In-memory category store with a case-insensitive name index.

    ``add``/``update`` do not check names; ``add_unique``/``update_unique``
    perform the name check and the write under the same lock. Plain writes
    can leave two categories under one name, so the index keeps every
    holder.
    """

    def __init__(self):
        super().__init__("category")
        self._names: Dict[str, Set[UUID]] = {}

    def _index(self, category: Category) -> None:
        self._names.setdefault(category.normalized_name, set()).add(category.id)

    def _unindex(self, category_id: UUID) -> None:
        current = self._items.get(category_id)
        if current is None:
            return
        holders = self._names.get(current.normalized_name)
        if holders is not None:
            holders.discard(category_id)
            if not holders:
                del self._names[current.normalized_name]

    def _name_holder(self, category: Category) -> Optional[Category]:
        for holder_id in self._names.get(category.normalized_name, ()):
            if holder_id != category.id:
                return self._copy(self._items[holder_id])
        return None

    def get_by_name(self, name: str) -> Optional[Category]:
        """
        Find category by name, ignoring case and surrounding whitespace.

        Args:
            name: Category name

        Returns:
            Category if found, None otherwise
        """
        with self.lock:
            holders = self._names.get(normalize_name(name))
            if not holders:
                return None
            return self._copy(self._items[next(iter(holders))])

    def add(self, category: Category) -> Category:
        with self.lock:
            self._unindex(category.id)
            stored = super().add(category)
            self._index(category)
        return stored

    def add_unique(self, category: Category) -> Optional[Category]:
        with self.lock:
            holder = self._name_holder(category)
            if holder is not None:
                logger.debug(
                    f"Category name '{category.name}' already held by {holder.id}"
                )
                return holder
            self.add(category)
        return None

    def update(self, category: Category) -> Optional[Category]:
        with self.lock:
            if not self.exists(category.id):
                return None
            self._unindex(category.id)
            updated = super().update(category)
            self._index(category)
        return updated

    def update_unique(self, category: Category) -> Optional[Category]:
        with self.lock:
            if not self.exists(category.id):
                raise KeyError(category.id)
            holder = self._name_holder(category)
            if holder is not None:
                logger.debug(
                    f"Category name '{category.name}' already held by {holder.id}"
                )
                return holder
            self.update(category)
        return None

    def delete(self, category_id: UUID) -> bool:
        with self.lock:
            self._unindex(category_id)
            return super().delete(category_id)
