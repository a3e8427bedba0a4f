"""
Base repository with common CRUD operations over an in-memory store.
Follows Single Responsibility Principle - only handles data access.
"""

import dataclasses
import threading
from abc import ABC
from typing import Callable, Dict, Generic, List, Optional, TypeVar
from uuid import UUID

from core.logger import logger

T = TypeVar("T")


class BaseRepository(ABC, Generic[T]):
    """
    Base repository providing common CRUD operations.
    All in-memory repositories should inherit from this class.

    Entries are keyed by the entity's ``id`` attribute. Every operation runs
    under one re-entrant lock, and entities are copied on the way in and on
    the way out, so callers never share instances with the store.
    """

    def __init__(self, entity_name: str):
        """
        Initialize repository.

        Args:
            entity_name: Name used in log messages
        """
        self.entity_name = entity_name
        self._items: Dict[UUID, T] = {}
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        """Lock guarding the store; subclasses hold it for compound operations."""
        return self._lock

    @staticmethod
    def _copy(entity: T) -> T:
        return dataclasses.replace(entity)

    def get(self, entity_id: UUID) -> Optional[T]:
        """
        Find entity by ID.

        Args:
            entity_id: Entity ID

        Returns:
            Copy of the entity if found, None otherwise
        """
        with self._lock:
            entity = self._items.get(entity_id)
            return self._copy(entity) if entity is not None else None

    def get_all(self) -> List[T]:
        """Snapshot of all entities, in insertion order."""
        with self._lock:
            return [self._copy(entity) for entity in self._items.values()]

    def find(self, predicate: Callable[[T], bool]) -> List[T]:
        """
        Find all entities matching a predicate.

        Args:
            predicate: Called with each stored entity

        Returns:
            Copies of matching entities
        """
        with self._lock:
            return [
                self._copy(entity)
                for entity in self._items.values()
                if predicate(entity)
            ]

    def add(self, entity: T) -> T:
        """
        Store an entity, overwriting any entry with the same ID.

        Args:
            entity: Entity to store

        Returns:
            Copy of the stored entity
        """
        with self._lock:
            self._items[entity.id] = self._copy(entity)
        logger.debug(f"Added {self.entity_name}: {entity.id}")
        return self._copy(entity)

    def update(self, entity: T) -> Optional[T]:
        """
        Replace an existing entity.

        Args:
            entity: Entity carrying the ID to replace

        Returns:
            Copy of the updated entity, None if the ID is unknown
        """
        with self._lock:
            if entity.id not in self._items:
                logger.debug(f"Update skipped, {self.entity_name} not found: {entity.id}")
                return None
            self._items[entity.id] = self._copy(entity)
        logger.debug(f"Updated {self.entity_name}: {entity.id}")
        return self._copy(entity)

    def delete(self, entity_id: UUID) -> bool:
        """
        Delete entity by ID.

        Args:
            entity_id: Entity ID

        Returns:
            True if deleted, False otherwise
        """
        with self._lock:
            removed = self._items.pop(entity_id, None) is not None
        if removed:
            logger.debug(f"Deleted {self.entity_name}: {entity_id}")
        return removed

    def exists(self, entity_id: UUID) -> bool:
        """Whether an entity with this ID is stored."""
        with self._lock:
            return entity_id in self._items

    def count(self) -> int:
        """Number of stored entities."""
        with self._lock:
            return len(self._items)
