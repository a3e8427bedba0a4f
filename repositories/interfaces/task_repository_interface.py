"""
Interface for Task Repository.
Defines the contract that all task repositories must implement.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from domain import Task, TaskPriority, TaskStatus


class ITaskRepository(ABC):
    """Interface for task repository operations."""

    @abstractmethod
    def get(self, task_id: UUID) -> Optional[Task]:
        """
        Find a task by ID.

        Args:
            task_id: ID of the task

        Returns:
            Optional[Task]: Task if found, None otherwise
        """
        pass

    @abstractmethod
    def get_all(self) -> List[Task]:
        """
        Get all stored tasks.

        Returns:
            List[Task]: Snapshot of all tasks
        """
        pass

    @abstractmethod
    def get_by_status(self, status: TaskStatus) -> List[Task]:
        """Find tasks with the given status."""
        pass

    @abstractmethod
    def get_by_priority(self, priority: TaskPriority) -> List[Task]:
        """Find tasks with the given priority."""
        pass

    @abstractmethod
    def get_by_category_id(self, category_id: UUID) -> List[Task]:
        """Find tasks referencing the given category."""
        pass

    @abstractmethod
    def get_overdue(self, reference_date: datetime) -> List[Task]:
        """
        Find overdue tasks.

        Args:
            reference_date: Tasks due strictly before this are candidates

        Returns:
            List[Task]: Tasks with a due date before reference_date that are
            not completed
        """
        pass

    @abstractmethod
    def add(self, task: Task) -> Task:
        """
        Store a task, overwriting any entry with the same ID.

        Args:
            task: Task to store

        Returns:
            Task: The stored task
        """
        pass

    @abstractmethod
    def update(self, task: Task) -> Optional[Task]:
        """
        Replace an existing task.

        Args:
            task: Task carrying the ID to replace

        Returns:
            Optional[Task]: Updated task, None if no task had that ID
        """
        pass

    @abstractmethod
    def delete(self, task_id: UUID) -> bool:
        """
        Delete a task.

        Args:
            task_id: ID of the task

        Returns:
            bool: True if a task was removed, False otherwise
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored tasks."""
        pass
