"""
Interface for Task Service.
Defines the contract that all task services must implement.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from domain import Task, TaskPriority, TaskStatus


class ITaskService(ABC):
    """Interface for task service operations."""

    @abstractmethod
    async def get_by_id(self, task_id: UUID) -> Optional[Task]:
        """
        Get task by ID.

        Args:
            task_id: ID of the task

        Returns:
            Optional[Task]: Task if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_all(self) -> List[Task]:
        """Get all tasks."""
        pass

    @abstractmethod
    async def get_by_status(self, status: TaskStatus) -> List[Task]:
        """Get tasks with the given status."""
        pass

    @abstractmethod
    async def get_by_priority(self, priority: TaskPriority) -> List[Task]:
        """Get tasks with the given priority."""
        pass

    @abstractmethod
    async def get_by_category(self, category_id: UUID) -> List[Task]:
        """Get tasks referencing the given category."""
        pass

    @abstractmethod
    async def get_overdue(self) -> List[Task]:
        """Get tasks past their due date that are not completed."""
        pass

    @abstractmethod
    async def create(
        self,
        title: str,
        description: str = "",
        priority: TaskPriority = TaskPriority.NONE,
        category_id: Optional[UUID] = None,
        due_date: Optional[datetime] = None,
    ) -> Task:
        """
        Create a new task in PENDING status.

        Args:
            title: Task title
            description: Optional description
            priority: Task priority
            category_id: Optional category the task belongs to
            due_date: Optional due date

        Returns:
            Task: Created task

        Raises:
            ValidationError: If title is blank or category_id is unknown
        """
        pass

    @abstractmethod
    async def update(
        self,
        task_id: UUID,
        title: str,
        description: str = "",
        priority: TaskPriority = TaskPriority.NONE,
        status: TaskStatus = TaskStatus.PENDING,
        category_id: Optional[UUID] = None,
        due_date: Optional[datetime] = None,
    ) -> Optional[Task]:
        """
        Replace all mutable fields of a task.

        Returns:
            Optional[Task]: Updated task, None if not found

        Raises:
            ValidationError: If title is blank or category_id is unknown
        """
        pass

    @abstractmethod
    async def complete(self, task_id: UUID) -> Optional[Task]:
        """
        Mark a task as completed.

        Returns:
            Optional[Task]: Completed task, None if not found
        """
        pass

    @abstractmethod
    async def delete(self, task_id: UUID) -> bool:
        """
        Delete a task.

        Returns:
            bool: True if the task existed
        """
        pass
