"""
Repository for tasks.
Follows Single Responsibility Principle - only handles task data access.
"""

from datetime import datetime
from typing import List
from uuid import UUID

from domain import Task, TaskPriority, TaskStatus

from .base_repository import BaseRepository
from .interfaces import ITaskRepository


class InMemoryTaskRepository(BaseRepository[Task], ITaskRepository):
    """In-memory task store. Filtered queries are linear scans."""

    def __init__(self):
        super().__init__("task")

    def get_by_status(self, status: TaskStatus) -> List[Task]:
        return self.find(lambda task: task.status == status)

    def get_by_priority(self, priority: TaskPriority) -> List[Task]:
        return self.find(lambda task: task.priority == priority)

    def get_by_category_id(self, category_id: UUID) -> List[Task]:
        return self.find(lambda task: task.category_id == category_id)

    def get_overdue(self, reference_date: datetime) -> List[Task]:
        return self.find(lambda task: task.is_overdue(reference_date))
