"""
Domain entities for task management.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum, IntEnum
from typing import Optional
from uuid import UUID, uuid4


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class TaskStatus(str, Enum):
    """Task status enumeration. Any status may move to any other."""

    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class TaskPriority(IntEnum):
    """Ordered task priority."""

    NONE = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4


@dataclass
class Category:
    """Category entity."""

    name: str
    description: str = ""
    id: UUID = field(default_factory=uuid4)

    @property
    def normalized_name(self) -> str:
        """Key used for case-insensitive name comparison."""
        return normalize_name(self.name)


@dataclass
class Task:
    """Task entity."""

    title: str
    description: str = ""
    priority: TaskPriority = TaskPriority.NONE
    status: TaskStatus = TaskStatus.PENDING
    category_id: Optional[UUID] = None
    due_date: Optional[datetime] = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utcnow)

    def complete(self):
        """Mark task as completed."""
        self.status = TaskStatus.COMPLETED

    def is_overdue(self, reference_date: datetime) -> bool:
        """Due strictly before reference_date and not yet completed."""
        if self.due_date is None:
            return False
        return self.due_date < reference_date and self.status != TaskStatus.COMPLETED


def normalize_name(name: str) -> str:
    return name.strip().casefold()
