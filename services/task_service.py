"""
Service for task business logic.
Implements Service Layer Pattern - validates input and orchestrates repositories.
"""

from datetime import datetime, timezone
from typing import Callable, List, Optional
from uuid import UUID

from core.exceptions import ValidationError
from core.logger import format_exception_short, logger
from domain import Task, TaskPriority, TaskStatus, utcnow
from repositories.interfaces import ICategoryRepository, ITaskRepository

from .interfaces import ITaskService


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Naive datetimes are taken to be UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class TaskService(ITaskService):
    """
    Service handling task business logic.

    Reads the category repository only to check that a referenced category
    exists; the reference is not re-checked after the write.
    """

    def __init__(
        self,
        task_repository: ITaskRepository,
        category_repository: ICategoryRepository,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.repository = task_repository
        self.category_repository = category_repository
        self.clock = clock

    def _validate(self, title: Optional[str], category_id: Optional[UUID]) -> None:
        if title is None or not title.strip():
            raise ValidationError("Task title must not be empty", field="title")

        if category_id is not None and self.category_repository.get(category_id) is None:
            raise ValidationError(
                f"Category not found: {category_id}", field="category_id"
            )

    async def get_by_id(self, task_id: UUID) -> Optional[Task]:
        task = self.repository.get(task_id)
        if task is None:
            logger.debug(f"Task not found: id={task_id}")
        return task

    async def get_all(self) -> List[Task]:
        return self.repository.get_all()

    async def get_by_status(self, status: TaskStatus) -> List[Task]:
        return self.repository.get_by_status(status)

    async def get_by_priority(self, priority: TaskPriority) -> List[Task]:
        return self.repository.get_by_priority(priority)

    async def get_by_category(self, category_id: UUID) -> List[Task]:
        return self.repository.get_by_category_id(category_id)

    async def get_overdue(self) -> List[Task]:
        now = self.clock()
        tasks = self.repository.get_overdue(now)
        logger.debug(f"Overdue tasks at {now.isoformat()}: {len(tasks)}")
        return tasks

    async def create(
        self,
        title: str,
        description: str = "",
        priority: TaskPriority = TaskPriority.NONE,
        category_id: Optional[UUID] = None,
        due_date: Optional[datetime] = None,
    ) -> Task:
        """
        Create a new task.

        The task starts PENDING with ``created_at`` set from the service clock.

        Raises:
            ValidationError: If title is blank or category_id is unknown
        """
        try:
            self._validate(title, category_id)

            task = Task(
                title=title,
                description=description or "",
                priority=TaskPriority(priority),
                status=TaskStatus.PENDING,
                category_id=category_id,
                due_date=_as_utc(due_date),
                created_at=self.clock(),
            )
            stored = self.repository.add(task)

            logger.info(
                f"Task created: id={stored.id}, priority={stored.priority.name}, category_id={stored.category_id}"
            )
            return stored

        except ValidationError as e:
            logger.warning(f"Task creation rejected: {e}")
            raise

        except Exception as e:
            logger.error(format_exception_short(e, "Failed to create task"))
            raise

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
        Replace the mutable fields of a task.

        ``id`` and ``created_at`` are kept. Any status may be set here, not
        only the forward moves.

        Raises:
            ValidationError: If title is blank or category_id is unknown
        """
        try:
            task = self.repository.get(task_id)
            if task is None:
                logger.warning(f"Task not found for update: id={task_id}")
                return None

            self._validate(title, category_id)

            task.title = title
            task.description = description or ""
            task.priority = TaskPriority(priority)
            task.status = TaskStatus(status)
            task.category_id = category_id
            task.due_date = _as_utc(due_date)

            updated = self.repository.update(task)
            if updated is None:
                logger.warning(f"Task vanished during update: id={task_id}")
                return None

            logger.info(f"Task updated: id={task_id}, status={updated.status.value}")
            return updated

        except ValidationError as e:
            logger.warning(f"Task update rejected: id={task_id}: {e}")
            raise

        except Exception as e:
            logger.error(format_exception_short(e, f"Failed to update task {task_id}"))
            raise

    async def complete(self, task_id: UUID) -> Optional[Task]:
        task = self.repository.get(task_id)
        if task is None:
            logger.warning(f"Task not found for completion: id={task_id}")
            return None

        task.complete()
        completed = self.repository.update(task)
        if completed is not None:
            logger.info(f"Task completed: id={task_id}")
        return completed

    async def delete(self, task_id: UUID) -> bool:
        deleted = self.repository.delete(task_id)
        if deleted:
            logger.info(f"Task deleted: id={task_id}")
        else:
            logger.warning(f"Task not found for delete: id={task_id}")
        return deleted
