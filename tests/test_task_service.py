from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from core.exceptions import ValidationError
from domain import Category, Task, TaskPriority, TaskStatus
from repositories.interfaces import ICategoryRepository, ITaskRepository
from services import TaskService

from .fakes import FIXED_NOW


@pytest.fixture
def work_category(category_repository):
    return category_repository.add(Category(name="Work"))


class TestCreate:
    @pytest.mark.asyncio
    async def test_create_valid_task(self, task_service, task_repository, clock):
        task = await task_service.create("Write report", "Quarterly", TaskPriority.HIGH)

        assert task.title == "Write report"
        assert task.description == "Quarterly"
        assert task.priority == TaskPriority.HIGH
        assert task.status == TaskStatus.PENDING
        assert task.created_at == clock()
        assert task_repository.get(task.id) == task

    @pytest.mark.asyncio
    async def test_create_with_existing_category(self, task_service, work_category):
        task = await task_service.create("Email boss", category_id=work_category.id)

        assert task.category_id == work_category.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("title", ["", "   ", None])
    async def test_blank_title_is_rejected(self, task_service, task_repository, title):
        with pytest.raises(ValidationError) as exc_info:
            await task_service.create(title)

        assert exc_info.value.field == "title"
        assert task_repository.count() == 0

    @pytest.mark.asyncio
    async def test_unknown_category_is_rejected(self, task_service, task_repository):
        with pytest.raises(ValidationError) as exc_info:
            await task_service.create("Orphan", category_id=uuid4())

        assert exc_info.value.field == "category_id"
        assert task_repository.count() == 0

    @pytest.mark.asyncio
    async def test_naive_due_date_is_taken_as_utc(self, task_service):
        task = await task_service.create("Naive", due_date=datetime(2025, 7, 1, 9, 30))

        assert task.due_date == datetime(2025, 7, 1, 9, 30, tzinfo=timezone.utc)

    @pytest.mark.asyncio
    async def test_no_category_skips_category_lookup(self, clock):
        task_repo = MagicMock(spec=ITaskRepository)
        task_repo.add.side_effect = lambda task: task
        category_repo = MagicMock(spec=ICategoryRepository)
        service = TaskService(task_repo, category_repo, clock=clock)

        await service.create("No category", category_id=None)

        category_repo.get.assert_not_called()
        task_repo.add.assert_called_once()


class TestUpdate:
    @pytest.mark.asyncio
    async def test_update_replaces_fields_and_keeps_identity(self, task_service, work_category, clock):
        task = await task_service.create("Old", priority=TaskPriority.LOW)
        clock.advance(hours=3)
        due = FIXED_NOW + timedelta(days=2)

        updated = await task_service.update(
            task.id,
            "New",
            "Desc",
            TaskPriority.CRITICAL,
            TaskStatus.IN_PROGRESS,
            work_category.id,
            due,
        )

        assert updated.id == task.id
        assert updated.created_at == task.created_at
        assert updated.title == "New"
        assert updated.priority == TaskPriority.CRITICAL
        assert updated.status == TaskStatus.IN_PROGRESS
        assert updated.category_id == work_category.id
        assert updated.due_date == due

    @pytest.mark.asyncio
    async def test_update_allows_moving_back_from_completed(self, task_service):
        task = await task_service.create("Reopen me")
        await task_service.complete(task.id)

        updated = await task_service.update(task.id, "Reopen me", status=TaskStatus.PENDING)

        assert updated.status == TaskStatus.PENDING

    @pytest.mark.asyncio
    async def test_update_unknown_task_returns_none(self, task_service):
        assert await task_service.update(uuid4(), "Anything") is None

    @pytest.mark.asyncio
    async def test_update_with_blank_title_leaves_task_unchanged(self, task_service, task_repository):
        task = await task_service.create("Keep")

        with pytest.raises(ValidationError):
            await task_service.update(task.id, " ")

        assert task_repository.get(task.id).title == "Keep"

    @pytest.mark.asyncio
    async def test_update_with_unknown_category_is_rejected(self, task_service, task_repository):
        task = await task_service.create("Keep")

        with pytest.raises(ValidationError):
            await task_service.update(task.id, "Keep", category_id=uuid4())

        assert task_repository.get(task.id).category_id is None


class TestComplete:
    @pytest.mark.asyncio
    async def test_complete_marks_completed(self, task_service):
        task = await task_service.create("Finish")

        completed = await task_service.complete(task.id)

        assert completed.status == TaskStatus.COMPLETED

    @pytest.mark.asyncio
    async def test_complete_is_idempotent(self, task_service):
        task = await task_service.create("Twice")

        first = await task_service.complete(task.id)
        second = await task_service.complete(task.id)

        assert first == second
        assert second.status == TaskStatus.COMPLETED

    @pytest.mark.asyncio
    async def test_complete_unknown_returns_none(self, task_service):
        assert await task_service.complete(uuid4()) is None


class TestQueries:
    @pytest.mark.asyncio
    async def test_overdue_uses_service_clock(self, task_service, clock):
        late = await task_service.create("Late", due_date=FIXED_NOW - timedelta(hours=1))
        soon = await task_service.create("Soon", due_date=FIXED_NOW + timedelta(hours=1))

        assert [t.id for t in await task_service.get_overdue()] == [late.id]

        clock.advance(hours=2)
        assert {t.id for t in await task_service.get_overdue()} == {late.id, soon.id}

    @pytest.mark.asyncio
    async def test_completed_task_leaves_overdue_list(self, task_service):
        late = await task_service.create("Late", due_date=FIXED_NOW - timedelta(days=1))

        await task_service.complete(late.id)

        assert await task_service.get_overdue() == []

    @pytest.mark.asyncio
    async def test_filters(self, task_service, work_category):
        a = await task_service.create("A", priority=TaskPriority.HIGH, category_id=work_category.id)
        b = await task_service.create("B", priority=TaskPriority.LOW)
        await task_service.complete(b.id)

        assert [t.id for t in await task_service.get_by_priority(TaskPriority.HIGH)] == [a.id]
        assert [t.id for t in await task_service.get_by_status(TaskStatus.COMPLETED)] == [b.id]
        assert [t.id for t in await task_service.get_by_category(work_category.id)] == [a.id]
        assert len(await task_service.get_all()) == 2

    @pytest.mark.asyncio
    async def test_deleting_category_keeps_task_reference(
        self, task_service, category_service, work_category
    ):
        task = await task_service.create("Dangling", category_id=work_category.id)

        assert await category_service.delete(work_category.id) is True

        fetched = await task_service.get_by_id(task.id)
        assert fetched.category_id == work_category.id
        assert [t.id for t in await task_service.get_by_category(work_category.id)] == [task.id]


class TestDelete:
    @pytest.mark.asyncio
    async def test_delete(self, task_service):
        task = await task_service.create("Bye")

        assert await task_service.delete(task.id) is True
        assert await task_service.get_by_id(task.id) is None
        assert await task_service.delete(task.id) is False

    @pytest.mark.asyncio
    async def test_get_by_id_returns_copy(self, task_service):
        task = await task_service.create("Stable")

        fetched = await task_service.get_by_id(task.id)
        fetched.title = "Mutated"

        assert (await task_service.get_by_id(task.id)).title == "Stable"


def test_task_is_overdue_boundary():
    task = Task(title="Edge", due_date=FIXED_NOW)

    assert task.is_overdue(FIXED_NOW) is False
    assert task.is_overdue(FIXED_NOW + timedelta(seconds=1)) is True
