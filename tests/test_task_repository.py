from datetime import timedelta
from uuid import uuid4

from domain import Task, TaskPriority, TaskStatus

from .fakes import FIXED_NOW


def test_add_stores_task(task_repository):
    task = Task(title="Write tests", priority=TaskPriority.MEDIUM)

    result = task_repository.add(task)

    assert result.id == task.id
    assert result.title == "Write tests"
    assert task_repository.exists(task.id)


def test_get_existing(task_repository):
    task = task_repository.add(Task(title="Test", description="Desc"))

    result = task_repository.get(task.id)

    assert result.title == "Test"
    assert result.description == "Desc"


def test_get_unknown_returns_none(task_repository):
    assert task_repository.get(uuid4()) is None


def test_get_all(task_repository):
    task_repository.add(Task(title="A"))
    task_repository.add(Task(title="B"))

    assert len(task_repository.get_all()) == 2


def test_get_by_status(task_repository):
    task_repository.add(Task(title="Todo", status=TaskStatus.PENDING))
    task_repository.add(Task(title="Done", status=TaskStatus.COMPLETED))
    task_repository.add(Task(title="Doing", status=TaskStatus.IN_PROGRESS))

    result = task_repository.get_by_status(TaskStatus.COMPLETED)

    assert [t.title for t in result] == ["Done"]


def test_get_by_priority(task_repository):
    task_repository.add(Task(title="Urgent", priority=TaskPriority.CRITICAL))
    task_repository.add(Task(title="Later", priority=TaskPriority.LOW))

    result = task_repository.get_by_priority(TaskPriority.CRITICAL)

    assert [t.title for t in result] == ["Urgent"]


def test_get_by_category_id(task_repository):
    category_id = uuid4()
    task_repository.add(Task(title="In category", category_id=category_id))
    task_repository.add(Task(title="Other category", category_id=uuid4()))
    task_repository.add(Task(title="No category"))

    result = task_repository.get_by_category_id(category_id)

    assert [t.title for t in result] == ["In category"]


def test_get_overdue_returns_overdue_non_completed(task_repository):
    yesterday = FIXED_NOW - timedelta(days=1)
    task_repository.add(Task(title="Overdue", due_date=yesterday))
    task_repository.add(
        Task(title="Overdue but done", due_date=yesterday, status=TaskStatus.COMPLETED)
    )
    task_repository.add(Task(title="Future", due_date=FIXED_NOW + timedelta(days=5)))
    task_repository.add(Task(title="No due date"))

    result = task_repository.get_overdue(FIXED_NOW)

    assert [t.title for t in result] == ["Overdue"]


def test_get_overdue_excludes_due_exactly_now(task_repository):
    task_repository.add(Task(title="Due now", due_date=FIXED_NOW))

    assert task_repository.get_overdue(FIXED_NOW) == []


def test_update_existing(task_repository):
    task = task_repository.add(Task(title="Old", priority=TaskPriority.LOW))

    result = task_repository.update(
        Task(id=task.id, title="New", priority=TaskPriority.HIGH)
    )

    assert result.title == "New"
    assert result.priority == TaskPriority.HIGH
    assert task_repository.get(task.id).title == "New"


def test_update_unknown_returns_none(task_repository):
    assert task_repository.update(Task(title="Nope")) is None
    assert task_repository.count() == 0


def test_delete_existing(task_repository):
    task = task_repository.add(Task(title="ToDelete"))

    assert task_repository.delete(task.id) is True
    assert task_repository.get(task.id) is None


def test_delete_unknown_returns_false(task_repository):
    task_repository.add(Task(title="Keep"))

    assert task_repository.delete(uuid4()) is False
    assert task_repository.count() == 1
