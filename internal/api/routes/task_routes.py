"""
Task API Routes.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from core.logger import logger
from domain import TaskPriority, TaskStatus
from internal.api.dependencies import get_task_service
from internal.api.schemas import CreateTaskRequest, TaskResponse, UpdateTaskRequest
from services.interfaces import ITaskService

router = APIRouter(prefix="/tasks", tags=["Tasks"])


def _not_found(task_id: UUID) -> HTTPException:
    logger.warning(f"API: Task not found: id={task_id}")
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND, detail=f"Task not found: {task_id}"
    )


def _to_response(tasks) -> List[TaskResponse]:
    return [TaskResponse.model_validate(task) for task in tasks]


def parse_priority(value: str) -> TaskPriority:
    """
    Parse a priority given either as its number (0-4) or its name.

    Raises:
        HTTPException: 400 if the value matches no priority
    """
    try:
        if value.isdigit():
            return TaskPriority(int(value))
        return TaskPriority[value.upper()]
    except (KeyError, ValueError):
        names = ", ".join(p.name for p in TaskPriority)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown priority '{value}'. Use 0-4 or one of: {names}",
        )


@router.get("", response_model=List[TaskResponse], summary="List Tasks")
async def list_tasks(service: ITaskService = Depends(get_task_service)):
    """Return all tasks."""
    tasks = await service.get_all()
    logger.info(f"API: Tasks listed: count={len(tasks)}")
    return _to_response(tasks)


@router.get("/overdue", response_model=List[TaskResponse], summary="List Overdue Tasks")
async def list_overdue_tasks(service: ITaskService = Depends(get_task_service)):
    """Return tasks whose due date has passed and that are not completed."""
    return _to_response(await service.get_overdue())


@router.get(
    "/status/{task_status}",
    response_model=List[TaskResponse],
    summary="List Tasks by Status",
)
async def list_tasks_by_status(
    task_status: TaskStatus, service: ITaskService = Depends(get_task_service)
):
    """Return tasks with the given status (PENDING, IN_PROGRESS, COMPLETED)."""
    return _to_response(await service.get_by_status(task_status))


@router.get(
    "/priority/{priority}",
    response_model=List[TaskResponse],
    summary="List Tasks by Priority",
    responses={400: {"description": "Unknown priority"}},
)
async def list_tasks_by_priority(
    priority: str, service: ITaskService = Depends(get_task_service)
):
    """
    Return tasks with the given priority.

    **Parameters:**
    - **priority**: 0-4 or NONE, LOW, MEDIUM, HIGH, CRITICAL
    """
    return _to_response(await service.get_by_priority(parse_priority(priority)))


@router.get(
    "/category/{category_id}",
    response_model=List[TaskResponse],
    summary="List Tasks by Category",
)
async def list_tasks_by_category(
    category_id: UUID, service: ITaskService = Depends(get_task_service)
):
    """Return tasks referencing the given category ID."""
    return _to_response(await service.get_by_category(category_id))


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Get Task",
    responses={404: {"description": "Task not found"}},
)
async def get_task(task_id: UUID, service: ITaskService = Depends(get_task_service)):
    """Return a task by ID, or 404."""
    task = await service.get_by_id(task_id)
    if task is None:
        raise _not_found(task_id)
    return TaskResponse.model_validate(task)


@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Task",
    responses={400: {"description": "Blank title or unknown category"}},
)
async def create_task(
    body: CreateTaskRequest,
    request: Request,
    response: Response,
    service: ITaskService = Depends(get_task_service),
):
    """
    Create a task in PENDING status.

    **Returns:** the created task, with a `Location` header pointing at it.
    """
    logger.info(
        f"API: Create task request: title={body.title!r}, category_id={body.category_id}"
    )
    task = await service.create(
        title=body.title,
        description=body.description,
        priority=body.priority,
        category_id=body.category_id,
        due_date=body.due_date,
    )
    response.headers["Location"] = str(
        request.url_for("get_task", task_id=str(task.id)).path
    )
    return TaskResponse.model_validate(task)


@router.put(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Update Task",
    responses={
        400: {"description": "Blank title or unknown category"},
        404: {"description": "Task not found"},
    },
)
async def update_task(
    task_id: UUID,
    body: UpdateTaskRequest,
    service: ITaskService = Depends(get_task_service),
):
    """Replace every mutable field of a task, including its status."""
    logger.info(f"API: Update task request: id={task_id}, status={body.status.value}")
    task = await service.update(
        task_id,
        title=body.title,
        description=body.description,
        priority=body.priority,
        status=body.status,
        category_id=body.category_id,
        due_date=body.due_date,
    )
    if task is None:
        raise _not_found(task_id)
    return TaskResponse.model_validate(task)


@router.patch(
    "/{task_id}/complete",
    response_model=TaskResponse,
    summary="Complete Task",
    responses={404: {"description": "Task not found"}},
)
async def complete_task(task_id: UUID, service: ITaskService = Depends(get_task_service)):
    """Mark a task as completed. Completing a completed task is a no-op."""
    task = await service.complete(task_id)
    if task is None:
        raise _not_found(task_id)
    return TaskResponse.model_validate(task)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Task",
    responses={404: {"description": "Task not found"}},
)
async def delete_task(task_id: UUID, service: ITaskService = Depends(get_task_service)):
    """Delete a task."""
    if not await service.delete(task_id):
        raise _not_found(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
