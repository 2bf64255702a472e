# interfaces/api.py
from fastapi import APIRouter, Body, Depends, Query, Request
from schemas.task import MessageResponse, TaskResponse, parse_task_payload, to_response_list
from application.use_cases import TaskUseCases
from domain.errors import TaskNotFoundError
from typing import Any, List, Optional

router = APIRouter()

DELETE_MESSAGE = "Task deleted successfully"


def get_use_cases(request: Request) -> TaskUseCases:
    return request.app.state.use_cases


def parse_task_id(raw_id: str) -> int:
    """Path ids that are not integers can never match a task."""
    try:
        return int(raw_id)
    except ValueError:
        raise TaskNotFoundError(raw_id) from None


def parse_completed_filter(value: Optional[str]) -> Optional[bool]:
    if value is None:
        return None
    lowered = value.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return None


@router.get("/tasks", response_model=List[TaskResponse])
async def get_all_tasks(
    completed: Optional[str] = Query(default=None),
    sort_by: Optional[str] = Query(default=None, alias="sortBy"),
    use_cases: TaskUseCases = Depends(get_use_cases),
):
    tasks = use_cases.list_tasks(completed=parse_completed_filter(completed), sort_by=sort_by)
    return to_response_list(tasks)


@router.get("/tasks/priority/{level}", response_model=List[TaskResponse])
async def get_tasks_by_priority(level: str, use_cases: TaskUseCases = Depends(get_use_cases)):
    return to_response_list(use_cases.get_tasks_by_priority(level))


@router.get("/tasks/{task_id}", response_model=TaskResponse)
async def get_task(task_id: str, use_cases: TaskUseCases = Depends(get_use_cases)):
    task = use_cases.get_task(parse_task_id(task_id))
    return TaskResponse.from_entity(task)


@router.post("/tasks", response_model=TaskResponse, status_code=201)
async def create_task(payload: Any = Body(default=None), use_cases: TaskUseCases = Depends(get_use_cases)):
    data = parse_task_payload(payload)
    created_task = use_cases.create_task(data)
    return TaskResponse.from_entity(created_task)


@router.put("/tasks/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: str,
    payload: Any = Body(default=None),
    use_cases: TaskUseCases = Depends(get_use_cases),
):
    target_id = parse_task_id(task_id)
    # an unknown id is reported before anything about the body
    use_cases.get_task(target_id)
    data = parse_task_payload(payload)
    updated_task = use_cases.update_task(target_id, data)
    return TaskResponse.from_entity(updated_task)


@router.delete("/tasks/{task_id}", response_model=MessageResponse)
async def delete_task(task_id: str, use_cases: TaskUseCases = Depends(get_use_cases)):
    use_cases.delete_task(parse_task_id(task_id))
    return MessageResponse(message=DELETE_MESSAGE)
