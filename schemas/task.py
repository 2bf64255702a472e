# schemas/task.py
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationError, field_validator

from domain.entities import Priority, Task, TaskInput
from domain.errors import EmptyFieldError, InvalidPriorityError, InvalidTypeError, MissingFieldsError

REQUIRED_FIELDS = ("title", "description", "completed")


def require_not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


class TaskPayload(BaseModel):
    """Body of POST /tasks and PUT /tasks/{id}; unknown keys such as id are dropped."""
    model_config = ConfigDict(extra="ignore")

    title: str
    description: str
    completed: StrictBool
    priority: Optional[Priority] = None

    @field_validator("title", "description")
    @classmethod
    def not_blank(cls, value: str) -> str:
        return require_not_blank(value)


class TaskResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    description: str
    completed: bool
    priority: Optional[Priority] = None
    created_at: Optional[str] = Field(default=None, alias="createdAt")

    @classmethod
    def from_entity(cls, task: Task) -> "TaskResponse":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            completed=task.completed,
            priority=task.priority,
            created_at=task.created_at,
        )


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


def parse_task_payload(payload: Any) -> TaskInput:
    """Validate a raw JSON body into a TaskInput.

    Checks run in a fixed order and the first failing rule decides the error:
    missing fields, then blank title/description, then a non-boolean
    ``completed``, then an unknown priority.
    """
    if not isinstance(payload, dict) or any(payload.get(name) is None for name in REQUIRED_FIELDS):
        raise MissingFieldsError()

    try:
        data = TaskPayload.model_validate(payload)
    except ValidationError as e:
        failed = {error["loc"][0] for error in e.errors() if error["loc"]}
        if failed & {"title", "description"}:
            raise EmptyFieldError() from e
        if "completed" in failed:
            raise InvalidTypeError() from e
        raise InvalidPriorityError() from e

    return TaskInput(
        title=data.title,
        description=data.description,
        completed=data.completed,
        priority=data.priority,
    )


def to_response_list(tasks: List[Task]) -> List[TaskResponse]:
    return [TaskResponse.from_entity(task) for task in tasks]
