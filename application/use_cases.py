import logging
from datetime import datetime, timezone
from typing import List, Optional
from domain.entities import Priority, Task, TaskInput
from domain.errors import InvalidArgumentError, TaskNotFoundError
from infrastructure.database import Database

logger = logging.getLogger(__name__)

SORT_BY_CREATED_AT = "createdAt"
_EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


def _created_at_key(task: Task) -> datetime:
    # missing or unparseable timestamps sort first
    if not task.created_at:
        return _EARLIEST
    try:
        parsed = datetime.fromisoformat(task.created_at.replace("Z", "+00:00"))
    except (TypeError, ValueError):
        return _EARLIEST
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def normalize_priority_level(level: str) -> Priority:
    try:
        return Priority(level.strip().lower())
    except (AttributeError, ValueError):
        raise InvalidArgumentError() from None


class TaskUseCases:
    def __init__(self, db: Database):
        self.db = db

    def list_tasks(self, completed: Optional[bool] = None, sort_by: Optional[str] = None) -> List[Task]:
        tasks = self.db.get_all_tasks()
        if completed is not None:
            tasks = [task for task in tasks if task.completed is completed]
        if sort_by == SORT_BY_CREATED_AT:
            tasks = sorted(tasks, key=_created_at_key)
        return tasks

    def get_tasks_by_priority(self, level: str) -> List[Task]:
        priority = normalize_priority_level(level)
        return [task for task in self.db.get_all_tasks() if task.priority == priority]

    def get_task(self, task_id: int) -> Task:
        task = self.db.get_task_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def create_task(self, data: TaskInput) -> Task:
        task = Task(
            title=data.title,
            description=data.description,
            completed=data.completed,
            priority=data.priority or Priority.MEDIUM,
            created_at=datetime.now(timezone.utc).isoformat(),
        )
        created = self.db.create_task(task)
        logger.info(f"Created task {created.id}")
        return created

    def update_task(self, task_id: int, data: TaskInput) -> Task:
        # id, created_at and an omitted priority are carried over from the stored task
        updated = self.db.update_task(
            task_id,
            Task(
                title=data.title,
                description=data.description,
                completed=data.completed,
                priority=data.priority,
            ),
        )
        if updated is None:
            raise TaskNotFoundError(task_id)
        logger.info(f"Updated task {task_id}")
        return updated

    def delete_task(self, task_id: int) -> None:
        if not self.db.delete_task(task_id):
            raise TaskNotFoundError(task_id)
        logger.info(f"Deleted task {task_id}")
