"""
Seed loading for the task collection.

The seed document has the shape ``{"tasks": [...]}``. A document that cannot
be read or parsed is logged and an empty collection is used instead. Inside a
readable document, records that fail validation (or repeat an earlier id) are
skipped one by one with a warning; the remaining records are still loaded.
"""
import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, StrictBool, ValidationError, field_validator

from domain.entities import Priority, Task
from schemas.task import require_not_blank

logger = logging.getLogger(__name__)


class SeedTask(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: PositiveInt
    title: str
    description: str
    completed: StrictBool
    priority: Priority = Priority.MEDIUM
    created_at: Optional[str] = Field(default=None, alias="createdAt")

    @field_validator("title", "description")
    @classmethod
    def not_blank(cls, value: str) -> str:
        return require_not_blank(value)

    @field_validator("priority", mode="before")
    @classmethod
    def default_priority(cls, value: Any) -> Any:
        return Priority.MEDIUM if value is None else value

    def to_entity(self) -> Task:
        return Task(
            id=self.id,
            title=self.title,
            description=self.description,
            completed=self.completed,
            priority=self.priority,
            created_at=self.created_at,
        )


class SeedDocument(BaseModel):
    tasks: List[Any]


def load_seed_tasks(path: str | Path) -> List[Task]:
    """Read seed tasks from ``path``.

    Returns an empty list when the document itself is unusable; otherwise
    every valid record, in document order.
    """
    try:
        raw = Path(path).read_text(encoding="utf-8")
        document = SeedDocument.model_validate(json.loads(raw))
    except (OSError, ValueError) as e:
        logger.error(f"Error loading tasks from {path}, starting with an empty collection: {e}")
        return []

    tasks: List[Task] = []
    seen_ids = set()
    for index, record in enumerate(document.tasks):
        try:
            seed = SeedTask.model_validate(record)
        except ValidationError as e:
            logger.warning(f"Skipping invalid seed task at index {index} in {path}: {e}")
            continue
        if seed.id in seen_ids:
            logger.warning(f"Skipping seed task at index {index} in {path}: duplicate id {seed.id}")
            continue
        seen_ids.add(seed.id)
        tasks.append(seed.to_entity())

    logger.info(f"Loaded {len(tasks)} tasks from {path}")
    return tasks
