from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass
class Task:
    title: str
    description: str
    completed: bool = False
    priority: Optional[Priority] = Priority.MEDIUM
    id: Optional[int] = None
    created_at: Optional[str] = None


@dataclass(frozen=True)
class TaskInput:
    """Validated fields of a create or update request."""
    title: str
    description: str
    completed: bool
    priority: Optional[Priority] = None
