import threading
from dataclasses import replace
from typing import Iterable, List, Optional
from domain.entities import Priority, Task


class Database:
    """In-memory, insertion-ordered task collection.

    Every read and mutation runs under a single lock so id assignment and
    positional replacement stay atomic when called from worker threads.
    """

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._lock = threading.RLock()
        self._tasks: List[Task] = list(tasks or [])

    def _index_of(self, task_id: int) -> int:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        return -1

    def _next_id(self) -> int:
        # max + 1 rather than len + 1 so gaps left by deletions never collide
        if not self._tasks:
            return 1
        return max(task.id for task in self._tasks) + 1

    def create_task(self, task: Task) -> Task:
        with self._lock:
            created = replace(task, id=self._next_id())
            self._tasks.append(created)
            return created

    def get_task_by_id(self, task_id: int) -> Optional[Task]:
        with self._lock:
            index = self._index_of(task_id)
            return self._tasks[index] if index != -1 else None

    def get_all_tasks(self) -> List[Task]:
        with self._lock:
            return list(self._tasks)

    def update_task(self, task_id: int, updated_task: Task) -> Optional[Task]:
        with self._lock:
            index = self._index_of(task_id)
            if index == -1:
                return None
            current = self._tasks[index]
            self._tasks[index] = replace(
                updated_task,
                id=current.id,
                created_at=current.created_at,
                priority=updated_task.priority or current.priority or Priority.MEDIUM,
            )
            return self._tasks[index]

    def delete_task(self, task_id: int) -> bool:
        with self._lock:
            index = self._index_of(task_id)
            if index == -1:
                return False
            del self._tasks[index]
            return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)
