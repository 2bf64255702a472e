"""
Shared pytest fixtures for the task API
"""

import json
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from application.use_cases import TaskUseCases
from domain.entities import Priority, Task
from infrastructure.database import Database


SEED_TASKS = [
    {
        "id": 1,
        "title": "Set up environment",
        "description": "Install Python, pip, and git",
        "completed": True,
        "priority": "high",
        "createdAt": "2024-01-02T09:00:00+00:00",
    },
    {
        "id": 2,
        "title": "Create a new project",
        "description": "Create a new project from the template",
        "completed": True,
        "priority": "medium",
        "createdAt": "2024-01-01T09:00:00+00:00",
    },
    {
        "id": 3,
        "title": "Install dependencies",
        "description": "Install project dependencies with pip",
        "completed": False,
        "priority": "medium",
        "createdAt": "2024-01-03T09:00:00+00:00",
    },
    {
        "id": 5,
        "title": "Write tests",
        "description": "Cover every route",
        "completed": False,
        "priority": "low",
        "createdAt": "2024-01-02T12:30:00+00:00",
    },
]


@pytest.fixture
def seed_file(tmp_path: Path) -> Path:
    """Write the sample seed document to a temporary file"""
    path = tmp_path / "task.json"
    path.write_text(json.dumps({"tasks": SEED_TASKS}), encoding="utf-8")
    return path


@pytest.fixture
def seeded_tasks() -> list[Task]:
    return [
        Task(
            id=item["id"],
            title=item["title"],
            description=item["description"],
            completed=item["completed"],
            priority=Priority(item["priority"]),
            created_at=item["createdAt"],
        )
        for item in SEED_TASKS
    ]


@pytest.fixture
def db(seeded_tasks) -> Database:
    return Database(seeded_tasks)


@pytest.fixture
def use_cases(db) -> TaskUseCases:
    return TaskUseCases(db)


@pytest.fixture
def empty_use_cases() -> TaskUseCases:
    return TaskUseCases(Database())


@pytest.fixture
def test_app(seed_file):
    """Create a FastAPI app with its own seeded collection"""
    from main import create_app
    return create_app(seed_file)


@pytest.fixture
async def test_client(test_app):
    """Create async test client"""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
