"""
Seed loading tests
"""

import json
import logging

from domain.entities import Priority
from infrastructure.seed import load_seed_tasks


def write(tmp_path, content):
    path = tmp_path / "task.json"
    path.write_text(content, encoding="utf-8")
    return path


def test_loads_tasks_in_order(seed_file):
    tasks = load_seed_tasks(seed_file)
    assert [task.id for task in tasks] == [1, 2, 3, 5]
    assert tasks[0].priority is Priority.HIGH
    assert tasks[0].created_at == "2024-01-02T09:00:00+00:00"


def test_priority_defaults_to_medium_and_created_at_may_be_absent(tmp_path):
    path = write(tmp_path, json.dumps({"tasks": [
        {"id": 1, "title": "a", "description": "b", "completed": False},
        {"id": 2, "title": "c", "description": "d", "completed": True, "priority": None},
    ]}))
    tasks = load_seed_tasks(path)
    assert [task.priority for task in tasks] == [Priority.MEDIUM, Priority.MEDIUM]
    assert tasks[0].created_at is None


def test_missing_file_starts_empty(tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        assert load_seed_tasks(tmp_path / "nope.json") == []
    assert "Error loading tasks" in caplog.text
    assert "starting with an empty collection" in caplog.text


def test_invalid_json_starts_empty(tmp_path):
    assert load_seed_tasks(write(tmp_path, "{not json")) == []


def test_wrong_shape_starts_empty(tmp_path):
    assert load_seed_tasks(write(tmp_path, json.dumps([{"id": 1}]))) == []
    assert load_seed_tasks(write(tmp_path, json.dumps({"items": []}))) == []


def test_blank_title_or_description_is_skipped(tmp_path, caplog):
    path = write(tmp_path, json.dumps({"tasks": [
        {"id": 1, "title": "   ", "description": "b", "completed": False},
        {"id": 2, "title": "a", "description": "", "completed": False},
        {"id": 3, "title": "a", "description": "b", "completed": False},
    ]}))
    with caplog.at_level(logging.WARNING):
        tasks = load_seed_tasks(path)
    assert [task.id for task in tasks] == [3]
    assert "index 0" in caplog.text
    assert "index 1" in caplog.text


def test_invalid_record_does_not_drop_the_rest(tmp_path):
    path = write(tmp_path, json.dumps({"tasks": [
        {"id": 1, "title": "a", "description": "b", "completed": "yes"},
        {"id": 2, "title": "a", "description": "b", "completed": True, "priority": "urgent"},
        "not a record",
        {"id": 4, "title": "a", "description": "b", "completed": True},
    ]}))
    assert [task.id for task in load_seed_tasks(path)] == [4]


def test_duplicate_id_keeps_first_record(tmp_path, caplog):
    first = {"id": 1, "title": "first", "description": "b", "completed": False}
    second = {"id": 1, "title": "second", "description": "b", "completed": True}
    with caplog.at_level(logging.WARNING):
        tasks = load_seed_tasks(write(tmp_path, json.dumps({"tasks": [first, second]})))
    assert [task.title for task in tasks] == ["first"]
    assert "duplicate id 1" in caplog.text
