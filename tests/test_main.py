from __future__ import annotations

import json
from pathlib import Path

import pytest

from task_tracker.main import main


@pytest.fixture()
def tasks_file(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"


def run(tasks_file: Path, *args: str) -> int:
    return main(["--file", str(tasks_file), *args])


def test_add_update_mark_and_list(tasks_file: Path, capsys) -> None:
    assert run(tasks_file, "add", "buy milk") == 0
    assert run(tasks_file, "add", "walk dog") == 0
    assert run(tasks_file, "update", "1", "buy oat milk") == 0
    assert run(tasks_file, "mark-in-progress", "1") == 0
    assert run(tasks_file, "mark-done", "2") == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Task added successfully (ID: 1)",
        "Task added successfully (ID: 2)",
        "Task updated successfully",
        "Task marked as in progress",
        "Task marked as done",
    ]

    assert run(tasks_file, "list", "in-progress") == 0
    [line] = capsys.readouterr().out.splitlines()
    assert line.startswith("ID: 1 | buy oat milk | Status: in-progress | Created: ")

    records = json.loads(tasks_file.read_text("utf-8"))
    assert [(r["id"], r["status"]) for r in records] == [(1, "in-progress"), (2, "done")]


def test_delete_then_list_reports_no_tasks(tasks_file: Path, capsys) -> None:
    run(tasks_file, "add", "temp")
    assert run(tasks_file, "delete", "1") == 0
    assert run(tasks_file, "list") == 0
    assert run(tasks_file, "list", "done") == 0

    out = capsys.readouterr().out.splitlines()
    assert out[-3:] == ["Task deleted successfully", "No tasks found", "No tasks found with status: done"]
    assert json.loads(tasks_file.read_text("utf-8")) == []


def test_unknown_id_exits_with_error(tasks_file: Path, capsys) -> None:
    assert run(tasks_file, "mark-done", "7") == 1

    assert "Task with ID 7 not found" in capsys.readouterr().err
    assert not tasks_file.exists()


def test_invalid_list_status(tasks_file: Path, capsys) -> None:
    assert run(tasks_file, "list", "someday") == 2

    assert "Invalid status" in capsys.readouterr().err


def test_corrupt_file_is_reported_and_left_untouched(tasks_file: Path, capsys) -> None:
    tasks_file.write_text('[{"id": 1, "description": "tru', "utf-8")

    assert run(tasks_file, "add", "new") == 1

    assert "not valid JSON" in capsys.readouterr().err
    assert tasks_file.read_text("utf-8") == '[{"id": 1, "description": "tru'


def test_non_integer_id_is_a_usage_error(tasks_file: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        run(tasks_file, "delete", "abc")

    assert excinfo.value.code == 2


def test_empty_list_status_is_rejected(tasks_file: Path, capsys) -> None:
    assert run(tasks_file, "list", "") == 2

    assert "Invalid status" in capsys.readouterr().err


def test_unreadable_task_file_exits_with_error(tmp_path: Path, capsys) -> None:
    assert run(tmp_path, "list") == 1

    assert "cannot read" in capsys.readouterr().err


def test_deeply_nested_file_is_reported_as_corrupt(tasks_file: Path, capsys) -> None:
    tasks_file.write_bytes(b"[" * 100_000)

    assert run(tasks_file, "list") == 1

    assert "not valid JSON" in capsys.readouterr().err
