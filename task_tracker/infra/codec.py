from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import Any

from task_tracker.domain.entities import Task
from task_tracker.domain.enums import TaskStatus
from task_tracker.domain.errors import CorruptStoreError, InvalidStatusError

logger = logging.getLogger(__name__)

RECORD_KEYS = frozenset({"id", "description", "status", "createdAt", "updatedAt"})
_TEXT_FIELDS = ("description", "status", "createdAt", "updatedAt")


def _to_record(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "description": task.description,
        "status": task.status.value,
        "createdAt": task.created_at,
        "updatedAt": task.updated_at,
    }


def _from_record(index: int, raw: Any) -> Task:
    if not isinstance(raw, dict):
        raise CorruptStoreError(f"record {index} is not an object")
    keys = set(raw)
    if keys != RECORD_KEYS:
        missing = sorted(RECORD_KEYS - keys)
        extra = sorted(keys - RECORD_KEYS)
        raise CorruptStoreError(f"record {index} has missing keys {missing} or unexpected keys {extra}")

    task_id = raw["id"]
    if not isinstance(task_id, int) or isinstance(task_id, bool):
        raise CorruptStoreError(f"record {index} has a non-integer id: {task_id!r}")
    for field in _TEXT_FIELDS:
        if not isinstance(raw[field], str):
            raise CorruptStoreError(f"record {index} field {field!r} is not a string")

    try:
        status = TaskStatus.parse(raw["status"])
    except InvalidStatusError as exc:
        raise CorruptStoreError(f"record {index}: {exc}") from exc

    return Task(
        id=task_id,
        description=raw["description"],
        status=status,
        created_at=raw["createdAt"],
        updated_at=raw["updatedAt"],
    )


def encode(tasks: Iterable[Task]) -> bytes:
    records = [_to_record(task) for task in tasks if not task.deleted]
    text = json.dumps(records, ensure_ascii=False, indent=2)
    return (text + "\n").encode("utf-8")


def decode(data: bytes | None) -> list[Task]:
    if data is None:
        return []
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise CorruptStoreError(f"task file is not valid UTF-8: {exc}") from exc
    if not text.strip():
        return []

    try:
        payload = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as exc:
        logger.debug("Task file is not valid JSON: %s", exc)
        raise CorruptStoreError(f"task file is not valid JSON: {exc}") from exc
    if not isinstance(payload, list):
        raise CorruptStoreError("task file must contain a JSON list")

    tasks: list[Task] = []
    seen: set[int] = set()
    for index, raw in enumerate(payload):
        task = _from_record(index, raw)
        if task.id in seen:
            raise CorruptStoreError(f"duplicate task id {task.id}")
        seen.add(task.id)
        tasks.append(task)
    return tasks
