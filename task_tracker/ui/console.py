from __future__ import annotations

from task_tracker.domain.entities import Task
from task_tracker.domain.enums import TaskStatus


def format_task(task: Task) -> str:
    return (
        f"ID: {task.id} | {task.description} | Status: {task.status.value}"
        f" | Created: {task.created_at} | Updated: {task.updated_at}"
    )


def render_task_list(tasks: list[Task], status: TaskStatus | None = None) -> list[str]:
    if tasks:
        return [format_task(task) for task in tasks]
    if status is None:
        return ["No tasks found"]
    return [f"No tasks found with status: {status.value}"]
