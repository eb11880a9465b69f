from __future__ import annotations

from dataclasses import dataclass

from .enums import TaskStatus


@dataclass
class Task:
    id: int
    description: str
    status: TaskStatus
    created_at: str
    updated_at: str
    deleted: bool = False
