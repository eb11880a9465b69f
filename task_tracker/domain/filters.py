from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .enums import TaskStatus


@dataclass(frozen=True)
class TaskFilters:
    status: Optional[TaskStatus] = None

    def matches(self, status: TaskStatus) -> bool:
        return self.status is None or status == self.status
