from __future__ import annotations

from enum import StrEnum

from .errors import InvalidStatusError


class TaskStatus(StrEnum):
    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"

    @classmethod
    def parse(cls, raw: str | TaskStatus) -> TaskStatus:
        try:
            return cls(raw)
        except ValueError:
            raise InvalidStatusError(raw) from None


SETTABLE_STATUSES = frozenset({TaskStatus.IN_PROGRESS, TaskStatus.DONE})
