from __future__ import annotations


class TaskTrackerError(Exception):
    """Base class for every error raised by the tracker core."""


class InvalidStatusError(TaskTrackerError, ValueError):
    def __init__(self, status: object) -> None:
        super().__init__(f"Invalid status: {status!r}")
        self.status = status


class CorruptStoreError(TaskTrackerError):
    """The backing file exists but does not hold a valid task list."""


class StoreReadError(TaskTrackerError):
    pass


class StoreWriteError(TaskTrackerError):
    """The task list could not be written; the last change is not durable."""
