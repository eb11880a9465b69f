from __future__ import annotations

import logging
from collections.abc import Callable

from task_tracker.domain.entities import Task
from task_tracker.domain.enums import SETTABLE_STATUSES, TaskStatus
from task_tracker.domain.errors import InvalidStatusError
from task_tracker.domain.filters import TaskFilters
from task_tracker.infra import codec
from task_tracker.infra.clock import utc_timestamp
from task_tracker.infra.repository import TaskFileRepository

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, repo: TaskFileRepository, clock: Callable[[], str] = utc_timestamp) -> None:
        self._repo = repo
        self._clock = clock
        self._tasks: list[Task] = codec.decode(repo.read())
        self._next_id = max((task.id for task in self._tasks), default=0) + 1
        logger.debug("Loaded %d tasks, next id %d", len(self._tasks), self._next_id)

    @property
    def next_id(self) -> int:
        return self._next_id

    def list_tasks(self, filters: TaskFilters | None = None) -> list[Task]:
        filters = filters or TaskFilters()
        return [
            task for task in self._tasks
            if not task.deleted and filters.matches(task.status)
        ]

    def get_task(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id and not task.deleted:
                return task
        return None

    def create(self, description: str) -> Task:
        now = self._clock()
        task = Task(
            id=self._next_id,
            description=description,
            status=TaskStatus.TODO,
            created_at=now,
            updated_at=now,
        )
        self._next_id += 1
        self._tasks.append(task)
        logger.debug("Created task %d", task.id)
        self._save()
        return task

    def update_description(self, task_id: int, description: str) -> Task | None:
        task = self.get_task(task_id)
        if not task:
            return None
        task.description = description
        task.updated_at = self._clock()
        logger.debug("Updated description of task %d", task_id)
        self._save()
        return task

    def set_status(self, task_id: int, status: TaskStatus | str) -> Task | None:
        status = TaskStatus.parse(status)
        if status not in SETTABLE_STATUSES:
            raise InvalidStatusError(status.value)
        task = self.get_task(task_id)
        if not task:
            return None
        task.status = status
        task.updated_at = self._clock()
        logger.debug("Task %d is now %s", task_id, status.value)
        self._save()
        return task

    def mark_in_progress(self, task_id: int) -> Task | None:
        return self.set_status(task_id, TaskStatus.IN_PROGRESS)

    def mark_done(self, task_id: int) -> Task | None:
        return self.set_status(task_id, TaskStatus.DONE)

    def delete(self, task_id: int) -> Task | None:
        task = self.get_task(task_id)
        if not task:
            return None
        task.deleted = True
        logger.debug("Deleted task %d", task_id)
        self._save()
        return task

    def _save(self) -> None:
        self._repo.write(codec.encode(self._tasks))
