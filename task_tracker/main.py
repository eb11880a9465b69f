from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from task_tracker.config import SETTINGS
from task_tracker.domain.enums import TaskStatus
from task_tracker.domain.errors import InvalidStatusError, TaskTrackerError
from task_tracker.domain.filters import TaskFilters
from task_tracker.infra.logging import setup_logging
from task_tracker.infra.repository import TaskFileRepository
from task_tracker.services.task_service import TaskService
from task_tracker.ui.console import render_task_list

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="task-cli", description="Track tasks in a local JSON file.")
    parser.add_argument(
        "--file",
        default=SETTINGS.tasks_file,
        help="path to the task file (default: %(default)s)",
    )
    commands = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    add = commands.add_parser("add", help="add a new task")
    add.add_argument("description")

    update = commands.add_parser("update", help="update a task description")
    update.add_argument("id", type=int)
    update.add_argument("description")

    delete = commands.add_parser("delete", help="delete a task")
    delete.add_argument("id", type=int)

    in_progress = commands.add_parser("mark-in-progress", help="mark a task as in progress")
    in_progress.add_argument("id", type=int)

    done = commands.add_parser("mark-done", help="mark a task as done")
    done.add_argument("id", type=int)

    list_cmd = commands.add_parser("list", help="list tasks, optionally by status")
    list_cmd.add_argument("status", nargs="?", help="todo, in-progress or done")
    return parser


def _run(service: TaskService, args: argparse.Namespace) -> int:
    if args.command == "add":
        task = service.create(args.description)
        print(f"Task added successfully (ID: {task.id})")
        return 0

    if args.command == "list":
        status = TaskStatus.parse(args.status) if args.status is not None else None
        tasks = service.list_tasks(TaskFilters(status=status))
        for line in render_task_list(tasks, status):
            print(line)
        return 0

    if args.command == "update":
        task = service.update_description(args.id, args.description)
        message = "Task updated successfully"
    elif args.command == "delete":
        task = service.delete(args.id)
        message = "Task deleted successfully"
    elif args.command == "mark-in-progress":
        task = service.mark_in_progress(args.id)
        message = "Task marked as in progress"
    else:
        task = service.mark_done(args.id)
        message = "Task marked as done"

    if not task:
        print(f"Task with ID {args.id} not found", file=sys.stderr)
        return 1
    print(message)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    setup_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        service = TaskService(TaskFileRepository(args.file, atomic_writes=SETTINGS.atomic_writes))
        return _run(service, args)
    except InvalidStatusError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    except TaskTrackerError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
