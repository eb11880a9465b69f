from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from task_tracker.config import SETTINGS


def setup_logging() -> None:
    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [console_handler]

    if SETTINGS.log_dir:
        log_dir = Path(SETTINGS.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / "task_tracker.log", maxBytes=2_000_000, backupCount=3, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(
        level=SETTINGS.log_level.upper(),
        handlers=handlers,
    )
