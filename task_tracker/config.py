from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def load_env() -> None:
    env_name = os.getenv("APP_ENV", "development")
    candidates = [Path.cwd(), PROJECT_ROOT]
    for base in candidates:
        env_path = base / ".env"
        if env_path.exists():
            load_dotenv(env_path)
            break

    for base in candidates:
        env_specific = base / f".env.{env_name}"
        if env_specific.exists():
            load_dotenv(env_specific, override=True)
            break


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    tasks_file: str = "tasks.json"
    log_level: str = "WARNING"
    log_dir: str | None = None
    atomic_writes: bool = True


load_env()

SETTINGS = Settings(
    tasks_file=os.getenv("TASKS_FILE", "").strip() or "tasks.json",
    log_level=os.getenv("LOG_LEVEL", "WARNING"),
    log_dir=os.getenv("LOG_DIR", "").strip() or None,
    atomic_writes=_env_bool("ATOMIC_WRITES", True),
)
