from __future__ import annotations

import contextlib
import logging
import os
from pathlib import Path

from task_tracker.domain.errors import StoreReadError, StoreWriteError

logger = logging.getLogger(__name__)


class TaskFileRepository:
    def __init__(self, path: str | Path, atomic_writes: bool = True) -> None:
        self._path = Path(path)
        self._atomic_writes = atomic_writes

    @property
    def path(self) -> Path:
        return self._path

    @property
    def tmp_path(self) -> Path:
        return self._path.with_name(self._path.name + ".tmp")

    def read(self) -> bytes | None:
        try:
            return self._path.read_bytes()
        except FileNotFoundError:
            logger.debug("Task file %s does not exist yet", self._path)
            return None
        except OSError as exc:
            raise StoreReadError(f"cannot read {self._path}: {exc}") from exc

    def write(self, data: bytes) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            if self._atomic_writes:
                self._replace(data)
            else:
                self._path.write_bytes(data)
        except OSError as exc:
            logger.debug("Failed to write task file %s: %s", self._path, exc)
            raise StoreWriteError(f"cannot write {self._path}: {exc}") from exc
        logger.debug("Wrote %d bytes to %s", len(data), self._path)

    def _replace(self, data: bytes) -> None:
        tmp = self.tmp_path
        try:
            tmp.write_bytes(data)
            os.replace(tmp, self._path)
        except OSError:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise
