"""Process-wide JSON document store.

One instance is created by the composition root, opened once, and
injected into every repository. Each collection is a JSON array in its
own file under ``data_dir``.

Every read-modify-write runs inside ``store.locked(collection)``: a
thread lock for callers sharing this handle plus an exclusive ``fcntl``
lock on a ``<collection>.json.lock`` sidecar, so separate processes (one
per CLI invocation) working on the same data directory are serialized
too. Writes go to a private temp file that is renamed over the
collection, so readers never see a partial document.
"""

from __future__ import annotations

import fcntl
import json
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

import structlog

from marketplace.domain.exceptions import PersistenceError

logger = structlog.get_logger(__name__)

_LOCK_SUFFIX = ".lock"


class JsonDocumentStore:

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = data_dir
        self._lock = threading.RLock()
        self._held: dict[str, int] = {}
        self._is_open = False

    # --- Lifecycle ------------------------------------------------------------

    def open(self) -> JsonDocumentStore:
        try:
            self._data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise PersistenceError(f"Cannot open data directory {self._data_dir}: {exc}") from exc
        self._is_open = True
        logger.debug("Document store opened", data_dir=str(self._data_dir))
        return self

    def close(self) -> None:
        if self._is_open:
            self._is_open = False
            logger.debug("Document store closed", data_dir=str(self._data_dir))

    def __enter__(self) -> JsonDocumentStore:
        return self.open()

    def __exit__(self, *exc_info) -> None:
        self.close()

    # --- Locking --------------------------------------------------------------

    @contextmanager
    def locked(self, collection: str) -> Iterator[None]:
        """Hold ``collection`` exclusively across threads and processes.

        Re-entrant within one thread: only the outermost entry takes the
        file lock.
        """
        path = self._path(collection)
        with self._lock:
            if self._held.get(collection):
                self._held[collection] += 1
                try:
                    yield
                finally:
                    self._held[collection] -= 1
                return

            lock_path = path.with_suffix(path.suffix + _LOCK_SUFFIX)
            try:
                handle = lock_path.open("a+", encoding="utf-8")
                fcntl.flock(handle.fileno(), fcntl.LOCK_EX)
            except OSError as exc:
                logger.error("Collection lock failed", collection=collection, error=str(exc))
                raise PersistenceError(f"Cannot lock {collection}: {exc}") from exc

            self._held[collection] = 1
            try:
                yield
            finally:
                self._held[collection] = 0
                fcntl.flock(handle.fileno(), fcntl.LOCK_UN)
                handle.close()

    # --- Collections ----------------------------------------------------------

    def load(self, collection: str) -> list[dict]:
        path = self._path(collection)
        if not path.exists():
            return []
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.error("Collection read failed", collection=collection, error=str(exc))
            raise PersistenceError(f"Cannot read {collection}: {exc}") from exc

    def persist(self, collection: str, records: list[dict]) -> None:
        """Write the whole collection; replaced atomically via rename."""
        path = self._path(collection)
        try:
            fd, tmp_path = tempfile.mkstemp(
                dir=str(path.parent), prefix=f".{path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                    tmp.write(json.dumps(records, indent=2) + "\n")
                    tmp.flush()
                    os.fsync(tmp.fileno())
                os.replace(tmp_path, path)
            except BaseException:
                Path(tmp_path).unlink(missing_ok=True)
                raise
        except OSError as exc:
            logger.error("Collection write failed", collection=collection, error=str(exc))
            raise PersistenceError(f"Cannot write {collection}: {exc}") from exc

    def _path(self, collection: str) -> Path:
        if not self._is_open:
            raise PersistenceError("Document store is not open")
        return self._data_dir / f"{collection}.json"
