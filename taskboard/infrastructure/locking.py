"""Reader/Writer Lock: many concurrent readers or one exclusive writer.

Invariants:
    - A writer holds the lock alone; readers never overlap a writer
    - Waiting writers block new readers (no writer starvation)
    - Every acquire is paired with a release via the context managers

Design Decisions:
    - Built on threading.Condition: the stdlib has no RW lock and request
      handlers run on FastAPI's worker threads, not the event loop
    - Not reentrant: each store operation acquires exactly once
"""

import threading
from contextlib import contextmanager
from typing import Iterator


class ReadWriteLock:
    """Coarse reader/writer lock guarding a whole collection."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        """Hold the lock in shared mode for the duration of the block."""
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        """Hold the lock in exclusive mode for the duration of the block."""
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
