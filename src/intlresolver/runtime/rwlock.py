"""Readers-writer lock guarding a Localizer's configuration snapshot.

Allows:
- Multiple concurrent readers (message resolution capturing a snapshot)
- Exclusive writer access (init, load, change_current_locale)
- Writer preference, so a steady stream of lookups cannot starve a
  catalog load
- Reentrant reader locks (same thread can acquire read lock multiple times)

Read-to-write upgrades and write reentrancy raise RuntimeError: the
Localizer's write paths are single-level operations, so either case is a
programming error that would otherwise deadlock.

Python 3.13+.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

__all__ = ["RWLock"]


class RWLock:
    """Readers-writer lock with writer preference.

    Example:
        >>> lock = RWLock()
        >>> with lock.read():
        ...     pass  # shared access
        >>> with lock.write():
        ...     pass  # exclusive access
    """

    __slots__ = (
        "_active_readers",
        "_active_writer",
        "_condition",
        "_reader_threads",
        "_waiting_writers",
    )

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        self._active_readers: int = 0
        self._active_writer: int | None = None
        self._waiting_writers: int = 0
        # thread id -> reentrant acquisition count
        self._reader_threads: dict[int, int] = {}

    @contextmanager
    def read(self) -> Generator[None]:
        """Acquire the lock for shared access.

        Raises:
            RuntimeError: If the calling thread holds the write lock.
        """
        self._acquire_read()
        try:
            yield
        finally:
            self._release_read()

    @contextmanager
    def write(self) -> Generator[None]:
        """Acquire the lock for exclusive access.

        Raises:
            RuntimeError: If the calling thread holds a read lock or already
                holds the write lock.
        """
        self._acquire_write()
        try:
            yield
        finally:
            self._release_write()

    def _acquire_read(self) -> None:
        thread_id = threading.get_ident()
        with self._condition:
            if thread_id in self._reader_threads:
                self._reader_threads[thread_id] += 1
                return
            if self._active_writer == thread_id:
                msg = "Cannot acquire read lock while holding write lock"
                raise RuntimeError(msg)

            while self._active_writer is not None or self._waiting_writers > 0:
                self._condition.wait()

            self._active_readers += 1
            self._reader_threads[thread_id] = 1

    def _release_read(self) -> None:
        thread_id = threading.get_ident()
        with self._condition:
            if thread_id not in self._reader_threads:
                msg = "Thread does not hold read lock"
                raise RuntimeError(msg)

            self._reader_threads[thread_id] -= 1
            if self._reader_threads[thread_id] == 0:
                del self._reader_threads[thread_id]
                self._active_readers -= 1
                if self._active_readers == 0:
                    self._condition.notify_all()

    def _acquire_write(self) -> None:
        thread_id = threading.get_ident()
        with self._condition:
            if thread_id in self._reader_threads:
                msg = "Cannot upgrade read lock to write lock"
                raise RuntimeError(msg)
            if self._active_writer == thread_id:
                msg = "Cannot acquire write lock: already holding write lock"
                raise RuntimeError(msg)

            self._waiting_writers += 1
            try:
                while self._active_readers > 0 or self._active_writer is not None:
                    self._condition.wait()
                self._active_writer = thread_id
            finally:
                self._waiting_writers -= 1
                self._condition.notify_all()

    def _release_write(self) -> None:
        thread_id = threading.get_ident()
        with self._condition:
            if self._active_writer != thread_id:
                msg = "Thread does not hold write lock"
                raise RuntimeError(msg)
            self._active_writer = None
            self._condition.notify_all()

    @property
    def reader_count(self) -> int:
        """Number of distinct threads currently holding read locks."""
        with self._condition:
            return self._active_readers

    @property
    def writer_active(self) -> bool:
        """True if any thread currently holds the write lock."""
        with self._condition:
            return self._active_writer is not None
