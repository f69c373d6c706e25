from __future__ import annotations

from contextlib import contextmanager
from threading import Lock
from typing import Iterator


class EngineerLockRegistry:
    """
    One mutex per engineer id.

    Assignment writes hold the engineer's lock from the capacity check until
    the commit, so two requests for the same engineer in this process cannot
    both pass validation against the same allocation set. Locks are kept for
    the lifetime of the registry.
    """

    def __init__(self) -> None:
        self._guard = Lock()
        self._locks: dict[str, Lock] = {}

    def _lock_for(self, engineer_id: str) -> Lock:
        with self._guard:
            lock = self._locks.get(engineer_id)
            if lock is None:
                lock = Lock()
                self._locks[engineer_id] = lock
            return lock

    @contextmanager
    def hold(self, engineer_id: str) -> Iterator[None]:
        lock = self._lock_for(engineer_id)
        with lock:
            yield

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)


__all__ = ["EngineerLockRegistry"]
