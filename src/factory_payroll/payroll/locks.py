from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator


class EmployeeLocks:
    """One re-entrant lock per employee.

    Recomputing the same employee twice at once could insert the same Sunday
    credit twice (the credit check and insert are separate statements), so
    every writer for an employee goes through `hold`.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: dict[int, threading.RLock] = {}

    def _lock_for(self, employee_id: int) -> threading.RLock:
        with self._guard:
            lock = self._locks.get(employee_id)
            if lock is None:
                lock = self._locks[employee_id] = threading.RLock()
            return lock

    @contextmanager
    def hold(self, employee_id: int) -> Iterator[None]:
        lock = self._lock_for(int(employee_id))
        with lock:
            yield
