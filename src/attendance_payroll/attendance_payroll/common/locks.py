from __future__ import annotations

import threading
from collections import defaultdict
from contextlib import contextmanager
from typing import Iterator


class EmployeeLocks:
    """One mutex per employee code.

    Allowance and leave balances are shared by all of an employee's records,
    so every pipeline run that may write them holds the employee's lock.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = defaultdict(threading.Lock)

    @contextmanager
    def hold(self, code: str) -> Iterator[None]:
        with self._guard:
            lock = self._locks[code]
        with lock:
            yield
