"""A thread-safe FIFO queue."""

from __future__ import annotations

import queue
import threading
from collections import deque
from typing import Any


class ConcurrentQueue:
    """FIFO queue guarded by a lock; pop can block until data arrives."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()
        self._condition = threading.Condition()

    def push(self, record: Any) -> None:
        """Append a record and wake one waiting consumer."""
        with self._condition:
            self._items.append(record)
            self._condition.notify()

    def pop(self, blocking: bool = True) -> Any:
        """Remove and return the oldest record.

        When blocking, wait until a record is available; otherwise raise
        queue.Empty if there is none.
        """
        with self._condition:
            if blocking:
                self._condition.wait_for(lambda: bool(self._items))
            elif not self._items:
                raise queue.Empty
            return self._items.popleft()

    def __len__(self) -> int:
        with self._condition:
            return len(self._items)

    def empty(self) -> bool:
        """Return True when the queue holds no records."""
        with self._condition:
            return not self._items

    def clear(self) -> None:
        """Drop every queued record."""
        with self._condition:
            self._items.clear()