"""A multiple-producer, multiple-consumer FIFO queue guarded by a lock."""

from __future__ import annotations

import queue
import threading
from collections import deque
from typing import Deque, Generic, TypeVar

T = TypeVar("T")


class SharedQueue(Generic[T]):
    """Thread-safe FIFO queue with blocking and non-blocking pops."""

    def __init__(self) -> None:
        self._items: Deque[T] = deque()
        self._lock = threading.Lock()
        self._not_empty = threading.Condition(self._lock)

    def push(self, item: T) -> None:
        """Append *item* and wake one waiting consumer."""
        with self._lock:
            self._items.append(item)
            self._not_empty.notify()

    def try_and_pop(self) -> T:
        """Remove and return the oldest item at once.

        Raises :class:`queue.Empty` when nothing is queued.
        """
        with self._lock:
            if not self._items:
                raise queue.Empty
            return self._items.popleft()

    def wait_and_pop(self) -> T:
        """Remove and return the oldest item, waiting until one is available."""
        with self._not_empty:
            while not self._items:
                self._not_empty.wait()
            return self._items.popleft()

    def empty(self) -> bool:
        """Return whether the queue holds no items."""
        with self._lock:
            return not self._items

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)