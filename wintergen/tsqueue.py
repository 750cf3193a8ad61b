"""A thread-safe double-ended queue with blocking waits."""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Generic, Optional, TypeVar

T = TypeVar("T")


class TsQueue(Generic[T]):
    """Deque guarded by a lock; waiters are woken whenever its size changes."""

    def __init__(self) -> None:
        self._items: Deque[T] = deque()
        self._changed = threading.Condition()

    def push_front(self, value: T) -> None:
        with self._changed:
            self._items.appendleft(value)
            self._changed.notify_all()

    def push_back(self, value: T) -> None:
        with self._changed:
            self._items.append(value)
            self._changed.notify_all()

    def pop_front(self) -> T:
        with self._changed:
            if not self._items:
                raise IndexError("pop from an empty queue")
            value = self._items.popleft()
            self._changed.notify_all()
            return value

    def pop_back(self) -> T:
        with self._changed:
            if not self._items:
                raise IndexError("pop from an empty queue")
            value = self._items.pop()
            self._changed.notify_all()
            return value

    def front(self) -> T:
        with self._changed:
            if not self._items:
                raise IndexError("front of an empty queue")
            return self._items[0]

    def back(self) -> T:
        with self._changed:
            if not self._items:
                raise IndexError("back of an empty queue")
            return self._items[-1]

    def __len__(self) -> int:
        with self._changed:
            return len(self._items)

    def empty(self) -> bool:
        with self._changed:
            return not self._items

    def clear(self) -> None:
        with self._changed:
            self._items.clear()
            self._changed.notify_all()

    def wait_for_event(self, timeout: Optional[float] = None) -> bool:
        """Block until the queue holds an item; False if ``timeout`` ran out."""
        with self._changed:
            return self._changed.wait_for(lambda: bool(self._items), timeout)

    def wait_until_at_most(self, max_size: int, timeout: Optional[float] = None) -> bool:
        """Block until the queue holds at most ``max_size`` items."""
        with self._changed:
            return self._changed.wait_for(lambda: len(self._items) <= max_size, timeout)