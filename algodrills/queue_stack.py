"""A LIFO stack built on a single FIFO queue."""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class QueueStack(Generic[T]):
    """Stack whose push rotates the queue so the newest item is at the front."""

    def __init__(self) -> None:
        self._queue: deque[T] = deque()

    def push(self, x: T) -> None:
        """Put x on top of the stack."""
        self._queue.append(x)
        for _ in range(len(self._queue) - 1):
            self._queue.append(self._queue.popleft())

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._queue:
            raise IndexError("pop from empty stack")
        return self._queue.popleft()

    def top(self) -> T:
        """Return the top item without removing it."""
        if not self._queue:
            raise IndexError("top of empty stack")
        return self._queue[0]

    def empty(self) -> bool:
        """Return True when the stack holds no items."""
        return not self._queue

    def __len__(self) -> int:
        return len(self._queue)