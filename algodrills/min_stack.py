"""A stack that reports its minimum in constant time."""

from __future__ import annotations


class MinStack:
    """Stack of integers with a companion stack of running minima."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self._minima: list[int] = []

    def push(self, val: int) -> None:
        """Put val on top of the stack."""
        self._items.append(val)
        if not self._minima or self._minima[-1] >= val:
            self._minima.append(val)

    def pop(self) -> None:
        """Remove the top item."""
        if not self._items:
            raise IndexError("pop from empty stack")
        if self._items[-1] == self._minima[-1]:
            self._minima.pop()
        self._items.pop()

    def top(self) -> int:
        """Return the top item."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def get_min(self) -> int:
        """Return the smallest item currently on the stack."""
        if not self._minima:
            raise IndexError("minimum of empty stack")
        return self._minima[-1]

    def __len__(self) -> int:
        return len(self._items)