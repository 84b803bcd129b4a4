"""Stack-based problems: brackets, RPN, temperatures, fleets, histograms."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator, Sequence

_OPENERS = frozenset("({[")
_MATCHING_OPENER = {")": "(", "]": "[", "}": "{"}


def is_valid_parentheses(s: str) -> bool:
    """Return True when every bracket in s is closed in the right order.

    Any character that is not an opening bracket is treated as a closer,
    so characters other than brackets make the string invalid.
    """
    stack: list[str] = []
    for ch in s:
        if ch in _OPENERS:
            stack.append(ch)
            continue
        if not stack or stack[-1] != _MATCHING_OPENER.get(ch):
            return False
        stack.pop()
    return not stack


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate integer reverse Polish notation; division truncates toward zero.

    Raises ValueError for malformed expressions or tokens and
    ZeroDivisionError when dividing by zero.
    """
    stack: list[int] = []
    for token in tokens:
        op = _OPERATORS.get(token)
        if op is None:
            stack.append(int(token))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {token!r} needs two operands")
        right = stack.pop()
        left = stack.pop()
        stack.append(op(left, right))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """For each day, the number of days until a warmer one, or 0 if none."""
    result = [0] * len(temperatures)
    unresolved: list[int] = []
    for day, temp in enumerate(temperatures):
        while unresolved and temp > temperatures[unresolved[-1]]:
            earlier = unresolved.pop()
            result[earlier] = day - earlier
        unresolved.append(day)
    return result


def generate_parentheses(n: int) -> list[str]:
    """Return all well-formed strings of n bracket pairs, in sorted order."""

    def search(current: str, opened: int, closed: int) -> Iterator[str]:
        if len(current) == 2 * n:
            yield current
            return
        if opened < n:
            yield from search(current + "(", opened + 1, closed)
        if closed < opened:
            yield from search(current + ")", opened, closed + 1)

    return list(search("", 0, 0))


def car_fleet(target: int, position: Sequence[int], speed: Sequence[int]) -> int:
    """Count the fleets of cars that arrive at target.

    Cars are taken from the one nearest the target backwards; a car that
    would arrive no later than the fleet ahead joins it. When two cars share
    a position the later one in the input wins.
    """
    cars = dict(zip(position, speed, strict=True))
    arrival_times: list[float] = []
    for pos, spd in sorted(cars.items(), reverse=True):
        arrival_times.append((target - pos) / spd)
        if len(arrival_times) >= 2 and arrival_times[-1] <= arrival_times[-2]:
            arrival_times.pop()
    return len(arrival_times)


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle that fits in the histogram."""
    n = len(heights)
    prev_smaller = [-1] * n
    next_smaller = [n] * n

    stack: list[int] = []
    for i, height in enumerate(heights):
        while stack and heights[stack[-1]] >= height:
            stack.pop()
        prev_smaller[i] = stack[-1] if stack else -1
        stack.append(i)

    stack.clear()
    for i in reversed(range(n)):
        while stack and heights[stack[-1]] >= heights[i]:
            stack.pop()
        next_smaller[i] = stack[-1] if stack else n
        stack.append(i)

    return max(
        (
            height * (right - left - 1)
            for height, left, right in zip(heights, prev_smaller, next_smaller)
        ),
        default=0,
    )