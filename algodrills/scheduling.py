"""Minimum CPU intervals to run tasks with a cooldown between equal tasks."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from string import ascii_uppercase


def _letter_frequencies(tasks: Iterable[str]) -> list[int]:
    counts = Counter(tasks)
    unknown = set(counts) - set(ascii_uppercase)
    if unknown:
        raise ValueError(f"tasks must be letters 'A'-'Z', got {sorted(unknown)!r}")
    return [counts[letter] for letter in ascii_uppercase]


def least_interval(tasks: Iterable[str], n: int) -> int:
    """Greedy count of idle slots left after filling the gaps of the most
    frequent task."""
    tasks = list(tasks)
    counts = sorted(_letter_frequencies(tasks))
    *others, max_freq = counts
    idle = (max_freq - 1) * n
    idle -= sum(min(max_freq - 1, c) for c in others)
    return max(0, idle) + len(tasks)


def least_interval_formula(tasks: Iterable[str], n: int) -> int:
    """Closed form: (max_freq - 1) frames of n + 1 slots plus the tasks
    sharing the maximum frequency, never less than the number of tasks."""
    tasks = list(tasks)
    freq = _letter_frequencies(tasks)
    max_freq = max(freq)
    max_count = freq.count(max_freq)
    slots = (max_freq - 1) * (n + 1) + max_count
    return max(len(tasks), slots)