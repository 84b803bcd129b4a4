"""Backtracking searches: combinations, permutations, subsets and case variants."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return every multiset of candidates (with reuse) whose sum is target.

    Each candidate is first taken as often as possible before moving on,
    which fixes the order of the results.
    """
    nums = list(candidates)

    def search(remaining: int, start: int, chosen: list[int]) -> Iterator[list[int]]:
        if remaining == 0:
            yield list(chosen)
            return
        if remaining < 0 or start >= len(nums):
            return
        chosen.append(nums[start])
        yield from search(remaining - nums[start], start, chosen)
        chosen.pop()
        yield from search(remaining, start + 1, chosen)

    return list(search(target, 0, []))


def combine(n: int, k: int) -> list[list[int]]:
    """Return all k-element combinations of 1..n in lexicographic order."""

    def search(start: int, chosen: list[int]) -> Iterator[list[int]]:
        if len(chosen) == k:
            yield list(chosen)
            return
        for value in range(start, n + 1):
            chosen.append(value)
            yield from search(value + 1, chosen)
            chosen.pop()

    return list(search(1, []))


def _is_ascii_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def letter_case_permutation(s: str) -> list[str]:
    """Return every string obtained by switching the case of letters in s.

    Digits are kept as they are; for every other character the lower-case
    variant is produced before the upper-case one.
    """

    def search(rest: str, built: str) -> Iterator[str]:
        if not rest:
            yield built
            return
        ch, tail = rest[0], rest[1:]
        if _is_ascii_digit(ch):
            yield from search(tail, built + ch)
        else:
            yield from search(tail, built + ch.lower())
            yield from search(tail, built + ch.upper())

    return list(search(s, ""))


def permute_by_insertion(nums: Sequence[int]) -> list[list[int]]:
    """Return all permutations by inserting the first element into each
    permutation of the rest, at every position."""
    if not nums:
        return [[]]
    head, rest = nums[0], nums[1:]
    result = []
    for perm in permute_by_insertion(rest):
        for position in range(len(perm) + 1):
            result.append([*perm[:position], head, *perm[position:]])
    return result


def permute(nums: Sequence[int]) -> list[list[int]]:
    """Return all permutations, generated by in-place swaps on a copy."""
    work = list(nums)
    result: list[list[int]] = []

    def search(index: int) -> None:
        if index == len(work):
            result.append(list(work))
            return
        for i in range(index, len(work)):
            work[index], work[i] = work[i], work[index]
            search(index + 1)
            work[index], work[i] = work[i], work[index]

    search(0)
    return result


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Return the power set of nums, each subset in input order."""
    items = list(nums)

    def search(start: int, chosen: list[int]) -> Iterator[list[int]]:
        yield list(chosen)
        for index in range(start, len(items)):
            chosen.append(items[index])
            yield from search(index + 1, chosen)
            chosen.pop()

    return list(search(0, []))