"""Counting islands of '1' cells in a grid, by breadth- and depth-first search."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence

Cell = tuple[int, int]

_LAND = "1"


def _land_cells(grid: Sequence[Sequence[str]]) -> set[Cell]:
    return {
        (r, c)
        for r, row in enumerate(grid)
        for c, value in enumerate(row)
        if value == _LAND
    }


def _neighbours(cell: Cell) -> Iterator[Cell]:
    r, c = cell
    yield r + 1, c
    yield r - 1, c
    yield r, c + 1
    yield r, c - 1


def _scan_order(grid: Sequence[Sequence[str]]) -> Iterable[Cell]:
    return ((r, c) for r, row in enumerate(grid) for c in range(len(row)))


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Count 4-connected groups of '1' cells using breadth-first search.

    The grid is not modified.
    """
    land = _land_cells(grid)
    islands = 0
    for cell in _scan_order(grid):
        if cell not in land:
            continue
        islands += 1
        land.discard(cell)
        queue = deque([cell])
        while queue:
            current = queue.popleft()
            for nxt in _neighbours(current):
                if nxt in land:
                    land.discard(nxt)
                    queue.append(nxt)
    return islands


def num_islands_dfs(grid: Sequence[Sequence[str]]) -> int:
    """Count 4-connected groups of '1' cells using depth-first search.

    An explicit stack is used, so large grids do not exhaust recursion.
    """
    land = _land_cells(grid)
    count = 0
    for cell in _scan_order(grid):
        if cell not in land:
            continue
        count += 1
        stack = [cell]
        while stack:
            current = stack.pop()
            if current not in land:
                continue
            land.discard(current)
            stack.extend(n for n in _neighbours(current) if n in land)
    return count