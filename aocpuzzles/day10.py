"""Hoof It: scoring and rating hiking trails on a topographic map."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from aocpuzzles.grid import Grid, Position


def _parse(text: str) -> Grid[int]:
    rows = []
    for line in text.splitlines():
        if any(ch not in "0123456789" for ch in line):
            raise ValueError(f"invalid height in line {line!r}")
        rows.append([int(ch) for ch in line])
    return Grid(rows)


def _trailheads(grid: Grid[int]) -> list[Position]:
    return [
        (r, c)
        for r, row in enumerate(grid)
        for c, height in enumerate(row)
        if height == 0
    ]


def _trail_ends(grid: Grid[int], start: Position) -> Iterator[Position]:
    """Yield the summit reached by every distinct trail from ``start``."""
    queue = deque([start])
    while queue:
        r, c = queue.popleft()
        height = grid[r, c]
        for neighbour in ((r, c - 1), (r, c + 1), (r - 1, c), (r + 1, c)):
            if neighbour not in grid or grid[neighbour] != height + 1:
                continue
            if grid[neighbour] == 9:
                yield neighbour
            else:
                queue.append(neighbour)


def part1(text: str) -> int:
    """Sum over trailheads of the number of distinct summits reachable."""
    grid = _parse(text)
    return sum(len(set(_trail_ends(grid, head))) for head in _trailheads(grid))


def part2(text: str) -> int:
    """Sum over trailheads of the number of distinct trails to a summit."""
    grid = _parse(text)
    return sum(
        sum(1 for _ in _trail_ends(grid, head)) for head in _trailheads(grid)
    )