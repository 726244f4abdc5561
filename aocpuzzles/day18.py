"""RAM Run: escaping a memory grid as bytes fall into it."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

from aocpuzzles.grid import Grid, Position

_STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def _parse(text: str) -> list[Position]:
    """Fallen bytes as (row, column) positions; the input lists x,y."""
    positions = []
    for line in text.splitlines():
        x, y = line.split(",")[:2]
        positions.append((int(y), int(x)))
    return positions


def _shortest_path(fallen: Sequence[Position], edge: int) -> int | None:
    grid: Grid[str] = Grid([["."] * (edge + 1) for _ in range(edge + 1)])
    for position in fallen:
        grid[position] = "#"
    goal = (edge, edge)
    queue = deque([((0, 0), 0)])
    visited = {(0, 0)}
    while queue:
        (row, col), distance = queue.popleft()
        for dr, dc in _STEPS:
            nxt = (row + dr, col + dc)
            if nxt not in grid or grid[nxt] == "#":
                continue
            if nxt == goal:
                return distance + 1
            if nxt in visited:
                continue
            visited.add(nxt)
            queue.append((nxt, distance + 1))
    return None


def part1(text: str, edge: int, byte_count: int) -> int:
    """Fewest steps to the far corner after ``byte_count`` bytes, or 0 if blocked."""
    distance = _shortest_path(_parse(text)[:byte_count], edge)
    return 0 if distance is None else distance


def part2(text: str, edge: int, valid_point: int) -> tuple[int, int]:
    """Coordinates (x, y) of the first byte that cuts off the exit, or (0, 0)."""
    positions = _parse(text)
    for count in range(valid_point + 1, len(positions)):
        if _shortest_path(positions[:count], edge) is None:
            row, col = positions[count - 1]
            return (col, row)
    return (0, 0)