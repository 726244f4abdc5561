"""Guard Gallivant: tracing a patrolling guard and finding loop spots."""

from __future__ import annotations

from collections.abc import Iterator

from aocpuzzles.grid import Grid, Position, parse_grid

_UP = (-1, 0)


def _turn_right(direction: Position) -> Position:
    dr, dc = direction
    return (dc, -dr)


def _start(grid: Grid[str]) -> Position:
    start = grid.find("^")
    if start is None:
        raise ValueError("no guard '^' on the map")
    return start


def _walk(grid: Grid[str], start: Position) -> Iterator[tuple[Position, Position]]:
    """Yield (position, direction) states until the guard leaves the map."""
    position, direction = start, _UP
    while True:
        yield position, direction
        ahead = (position[0] + direction[0], position[1] + direction[1])
        if ahead not in grid:
            return
        if grid[ahead] == "#":
            direction = _turn_right(direction)
        else:
            position = ahead


def _loops(grid: Grid[str], start: Position) -> bool:
    seen: set[tuple[Position, Position]] = set()
    for state in _walk(grid, start):
        if state in seen:
            return True
        seen.add(state)
    return False


def part1(text: str) -> int:
    """Number of distinct cells the guard visits before leaving."""
    grid = parse_grid(text)
    return len({position for position, _ in _walk(grid, _start(grid))})


def part2(text: str) -> int:
    """Number of open cells where one new obstacle traps the guard in a loop."""
    grid = parse_grid(text)
    start = _start(grid)
    # Only an obstacle on the original route can change the guard's walk.
    candidates = {position for position, _ in _walk(grid, start)}
    count = 0
    for position in candidates:
        if grid[position] != ".":
            continue
        grid[position] = "#"
        if _loops(grid, start):
            count += 1
        grid[position] = "."
    return count