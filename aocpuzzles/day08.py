"""Resonant Collinearity: counting antinodes of antenna pairs."""

from __future__ import annotations

from collections import defaultdict
from itertools import combinations

from aocpuzzles.grid import Position, parse_grid


def _antennas(text: str) -> tuple[dict[str, list[Position]], int, int]:
    grid = parse_grid(text)
    groups: dict[str, list[Position]] = defaultdict(list)
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell != ".":
                groups[cell].append((r, c))
    return groups, grid.height, grid.width


def part1(text: str) -> int:
    """Antinodes at twice the distance of each same-frequency pair, inside the map."""
    groups, rows, cols = _antennas(text)
    antinodes: set[Position] = set()
    for coords in groups.values():
        for (r1, c1), (r2, c2) in combinations(coords, 2):
            antinodes.add((2 * r1 - r2, 2 * c1 - c2))
            antinodes.add((2 * r2 - r1, 2 * c2 - c1))
    return sum(1 for r, c in antinodes if 0 <= r < rows and 0 <= c < cols)


def part2(text: str) -> int:
    """Antinodes at every grid point in line with a same-frequency pair."""
    groups, rows, cols = _antennas(text)
    antinodes: set[Position] = set()

    def extend(r: int, c: int, dr: int, dc: int) -> None:
        while 0 <= r < rows and 0 <= c < cols:
            antinodes.add((r, c))
            r += dr
            c += dc

    for coords in groups.values():
        for (r1, c1), (r2, c2) in combinations(coords, 2):
            dr, dc = r2 - r1, c2 - c1
            extend(r1, c1, -dr, -dc)
            extend(r2, c2, dr, dc)
    return len(antinodes)