"""Ceres Search: word search for XMAS and X-shaped MAS."""

from __future__ import annotations

from aocpuzzles.grid import Grid, parse_grid

_WORD = "XMAS"
_DIRECTIONS = [
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
]
# Corner letters in the order top-left, top-right, bottom-left, bottom-right.
_CROSS_PATTERNS = {"MMSS", "SSMM", "MSMS", "SMSM"}


def _spells_word(grid: Grid[str], row: int, col: int, dr: int, dc: int) -> bool:
    for step, letter in enumerate(_WORD):
        position = (row + step * dr, col + step * dc)
        if position not in grid or grid[position] != letter:
            return False
    return True


def part1(text: str) -> int:
    """Occurrences of XMAS in any of the eight directions."""
    grid = parse_grid(text)
    return sum(
        _spells_word(grid, r, c, dr, dc)
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if cell == _WORD[0]
        for dr, dc in _DIRECTIONS
    )


def _corners(grid: Grid[str], row: int, col: int) -> str | None:
    positions = [
        (row - 1, col - 1),
        (row - 1, col + 1),
        (row + 1, col - 1),
        (row + 1, col + 1),
    ]
    if not all(p in grid for p in positions):
        return None
    return "".join(grid[p] for p in positions)


def part2(text: str) -> int:
    """Number of MAS crosses centred on an A."""
    grid = parse_grid(text)
    return sum(
        _corners(grid, r, c) in _CROSS_PATTERNS
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if cell == "A"
    )