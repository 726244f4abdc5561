"""Garden Groups: pricing fences around regions of garden plots."""

from __future__ import annotations

from collections import deque

from aocpuzzles.grid import Grid, Position, parse_grid

_NEIGHBOURS = ((0, -1), (0, 1), (-1, 0), (1, 0))
_DIAGONALS = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def find_regions(grid: Grid[str]) -> list[list[Position]]:
    """Split the grid into connected regions of equal plants, in row order."""
    visited: set[Position] = set()
    regions: list[list[Position]] = []
    for r, row in enumerate(grid):
        for c, plant in enumerate(row):
            if (r, c) in visited:
                continue
            region = [(r, c)]
            visited.add((r, c))
            queue = deque([(r, c)])
            while queue:
                nr, nc = queue.popleft()
                for dr, dc in _NEIGHBOURS:
                    neighbour = (nr + dr, nc + dc)
                    if (
                        neighbour in grid
                        and neighbour not in visited
                        and grid[neighbour] == plant
                    ):
                        visited.add(neighbour)
                        region.append(neighbour)
                        queue.append(neighbour)
            regions.append(region)
    return regions


def _same(grid: Grid[str], position: Position, plant: str) -> bool:
    return position in grid and grid[position] == plant


def _perimeter(grid: Grid[str], region: list[Position]) -> int:
    return sum(
        not _same(grid, (r + dr, c + dc), grid[r, c])
        for r, c in region
        for dr, dc in _NEIGHBOURS
    )


def _corners(grid: Grid[str], region: list[Position]) -> int:
    count = 0
    for r, c in region:
        plant = grid[r, c]
        for dr, dc in _DIAGONALS:
            vertical = _same(grid, (r + dr, c), plant)
            horizontal = _same(grid, (r, c + dc), plant)
            diagonal = _same(grid, (r + dr, c + dc), plant)
            if not vertical and not horizontal:
                count += 1
            elif vertical and horizontal and not diagonal:
                count += 1
    return count


def part1(text: str) -> int:
    """Total price using area times perimeter for every region."""
    grid = parse_grid(text)
    return sum(len(region) * _perimeter(grid, region) for region in find_regions(grid))


def part2(text: str) -> int:
    """Total price using area times number of sides for every region."""
    grid = parse_grid(text)
    return sum(len(region) * _corners(grid, region) for region in find_regions(grid))