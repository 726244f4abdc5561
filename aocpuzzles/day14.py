"""Restroom Redoubt: robots moving on a wrapping grid."""

from __future__ import annotations

import re

_NUMBER = re.compile(r"-?\d+")
_SECONDS = 100

_Robot = tuple[int, int, int, int]


def _parse(text: str) -> list[_Robot]:
    robots = []
    for line in text.splitlines():
        numbers = [int(n) for n in _NUMBER.findall(line)]
        if len(numbers) < 4:
            raise ValueError(f"invalid robot line {line!r}")
        px, py, vx, vy = numbers[:4]
        robots.append((px, py, vx, vy))
    return robots


def part1(text: str, rows: int, cols: int) -> int:
    """Safety factor: product of robot counts per quadrant after 100 seconds."""
    mid_row, mid_col = rows // 2, cols // 2
    quadrants = [0, 0, 0, 0]
    for px, py, vx, vy in _parse(text):
        x = (px + vx * _SECONDS) % cols
        y = (py + vy * _SECONDS) % rows
        if x == mid_col or y == mid_row:
            continue
        quadrants[(y > mid_row) * 2 + (x > mid_col)] += 1
    top_left, top_right, bottom_left, bottom_right = quadrants
    return top_left * top_right * bottom_left * bottom_right


def part2(text: str, rows: int, cols: int) -> int:
    """First second at which no two robots share a position."""
    robots = _parse(text)
    positions = [(px, py) for px, py, _, _ in robots]
    velocities = [(vx, vy) for _, _, vx, vy in robots]
    seconds = 0
    while True:
        seconds += 1
        positions = [
            ((x + vx) % cols, (y + vy) % rows)
            for (x, y), (vx, vy) in zip(positions, velocities)
        ]
        if len(set(positions)) == len(positions):
            return seconds