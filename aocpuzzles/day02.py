"""Red-Nosed Reports: checking level sequences for safety."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def _parse(text: str) -> list[list[int]]:
    return [[int(n) for n in line.split(" ")] for line in text.splitlines()]


def is_safe(levels: Sequence[int]) -> bool:
    """True if levels move steadily in one direction by 1 to 3 each step."""
    if len(levels) < 2:
        raise ValueError("a report needs at least two levels")
    increasing = levels[0] < levels[1]
    return all(
        1 <= (b - a if increasing else a - b) <= 3 for a, b in pairwise(levels)
    )


def _is_safe_with_dampener(levels: list[int]) -> bool:
    return any(
        is_safe(levels[:i] + levels[i + 1 :]) for i in range(len(levels))
    )


def part1(text: str) -> int:
    """Number of safe reports."""
    return sum(is_safe(levels) for levels in _parse(text))


def part2(text: str) -> int:
    """Number of reports that are safe once any single level is removed."""
    return sum(_is_safe_with_dampener(levels) for levels in _parse(text))