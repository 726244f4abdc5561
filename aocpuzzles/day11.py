"""Plutonian Pebbles: counting stones that split as you blink."""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache


@lru_cache(maxsize=None)
def _blink(stone: int, steps: int) -> int:
    if steps == 0:
        return 1
    if stone == 0:
        return _blink(1, steps - 1)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return _blink(int(digits[:half]), steps - 1) + _blink(
            int(digits[half:]), steps - 1
        )
    return _blink(stone * 2024, steps - 1)


def count_stones(stones: Iterable[int], blinks: int) -> int:
    """Number of stones after blinking ``blinks`` times."""
    return sum(_blink(stone, blinks) for stone in stones)


def _parse(text: str) -> list[int]:
    return [int(n) for n in text.split(" ")]


def part1(text: str) -> int:
    """Number of stones after 25 blinks."""
    return count_stones(_parse(text), 25)


def part2(text: str) -> int:
    """Number of stones after 75 blinks."""
    return count_stones(_parse(text), 75)