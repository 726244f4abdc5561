"""Linen Layout: building towel designs from available patterns."""

from __future__ import annotations

from functools import lru_cache


def _parse(text: str) -> tuple[frozenset[str], list[str]]:
    sections = text.split("\n\n")
    if len(sections) < 2:
        raise ValueError("expected patterns and designs separated by a blank line")
    return frozenset(sections[0].split(", ")), sections[1].splitlines()


def _arrangement_counter(patterns: frozenset[str]):
    @lru_cache(maxsize=None)
    def arrangements(design: str) -> int:
        if not design:
            return 1
        return sum(
            arrangements(design[i:])
            for i in range(1, len(design) + 1)
            if design[:i] in patterns
        )

    return arrangements


def part1(text: str) -> int:
    """Number of designs that can be built from the patterns."""
    patterns, designs = _parse(text)
    arrangements = _arrangement_counter(patterns)
    return sum(arrangements(design) > 0 for design in designs)


def part2(text: str) -> int:
    """Total number of ways to build every design from the patterns."""
    patterns, designs = _parse(text)
    arrangements = _arrangement_counter(patterns)
    return sum(arrangements(design) for design in designs)