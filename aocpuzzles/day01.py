"""Historian Hysteria: comparing two lists of location ids."""

from __future__ import annotations

from collections import Counter


def _parse(text: str) -> tuple[list[int], list[int]]:
    left: list[int] = []
    right: list[int] = []
    for line in text.splitlines():
        fields = line.split(" ")
        left.append(int(fields[0]))
        right.append(int(fields[-1]))
    return left, right


def part1(text: str) -> int:
    """Total distance between the two lists after sorting each."""
    left, right = _parse(text)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part2(text: str) -> int:
    """Similarity score: each left id times its count in the right list."""
    left, right = _parse(text)
    counts = Counter(right)
    return sum(item * counts[item] for item in left)