"""Claw Contraption: cheapest button presses to reach each prize."""

from __future__ import annotations

import re

_NUMBER = re.compile(r"\d+")
_PRIZE_OFFSET = 10_000_000_000_000.0
_PRESS_LIMIT = 100


def _cost(block: str, offset: float, limit: int | None) -> int | None:
    numbers = [float(n) for n in _NUMBER.findall(block)]
    if len(numbers) < 6:
        raise ValueError("a machine needs six numbers")
    ax, ay, bx, by, rx, ry = numbers[:6]
    rx += offset
    ry += offset

    # Solve x*ax + y*bx = rx and x*ay + y*by = ry.
    determinant = ax * by - ay * bx
    if determinant == 0 or bx == 0:
        return None
    x = (rx * by - ry * bx) / determinant
    y = (rx - x * ax) / bx
    if not (x.is_integer() and y.is_integer()):
        return None

    presses_a = max(int(x), 0)
    presses_b = max(int(y), 0)
    if limit is not None and (presses_a >= limit or presses_b >= limit):
        return None
    return presses_a * 3 + presses_b


def _total(text: str, offset: float, limit: int | None) -> int:
    costs = (_cost(block, offset, limit) for block in text.split("\n\n"))
    return sum(cost for cost in costs if cost is not None)


def part1(text: str) -> int:
    """Fewest tokens to win every winnable prize with under 100 presses each."""
    return _total(text, 0.0, _PRESS_LIMIT)


def part2(text: str) -> int:
    """Fewest tokens to win every prize after moving prizes far away."""
    return _total(text, _PRIZE_OFFSET, None)