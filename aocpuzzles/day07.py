"""Bridge Repair: finding operators that make calibration equations true."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum


class Operation(Enum):
    """Operators that combine the running total with the next value."""

    ADD = "+"
    MULTIPLY = "*"
    CONCATENATE = "||"

    def apply(self, left: int, right: int) -> int:
        """Combine ``left`` and ``right`` with this operator."""
        if self is Operation.ADD:
            return left + right
        if self is Operation.MULTIPLY:
            return left * right
        if left == 0:
            return right
        return int(f"{left}{right}")


def _parse(text: str) -> list[tuple[int, list[int]]]:
    equations = []
    for line in text.splitlines():
        target, values = line.split(":")[:2]
        equations.append((int(target), [int(v) for v in values.strip().split(" ")]))
    return equations


def _matches(
    target: int,
    values: Sequence[int],
    operations: Sequence[Operation],
    current: int = 0,
) -> bool:
    if not values:
        return current == target
    if current > target:
        return False
    head, rest = values[0], values[1:]
    for operation in operations:
        left = 1 if operation is Operation.MULTIPLY and current == 0 else current
        if _matches(target, rest, operations, operation.apply(left, head)):
            return True
    return False


def _total(text: str, operations: Sequence[Operation]) -> int:
    return sum(
        target
        for target, values in _parse(text)
        if _matches(target, values, operations)
    )


def part1(text: str) -> int:
    """Sum of targets reachable with addition and multiplication."""
    return _total(text, (Operation.ADD, Operation.MULTIPLY))


def part2(text: str) -> int:
    """Sum of targets reachable with addition, concatenation and multiplication."""
    return _total(
        text, (Operation.ADD, Operation.CONCATENATE, Operation.MULTIPLY)
    )