"""Chronospatial Computer: a small three-bit instruction machine."""

from __future__ import annotations

import re
from collections.abc import Sequence

_NUMBER = re.compile(r"\d+")


def run_program(a: int, b: int, c: int, program: Sequence[int]) -> list[int]:
    """Run ``program`` with the given registers and return its output values."""
    output: list[int] = []

    def combo(operand: int) -> int:
        if 0 <= operand <= 3:
            return operand
        if operand == 4:
            return a
        if operand == 5:
            return b
        if operand == 6:
            return c
        raise ValueError(f"invalid combo operand {operand}")

    pointer = 0
    while pointer < len(program) - 1:
        opcode, operand = program[pointer], program[pointer + 1]
        if opcode == 0:
            a >>= combo(operand)
        elif opcode == 1:
            b ^= operand
        elif opcode == 2:
            b = combo(operand) % 8
        elif opcode == 3:
            if a != 0:
                pointer = operand
                continue
        elif opcode == 4:
            b ^= c
        elif opcode == 5:
            output.append(combo(operand) % 8)
        elif opcode == 6:
            b = a >> combo(operand)
        elif opcode == 7:
            c = a >> combo(operand)
        else:
            raise ValueError(f"invalid opcode {opcode}")
        pointer += 2
    return output


def part1(text: str) -> str:
    """Comma-separated output of the program described by ``text``."""
    numbers = [int(n) for n in _NUMBER.findall(text)]
    if len(numbers) < 3:
        raise ValueError("expected three registers and a program")
    a, b, c, *program = numbers
    return ",".join(str(value) for value in run_program(a, b, c, program))