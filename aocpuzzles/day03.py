"""Mull It Over: summing products from corrupted memory."""

from __future__ import annotations

import re

_MUL = re.compile(r"mul\((\d+),(\d+)\)")
_INSTRUCTION = re.compile(r"mul\((\d+),(\d+)\)|do\(\)|don't\(\)")


def part1(text: str) -> int:
    """Sum of every well-formed mul(a,b) product."""
    return sum(int(a) * int(b) for a, b in _MUL.findall(text))


def part2(text: str) -> int:
    """Sum of mul products, honouring do() and don't() switches."""
    enabled = True
    total = 0
    for match in _INSTRUCTION.finditer(text):
        token = match.group(0)
        if token == "don't()":
            enabled = False
        elif token == "do()":
            enabled = True
        elif enabled:
            total += int(match.group(1)) * int(match.group(2))
    return total