"""Command-line entry point that solves one puzzle part from an input file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from typing import Any

from aocpuzzles import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
    day17,
    day18,
    day19,
)

_ROBOT_ROWS = 103
_ROBOT_COLS = 101
_MEMORY_EDGE = 70
_FALLEN_BYTES = 1024

_SOLVERS: dict[tuple[int, int], Callable[[str], Any]] = {
    (1, 1): day01.part1,
    (1, 2): day01.part2,
    (2, 1): day02.part1,
    (2, 2): day02.part2,
    (3, 1): day03.part1,
    (3, 2): day03.part2,
    (4, 1): day04.part1,
    (4, 2): day04.part2,
    (5, 1): day05.part1,
    (5, 2): day05.part2,
    (6, 1): day06.part1,
    (6, 2): day06.part2,
    (7, 1): day07.part1,
    (7, 2): day07.part2,
    (8, 1): day08.part1,
    (8, 2): day08.part2,
    (9, 1): day09.part1,
    (9, 2): day09.part2,
    (10, 1): day10.part1,
    (10, 2): day10.part2,
    (11, 1): day11.part1,
    (11, 2): day11.part2,
    (12, 1): day12.part1,
    (12, 2): day12.part2,
    (13, 1): day13.part1,
    (13, 2): day13.part2,
    (14, 1): lambda text: day14.part1(text, _ROBOT_ROWS, _ROBOT_COLS),
    (14, 2): lambda text: day14.part2(text, _ROBOT_ROWS, _ROBOT_COLS),
    (15, 1): day15.part1,
    (15, 2): day15.part2,
    (17, 1): day17.part1,
    (18, 1): lambda text: day18.part1(text, _MEMORY_EDGE, _FALLEN_BYTES),
    (18, 2): lambda text: day18.part2(text, _MEMORY_EDGE, _FALLEN_BYTES),
    (19, 1): day19.part1,
    (19, 2): day19.part2,
}


def solve(day: int, part: int, text: str) -> Any:
    """Answer for the given day and part of the puzzle input ``text``."""
    try:
        solver = _SOLVERS[day, part]
    except KeyError:
        raise ValueError(f"no solution for day {day} part {part}") from None
    return solver(text)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aocpuzzles", description="Solve one part of a daily puzzle."
    )
    parser.add_argument("day", type=int, help="puzzle day")
    parser.add_argument("part", type=int, choices=(1, 2), help="puzzle part")
    parser.add_argument(
        "input",
        nargs="?",
        help="input file, '-' for standard input (default: input<part>.txt)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Read the puzzle input, solve it and print the answer."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if (args.day, args.part) not in _SOLVERS:
        parser.error(f"no solution for day {args.day} part {args.part}")

    path = args.input or f"input{args.part}.txt"
    try:
        if path == "-":
            text = sys.stdin.read()
        else:
            with open(path, encoding="utf-8") as handle:
                text = handle.read()
    except OSError as exc:
        print(f"aocpuzzles: cannot read {path}: {exc}", file=sys.stderr)
        return 1

    print(solve(args.day, args.part, text))
    return 0


if __name__ == "__main__":
    sys.exit(main())