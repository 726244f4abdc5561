import pytest

from aocpuzzles.day06 import part1, part2

SAMPLE = """....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#..."""


def test_part1_sample():
    assert part1(SAMPLE) == 41


def test_part2_sample():
    assert part2(SAMPLE) == 6


def test_missing_guard():
    with pytest.raises(ValueError):
        part1("....\n....")


def test_straight_exit_visits_column():
    text = "...\n...\n.^."
    assert part1(text) == len(text.splitlines())