import pytest

from aocpuzzles.day10 import part1, part2

SAMPLE = """89010123
78121874
87430965
96549874
45678903
32019012
01329801
10456732"""

SMALL = """0123
1234
8765
9876"""


def test_part1_sample():
    assert part1(SAMPLE) == 36


def test_part2_sample():
    assert part2(SAMPLE) == 81


def test_part1_small():
    assert part1(SMALL) == 1


def test_rating_at_least_score():
    assert part2(SMALL) >= part1(SMALL)


def test_no_trailheads():
    assert part1("1111\n2222") == 0
    assert part2("1111\n2222") == 0


def test_invalid_character_raises():
    with pytest.raises(ValueError):
        part1("0.1\n234")