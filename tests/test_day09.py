import pytest

from aocpuzzles.day09 import checksum, part1, part2

SAMPLE = "2333133121414131402"


def test_part1_sample():
    assert part1(SAMPLE) == 1928


def test_part2_sample():
    assert part2(SAMPLE) == 2858


def test_part1_small_map():
    assert part1("12345") == 60


def test_trailing_newline_is_ignored():
    assert part1(SAMPLE + "\n") == 1928


def test_checksum_skips_free_blocks():
    assert checksum([0, 0, None, 1]) == 3
    assert checksum([None, None]) == 0


def test_checksum_empty():
    assert checksum([]) == 0


def test_invalid_digit_raises():
    with pytest.raises(ValueError):
        part1("12a4")


def test_already_compact_map_unchanged():
    # One file with no free space: both parts leave it in place.
    assert part1("3") == part2("3") == 0