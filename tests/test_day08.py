from aocpuzzles.day08 import part1, part2

SAMPLE = """............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............"""

TWO_ANTENNAS = "\n".join(
    [
        "..........",
        "..........",
        "..........",
        "....a.....",
        "..........",
        ".....a....",
        "..........",
        "..........",
        "..........",
        "..........",
    ]
)

T_ANTENNAS = "\n".join(
    ["T.........", "...T......", ".T........"] + [".........."] * 7
)


def test_part1_sample():
    assert part1(SAMPLE) == 14


def test_part2_sample():
    assert part2(SAMPLE) == 34


def test_part1_two_antennas():
    assert part1(TWO_ANTENNAS) == 2


def test_part2_t_antennas():
    assert part2(T_ANTENNAS) == 9


def test_no_antennas():
    assert part1("....\n....") == 0
    assert part2("....\n....") == 0