from aocpuzzles.day04 import part1, part2


def _rows(spec):
    return "\n".join(spec.split())


SAMPLE1 = _rows(
    "MMMSXXMASM MSAMXMSMSA AMXSXMAAMM MSAMASMSMX XMASAMXAMM "
    "XXAMMXXAMA SMSMSASXSS SAXAMASAAA MAMMMXMMMM MXMXAXMASX"
)

SAMPLE2 = _rows(
    ".M.S...... ..A..MSMS. .M.S.MAA.. ..A.ASMSM. .M.S.M.... "
    ".......... S.S.S.S.S. .A.A.A.A.. M.M.M.M.M. .........."
)


def test_part1_sample():
    assert part1(SAMPLE1) == 18


def test_part2_sample():
    assert part2(SAMPLE2) == 9


def test_part2_on_full_sample():
    assert part2(SAMPLE1) == 9


def test_part1_reverse_reading_counts():
    assert part1("XMAS") == part1("SAMX")