from aocpuzzles.day03 import part1, part2


def test_part1_sample():
    text = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
    assert part1(text) == 161


def test_part2_sample():
    text = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"
    assert part2(text) == 48


def test_part2_without_switches_matches_part1():
    text = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
    assert part2(text) == part1(text)


def test_no_instructions():
    assert part1("nothing here") == 0
    assert part2("don't()") == 0