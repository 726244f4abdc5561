import io

import pytest

from aocpuzzles.cli import main, solve

LISTS = """3   4
4   3
2   5
1   3
3   9
3   3"""

TOWELS = """r, wr, b, g, bwu, rb, gb, br

brwrr
bggr
gbbr
rrbgbr
ubwu
bwurrg
brgr
bbrgwb"""

PROGRAM = """Register A: 729
Register B: 0
Register C: 0

Program: 0,1,5,4,3,0"""


def test_solve_day1_both_parts():
    assert solve(1, 1, LISTS) == 11
    assert solve(1, 2, LISTS) == 31


def test_solve_day17_returns_text():
    assert solve(17, 1, PROGRAM) == "4,6,3,5,6,3,5,2,1,0"


def test_solve_unknown_day():
    with pytest.raises(ValueError):
        solve(16, 1, "")


def test_solve_day17_has_no_second_part():
    with pytest.raises(ValueError):
        solve(17, 2, PROGRAM)


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(TOWELS, encoding="utf-8")
    assert main(["19", "2", str(path)]) == 0
    assert capsys.readouterr().out == "16\n"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(TOWELS))
    assert main(["19", "1", "-"]) == 0
    assert capsys.readouterr().out == "6\n"


def test_main_missing_file(tmp_path, capsys):
    assert main(["1", "1", str(tmp_path / "absent.txt")]) == 1
    assert "cannot read" in capsys.readouterr().err


def test_main_rejects_unknown_part():
    with pytest.raises(SystemExit) as excinfo:
        main(["1", "3"])
    assert excinfo.value.code == 2


def test_main_rejects_unsolved_day():
    with pytest.raises(SystemExit) as excinfo:
        main(["16", "1"])
    assert excinfo.value.code == 2