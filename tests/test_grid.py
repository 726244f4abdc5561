import pytest

from aocpuzzles.grid import Grid, parse_grid

SAMPLE = "abc\ndef"


def test_parse_grid_round_trip():
    grid = parse_grid(SAMPLE)
    assert ["".join(row) for row in grid] == SAMPLE.splitlines()


def test_dimensions_match_input():
    lines = SAMPLE.splitlines()
    grid = parse_grid(SAMPLE)
    assert grid.height == len(lines)
    assert len(grid) == len(lines)
    assert grid.width == len(lines[0])


def test_empty_grid():
    grid = parse_grid("")
    assert grid.height == 0
    assert grid.width == 0
    assert list(grid) == []


def test_getitem_reads_cells():
    grid = parse_grid(SAMPLE)
    for r, line in enumerate(SAMPLE.splitlines()):
        for c, ch in enumerate(line):
            assert grid[r, c] == ch


@pytest.mark.parametrize("position", [(-1, 0), (0, -1), (2, 0), (0, 3)])
def test_getitem_out_of_bounds(position):
    grid = parse_grid(SAMPLE)
    assert position not in grid
    with pytest.raises(IndexError):
        grid[position]


def test_setitem_out_of_bounds_leaves_grid_unchanged():
    grid = parse_grid(SAMPLE)
    with pytest.raises(IndexError):
        grid[-1, -1] = "x"
    assert ["".join(row) for row in grid] == SAMPLE.splitlines()


def test_setitem_round_trip():
    grid = parse_grid(SAMPLE)
    grid[1, 1] = "#"
    assert grid[1, 1] == "#"
    assert grid[0, 0] == "a"


def test_contains_in_bounds():
    grid = parse_grid(SAMPLE)
    assert (0, 0) in grid
    assert (1, 2) in grid
    assert "a" not in grid


def test_find():
    grid = parse_grid(SAMPLE)
    assert grid.find("f") == (1, 2)
    assert grid.find("z") is None


def test_find_returns_first_in_row_order():
    grid = Grid([[1, 2], [2, 1]])
    position = grid.find(2)
    assert position is not None
    assert grid[position] == 2
    assert position[0] == 0


def test_copy_is_independent():
    grid = parse_grid(SAMPLE)
    clone = grid.copy()
    clone[0, 0] = "z"
    assert grid[0, 0] == "a"
    assert clone[0, 0] == "z"
    assert list(grid)[1] == list(clone)[1]