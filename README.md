# aocpuzzles

Solvers for a season of daily programming puzzles. There is one module per
day, from `aocpuzzles.day01` to `aocpuzzles.day19`. Each module has
`part1(text)` and most also have `part2(text)`. Both take the puzzle input
as a string and return the answer.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

The `aocpuzzles` command solves one part of one day and prints the answer:

```
aocpuzzles DAY PART [INPUT]
```

- `DAY` is the puzzle day and `PART` is `1` or `2`.
- `INPUT` is the input file. Use `-` to read from standard input. Without
  it, the command reads `input1.txt` or `input2.txt` in the current
  directory, depending on the part.

Examples:

```
aocpuzzles 1 1 input.txt
aocpuzzles 11 2 - < input.txt
aocpuzzles 5 2          # reads input2.txt
```

If a day and part has no solver, the command reports a usage error. If the
input file cannot be read, it prints a message to standard error and exits
with status 1.

Days 14 and 18 are run at the full puzzle dimensions:

- Day 14 uses a floor 101 columns wide and 103 rows tall.
- Day 18 uses a 71 × 71 memory grid (edge 70). It takes the first 1024
  fallen bytes for part 1, and starts its part 2 search after 1024 bytes.

## Library use

```python
from aocpuzzles import day01
from aocpuzzles.cli import solve

sample = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3"
day01.part1(sample)        # 11
day01.part2(sample)        # 31

solve(1, 2, sample)        # 31; raises ValueError for an unknown day/part
```

Some days take extra arguments, so that the worked examples, which are
smaller than the real puzzles, can be solved too:

- `day14.part1(text, rows, cols)` and `day14.part2(text, rows, cols)`
- `day18.part1(text, edge, byte_count)` returns the shortest path length,
  or 0 if the exit is blocked.
- `day18.part2(text, edge, valid_point)` returns the `(x, y)` of the first
  byte that cuts off the exit, or `(0, 0)`.

Helpers that can be used on their own:

- `aocpuzzles.grid.Grid` is a grid of cells indexed by `(row, col)` tuples.
  It supports `in`, iteration over rows, `find(value)` and `copy()`.
  Positions outside the grid, negative ones included, raise `IndexError`.
  `parse_grid(text)` builds a grid of characters from lines of text.
- `day02.is_safe(levels)`
- `day07.Operation`, the add, multiply and concatenate operators, with
  `apply(left, right)`
- `day09.checksum(blocks)`
- `day11.count_stones(stones, blinks)`
- `day12.find_regions(grid)`
- `day15.get_direction(ch)` and `day15.format_grid(grid)`
- `day17.run_program(a, b, c, program)`

## What is not included

- Day 16 has no solver.
- Day 17 has only part 1.