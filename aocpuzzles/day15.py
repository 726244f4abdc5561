"""Warehouse Woes: a robot pushing boxes around a warehouse."""

from __future__ import annotations

from aocpuzzles.grid import Grid, Position

_WIDE = {"#": "##", "O": "[]", ".": ".."}


def get_direction(ch: str) -> Position:
    """Row and column step for a move character; anything unknown moves left."""
    if ch == "^":
        return (-1, 0)
    if ch == ">":
        return (0, 1)
    if ch == "v":
        return (1, 0)
    return (0, -1)


def format_grid(grid: Grid[str]) -> str:
    """Render the grid with a space after every cell and a blank gap below."""
    rows = "".join("".join(f"{cell} " for cell in row) + "\n" for row in grid)
    return rows + "\n\n\n"


def _parse(text: str) -> tuple[list[str], str]:
    sections = text.split("\n\n")
    if len(sections) < 2:
        raise ValueError("expected a map and moves separated by a blank line")
    return sections[0].splitlines(), sections[1].replace("\n", "")


def _robot(grid: Grid[str]) -> Position:
    position = grid.find("@")
    if position is None:
        raise ValueError("no robot '@' on the map")
    return position


def _gps_total(grid: Grid[str], box: str) -> int:
    return sum(
        100 * r + c
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if cell == box
    )


def part1(text: str) -> int:
    """Sum of box GPS coordinates after the robot finishes moving."""
    lines, moves = _parse(text)
    grid = Grid(lines)
    robot = _robot(grid)

    for move in moves:
        dr, dc = get_direction(move)
        boxes: list[Position] = []
        r, c = robot
        while True:
            r, c = r + dr, c + dc
            cell = grid[r, c]
            if cell == "O":
                boxes.append((r, c))
            else:
                break
        if cell == "#":
            continue

        grid[robot] = "."
        robot = (robot[0] + dr, robot[1] + dc)
        grid[robot] = "@"
        for br, bc in boxes:
            grid[br + dr, bc + dc] = "O"

    return _gps_total(grid, "O")


def _pushed_cells(
    grid: Grid[str], start: Position, direction: Position
) -> list[Position] | None:
    """Cells that move with the robot, starting with the robot; None if blocked."""
    dr, dc = direction
    cells = [start]
    seen = {start}
    pending = [start]
    while pending:
        r, c = pending.pop()
        ahead = (r + dr, c + dc)
        cell = grid[ahead]
        if cell == "#":
            return None
        if cell not in "[]":
            continue
        partner = (ahead[0], ahead[1] + (1 if cell == "[" else -1))
        for position in (ahead, partner):
            if position not in seen:
                seen.add(position)
                cells.append(position)
                pending.append(position)
    return cells


def part2(text: str) -> int:
    """Sum of wide-box GPS coordinates on the doubled-width warehouse."""
    lines, moves = _parse(text)
    grid = Grid(
        [list("".join(_WIDE.get(ch, "@.") for ch in line)) for line in lines]
    )
    robot = _robot(grid)

    for move in moves:
        direction = get_direction(move)
        cells = _pushed_cells(grid, robot, direction)
        if cells is None:
            continue
        dr, dc = direction
        before = grid.copy()

        grid[robot] = "."
        robot = (robot[0] + dr, robot[1] + dc)
        grid[robot] = "@"
        boxes = cells[1:]
        for position in boxes:
            grid[position] = "."
        for r, c in boxes:
            grid[r + dr, c + dc] = before[r, c]

    return _gps_total(grid, "[")