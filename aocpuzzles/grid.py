"""A rectangular grid of cells addressed by (row, column) positions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

Position = tuple[int, int]


class Grid(Generic[T]):
    """Rows of cells with bounds-checked (row, column) access.

    Negative positions are out of bounds rather than counted from the end.
    """

    def __init__(self, rows: Iterable[Iterable[T]]) -> None:
        self._rows: list[list[T]] = [list(row) for row in rows]

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self._rows)

    @property
    def width(self) -> int:
        """Number of cells in the first row, or 0 for an empty grid."""
        return len(self._rows[0]) if self._rows else 0

    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, position: object) -> bool:
        if not isinstance(position, tuple) or len(position) != 2:
            return False
        row, col = position
        return 0 <= row < len(self._rows) and 0 <= col < len(self._rows[row])

    def __getitem__(self, position: Position) -> T:
        if position not in self:
            raise IndexError(f"position {position!r} is out of bounds")
        row, col = position
        return self._rows[row][col]

    def __setitem__(self, position: Position, value: T) -> None:
        if position not in self:
            raise IndexError(f"position {position!r} is out of bounds")
        row, col = position
        self._rows[row][col] = value

    def __iter__(self) -> Iterator[tuple[T, ...]]:
        for row in self._rows:
            yield tuple(row)

    def __repr__(self) -> str:
        return f"Grid({self._rows!r})"

    def find(self, value: T) -> Position | None:
        """Return the first position holding ``value`` in row order, or None."""
        for r, row in enumerate(self._rows):
            for c, cell in enumerate(row):
                if cell == value:
                    return (r, c)
        return None

    def copy(self) -> Grid[T]:
        """Return an independent copy of the grid."""
        return Grid(self._rows)


def parse_grid(text: str) -> Grid[str]:
    """Build a grid of characters, one row per line of ``text``."""
    return Grid(text.splitlines())