"""Grids and zones for placing stars in a zoned puzzle."""

from __future__ import annotations

from dataclasses import dataclass, field

EMPTY = "."
STAR = "@"


@dataclass
class Zone:
    """A lettered region made of ``(x, y)`` cells."""

    letter: str
    positions: list[tuple[int, int]] = field(default_factory=list)

    def size(self) -> int:
        return len(self.positions)


class Grid:
    """A rectangle of cells holding zone letters and placed stars."""

    def __init__(self, rows: int, columns: int) -> None:
        if rows < 0 or columns < 0:
            raise ValueError("grid dimensions must not be negative")
        self.rows = rows
        self.columns = columns
        self._cells = [[EMPTY] * columns for _ in range(rows)]
        self._row_counts = [0] * rows
        self._column_counts = [0] * columns
        self.stars: list[tuple[int, int]] = []

    def _check(self, row: int, column: int) -> None:
        if not (0 <= row < self.rows and 0 <= column < self.columns):
            raise IndexError(f"cell ({row}, {column}) is outside the grid")

    def __getitem__(self, cell: tuple[int, int]) -> str:
        row, column = cell
        self._check(row, column)
        return self._cells[row][column]

    def mark_zone(self, row: int, column: int, letter: str) -> None:
        """Write a zone letter into a cell."""
        self._check(row, column)
        self._cells[row][column] = letter

    def place_star(self, row: int, column: int) -> None:
        """Put a star in a cell; stars are recorded as ``(x, y)``."""
        self._check(row, column)
        self._cells[row][column] = STAR
        self._row_counts[row] += 1
        self._column_counts[column] += 1
        self.stars.append((column, row))

    def stars_in_row(self, row: int) -> int:
        return self._row_counts[row]

    def stars_in_column(self, column: int) -> int:
        return self._column_counts[column]

    def copy(self) -> "Grid":
        """Return an independent copy of the grid."""
        other = Grid(self.rows, self.columns)
        other._cells = [list(line) for line in self._cells]
        other._row_counts = list(self._row_counts)
        other._column_counts = list(self._column_counts)
        other.stars = list(self.stars)
        return other

    def __str__(self) -> str:
        return "".join("".join(line) + "\n" for line in self._cells)