"""A growable connect-four board."""

from __future__ import annotations

_DEFAULT_ROWS = 5
_DEFAULT_COLUMNS = 4
_RUN = 4


class Board:
    """A board of columns that grows when a token is dropped beyond its edges."""

    def __init__(self, first: str = "", second: str = "", empty: str = "") -> None:
        self.first = first
        self.second = second
        self.empty = empty
        self._rows = _DEFAULT_ROWS
        self._stacks: list[list[str]] = [[] for _ in range(_DEFAULT_COLUMNS)]

    def rows(self) -> int:
        return self._rows

    def columns(self) -> int:
        return len(self._stacks)

    def tokens_in_column(self, column: int) -> int:
        """Number of tokens in a column; IndexError outside the board."""
        if not 0 <= column < self.columns():
            raise IndexError(f"column {column} is outside the board")
        return len(self._stacks[column])

    def tokens_in_row(self, row: int) -> int:
        """Number of tokens at a given height; IndexError outside the board."""
        if not 0 <= row < self._rows:
            raise IndexError(f"row {row} is outside the board")
        return sum(1 for stack in self._stacks if len(stack) > row)

    def insert(self, column: int, first: bool) -> str | None:
        """Drop a token into a column and return the winning token, if any."""
        if column < 0:
            raise IndexError(f"column {column} is outside the board")
        if column >= self.columns():
            self._stacks.extend([] for _ in range(column + 1 - self.columns()))
        stack = self._stacks[column]
        stack.append(self.first if first else self.second)
        self._rows = max(self._rows, len(stack))
        return self.winner()

    def winner(self) -> str | None:
        """Return a token that has four in a line, or None.

        The scan runs up each column of four or more tokens and then along
        each row, and the running streak is carried from one line to the next.
        """
        count = 0
        current = ""
        for stack in self._stacks:
            if len(stack) < _RUN:
                continue
            for token in stack:
                if token != current:
                    current = token
                    count = 0
                else:
                    count += 1
                if count == _RUN - 1:
                    return current
        for row in range(self._rows):
            for stack in self._stacks:
                if row < len(stack):
                    token = stack[row]
                    if token != current:
                        count = 0
                        current = token
                    else:
                        count += 1
                        if count == _RUN - 1:
                            return current
                else:
                    current = ""
                    count = 0
        return None

    def clear(self) -> None:
        """Remove every token and return to the starting size."""
        self._rows = _DEFAULT_ROWS
        self._stacks = [[] for _ in range(_DEFAULT_COLUMNS)]

    def copy(self) -> "Board":
        """Return an independent copy of the board."""
        other = Board(self.first, self.second, self.empty)
        other._rows = self._rows
        other._stacks = [list(stack) for stack in self._stacks]
        return other

    def __str__(self) -> str:
        lines = []
        for row in reversed(range(self._rows)):
            cells = (stack[row] if row < len(stack) else self.empty for stack in self._stacks)
            lines.append(" ".join(cells))
        return "\n".join(lines) + "\n"