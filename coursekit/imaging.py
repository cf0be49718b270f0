"""Operations on images drawn as grids of characters: replace, dilation and erosion."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

OPERATIONS = ("replace", "dilation", "erosion")


def replace(grid: Sequence[str], origin: str, replacement: str) -> list[str]:
    """Swap every ``origin`` character for ``replacement``."""
    return [row.replace(origin, replacement) for row in grid]


def dilate(grid: Sequence[str], symbol: str) -> list[str]:
    """Spread ``symbol`` from each cell that holds it to the cells above, below and beside.

    Only cells that held the symbol before the operation spread it.
    """
    cells = [list(row) for row in grid]
    for y, row in enumerate(grid):
        for x, char in enumerate(row):
            if char != symbol:
                continue
            for ny, nx in ((y - 1, x), (y + 1, x), (y, x - 1), (y, x + 1)):
                if 0 <= ny < len(cells) and 0 <= nx < len(cells[ny]):
                    cells[ny][nx] = symbol
    return ["".join(row) for row in cells]


def erode(grid: Sequence[str], symbol: str) -> list[str]:
    """Shrink the foreground by spreading the background ``symbol`` into its neighbours."""
    return dilate(grid, symbol)


def transform(
    lines: Iterable[str], operation: str, origin: str, replacement: str | None = None
) -> list[str]:
    """Apply an operation to the image; the last line fixes the image width.

    ``dilation`` spreads ``origin``; ``replace`` and ``erosion`` need a
    replacement, which erosion spreads. Any other operation leaves the
    image as it is.
    """
    lines = list(lines)
    width = len(lines[-1]) if lines else 0
    if any(len(line) < width for line in lines):
        raise ValueError("every line must be at least as wide as the last line")
    grid = [line[:width] for line in lines]
    if operation == "dilation":
        return dilate(grid, origin)
    if operation in ("replace", "erosion"):
        if not replacement:
            raise ValueError(f"{operation} needs a replacement character")
        if operation == "replace":
            return replace(grid, origin, replacement)
        return erode(grid, replacement)
    return grid


def _read_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry: <input> <output> <operation> <char> [char]."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not 4 <= len(args) <= 5:
        print("Please only enter 4-5 command line arguments", file=sys.stderr)
        return 1
    input_file, output_file, operation = args[0], args[1], args[2]
    origin = args[3][:1]
    replacement = args[4][:1] if len(args) == 5 else None
    if not origin:
        print("Error: the character argument must not be empty", file=sys.stderr)
        return 1
    try:
        with open(input_file, encoding="utf-8") as handle:
            lines = _read_lines(handle.read())
    except OSError:
        print(f"Can't open {input_file} to read.", file=sys.stderr)
        return 1
    try:
        result = transform(lines, operation, origin, replacement)
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    try:
        with open(output_file, "w", encoding="utf-8") as handle:
            handle.write("".join(f"{row}\n" for row in result))
    except OSError:
        print(f"Can't open {output_file} to write.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())