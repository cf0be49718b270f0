"""Solve zoned star-placement puzzles by depth-first search."""

from __future__ import annotations

import sys
from typing import Iterator, Sequence

from coursekit.star_grid import Grid, Zone

_USAGE = (
    "Usage: star_battle <input> <output> <stars> <print|count> "
    "<all_solutions|one_solution>"
)


def can_place(grid: Grid, x: int, y: int, stars: int) -> bool:
    """Whether a star fits at ``(x, y)``.

    The row and column must still have room for a star, and no star may
    already sit in the cell or in any of the eight cells around it.
    """
    if stars == grid.stars_in_row(y) or stars == grid.stars_in_column(x):
        return False
    return not any(abs(sx - x) < 2 and abs(sy - y) < 2 for sx, sy in grid.stars)


def _search(
    grid: Grid,
    zones: Sequence[Zone],
    stars: int,
    zone_number: int,
    placed: int,
    start: int,
) -> Iterator[Grid]:
    if zone_number == len(zones):
        yield grid
        return
    if placed == stars:
        yield from _search(grid, zones, stars, zone_number + 1, 0, 0)
        return
    zone = zones[zone_number]
    if start == zone.size():
        return
    for index in range(start, zone.size() - (stars - placed) + 1):
        x, y = zone.positions[index]
        if can_place(grid, x, y, stars):
            child = grid.copy()
            child.place_star(y, x)
            yield from _search(child, zones, stars, zone_number, placed + 1, index + 1)


def _solutions(grid: Grid, zones: Sequence[Zone], stars: int) -> Iterator[Grid]:
    ordered = sorted(zones, key=Zone.size)
    return _search(grid, ordered, stars, 0, 0, 0)


def find_solutions(grid: Grid, zones: Sequence[Zone], stars: int) -> list[Grid]:
    """Every placement of ``stars`` stars per zone, row and column limit.

    Zones are searched smallest first; the grid passed in is left untouched.
    """
    return list(_solutions(grid, zones, stars))


def first_solution(grid: Grid, zones: Sequence[Zone], stars: int) -> Grid | None:
    """The first solution in search order, or None if there is none."""
    return next(_solutions(grid, zones, stars), None)


def parse_puzzle(text: str) -> tuple[Grid, list[Zone]]:
    """Read ``rows columns`` then zones as ``letter count x y ...``."""
    tokens = iter(text.split())

    def number() -> int:
        try:
            return int(next(tokens))
        except StopIteration:
            raise ValueError("puzzle input ends too early") from None

    rows = number()
    columns = number()
    grid = Grid(rows, columns)
    zones: list[Zone] = []
    for letter in tokens:
        if len(letter) != 1:
            raise ValueError(f"zone letter must be one character: {letter!r}")
        zone = Zone(letter)
        for _ in range(number()):
            x = number()
            y = number()
            zone.positions.append((x, y))
            grid.mark_zone(y, x, letter)
        zones.append(zone)
    return grid, zones


def format_solutions(solutions: Sequence[Grid], output_mode: str) -> str:
    """The solution count, followed by every grid when the mode is ``print``."""
    parts = [f"Number of solutions: {len(solutions)}\n"]
    if output_mode == "print":
        for number, solution in enumerate(solutions, start=1):
            parts.append(f"Solution {number}:\n{solution}\n")
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry: <input> <output> <stars> <output mode> <solution mode>."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 5:
        print(_USAGE, file=sys.stderr)
        return 1
    input_file, output_file, stars_text, output_mode, solution_mode = args
    try:
        stars = int(stars_text)
    except ValueError:
        print(f"Error: star count must be an integer: {stars_text}", file=sys.stderr)
        return 1
    try:
        with open(input_file, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print(f"Can't open {input_file} to read.", file=sys.stderr)
        return 1
    try:
        grid, zones = parse_puzzle(text)
    except (ValueError, IndexError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    if solution_mode == "all_solutions":
        report = format_solutions(find_solutions(grid, zones, stars), output_mode)
    elif solution_mode == "one_solution":
        found = first_solution(grid, zones, stars)
        report = format_solutions([] if found is None else [found], output_mode)
    else:
        report = ""

    try:
        with open(output_file, "w", encoding="utf-8") as handle:
            handle.write(report)
    except OSError:
        print(f"Can't open {output_file} to write.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())