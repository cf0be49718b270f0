import pytest

from coursekit.star_grid import EMPTY, STAR, Grid, Zone


def test_new_grid_is_empty():
    grid = Grid(2, 3)
    assert str(grid) == (EMPTY * 3 + "\n") * 2
    assert grid.stars == []


def test_mark_zone_writes_letter():
    grid = Grid(2, 2)
    grid.mark_zone(1, 0, "A")
    assert grid[1, 0] == "A"
    assert str(grid).splitlines()[1] == "A" + EMPTY


def test_place_star_updates_counts_and_positions():
    grid = Grid(3, 3)
    grid.place_star(2, 1)
    assert grid[2, 1] == STAR
    assert grid.stars == [(1, 2)]
    assert grid.stars_in_row(2) == 1
    assert grid.stars_in_column(1) == 1
    assert grid.stars_in_row(0) == 0


def test_copy_is_independent():
    grid = Grid(2, 2)
    grid.place_star(0, 0)
    other = grid.copy()
    other.place_star(1, 1)
    assert grid.stars == [(0, 0)]
    assert other.stars == [(0, 0), (1, 1)]
    assert grid[1, 1] == EMPTY
    assert str(other) != str(grid)


def test_out_of_bounds_raises():
    grid = Grid(2, 2)
    with pytest.raises(IndexError):
        grid.place_star(2, 0)
    with pytest.raises(IndexError):
        grid.mark_zone(0, -1, "B")


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        Grid(-1, 2)


def test_zone_size_counts_positions():
    zone = Zone("C", [(0, 0), (1, 0), (1, 1)])
    assert zone.size() == len(zone.positions)
    assert Zone("D").size() == 0