import pytest

from coursekit.imaging import dilate, erode, main, replace, transform

GRID = ["#..#.", ".....", "..#..", "....."]


def test_replace_removes_every_origin_and_round_trips():
    result = replace(GRID, "#", "X")
    assert "#" not in "".join(result)
    assert [row.replace("X", "#") for row in result] == GRID


def test_dilate_center_makes_plus():
    assert dilate(["...", ".#.", "..."], "#") == [".#.", "###", ".#."]


def test_dilate_does_not_cascade():
    result = dilate(["#...."], "#")
    assert result[0].count("#") == 2
    assert result[0].startswith("##")


def test_dilate_keeps_original_cells_and_shape():
    result = dilate(GRID, "#")
    assert [len(r) for r in result] == [len(r) for r in GRID]
    for before, after in zip(GRID, result):
        for b, a in zip(before, after):
            if b == "#":
                assert a == "#"


def test_dilate_corner_stays_in_bounds():
    result = dilate(["#.", ".."], "#")
    assert [len(r) for r in result] == [2, 2]
    assert "".join(result).count("#") == 3


def test_erode_spreads_background():
    grid = ["###", "#.#", "###"]
    assert erode(grid, ".") == dilate(grid, ".")
    assert erode(["###", "###"], ".") == ["###", "###"]


def test_transform_replace_needs_replacement():
    with pytest.raises(ValueError):
        transform(GRID, "replace", "#")


def test_transform_erosion_needs_replacement():
    with pytest.raises(ValueError):
        transform(GRID, "erosion", "#")


def test_transform_rejects_short_lines():
    with pytest.raises(ValueError):
        transform(["ab", "abcd"], "dilation", "a")


def test_transform_truncates_to_last_line_width():
    assert transform(["abcd", "ab"], "dilation", "z") == ["ab", "ab"]


def test_transform_unknown_operation_leaves_grid():
    assert transform(GRID, "blur", "#") == GRID


def test_main_replace_writes_output(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("\n".join(GRID) + "\n")
    assert main([str(source), str(target), "replace", "#", "X"]) == 0
    assert target.read_text().splitlines() == replace(GRID, "#", "X")


def test_main_erosion_writes_output(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("\n".join(GRID) + "\n")
    assert main([str(source), str(target), "erosion", "#", "."]) == 0
    assert target.read_text().splitlines() == erode(GRID, ".")


def test_main_missing_input_fails(tmp_path):
    assert main([str(tmp_path / "nope.txt"), str(tmp_path / "o.txt"), "dilation", "#"]) == 1


def test_main_wrong_argument_count_fails():
    assert main(["only", "two"]) == 1