import pytest

from dsakit.matrix import format_matrix, make_matrix, transpose, transpose_in_place, wave


def test_make_matrix_default_fill_is_one():
    grid = make_matrix(3, 4)
    assert len(grid) == 3
    assert all(row == [1, 1, 1, 1] for row in grid)


def test_make_matrix_rows_are_independent():
    grid = make_matrix(2, 2, 0)
    grid[0][0] = 5
    assert grid[1][0] == 0


def test_make_matrix_rejects_negative_size():
    with pytest.raises(ValueError):
        make_matrix(-1, 3)


def test_format_matrix_round_trip():
    grid = [[1, 2, 3], [4, 5, 6]]
    text = format_matrix(grid)
    parsed = [[int(cell) for cell in line.split()] for line in text.splitlines()]
    assert parsed == grid


def test_format_matrix_empty():
    assert format_matrix([]) == ""


def test_transpose_square():
    grid = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert transpose(grid) == [[1, 4, 7], [2, 5, 8], [3, 6, 9]]


def test_transpose_rectangular_swaps_shape_and_is_involution():
    grid = [[1, 2, 3], [4, 5, 6]]
    result = transpose(grid)
    assert len(result) == 3 and all(len(row) == 2 for row in result)
    assert transpose(result) == grid


def test_transpose_rejects_ragged():
    with pytest.raises(ValueError):
        transpose([[1, 2], [3]])


def test_transpose_in_place_matches_transpose():
    grid = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    expected = transpose(grid)
    transpose_in_place(grid)
    assert grid == expected


def test_transpose_in_place_rejects_non_square():
    with pytest.raises(ValueError):
        transpose_in_place([[1, 2, 3], [4, 5, 6]])


def test_wave_source_example():
    grid = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 11, 12, 0]]
    assert wave(grid) == [1, 5, 9, 11, 6, 2, 3, 7, 12, 0, 8, 4]


def test_wave_single_column_reads_downward():
    grid = [[1], [2], [3]]
    assert wave(grid) == [1, 2, 3]


def test_wave_visits_every_cell_once():
    grid = make_matrix(4, 5, 0)
    for r, row in enumerate(grid):
        for c in range(len(row)):
            row[c] = r * 5 + c
    assert sorted(wave(grid)) == list(range(20))