import numpy as np
import pytest

from bendmaze.errors import InvalidDimension
from bendmaze.grid import (
    create_grid, open_wall_between, carve, closed_walls, count_passages,
    wall_array, encode_maze, DIR_ORDER,
)


def test_create_grid_all_walls_closed_except_openings():
    grid = create_grid(3)
    assert len(grid) == 3 and all(len(row) == 3 for row in grid)
    assert grid[0][0]['N'] is False and grid[0][0]['W'] is False
    assert grid[0][0]['E'] and grid[0][0]['S']
    assert grid[2][2]['S'] is False and grid[2][2]['E'] is False
    assert grid[2][2]['N'] and grid[2][2]['W']
    assert not any(cell['visited'] for row in grid for cell in row)
    # 9 cells * 4 walls - 4 openings
    assert len(list(closed_walls(grid))) == 32
    assert count_passages(grid) == 0


def test_one_by_one_has_both_openings():
    grid = create_grid(1)
    cell = grid[0][0]
    assert not cell['N'] and not cell['W'] and not cell['S'] and not cell['E']
    assert count_passages(grid) == 0


@pytest.mark.parametrize("bad", [0, -3, 2.5, "4", True, None])
def test_create_grid_rejects_bad_dimension(bad):
    with pytest.raises(InvalidDimension):
        create_grid(bad)


def test_invalid_dimension_is_a_value_error():
    with pytest.raises(ValueError):
        create_grid(0)


def test_open_wall_between_clears_both_sides():
    grid = create_grid(2)
    open_wall_between(grid[0][0], grid[0][1], 'E')
    assert grid[0][0]['E'] is False
    assert grid[0][1]['W'] is False
    assert grid[1][0]['N'] and grid[0][0]['S']


def test_carve_uses_neighbour_and_rejects_outside():
    grid = create_grid(2)
    carve(grid, 1, 1, 'N')
    assert grid[1][1]['N'] is False and grid[0][1]['S'] is False
    assert count_passages(grid) == 1
    with pytest.raises(IndexError):
        carve(grid, 0, 1, 'E')


def test_wall_array_layout():
    grid = create_grid(2)
    carve(grid, 0, 0, 'S')
    arr = wall_array(grid)
    assert arr.shape == (2, 2, 4)
    assert arr.dtype == np.bool_
    s, n = DIR_ORDER.index('S'), DIR_ORDER.index('N')
    assert not arr[0, 0, s] and not arr[1, 0, n]
    assert arr.sum() == len(list(closed_walls(grid)))


def test_encode_maze_tracks_layout():
    a, b = create_grid(3), create_grid(3)
    assert encode_maze(a) == encode_maze(b)
    carve(b, 1, 1, 'E')
    assert encode_maze(a) != encode_maze(b)
