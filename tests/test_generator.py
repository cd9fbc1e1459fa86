import random

import pytest

from bendmaze.errors import InvalidDimension
from bendmaze.generator import (
    generate_maze, carve_origin_shift, carve_frontier_stack, find_frontier_cell, unvisited_neighbors,
)
from bendmaze.grid import create_grid, count_passages, wall_array, DIR_ORDER

from helpers import FirstChoice, ScriptedChoice, passages, edges, reachable

N_, E_, S_, W_ = (DIR_ORDER.index(d) for d in 'NESW')

# 3x3 walk that hits a dead end at (1,0) with (2,2) still unvisited
DEAD_END_PICKS = [0, 0, 0, 1, 0, 1, 0, 0]
DEAD_END_WALK = [
    ((0, 0), (0, 1)), ((0, 1), (0, 2)), ((0, 2), (1, 2)), ((1, 2), (1, 1)),
    ((1, 1), (2, 1)), ((2, 1), (2, 0)), ((2, 0), (1, 0)),
]


@pytest.mark.parametrize("method", ["rescan", "stack"])
@pytest.mark.parametrize("n", [1, 2, 3, 5, 8, 13])
def test_perfect_maze_property(n, method):
    for seed in range(5):
        grid = generate_maze(n, random.Random(seed), method=method)
        assert count_passages(grid) == n * n - 1
        assert len(reachable(grid)) == n * n


@pytest.mark.parametrize("method", ["rescan", "stack"])
def test_walls_symmetric_and_openings_kept(method):
    for seed in range(10):
        grid = generate_maze(7, random.Random(seed), method=method)
        arr = wall_array(grid)
        assert (arr[:, :-1, E_] == arr[:, 1:, W_]).all()
        assert (arr[:-1, :, S_] == arr[1:, :, N_]).all()
        assert not arr[0, 0, N_] and not arr[0, 0, W_]
        assert not arr[6, 6, S_] and not arr[6, 6, E_]
        # rest of the border stays closed
        assert arr[0, 1:, N_].all() and arr[1:, 0, W_].all()
        assert arr[-1, :-1, S_].all() and arr[:-1, -1, E_].all()


def test_visited_flags_cleared():
    grid = generate_maze(6, random.Random(1))
    assert not any(cell['visited'] for row in grid for cell in row)


def test_single_cell_maze():
    grid = generate_maze(1, random.Random(0))
    assert count_passages(grid) == 0
    assert not any(grid[0][0][d] for d in 'NESW')


def test_same_seed_same_layout():
    a = generate_maze(4, random.Random(1234))
    b = generate_maze(4, random.Random(1234))
    assert a == b


def test_first_choice_four_by_four_layout():
    grid = generate_maze(4, FirstChoice())
    assert passages(grid) == edges(
        ((0, 0), (0, 1)), ((0, 1), (0, 2)), ((0, 2), (0, 3)), ((0, 3), (1, 3)),
        ((1, 3), (2, 3)), ((2, 3), (3, 3)), ((3, 3), (3, 2)), ((3, 2), (3, 1)),
        ((3, 1), (3, 0)), ((3, 0), (2, 0)), ((2, 0), (2, 1)), ((2, 1), (2, 2)),
        ((2, 2), (1, 2)), ((1, 2), (1, 1)), ((1, 1), (1, 0)),
    )


def test_rescan_resumes_from_first_frontier_cell_in_row_major_order():
    grid = generate_maze(3, ScriptedChoice(DEAD_END_PICKS), method="rescan")
    assert passages(grid) == edges(*DEAD_END_WALK, ((1, 2), (2, 2)))


def test_stack_variant_resumes_elsewhere_for_same_choices():
    grid = generate_maze(3, ScriptedChoice(DEAD_END_PICKS), method="stack")
    assert passages(grid) == edges(*DEAD_END_WALK, ((2, 1), (2, 2)))


def test_one_choice_per_carved_wall():
    rng = ScriptedChoice(DEAD_END_PICKS + [0])
    carve_origin_shift(create_grid(3), rng)
    assert rng.picks == [0]
    rng = ScriptedChoice(DEAD_END_PICKS + [0])
    carve_frontier_stack(create_grid(3), rng)
    assert rng.picks == [0]


def test_neighbour_order_right_down_left_up():
    grid = create_grid(3)
    assert [d for d, _, _ in unvisited_neighbors(grid, 1, 1)] == ['E', 'S', 'W', 'N']
    grid[1][2]['visited'] = True
    assert [d for d, _, _ in unvisited_neighbors(grid, 1, 1)] == ['S', 'W', 'N']


def test_find_frontier_cell():
    grid = create_grid(2)
    assert find_frontier_cell(grid) is None
    grid[1][1]['visited'] = True
    assert find_frontier_cell(grid) == (1, 1)
    grid[0][0]['visited'] = True
    assert find_frontier_cell(grid) == (0, 0)


def test_unknown_method():
    with pytest.raises(ValueError):
        generate_maze(3, method="prim")


def test_bad_dimension():
    with pytest.raises(InvalidDimension):
        generate_maze(0)
