"""
Perfect-maze carving over a grid from `bendmaze.grid`.

Two carvers share the same neighbour order (Right, Down, Left, Up) and the
same use of the random source (one `rng.choice` per carved wall):

  carve_origin_shift   walk from the entrance; on a dead end, rescan the grid
                       row-major for the first visited cell that still has an
                       unvisited neighbour and continue from there.
  carve_frontier_stack same walk, but a dead end pops a stack back to the most
                       recent cell with an unvisited neighbour.

Both produce a spanning tree of the grid. Given identical choices they do not
produce identical mazes: the stack variant resumes from a different cell, so
it changes the distribution of generated layouts.
"""

import random
from typing import List, Optional, Tuple

from bendmaze.grid import create_grid, in_bounds, carve, clear_visited

# Right, Down, Left, Up
SHIFTS = (('E', 0, 1), ('S', 1, 0), ('W', 0, -1), ('N', -1, 0))

METHODS = ('rescan', 'stack')


def unvisited_neighbors(grid, r: int, c: int) -> List[Tuple[str, int, int]]:
    n = len(grid)
    out = []
    for d, dr, dc in SHIFTS:
        nr, nc = r + dr, c + dc
        if in_bounds(nr, nc, n) and not grid[nr][nc]['visited']:
            out.append((d, nr, nc))
    return out

def find_frontier_cell(grid) -> Optional[Tuple[int, int]]:
    """First visited cell (row-major) with an unvisited in-bounds neighbour."""
    n = len(grid)
    for r in range(n):
        for c in range(n):
            if grid[r][c]['visited'] and unvisited_neighbors(grid, r, c):
                return r, c
    return None


def carve_origin_shift(grid, rng):
    n = len(grid)
    total = n * n
    r, c = 0, 0
    grid[r][c]['visited'] = True
    visited = 1

    while visited < total:
        nbrs = unvisited_neighbors(grid, r, c)
        if nbrs:
            d, nr, nc = rng.choice(nbrs)
            carve(grid, r, c, d)
            r, c = nr, nc
            grid[r][c]['visited'] = True
            visited += 1
        else:
            # O(n^2) per dead end
            frontier = find_frontier_cell(grid)
            if frontier is None:
                raise RuntimeError(f"Carving stalled with {visited}/{total} cells visited")
            r, c = frontier

    clear_visited(grid)

def carve_frontier_stack(grid, rng):
    n = len(grid)
    total = n * n
    grid[0][0]['visited'] = True
    visited = 1
    stack = [(0, 0)]

    while visited < total:
        r, c = stack[-1]
        nbrs = unvisited_neighbors(grid, r, c)
        if not nbrs:
            stack.pop()
            continue
        d, nr, nc = rng.choice(nbrs)
        carve(grid, r, c, d)
        grid[nr][nc]['visited'] = True
        visited += 1
        stack.append((nr, nc))

    clear_visited(grid)


def generate_maze(n: int, rng=None, method: str = 'rescan'):
    """
    Build a fresh n x n grid and carve it into a perfect maze.
    `rng` is anything with a `choice(seq)` method (default: new random.Random()).
    """
    if method not in METHODS:
        raise ValueError(f"Unknown carving method {method!r}, expected one of {METHODS}")
    grid = create_grid(n)
    if rng is None:
        rng = random.Random()
    if method == 'rescan':
        carve_origin_shift(grid, rng)
    else:
        carve_frontier_stack(grid, rng)
    return grid
