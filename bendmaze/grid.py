import hashlib
from typing import Iterator, List, Tuple

import numpy as np

from bendmaze.errors import InvalidDimension

# Row increases downward, col increases rightward.
# 'N' is the top wall, 'E' right, 'S' bottom, 'W' left.
DIRS = {'N': (-1, 0), 'S': (1, 0), 'E': (0, 1), 'W': (0, -1)}
OPP  = {'N':'S', 'S':'N', 'E':'W', 'W':'E'}
DIR_ORDER = ('N','E','S','W')  # deterministic hashing / array order

Pos = Tuple[int, int]


# -------------------------
# Grid construction
# -------------------------

def init_grid(n: int):
    return [[{'N': True, 'S': True, 'E': True, 'W': True, 'visited': False}
             for _ in range(n)] for __ in range(n)]

def validate_dimension(n):
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise InvalidDimension(n)

def create_grid(n: int):
    """
    Fresh n x n grid with every wall closed, except the two openings to the
    outside: top/left of the entrance (0,0) and bottom/right of the exit.
    """
    validate_dimension(n)
    grid = init_grid(n)
    grid[0][0]['N'] = False
    grid[0][0]['W'] = False
    grid[n-1][n-1]['S'] = False
    grid[n-1][n-1]['E'] = False
    return grid

def in_bounds(r: int, c: int, n: int) -> bool:
    return 0 <= r < n and 0 <= c < n

def neighbor(r: int, c: int, d: str) -> Pos:
    dr, dc = DIRS[d]
    return r + dr, c + dc


# -------------------------
# Wall mutation
# -------------------------

def open_wall_between(cell_a, cell_b, d: str):
    """Clear the wall of cell_a facing d together with the mirrored wall of cell_b."""
    cell_a[d] = False
    cell_b[OPP[d]] = False

def carve(grid, r: int, c: int, d: str):
    nr, nc = neighbor(r, c, d)
    if not in_bounds(nr, nc, len(grid)):
        raise IndexError(f"No neighbour {d} of ({r},{c}) in a {len(grid)}x{len(grid)} grid")
    open_wall_between(grid[r][c], grid[nr][nc], d)

def clear_visited(grid):
    for row in grid:
        for cell in row:
            cell['visited'] = False


# -------------------------
# Queries
# -------------------------

def closed_walls(grid) -> Iterator[Tuple[int, int, str]]:
    """(r,c,d) for every wall flag that is set, outer border included."""
    n = len(grid)
    for r in range(n):
        for c in range(n):
            for d in DIR_ORDER:
                if grid[r][c][d]:
                    yield r, c, d

def count_passages(grid) -> int:
    """Open walls between two in-bounds cells, each counted once."""
    n = len(grid)
    total = 0
    for r in range(n):
        for c in range(n):
            # only look right and down so every pair is seen once
            if c + 1 < n and not grid[r][c]['E']:
                total += 1
            if r + 1 < n and not grid[r][c]['S']:
                total += 1
    return total

def wall_array(grid) -> np.ndarray:
    n = len(grid)
    arr = np.zeros((n, n, len(DIR_ORDER)), dtype=bool)
    for r in range(n):
        for c in range(n):
            arr[r, c] = [grid[r][c][d] for d in DIR_ORDER]
    return arr

def grid_to_graph(grid) -> dict:
    n = len(grid)
    G = {}
    for r in range(n):
        for c in range(n):
            nbrs: List[Pos] = []
            for d in DIR_ORDER:
                if not grid[r][c][d]:
                    nr, nc = neighbor(r, c, d)
                    if in_bounds(nr, nc, n):
                        nbrs.append((nr, nc))
            G[(r, c)] = nbrs
    return G

def encode_maze(grid) -> str:
    bits = []
    for row in grid:
        for cell in row:
            for d in DIR_ORDER:
                bits.append('1' if cell[d] else '0')
    return hashlib.sha256(''.join(bits).encode('ascii')).hexdigest()
