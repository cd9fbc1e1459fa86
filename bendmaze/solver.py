from typing import List, Optional, Tuple

from bendmaze.errors import NoSolutionFound
from bendmaze.grid import in_bounds

Pos = Tuple[int, int]

# Up, Right, Down, Left
SOLVE_ORDER = (('N', -1, 0), ('E', 0, 1), ('S', 1, 0), ('W', 0, -1))


def find_solution(grid, start: Pos = (0, 0), goal: Optional[Pos] = None) -> Optional[List[Pos]]:
    """
    Depth-first search from start to goal (default: bottom-right corner).

    Iterative version of the recursive backtracker: `tried[i]` is how many of
    the four directions have been attempted from `path[i]`, so cells are
    visited in exactly the same order as the recursion would visit them.
    Returns the path as a list of (row, col), or None when goal is unreachable.
    """
    n = len(grid)
    if goal is None:
        goal = (n - 1, n - 1)
    visited = [[False] * n for _ in range(n)]

    sr, sc = start
    visited[sr][sc] = True
    path: List[Pos] = [start]
    tried = [0]
    if start == goal:
        return path

    while path:
        r, c = path[-1]
        i = tried[-1]
        if i == len(SOLVE_ORDER):
            path.pop()
            tried.pop()
            continue
        tried[-1] = i + 1

        d, dr, dc = SOLVE_ORDER[i]
        if grid[r][c][d]:
            continue
        nr, nc = r + dr, c + dc
        if not in_bounds(nr, nc, n) or visited[nr][nc]:
            continue
        visited[nr][nc] = True
        path.append((nr, nc))
        tried.append(0)
        if (nr, nc) == goal:
            return path

    return None

def solve(grid) -> List[Pos]:
    path = find_solution(grid)
    if path is None:
        raise NoSolutionFound(len(grid))
    return path


# -------------------------
# Path shape
# -------------------------

def _axis(a: Pos, b: Pos) -> str:
    return 'horizontal' if b[1] != a[1] else 'vertical'

def count_bends(path) -> int:
    """Number of times consecutive steps switch between horizontal and vertical."""
    if not path:
        return 0
    bends = 0
    prev = None
    for a, b in zip(path, path[1:]):
        axis = _axis(a, b)
        if prev is not None and axis != prev:
            bends += 1
        prev = axis
    return bends

def bend_ratio(path, n: int) -> float:
    # normalised by cell count, not path length
    return count_bends(path) / float(n * n)

def path_segments(path) -> List[Tuple[str, int]]:
    """
    Straight runs of the path as [(direction, length), ...], direction being
    one of 'N','E','S','W'. A path of one cell has no segments.
    """
    segs: List[Tuple[str, int]] = []
    for (pr, pc), (r, c) in zip(path, path[1:]):
        step = (r - pr, c - pc)
        if step == (0, 1):
            d = 'E'
        elif step == (0, -1):
            d = 'W'
        elif step == (-1, 0):
            d = 'N'
        elif step == (1, 0):
            d = 'S'
        else:
            raise ValueError(f"Non-adjacent step in path: {(pr, pc)} -> {(r, c)}")
        if segs and segs[-1][0] == d:
            segs[-1] = (d, segs[-1][1] + 1)
        else:
            segs.append((d, 1))
    return segs
