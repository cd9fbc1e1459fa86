from collections import deque

from bendmaze.grid import grid_to_graph


class FirstChoice:
    """rng stand-in that always takes the first candidate."""

    def choice(self, seq):
        return seq[0]


class ScriptedChoice:
    """rng stand-in replaying a fixed list of indices."""

    def __init__(self, picks):
        self.picks = list(picks)

    def choice(self, seq):
        return seq[self.picks.pop(0)]


def passages(grid):
    """Set of frozenset({a, b}) for every open wall between two cells."""
    out = set()
    for a, nbrs in grid_to_graph(grid).items():
        for b in nbrs:
            out.add(frozenset((a, b)))
    return out

def edges(*pairs):
    return {frozenset(p) for p in pairs}

def reachable(grid, start=(0, 0)):
    G = grid_to_graph(grid)
    seen = {start}
    q = deque([start])
    while q:
        u = q.popleft()
        for v in G[u]:
            if v not in seen:
                seen.add(v)
                q.append(v)
    return seen

def assert_valid_path(grid, path):
    n = len(grid)
    assert path[0] == (0, 0)
    assert path[-1] == (n - 1, n - 1)
    assert len(set(path)) == len(path)
    G = grid_to_graph(grid)
    for a, b in zip(path, path[1:]):
        assert b in G[a], f"{a} -> {b} is not an open step"
