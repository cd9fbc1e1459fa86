import logging
import random
from typing import List, Optional, Tuple

from bendmaze.config import DEF_DIMENSION, DEF_DIFFICULTY, DEF_METHOD, DEF_CELL_PX
from bendmaze.difficulty import DifficultyResult, check_reachable, generate_with_bend_ratio
from bendmaze.render import render_maze, save_maze_png
from bendmaze.solver import solve, count_bends
from bendmaze.svg import maze_to_svg, save_svg

logger = logging.getLogger(__name__)


class MazeSession:
    """
    Owns the maze currently on display: generation, the solution toggle and
    exports all go through one session instead of a shared global maze.
    """

    def __init__(self, dimension: int = DEF_DIMENSION, difficulty: float = DEF_DIFFICULTY,
                 rng=None, method: str = DEF_METHOD, max_iterations: Optional[int] = None):
        check_reachable(dimension, difficulty)
        self.dimension = dimension
        self.difficulty = difficulty
        self.rng = rng if rng is not None else random.Random()
        self.method = method
        self.max_iterations = max_iterations
        self.solution_visible = False
        self._result: Optional[DifficultyResult] = None

    @property
    def result(self) -> DifficultyResult:
        if self._result is None:
            raise RuntimeError("No maze generated yet, call generate() first")
        return self._result

    @property
    def grid(self):
        return self.result.grid

    @property
    def iterations(self) -> int:
        return self.result.iterations

    def generate(self) -> DifficultyResult:
        self._result = generate_with_bend_ratio(
            self.dimension, self.difficulty, self.rng,
            max_iterations=self.max_iterations, method=self.method,
        )
        self.solution_visible = False
        return self._result

    def solve(self) -> List[Tuple[int, int]]:
        # always recomputed from the current grid
        return solve(self.grid)

    def bends(self) -> int:
        return count_bends(self.solve())

    def toggle_solution(self) -> bool:
        """Flip overlay visibility. Showing it requires a solvable maze."""
        if not self.solution_visible:
            self.solve()
        self.solution_visible = not self.solution_visible
        return self.solution_visible

    def render(self, cell_px: int = DEF_CELL_PX, **kwargs):
        solution = self.solve() if self.solution_visible else None
        return render_maze(self.grid, cell_px, solution=solution, **kwargs)

    def to_svg(self) -> str:
        return maze_to_svg(self.grid)

    def save_svg(self, out_svg: str):
        save_svg(self.grid, out_svg)
        logger.info("Saved %s", out_svg)

    def save_png(self, out_png: str, cell_px: int = DEF_CELL_PX, **kwargs):
        solution = self.solve() if self.solution_visible else None
        save_maze_png(self.grid, out_png, cell_px=cell_px, solution=solution, **kwargs)
        logger.info("Saved %s", out_png)
