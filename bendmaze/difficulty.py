import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from bendmaze.config import DEF_METHOD
from bendmaze.errors import InvalidDifficulty, NonConvergentDifficulty
from bendmaze.generator import generate_maze
from bendmaze.grid import validate_dimension
from bendmaze.solver import find_solution, count_bends, bend_ratio

logger = logging.getLogger(__name__)


@dataclass
class DifficultyResult:
    grid: list
    solution: Optional[List[Tuple[int, int]]]
    bend_ratio: float
    bends: int
    iterations: int

    @property
    def dimension(self) -> int:
        return len(self.grid)


def check_reachable(n: int, difficulty: float):
    """
    Reject thresholds no maze can meet. A simple path visits at most n*n cells
    and so bends at most n*n - 2 times, hence the ratio is always < 1, and a
    1x1 maze never bends.
    """
    validate_dimension(n)
    # also rejects NaN, which compares false against everything
    if not difficulty >= 0:
        raise InvalidDifficulty(difficulty)
    if difficulty >= 1:
        raise NonConvergentDifficulty(difficulty, n, reason="bend ratio is always below 1")
    if n == 1 and difficulty > 0:
        raise NonConvergentDifficulty(difficulty, n, reason="a 1x1 maze has no bends")


def generate_with_bend_ratio(n: int, difficulty: float, rng=None,
                             max_iterations: Optional[int] = None,
                             method: str = DEF_METHOD) -> DifficultyResult:
    """
    Regenerate a maze from scratch until its solution's bend ratio reaches
    `difficulty`. Without `max_iterations` this loops until it succeeds.
    """
    check_reachable(n, difficulty)
    if rng is None:
        rng = random.Random()

    iterations = 0
    while True:
        iterations += 1
        grid = generate_maze(n, rng, method=method)
        solution = find_solution(grid)
        if solution is None:
            logger.warning("Attempt %d produced an unsolvable %dx%d maze", iterations, n, n)
        bends = count_bends(solution)
        ratio = bend_ratio(solution, n)
        logger.debug("attempt %d: bends=%d ratio=%.4f target=%.4f", iterations, bends, ratio, difficulty)

        if ratio >= difficulty:
            logger.info("Accepted %dx%d maze after %d attempt(s), bend ratio %.4f", n, n, iterations, ratio)
            return DifficultyResult(grid=grid, solution=solution, bend_ratio=ratio,
                                    bends=bends, iterations=iterations)

        if max_iterations is not None and iterations >= max_iterations:
            raise NonConvergentDifficulty(difficulty, n, iterations=iterations,
                                          reason="iteration cap reached")
