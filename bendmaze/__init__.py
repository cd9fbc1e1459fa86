from bendmaze.errors import (
    MazeError, InvalidDimension, NoSolutionFound, NonConvergentDifficulty, EncodeError,
)
from bendmaze.grid import create_grid, open_wall_between
from bendmaze.generator import generate_maze
from bendmaze.solver import find_solution, solve, count_bends, bend_ratio
from bendmaze.difficulty import generate_with_bend_ratio, DifficultyResult
from bendmaze.session import MazeSession

__all__ = [
    "MazeError", "InvalidDimension", "NoSolutionFound", "NonConvergentDifficulty", "EncodeError",
    "create_grid", "open_wall_between", "generate_maze",
    "find_solution", "solve", "count_bends", "bend_ratio",
    "generate_with_bend_ratio", "DifficultyResult", "MazeSession",
]
