"""Exceptions raised by maze generation, solving and export."""


class MazeError(Exception):
    pass


class InvalidDimension(MazeError, ValueError):
    def __init__(self, dimension):
        super().__init__(f"Maze dimension must be an integer >= 1, got {dimension!r}")
        self.dimension = dimension


class NoSolutionFound(MazeError):
    def __init__(self, dimension: int):
        super().__init__(f"No path from (0,0) to ({dimension-1},{dimension-1}) in a {dimension}x{dimension} maze")
        self.dimension = dimension


class NonConvergentDifficulty(MazeError):
    """The bend-ratio threshold was not (or can never be) reached."""

    def __init__(self, difficulty: float, dimension: int, iterations: int = 0, reason: str = ""):
        msg = f"Difficulty {difficulty} not reached for a {dimension}x{dimension} maze"
        if iterations:
            msg += f" after {iterations} attempts"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)
        self.difficulty = difficulty
        self.dimension = dimension
        self.iterations = iterations


class EncodeError(MazeError):
    pass


class InvalidDifficulty(MazeError, ValueError):
    def __init__(self, difficulty):
        super().__init__(f"difficulty must be a number >= 0, got {difficulty!r}")
        self.difficulty = difficulty
