# -----------------------------------------------------------------------------
# Canvas rendering of a maze grid: one stroke per set wall flag, outer border
# strokes drawn heavier than interior ones, optional red solution polyline
# through the cell centres.
#
# Pillow is the raster canvas (PNG output, CLI `image`), matplotlib gives the
# same drawing on an Axes for interactive viewing.
# -----------------------------------------------------------------------------
import logging
from typing import Iterator, List, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np
from PIL import Image, ImageDraw

from bendmaze.config import (
    DEF_CELL_PX, DEF_WALL_PX, DEF_BORDER_PX,
    DEF_SOLUTION_PX, DEF_SOLUTION_COLOR,
)
from bendmaze.grid import DIR_ORDER
from bendmaze.solver import count_bends

logger = logging.getLogger(__name__)

Segment = Tuple[float, float, float, float, bool]  # x1, y1, x2, y2, on_border


def is_border_wall(r: int, c: int, d: str, n: int) -> bool:
    return ((d == 'N' and r == 0) or (d == 'E' and c == n - 1)
            or (d == 'S' and r == n - 1) or (d == 'W' and c == 0))

def wall_segments(grid, cell: float, x0: float = 0, y0: float = 0) -> Iterator[Segment]:
    """
    Line segments for every set wall flag, per cell in row-major order and
    N, E, S, W order within a cell. Interior walls appear once per side.
    """
    n = len(grid)
    for r in range(n):
        for c in range(n):
            x = x0 + c * cell
            y = y0 + r * cell
            for d in DIR_ORDER:
                if not grid[r][c][d]:
                    continue
                if d == 'N':
                    seg = (x, y, x + cell, y)
                elif d == 'E':
                    seg = (x + cell, y, x + cell, y + cell)
                elif d == 'S':
                    seg = (x + cell, y + cell, x, y + cell)
                else:
                    seg = (x, y + cell, x, y)
                yield seg + (is_border_wall(r, c, d, n),)

def cell_center_xy(r: int, c: int, cell: float, x0: float = 0, y0: float = 0) -> Tuple[float, float]:
    x = x0 + (c + 0.5) * cell
    y = y0 + (r + 0.5) * cell
    return x, y


# -------------------------
# Pillow canvas
# -------------------------

def _line(draw: ImageDraw.ImageDraw, x0, y0, x1, y1, w, color=(0,0,0)):
    draw.line([(int(x0),int(y0)), (int(x1),int(y1))], fill=color, width=int(w))

def render_maze(grid, cell_px: int = DEF_CELL_PX, *,
                wall_px: int = DEF_WALL_PX, border_px: int = DEF_BORDER_PX,
                margin: int = 0, solution: Optional[List[Tuple[int,int]]] = None,
                solution_px: int = DEF_SOLUTION_PX) -> Image.Image:
    n = len(grid)
    side = n * cell_px + 2 * margin
    im = Image.new("RGB", (side, side), (255, 255, 255))
    dr = ImageDraw.Draw(im)

    for x1, y1, x2, y2, border in wall_segments(grid, cell_px, margin, margin):
        _line(dr, x1, y1, x2, y2, border_px if border else wall_px)

    if solution:
        draw_solution(im, solution, cell_px, margin=margin, width=solution_px)
    return im

def draw_solution(im: Image.Image, solution, cell_px: int, *, margin: int = 0,
                  width: int = DEF_SOLUTION_PX, color=DEF_SOLUTION_COLOR) -> int:
    """Overlay the path through cell centres; returns its bend count."""
    pts = [cell_center_xy(r, c, cell_px, margin, margin) for (r, c) in solution]
    if len(pts) >= 2:
        ImageDraw.Draw(im).line(pts, fill=color, width=int(width))
    bends = count_bends(solution)
    logger.info("Solution: %d cells, %d bends", len(solution), bends)
    return bends

def save_maze_png(grid, out_png: str, **kwargs):
    render_maze(grid, **kwargs).save(out_png)


# -------------------------
# matplotlib view
# -------------------------

def plot_maze(grid, solution=None, ax=None, *, wall_width: float = 1.0,
              border_width: float = 3.0, grid_alpha: float = 0.0):
    """
    Draw the maze on a matplotlib Axes (row 0 at the top). Returns (fig, ax).
    """
    n = len(grid)
    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 6), dpi=100)
    else:
        fig = ax.figure
    ax.set_aspect('equal', adjustable='box')
    ax.set_xlim(-0.5, n + 0.5)
    ax.set_ylim(n + 0.5, -0.5)
    ax.set_axis_off()
    fig.patch.set_facecolor('white')

    if grid_alpha > 0:
        for b in np.arange(0, n + 1, 1.0):
            ax.plot([b, b], [0, n], color='0.85', linewidth=0.8, alpha=grid_alpha, zorder=0)
            ax.plot([0, n], [b, b], color='0.85', linewidth=0.8, alpha=grid_alpha, zorder=0)

    for x1, y1, x2, y2, border in wall_segments(grid, 1.0):
        ax.plot([x1, x2], [y1, y2], 'k-', linewidth=border_width if border else wall_width,
                solid_capstyle='round', zorder=2)

    if solution:
        xs, ys = zip(*(cell_center_xy(r, c, 1.0) for (r, c) in solution))
        ax.plot(xs, ys, color='red', linewidth=2, zorder=3)
        ax.set_title(f"bends: {count_bends(solution)}")
    return fig, ax
