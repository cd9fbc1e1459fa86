import svgwrite

from bendmaze.config import SVG_CELL_SIZE, SVG_STROKE_WIDTH, SVG_BORDER_STROKE
from bendmaze.render import wall_segments


def build_drawing(grid, cell_size: int = SVG_CELL_SIZE, filename: str = "maze.svg") -> svgwrite.Drawing:
    """
    One <line> per set wall flag inside a single stroked group; outer border
    lines override the group's stroke width with a heavier one.
    """
    n = len(grid)
    side = n * cell_size
    dwg = svgwrite.Drawing(filename, size=(side, side))
    dwg.add(dwg.rect(insert=(0, 0), size=("100%", "100%"), fill="white"))

    g = dwg.g(stroke="black", stroke_width=SVG_STROKE_WIDTH, stroke_linecap="round")
    for x1, y1, x2, y2, border in wall_segments(grid, cell_size):
        if border:
            g.add(dwg.line(start=(x1, y1), end=(x2, y2), stroke_width=SVG_BORDER_STROKE))
        else:
            g.add(dwg.line(start=(x1, y1), end=(x2, y2)))
    dwg.add(g)
    return dwg

def maze_to_svg(grid, cell_size: int = SVG_CELL_SIZE) -> str:
    return build_drawing(grid, cell_size).tostring()

def save_svg(grid, out_svg: str, cell_size: int = SVG_CELL_SIZE):
    build_drawing(grid, cell_size, filename=out_svg).save()
