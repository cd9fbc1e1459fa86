import io
import random
import xml.etree.ElementTree as ET

import pytest
from PIL import Image

from bendmaze.errors import EncodeError
from bendmaze.generator import generate_maze
from bendmaze.grid import closed_walls
from bendmaze.raster import svg_to_image, encode_jpeg
from bendmaze.svg import maze_to_svg, save_svg

SVG_NS = "{http://www.w3.org/2000/svg}"


def _lines(svg):
    root = ET.fromstring(svg)
    return root, list(root.iter(SVG_NS + "line"))


def test_two_by_two_svg_line_count():
    grid = generate_maze(2, random.Random(0))
    root, lines = _lines(maze_to_svg(grid))
    assert root.get("width") == "20" and root.get("height") == "20"
    assert len(lines) == len(list(closed_walls(grid)))
    # 4 border walls left after the openings, one interior wall seen from both sides
    assert len(lines) == 6
    assert len([ln for ln in lines if ln.get("stroke-width") == "4"]) == 4


def test_svg_group_style():
    grid = generate_maze(3, random.Random(4))
    root, _ = _lines(maze_to_svg(grid))
    g = root.find(SVG_NS + "g")
    assert g.get("stroke") == "black"
    assert g.get("stroke-width") == "2"
    assert g.get("stroke-linecap") == "round"
    assert root.find(SVG_NS + "rect").get("fill") == "white"


def test_svg_size_scales_with_dimension():
    root, lines = _lines(maze_to_svg(generate_maze(7, random.Random(1))))
    assert root.get("width") == "70"
    coords = {float(ln.get(k)) for ln in lines for k in ("x1", "y1", "x2", "y2")}
    assert min(coords) == 0 and max(coords) == 70


def test_save_svg(tmp_path):
    grid = generate_maze(4, random.Random(3))
    out = tmp_path / "maze.svg"
    save_svg(grid, str(out))
    _, lines = _lines(out.read_text(encoding="utf-8"))
    assert len(lines) == len(list(closed_walls(grid)))


def test_rasterize_draws_walls():
    grid = generate_maze(2, random.Random(0))
    im = svg_to_image(maze_to_svg(grid), 500, 500)
    assert im.size == (500, 500)
    assert im.getpixel((375, 10)) == (0, 0, 0)        # top border over (0,1)
    assert im.getpixel((125, 10)) == (255, 255, 255)  # entrance opening


def test_encode_jpeg():
    data = encode_jpeg(maze_to_svg(generate_maze(5, random.Random(2))), 120, 80)
    assert data[:2] == b"\xff\xd8"
    with Image.open(io.BytesIO(data)) as im:
        assert im.format == "JPEG"
        assert im.size == (120, 80)


@pytest.mark.parametrize("bad", [
    "<svg",
    "<html></html>",
    '<svg xmlns="http://www.w3.org/2000/svg"></svg>',
    '<svg xmlns="http://www.w3.org/2000/svg" width="0" height="10"></svg>',
])
def test_encode_rejects_bad_svg(bad):
    with pytest.raises(EncodeError):
        encode_jpeg(bad)
