"""
Rasterize the SVG produced by `bendmaze.svg` and encode it as JPEG.

Only the subset that exporter writes is understood: a root <svg> with
numeric width/height and <line> elements, with stroke-width taken from the
line itself or inherited from its enclosing <g>.
"""

import io
import xml.etree.ElementTree as ET

from PIL import Image, ImageDraw

from bendmaze.config import DEF_RASTER_W, DEF_RASTER_H, DEF_JPEG_QUALITY, SVG_STROKE_WIDTH
from bendmaze.errors import EncodeError


def _local(tag: str) -> str:
    return tag.rsplit('}', 1)[-1]

def _num(value, what: str) -> float:
    try:
        return float(str(value).replace("px", ""))
    except (TypeError, ValueError):
        raise EncodeError(f"Bad {what} in SVG: {value!r}") from None

def svg_to_image(svg: str, width: int = DEF_RASTER_W, height: int = DEF_RASTER_H) -> Image.Image:
    try:
        root = ET.fromstring(svg)
    except ET.ParseError as e:
        raise EncodeError(f"Failed to load SVG into image: {e}") from e
    if _local(root.tag) != "svg":
        raise EncodeError(f"Root element is <{_local(root.tag)}>, expected <svg>")

    src_w = _num(root.get("width"), "width")
    src_h = _num(root.get("height"), "height")
    if src_w <= 0 or src_h <= 0:
        raise EncodeError(f"SVG has empty size {src_w}x{src_h}")
    sx, sy = width / src_w, height / src_h

    # JPEG has no transparency
    im = Image.new("RGB", (width, height), (255, 255, 255))
    dr = ImageDraw.Draw(im)

    def walk(elem, stroke_w):
        stroke_w = _num(elem.get("stroke-width", stroke_w), "stroke-width")
        if _local(elem.tag) == "line":
            x1 = _num(elem.get("x1", 0), "x1") * sx
            y1 = _num(elem.get("y1", 0), "y1") * sy
            x2 = _num(elem.get("x2", 0), "x2") * sx
            y2 = _num(elem.get("y2", 0), "y2") * sy
            w = max(1, int(round(stroke_w * min(sx, sy))))
            dr.line([(x1, y1), (x2, y2)], fill=(0, 0, 0), width=w)
        for child in elem:
            walk(child, stroke_w)

    walk(root, SVG_STROKE_WIDTH)
    return im

def encode_jpeg(svg: str, width: int = DEF_RASTER_W, height: int = DEF_RASTER_H,
                quality: int = DEF_JPEG_QUALITY) -> bytes:
    im = svg_to_image(svg, width, height)
    buf = io.BytesIO()
    try:
        im.save(buf, format="JPEG", quality=quality)
    except (OSError, ValueError) as e:
        raise EncodeError(f"JPEG encode failed: {e}") from e
    return buf.getvalue()
