from __future__ import annotations

from io import BytesIO
from typing import Optional, Tuple

from PIL import Image

from aocgraph.errors import ConfigurationError
from aocgraph.theme import TRANSPARENT, ColorLike, parse_color


def centering_offset(outer: Tuple[int, int], inner: Tuple[int, int]) -> Tuple[int, int]:
    return (outer[0] - inner[0]) // 2, (outer[1] - inner[1]) // 2


def assemble_image(
    chart: Image.Image,
    size: Optional[Tuple[int, int]] = None,
    background: Optional[ColorLike] = None,
) -> Image.Image:
    """Composite ``chart`` centered on a fresh canvas filled with ``background``."""
    width, height = size or chart.size
    if chart.width > width or chart.height > height:
        raise ConfigurationError(
            f"Chart {chart.width}x{chart.height} does not fit on a {width}x{height} canvas"
        )
    fill = parse_color(background) if background is not None else TRANSPARENT
    canvas = Image.new("RGBA", (width, height), fill)
    canvas.alpha_composite(chart.convert("RGBA"), centering_offset((width, height), chart.size))
    return canvas


def to_png_bytes(image: Image.Image) -> BytesIO:
    buf = BytesIO()
    image.save(buf, format="PNG")
    buf.seek(0)
    return buf
