from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Tuple, Union

from PIL import Image, ImageDraw, ImageFont

from aocgraph.errors import FontLoadError

DEFAULT_FAMILY = "default"

Font = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


@dataclass(frozen=True)
class FontHandle:
    """A loaded font plus the angle (degrees, counter-clockwise) its text is drawn at."""

    font: Font
    size: int
    rotation: int = 0

    def rotated(self, degrees: int) -> "FontHandle":
        return replace(self, rotation=degrees)


def load_font(family_or_path: Optional[Union[str, Path]], size: int, rotation: int = 0) -> FontHandle:
    """Resolve a logical font request.

    ``None`` or ``"default"`` selects Pillow's bundled scalable font; anything
    else is handed to FreeType as a file path or installed font name.
    """
    try:
        if family_or_path is None or str(family_or_path) == DEFAULT_FAMILY:
            font = ImageFont.load_default(size=size)
        else:
            font = ImageFont.truetype(str(family_or_path), size)
    except (OSError, ValueError) as exc:
        raise FontLoadError(f"Cannot load font {family_or_path!r} at size {size}: {exc}") from exc
    return FontHandle(font=font, size=size, rotation=rotation)


def text_width(handle: FontHandle, text: str) -> int:
    return int(handle.font.getlength(text))


def _align(xy: Tuple[int, int], size: Tuple[int, int], anchor: str) -> Tuple[int, int]:
    """Top-left corner of a ``size`` box placed on ``xy`` by a two-letter anchor."""
    x, y = xy
    w, h = size
    horizontal, vertical = anchor[0], anchor[1]
    if horizontal == "m":
        x -= w // 2
    elif horizontal == "r":
        x -= w
    if vertical == "m":
        y -= h // 2
    elif vertical in ("b", "s", "d"):
        y -= h
    return x, y


def draw_text(
    image: Image.Image,
    xy: Tuple[int, int],
    text: str,
    handle: FontHandle,
    fill: Tuple[int, int, int, int],
    anchor: str = "la",
) -> None:
    """Draw ``text`` on ``image``.

    Unrotated text uses Pillow's anchor semantics. Rotated text is drawn on a
    transparent layer, turned by ``handle.rotation`` and its bounding box is
    aligned on ``xy`` (horizontal l/m/r, vertical t/m/b).
    """
    if handle.rotation % 360 == 0:
        ImageDraw.Draw(image).text(xy, text, fill=fill, font=handle.font, anchor=anchor)
        return

    left, top, right, bottom = handle.font.getbbox(text)
    layer = Image.new("RGBA", (max(1, int(right - left)), max(1, int(bottom - top))), (0, 0, 0, 0))
    ImageDraw.Draw(layer).text((-left, -top), text, fill=fill, font=handle.font)
    layer = layer.rotate(handle.rotation, expand=True, resample=Image.BICUBIC)
    image.paste(layer, _align(xy, layer.size, anchor), layer)
