from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Sequence, Union

from aocgraph.errors import ConfigurationError

logger = logging.getLogger(__name__)

RGBA = tuple[int, int, int, int]
ColorLike = Union[str, Sequence[int]]

WHITE: RGBA = (255, 255, 255, 255)
TRANSPARENT: RGBA = (0, 0, 0, 0)


def _hex_to_rgba(value: str) -> RGBA:
    h = value.strip().lstrip("#")
    if len(h) not in (6, 8):
        raise ConfigurationError(f"Invalid hex color: {value}")
    try:
        channels = [int(h[i:i + 2], 16) for i in range(0, len(h), 2)]
    except ValueError as exc:
        raise ConfigurationError(f"Invalid hex color: {value}") from exc
    if len(channels) == 3:
        channels.append(255)
    return tuple(channels)  # type: ignore[return-value]


def parse_color(value: ColorLike) -> RGBA:
    """Accept ``#RRGGBB``, ``#RRGGBBAA`` or an RGB(A) integer sequence."""
    if isinstance(value, str):
        return _hex_to_rgba(value)
    if isinstance(value, (list, tuple)) and len(value) in (3, 4):
        if all(isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255 for c in value):
            return (*value, 255) if len(value) == 3 else tuple(value)  # type: ignore[return-value]
    raise ConfigurationError(f"Invalid color value: {value!r}")


@dataclass(frozen=True)
class Theme:
    """Background, the three star-state colors and the label color."""

    background: RGBA
    gold: RGBA
    silver: RGBA
    grey: RGBA
    text: RGBA = WHITE

    # Document keys -> attribute names
    FIELDS = {
        "background": "background",
        "bar_gold": "gold",
        "bar_silver": "silver",
        "bar_grey": "grey",
    }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Theme":
        if not isinstance(data, Mapping):
            raise ConfigurationError(f"Theme document must be a mapping, got {type(data).__name__}")
        missing = [key for key in cls.FIELDS if key not in data]
        if missing:
            raise ConfigurationError(f"Theme is missing required fields: {', '.join(missing)}")
        values: dict[str, RGBA] = {}
        for key, attr in cls.FIELDS.items():
            try:
                values[attr] = parse_color(data[key])
            except ConfigurationError as exc:
                raise ConfigurationError(f"Theme field '{key}': {exc}") from exc
        if data.get("text") is not None:
            values["text"] = parse_color(data["text"])
        return cls(**values)

    def to_dict(self) -> dict[str, str]:
        def to_hex(color: RGBA) -> str:
            return "#" + "".join(f"{c:02X}" for c in color)

        doc = {key: to_hex(getattr(self, attr)) for key, attr in self.FIELDS.items()}
        doc["text"] = to_hex(self.text)
        return doc

    def state_colors(self) -> tuple[RGBA, RGBA, RGBA]:
        """Colors in stacking order: both, one, none."""
        return self.gold, self.silver, self.grey


DEFAULT_THEME = Theme(
    background=_hex_to_rgba("#0F0F23"),
    gold=_hex_to_rgba("#FFFF66"),
    silver=_hex_to_rgba("#9999CC"),
    grey=_hex_to_rgba("#FF8080"),
)


def load_theme(path: str | Path) -> Theme:
    """Read a JSON theme document."""
    p = Path(path)
    try:
        raw = p.read_text(encoding="utf-8-sig")
    except OSError as exc:
        raise ConfigurationError(f"Cannot read theme file {p}: {exc}") from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Theme file {p} is not valid JSON: {exc}") from exc
    theme = Theme.from_dict(data)
    logger.debug("Loaded theme from %s", p)
    return theme
