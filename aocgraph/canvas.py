from __future__ import annotations

from dataclasses import dataclass, fields, replace

from aocgraph.errors import ConfigurationError
from aocgraph.models import GROUP_SIZE, MAX_DAYS, MAX_PARTICIPANTS
from aocgraph.settings import get_env_int


@dataclass(frozen=True)
class CanvasSpec:
    """Fixed image geometry. Scaling always uses ``max_participants``, never the data."""

    width: int = 1500
    height: int = 1200
    margin_left: int = 125
    margin_right: int = 50
    margin_top: int = 200
    margin_bottom: int = 150
    font_size: int = 25
    max_participants: int = MAX_PARTICIPANTS
    max_days: int = MAX_DAYS
    group_size: int = GROUP_SIZE
    # distance from the plot's left edge to the center of the people labels
    tick_label_gap: int = 35

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigurationError(f"{f.name} must be an integer, got {value!r}")
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(f"Canvas must have a positive size, got {self.width}x{self.height}")
        if min(self.margin_left, self.margin_right, self.margin_top, self.margin_bottom) < 0:
            raise ConfigurationError("Margins must not be negative")
        if self.plot_width <= 0 or self.plot_height <= 0:
            raise ConfigurationError(
                f"Margins leave no plot area on a {self.width}x{self.height} canvas"
            )
        if self.max_days <= 0 or self.group_size <= 0:
            raise ConfigurationError("Day count and group size must be positive")
        if self.max_participants <= 0:
            raise ConfigurationError("Participant cap must be positive")
        if self.max_participants % self.group_size:
            raise ConfigurationError(
                f"Participant cap {self.max_participants} is not a multiple of group_size {self.group_size}"
            )
        if self.font_size <= 0:
            raise ConfigurationError("Font size must be positive")

    @property
    def plot_width(self) -> int:
        return self.width - self.margin_left - self.margin_right

    @property
    def plot_height(self) -> int:
        return self.height - self.margin_top - self.margin_bottom

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    @classmethod
    def from_env(cls) -> "CanvasSpec":
        base = cls()
        return replace(
            base,
            width=get_env_int("AOC_GRAPH_WIDTH", base.width),
            height=get_env_int("AOC_GRAPH_HEIGHT", base.height),
            font_size=get_env_int("AOC_GRAPH_FONT_SIZE", base.font_size),
            margin_left=get_env_int("AOC_GRAPH_MARGIN_LEFT", base.margin_left),
            margin_right=get_env_int("AOC_GRAPH_MARGIN_RIGHT", base.margin_right),
            margin_top=get_env_int("AOC_GRAPH_MARGIN_TOP", base.margin_top),
            margin_bottom=get_env_int("AOC_GRAPH_MARGIN_BOTTOM", base.margin_bottom),
        )
