"""Plot-area geometry.

All cells of the grid share one integer width and one integer height. Pixels
left over by the integer division are not spread over the cells: they shift
the grid right/down and shrink the usable area by the same amount, so every
grid line lands on a whole pixel.
"""

from __future__ import annotations

from dataclasses import dataclass

from aocgraph.canvas import CanvasSpec
from aocgraph.errors import ConfigurationError


@dataclass(frozen=True)
class SlotGeometry:
    """Pixel geometry handed to a chart variant for one day column."""

    x: int
    bottom: int
    plot_height: int
    col_width: int
    thickness: int


@dataclass(frozen=True)
class PlotArea:
    left: int
    top: int
    width: int
    height: int
    col_width: int
    row_height: int
    days: int
    rows: int

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height

    @property
    def center_x(self) -> int:
        return self.left + self.width // 2

    @property
    def center_y(self) -> int:
        return self.top + self.height // 2

    def column_lines(self) -> list[int]:
        return [self.left + k * self.col_width for k in range(self.days + 1)]

    def row_lines(self) -> list[int]:
        return [self.top + k * self.row_height for k in range(self.rows + 1)]

    def column_start(self, day: int) -> int:
        if not 1 <= day <= self.days:
            raise ValueError(f"Day {day} outside 1..{self.days}")
        return self.left + (day - 1) * self.col_width

    def column_center(self, day: int) -> int:
        return self.column_start(day) + self.col_width // 2

    def day_labels(self) -> list[tuple[int, int]]:
        """``(day, center x)`` for every column."""
        return [(day, self.column_center(day)) for day in range(1, self.days + 1)]

    def people_labels(self, max_participants: int) -> list[tuple[int, int]]:
        """``(value, y)`` for every row boundary, bottom (0) to top (cap)."""
        step = max_participants // self.rows
        return [(k * step, self.bottom - k * self.row_height) for k in range(self.rows + 1)]

    def slot_geometry(self, day: int) -> SlotGeometry:
        return SlotGeometry(
            x=self.column_start(day),
            bottom=self.bottom,
            plot_height=self.height,
            col_width=self.col_width,
            thickness=self.col_width // 5,
        )


def compute_grid(x: int, y: int, width: int, height: int, days: int, rows: int) -> PlotArea:
    if days <= 0 or rows <= 0:
        raise ConfigurationError(f"Grid needs at least one column and one row, got {days}x{rows}")
    if width < days or height < rows:
        raise ConfigurationError(
            f"Plot area {width}x{height} is too small for a {days}x{rows} grid"
        )

    width_rest = width % days
    height_rest = height % rows
    usable_width = width - width_rest
    usable_height = height - height_rest

    return PlotArea(
        left=x + width_rest,
        top=y + height_rest,
        width=usable_width,
        height=usable_height,
        col_width=usable_width // days,
        row_height=usable_height // rows,
        days=days,
        rows=rows,
    )


def plot_area_for(spec: CanvasSpec) -> PlotArea:
    return compute_grid(
        spec.margin_left,
        spec.margin_top,
        spec.plot_width,
        spec.plot_height,
        spec.max_days,
        spec.group_size,
    )
