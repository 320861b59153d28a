"""Chart variants.

A variant turns one day's counts into draw commands inside that day's column.
The renderer owns the canvas; variants only return plain values, so the
three strategies can be compared without drawing anything.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence, Union

from aocgraph.layout import SlotGeometry
from aocgraph.models import DayRecord, MAX_PARTICIPANTS
from aocgraph.theme import RGBA, Theme


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int
    fill: RGBA

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def box(self) -> tuple[int, int, int, int]:
        # Pillow rectangles include their far edge
        return self.x, self.y, self.x + self.width - 1, self.y + self.height - 1


@dataclass(frozen=True)
class Polygon:
    points: tuple[tuple[int, int], ...]
    fill: RGBA


@dataclass(frozen=True)
class _Boundary:
    """Vertical extent of one stack segment at a column center; area charts turn these into polygons."""

    x: int
    lower: int
    upper: int
    state: int
    fill: RGBA


DrawCommand = Union[Rect, Polygon]
_SlotCommand = Union[Rect, Polygon, _Boundary]


def scale_height(count: int, plot_height: int, cap: int = MAX_PARTICIPANTS) -> int:
    """Bar height for ``count`` on a linear scale where ``cap`` fills the plot."""
    return plot_height * count // cap


def _bar(x: int, bottom: int, width: int, height: int, fill: RGBA) -> list[DrawCommand]:
    if width <= 0 or height <= 0:
        return []
    return [Rect(x, bottom - height, width, height, fill)]


class ChartVariant(ABC):
    name: str = "variant"

    def __init__(self, cap: int = MAX_PARTICIPANTS) -> None:
        self.cap = cap

    @staticmethod
    def bar_start(slot: SlotGeometry) -> int:
        return slot.x + slot.thickness + slot.thickness // 4

    @abstractmethod
    def render_day_slot(self, record: DayRecord, slot: SlotGeometry, theme: Theme) -> list[_SlotCommand]:
        """Draw commands for one day's three counts."""

    def compose(self, slots: Sequence[list[_SlotCommand]]) -> list[DrawCommand]:
        return [command for commands in slots for command in commands]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(cap={self.cap})"


class GroupedBarVariant(ChartVariant):
    """Three thin bars side by side, each scaled on its own."""

    name = "bar"

    def render_day_slot(self, record: DayRecord, slot: SlotGeometry, theme: Theme) -> list[DrawCommand]:
        commands: list[DrawCommand] = []
        x = self.bar_start(slot)
        for count, color in zip(record.counts(), theme.state_colors()):
            height = scale_height(count, slot.plot_height, self.cap)
            commands.extend(_bar(x, slot.bottom, slot.thickness, height, color))
            x += slot.thickness
        return commands


class StackedBarVariant(ChartVariant):
    """One wide bar, segments stacked both -> one -> none from the bottom."""

    name = "stacked"

    def render_day_slot(self, record: DayRecord, slot: SlotGeometry, theme: Theme) -> list[DrawCommand]:
        commands: list[DrawCommand] = []
        x = self.bar_start(slot)
        width = slot.thickness * 3
        base = slot.bottom
        for count, color in zip(record.counts(), theme.state_colors()):
            height = scale_height(count, slot.plot_height, self.cap)
            commands.extend(_bar(x, base, width, height, color))
            base -= height
        return commands


class AreaVariant(ChartVariant):
    """Stacked values drawn as one continuous region per state."""

    name = "area"

    def render_day_slot(self, record: DayRecord, slot: SlotGeometry, theme: Theme) -> list[_SlotCommand]:
        commands: list[_SlotCommand] = []
        x = slot.x + slot.col_width // 2
        base = slot.bottom
        for state, (count, color) in enumerate(zip(record.counts(), theme.state_colors())):
            top = base - scale_height(count, slot.plot_height, self.cap)
            commands.append(_Boundary(x, base, top, state, color))
            base = top
        return commands

    def compose(self, slots: Sequence[list[_SlotCommand]]) -> list[DrawCommand]:
        boundaries = [c for commands in slots for c in commands if isinstance(c, _Boundary)]
        polygons: list[DrawCommand] = []
        for state in range(3):
            column = [b for b in boundaries if b.state == state]
            if all(b.upper == b.lower for b in column):
                continue
            upper = [(b.x, b.upper) for b in column]
            lower = [(b.x, b.lower) for b in reversed(column)]
            polygons.append(Polygon(tuple(upper + lower), column[0].fill))
        return polygons
