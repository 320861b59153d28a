from __future__ import annotations

import logging
from typing import Callable, Optional

from PIL import Image, ImageDraw

from aocgraph.assembler import assemble_image
from aocgraph.canvas import CanvasSpec
from aocgraph.errors import ConfigurationError, DataShapeError
from aocgraph.fonts import FontHandle, draw_text, load_font, text_width
from aocgraph.layout import PlotArea, plot_area_for
from aocgraph.leaderboard import fetch_day_series
from aocgraph.models import DaySeries
from aocgraph.theme import DEFAULT_THEME, RGBA, TRANSPARENT, WHITE, ColorLike, Theme, parse_color
from aocgraph.variants import ChartVariant, DrawCommand, Polygon, Rect

logger = logging.getLogger(__name__)

Fetcher = Callable[[int, int, str], DaySeries]

LEGEND_LABELS = ("Two Stars", "One Star", "No Star")


class ChartRenderer:
    """Draws the participation chart; the per-day bars come from ``variant``.

    Each :meth:`render` call paints a fresh image; nothing drawn is kept on
    the renderer, so one instance can serve several renders.
    """

    def __init__(
        self,
        variant: ChartVariant,
        year: int,
        leaderboard_id: int,
        session_token: Optional[str] = None,
        theme: Theme = DEFAULT_THEME,
        spec: Optional[CanvasSpec] = None,
        font: Optional[str] = None,
        fetcher: Optional[Fetcher] = None,
        subject: str = "Advent of Code",
    ) -> None:
        self.variant = variant
        self.year = year
        self.leaderboard_id = leaderboard_id
        self.session_token = session_token
        self.theme = theme
        self.spec = spec or CanvasSpec()
        if variant.cap != self.spec.max_participants:
            raise ConfigurationError(
                f"Variant scales against {variant.cap} participants, the axis against {self.spec.max_participants}"
            )
        self.font = font
        self.fetcher: Fetcher = fetcher or fetch_day_series
        self.subject = subject
        self.background: Optional[RGBA] = WHITE

    def set_background(self, color: Optional[ColorLike]) -> None:
        """Set the fill behind the chart; ``None`` leaves the canvas transparent."""
        self.background = parse_color(color) if color is not None else None

    @property
    def plot_area(self) -> PlotArea:
        return plot_area_for(self.spec)

    @property
    def title(self) -> str:
        return f"{self.subject} {self.year}"

    @staticmethod
    def participants(series: DaySeries) -> int:
        return series.participants

    def legend_texts(self, series: DaySeries) -> tuple[str, str]:
        return (
            f"Leaderboard ID: {self.leaderboard_id}",
            f"Participants: {self.participants(series)}",
        )

    def generate_image(self) -> Image.Image:
        """Fetch the leaderboard once, render it and center it on the output canvas."""
        if not self.session_token:
            raise ConfigurationError("A session token is required to fetch the leaderboard")
        series = self.fetcher(self.year, self.leaderboard_id, self.session_token)
        chart = self.render(series)
        return assemble_image(chart, self.spec.size, self.background)

    def render(self, series: DaySeries) -> Image.Image:
        if not series:
            raise DataShapeError("Cannot render an empty series")
        if len(series) > self.spec.max_days:
            raise DataShapeError(f"Series has {len(series)} days, the grid holds {self.spec.max_days}")
        if len(series) < self.spec.max_days:
            logger.warning("Rendering partial series: %s of %s days", len(series), self.spec.max_days)
        logger.debug("Rendering %s chart for %s (%s days)", self.variant.name, self.year, len(series))

        body_font = load_font(self.font, self.spec.font_size)
        title_font = load_font(self.font, self.spec.font_size * 2)

        image = Image.new("RGBA", self.spec.size, TRANSPARENT)
        self._draw_background(image)

        plot = self.plot_area
        draw = ImageDraw.Draw(image)
        self._draw_grid(draw, plot)
        self._draw_axis_values(image, plot, body_font)
        self._draw_commands(draw, self.day_commands(series, plot))

        self._draw_title(image, title_font)
        self._draw_legends(image, body_font, series)
        self._draw_axis_labels(image, plot, body_font)
        self._draw_legend_squares(image, draw, plot, body_font)
        return image

    def day_commands(self, series: DaySeries, plot: Optional[PlotArea] = None) -> list[DrawCommand]:
        """Variant output for every recorded day, placed in its own column."""
        plot = plot or self.plot_area
        slots = [
            self.variant.render_day_slot(record, plot.slot_geometry(record.day), self.theme)
            for record in series
        ]
        return self.variant.compose(slots)

    def _draw_background(self, image: Image.Image) -> None:
        if self.background is not None:
            ImageDraw.Draw(image).rectangle((0, 0, image.width - 1, image.height - 1), fill=self.background)

    def _draw_grid(self, draw: ImageDraw.ImageDraw, plot: PlotArea) -> None:
        color = self.theme.text
        draw.rectangle((plot.left, plot.top, plot.right, plot.bottom), outline=color)
        for y in plot.row_lines():
            draw.line((plot.left, y, plot.right, y), fill=color)
        for x in plot.column_lines():
            draw.line((x, plot.top, x, plot.bottom), fill=color)

    def _draw_axis_values(self, image: Image.Image, plot: PlotArea, font: FontHandle) -> None:
        color = self.theme.text
        days_y = self.spec.height - self.spec.margin_bottom // 6 * 5
        for day, x in plot.day_labels():
            draw_text(image, (x, days_y), str(day), font, color, anchor="mm")

        people_x = plot.left - self.spec.tick_label_gap
        for value, y in plot.people_labels(self.spec.max_participants):
            draw_text(image, (people_x, y), str(value), font, color, anchor="mm")

    def _draw_commands(self, draw: ImageDraw.ImageDraw, commands: list[DrawCommand]) -> None:
        for command in commands:
            if isinstance(command, Rect):
                draw.rectangle(command.box(), fill=command.fill)
            elif isinstance(command, Polygon):
                draw.polygon(list(command.points), fill=command.fill)
            else:
                raise TypeError(f"Cannot draw {type(command).__name__}")

    def _draw_title(self, image: Image.Image, font: FontHandle) -> None:
        top_area = self.spec.margin_top // 4 * 3
        draw_text(image, (self.spec.width // 2, top_area // 2), self.title, font, self.theme.text, anchor="mm")

    def _draw_legends(self, image: Image.Image, font: FontHandle, series: DaySeries) -> None:
        legend_y = self.spec.margin_top - self.spec.margin_top // 5
        leaderboard_text, participants_text = self.legend_texts(series)
        third = self.spec.width // 3
        draw_text(image, (third, legend_y), leaderboard_text, font, self.theme.text, anchor="mm")
        draw_text(image, (third * 2, legend_y), participants_text, font, self.theme.text, anchor="mm")

    def _draw_axis_labels(self, image: Image.Image, plot: PlotArea, font: FontHandle) -> None:
        day_y = self.spec.height - self.spec.margin_bottom // 2
        draw_text(image, (plot.center_x, day_y), "Day", font, self.theme.text, anchor="mm")
        # Rotated counter-clockwise so it reads bottom to top
        draw_text(
            image,
            (self.spec.margin_left // 4, plot.center_y),
            "People",
            font.rotated(90),
            self.theme.text,
            anchor="mm",
        )

    def _draw_legend_squares(
        self, image: Image.Image, draw: ImageDraw.ImageDraw, plot: PlotArea, font: FontHandle
    ) -> None:
        line_y = self.spec.height - self.spec.margin_bottom // 5
        square = self.spec.font_size
        square_top = line_y - square // 2

        start_x = plot.left + plot.width // 6
        separation = plot.width // 3
        for index, (label, color) in enumerate(zip(LEGEND_LABELS, self.theme.state_colors())):
            element_width = 2 * square + text_width(font, label)
            x = start_x + index * separation - element_width // 2
            draw.rectangle((x, square_top, x + square - 1, square_top + square - 1), fill=color)
            draw_text(image, (x + 2 * square, line_y), label, font, self.theme.text, anchor="lm")
