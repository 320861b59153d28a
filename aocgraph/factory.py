from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Union

from aocgraph.canvas import CanvasSpec
from aocgraph.errors import ConfigurationError
from aocgraph.renderer import ChartRenderer, Fetcher
from aocgraph.theme import DEFAULT_THEME, Theme
from aocgraph.variants import AreaVariant, ChartVariant, GroupedBarVariant, StackedBarVariant

logger = logging.getLogger(__name__)


class ChartType(Enum):
    GROUPED_BAR = "bar"
    STACKED_BAR = "stacked"
    AREA = "area"

    @classmethod
    def parse(cls, tag: Union["ChartType", str]) -> "ChartType":
        """Accept a member, its value (``"stacked"``) or its name (``"STACKED_BAR"``)."""
        if isinstance(tag, cls):
            return tag
        if isinstance(tag, str):
            key = tag.strip()
            for member in cls:
                if key.lower() == member.value or key.upper() == member.name:
                    return member
        choices = ", ".join(member.value for member in cls)
        raise ConfigurationError(f"Unknown chart type {tag!r} (expected one of: {choices})")


_VARIANTS: dict[ChartType, type[ChartVariant]] = {
    ChartType.GROUPED_BAR: GroupedBarVariant,
    ChartType.STACKED_BAR: StackedBarVariant,
    ChartType.AREA: AreaVariant,
}


def variant_for(chart_type: Union[ChartType, str], cap: Optional[int] = None) -> ChartVariant:
    variant_cls = _VARIANTS[ChartType.parse(chart_type)]
    return variant_cls() if cap is None else variant_cls(cap)


def create_graph(
    chart_type: Union[ChartType, str],
    year: int,
    leaderboard_id: int,
    session_token: Optional[str],
    theme: Optional[Theme] = None,
    spec: Optional[CanvasSpec] = None,
    font: Optional[str] = None,
    fetcher: Optional[Fetcher] = None,
) -> ChartRenderer:
    """Build a renderer for ``chart_type``; the theme's background becomes the chart background."""
    spec = spec or CanvasSpec()
    theme = theme or DEFAULT_THEME
    variant = variant_for(chart_type, spec.max_participants)
    renderer = ChartRenderer(
        variant,
        year,
        leaderboard_id,
        session_token=session_token,
        theme=theme,
        spec=spec,
        font=font,
        fetcher=fetcher,
    )
    renderer.set_background(theme.background)
    logger.debug("Created %s renderer for leaderboard %s (%s)", variant.name, leaderboard_id, year)
    return renderer
