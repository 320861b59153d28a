from __future__ import annotations

import pytest

from aocgraph.canvas import CanvasSpec
from aocgraph.factory import create_graph
from aocgraph.models import DaySeries, MAX_DAYS


def build_series(days: int = MAX_DAYS, first: tuple[int, int, int] = (50, 30, 120)) -> DaySeries:
    """Series whose counts drift from ``first`` towards fewer stars each day."""
    total = sum(first)
    counts = [first]
    for day in range(2, days + 1):
        both = max(0, first[0] - 2 * day)
        one = max(0, first[1] - day)
        counts.append((both, one, total - both - one))
    return DaySeries.from_counts(counts[:days])


@pytest.fixture
def spec() -> CanvasSpec:
    return CanvasSpec()


@pytest.fixture
def series() -> DaySeries:
    return build_series()


@pytest.fixture
def make_graph():
    def _make(chart_type="stacked", **kwargs):
        kwargs.setdefault("session_token", "token")
        return create_graph(chart_type, 2022, 951576, **kwargs)

    return _make
