from __future__ import annotations

import pytest

from aocgraph.errors import DataShapeError
from aocgraph.models import DayRecord, DaySeries, GROUP_SIZE, MAX_DAYS, MAX_PARTICIPANTS

from conftest import build_series


def test_constants_match_fixed_calendar() -> None:
    assert MAX_DAYS == 25
    assert MAX_PARTICIPANTS == 200
    assert GROUP_SIZE == 20


def test_record_total_sums_states() -> None:
    record = DayRecord(3, 4, 5, 6)
    assert record.total == 15
    assert record.counts() == (4, 5, 6)


@pytest.mark.parametrize("day", [0, 26, -1])
def test_record_rejects_day_outside_calendar(day: int) -> None:
    with pytest.raises(DataShapeError):
        DayRecord(day, 0, 0, 0)


def test_record_rejects_negative_counts() -> None:
    with pytest.raises(DataShapeError):
        DayRecord(1, 1, -1, 0)


def test_series_requires_consecutive_days_from_one() -> None:
    with pytest.raises(DataShapeError):
        DaySeries([DayRecord(1, 0, 0, 1), DayRecord(3, 0, 0, 1)])
    with pytest.raises(DataShapeError):
        DaySeries([DayRecord(2, 0, 0, 1)])


def test_series_rejects_more_than_max_days() -> None:
    records = [DayRecord(day, 0, 0, 1) for day in range(1, MAX_DAYS + 1)]
    with pytest.raises(DataShapeError):
        DaySeries(records + [records[0]])


def test_participants_come_from_first_day() -> None:
    series = build_series(first=(50, 30, 120))
    assert series.participants == 200
    assert series.is_complete


def test_partial_series_is_valid_but_incomplete() -> None:
    series = build_series(days=10)
    assert len(series) == 10
    assert not series.is_complete
    assert [r.day for r in series] == list(range(1, 11))


def test_empty_series_has_no_participants() -> None:
    series = DaySeries()
    assert not series
    with pytest.raises(DataShapeError):
        series.participants
