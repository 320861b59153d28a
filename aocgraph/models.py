from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from aocgraph.errors import DataShapeError

MAX_DAYS: int = 25
MAX_PARTICIPANTS: int = 200
# Number of horizontal grid rows; one row per 10 people
GROUP_SIZE: int = MAX_PARTICIPANTS // 10


@dataclass(frozen=True)
class DayRecord:
    """Participation counts for one calendar day.

    ``both``: members with two stars, ``one``: only the first star,
    ``none``: no star yet.
    """

    day: int
    both: int
    one: int
    none: int

    def __post_init__(self) -> None:
        if not isinstance(self.day, int) or not 1 <= self.day <= MAX_DAYS:
            raise DataShapeError(f"Day number out of range 1..{MAX_DAYS}: {self.day!r}")
        for name in ("both", "one", "none"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 0:
                raise DataShapeError(f"Day {self.day}: {name} must be a non-negative integer, got {value!r}")

    @property
    def total(self) -> int:
        return self.both + self.one + self.none

    def counts(self) -> tuple[int, int, int]:
        return self.both, self.one, self.none


class DaySeries:
    """Immutable, day-ordered sequence of :class:`DayRecord`.

    Days must run 1, 2, 3, ... without gaps. Fewer than ``MAX_DAYS`` records is
    a partial series and still valid; rendering an empty one is not.
    """

    __slots__ = ("_records",)

    def __init__(self, records: Iterable[DayRecord] = ()) -> None:
        items = tuple(records)
        if len(items) > MAX_DAYS:
            raise DataShapeError(f"Series holds {len(items)} records, at most {MAX_DAYS} allowed")
        for index, record in enumerate(items):
            if not isinstance(record, DayRecord):
                raise DataShapeError(f"Expected DayRecord at position {index}, got {type(record).__name__}")
            if record.day != index + 1:
                raise DataShapeError(f"Expected day {index + 1} at position {index}, got day {record.day}")
        self._records = items

    @classmethod
    def from_counts(cls, counts: Iterable[tuple[int, int, int]]) -> "DaySeries":
        """Build a series from ``(both, one, none)`` triples starting at day 1."""
        return cls(DayRecord(day, *triple) for day, triple in enumerate(counts, start=1))

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[DayRecord]:
        return iter(self._records)

    def __getitem__(self, index: int) -> DayRecord:
        return self._records[index]

    def __bool__(self) -> bool:
        return bool(self._records)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DaySeries):
            return NotImplemented
        return self._records == other._records

    def __hash__(self) -> int:
        return hash(self._records)

    def __repr__(self) -> str:
        return f"DaySeries({len(self._records)} days)"

    @property
    def records(self) -> tuple[DayRecord, ...]:
        return self._records

    @property
    def is_complete(self) -> bool:
        return len(self._records) == MAX_DAYS

    @property
    def participants(self) -> int:
        """Leaderboard size, taken from the first day."""
        if not self._records:
            raise DataShapeError("Empty series has no participant total")
        return self._records[0].total
