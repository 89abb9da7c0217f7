"""
Data model for the daily regional counts.

Each non-blank, non-header input line becomes a `Record` holding its raw
fields. Records are immutable (`frozen=True`) so that every report can be
recomputed from the same loaded sequence, and so the sequence can be shared
between threads without locking.

Validation is deferred: a `Record` may be short or carry non-numeric counts.
`loaders.utils.parse_record` turns a valid one into `DailyCounts`.
"""

import enum
from dataclasses import dataclass
from typing import NamedTuple

from .config import DATE_FIELD, ID_FIELD, REGION_FIELD


class Missing(enum.Enum):
    """Placeholders for aggregates that cannot be computed.

    Members are falsy, so `if rates:` distinguishes a real result from a
    placeholder, and they never compare equal to 0.
    """

    UNDEFINED_RATE = "undefined rate"
    NO_DATA = "no data"

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class Record:
    """One raw input line split on the delimiter."""

    fields: tuple[str, ...]
    line_no: int = 0

    def field(self, index: int) -> str | None:
        """Return the stripped field at `index`, or None if the row is too short."""
        if index >= len(self.fields):
            return None
        return self.fields[index].strip()

    @property
    def record_id(self) -> str | None:
        return self.field(ID_FIELD)

    @property
    def region(self) -> str | None:
        return self.field(REGION_FIELD)

    @property
    def date(self) -> str | None:
        return self.field(DATE_FIELD)

    def __len__(self) -> int:
        return len(self.fields)


@dataclass(frozen=True)
class DailyCounts:
    """A record whose three numeric fields parsed as integers."""

    record_id: str
    region: str
    date: str
    new_cases: int
    recoveries: int
    deaths: int


class Totals(NamedTuple):
    cases: int
    recoveries: int
    deaths: int
    valid_count: int
    skipped_count: int = 0


class RegionTotals(NamedTuple):
    cases: int
    recoveries: int
    deaths: int


class Rates(NamedTuple):
    fatality_pct: float
    recovery_pct: float


class PeakDay(NamedTuple):
    max_cases: int
    date: str


class MovingAveragePoint(NamedTuple):
    date: str
    average: float
