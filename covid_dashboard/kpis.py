"""
Aggregation functions: pure functions with no side effects.

Provides totals, case-fatality and recovery rates, regional breakdown,
peak-day detection and per-region moving averages. Every function takes
the loaded record sequence and recomputes from scratch, so the same
sequence can be analysed any number of times, from any thread.
"""

import itertools
import logging
from typing import Iterator, Sequence

import pandas as pd

from .config import MOVING_AVERAGE_WINDOW
from .loaders.utils import parse_new_cases, parse_record
from .models import (
    Missing,
    MovingAveragePoint,
    PeakDay,
    Rates,
    Record,
    RegionTotals,
    Totals,
)
from .transforms import build_fact_daily_counts

logger = logging.getLogger(__name__)

_COUNT_COLS = ["new_cases", "recoveries", "deaths"]


def total_counts(records: Sequence[Record]) -> Totals:
    """Sum cases, recoveries and deaths over the valid records.

    Malformed records are counted in `skipped_count` and otherwise ignored.
    With no valid records every sum is 0.
    """
    df = build_fact_daily_counts(records)
    skipped = len(records) - len(df)
    if skipped:
        logger.warning("Skipped %d malformed record(s) out of %d", skipped, len(records))

    if df.empty:
        return Totals(0, 0, 0, 0, skipped)

    # Python ints: int64 column sums can wrap
    sums = {col: sum(df[col].tolist()) for col in _COUNT_COLS}
    return Totals(
        cases=int(sums["new_cases"]),
        recoveries=int(sums["recoveries"]),
        deaths=int(sums["deaths"]),
        valid_count=len(df),
        skipped_count=skipped,
    )


def rates_from(cases: int, recoveries: int, deaths: int) -> Rates | Missing:
    """Return (fatality %, recovery %) relative to `cases`.

    Returns Missing.UNDEFINED_RATE when `cases` is not positive.
    """
    if cases <= 0:
        return Missing.UNDEFINED_RATE
    return Rates(
        fatality_pct=deaths / cases * 100,
        recovery_pct=recoveries / cases * 100,
    )


def by_region(records: Sequence[Record]) -> dict[str, RegionTotals]:
    """Per-region totals over the valid records.

    Keys are every region label seen in the valid records, in first-seen
    order. The region totals partition `total_counts`.
    """
    df = build_fact_daily_counts(records)
    if df.empty:
        return {}

    return {
        region: RegionTotals(*(sum(group[col].tolist()) for col in _COUNT_COLS))
        for region, group in df.groupby("region", sort=False)
    }


def regional_rates(records: Sequence[Record]) -> dict[str, Rates | Missing]:
    """Fatality and recovery rates for every region in `by_region`."""
    return {
        region: rates_from(totals.cases, totals.recoveries, totals.deaths)
        for region, totals in by_region(records).items()
    }


def region_share(region_cases: int, total_cases: int) -> float | Missing:
    """Percentage of all cases that fall in one region."""
    if total_cases <= 0:
        return Missing.UNDEFINED_RATE
    return region_cases / total_cases * 100


def peak_day(records: Sequence[Record], region: str) -> PeakDay | Missing:
    """Day with the most new cases in `region`.

    Scans valid records in file order with a strict greater-than
    comparison, so ties keep the first day seen. Returns Missing.NO_DATA
    when no valid record belongs to `region`.
    """
    peak = None
    for record in records:
        counts = parse_record(record)
        if counts is None or counts.region != region:
            continue
        if peak is None or counts.new_cases > peak.max_cases:
            peak = PeakDay(counts.new_cases, counts.date)

    if peak is None:
        return Missing.NO_DATA
    return peak


def peak_days(records: Sequence[Record]) -> dict[str, PeakDay | Missing]:
    """Peak day for every region present in the valid records."""
    return {region: peak_day(records, region) for region in by_region(records)}


class MovingAverage:
    """Trailing moving average of new cases for one region.

    Iterating yields one MovingAveragePoint per qualifying position, in
    order. Nothing is cached: every iteration recomputes from the records,
    so the object can be iterated any number of times and truncated with
    `head()` without affecting later iterations.

    Alignment
    ---------
    - "records": the window spans the last `window` rows of the region
      whose new-cases field parses, in file order. Rows that fail to parse
      are left out, so a window may cover more than `window` calendar days.
    - "calendar": dates are parsed and same-day rows summed. A point is
      produced for a date only when every one of the `window` calendar days
      ending on it has data; gaps suppress points. Rows whose date does not
      parse are left out. Dates in the output are ISO formatted.
    """

    ALIGNMENTS = ("records", "calendar")

    def __init__(
        self,
        records: Sequence[Record],
        region: str,
        window: int = MOVING_AVERAGE_WINDOW,
        align: str = "records",
    ):
        if window < 1:
            raise ValueError(f"window must be at least 1, got {window}")
        if align not in self.ALIGNMENTS:
            raise ValueError(f"align must be one of {self.ALIGNMENTS}, got {align!r}")
        self.records = records
        self.region = region
        self.window = window
        self.align = align

    def _region_values(self) -> tuple[list[str], list[int]]:
        dates, values = [], []
        for record in self.records:
            if record.region != self.region:
                continue
            cases = parse_new_cases(record)
            if cases is None:
                continue
            dates.append(record.date)
            values.append(cases)
        return dates, values

    def _calendar_series(self) -> pd.Series:
        dates, values = self._region_values()
        index = pd.to_datetime(dates, errors="coerce", format="mixed")
        series = pd.Series(values, index=index, dtype="float64")
        dropped = int(index.isna().sum())
        if dropped:
            logger.warning(
                "Dropped %d %s row(s) with unparseable dates from the moving average",
                dropped, self.region,
            )
        series = series[series.index.notna()]
        if series.empty:
            return series
        return series.groupby(level=0).sum().asfreq("D")

    def _compute(self) -> pd.Series:
        if self.align == "calendar":
            series = self._calendar_series()
            if series.empty:
                return series
            averages = series.rolling(self.window, min_periods=self.window).mean().dropna()
            averages.index = averages.index.strftime("%Y-%m-%d")
            return averages

        dates, values = self._region_values()
        if len(values) < self.window:
            return pd.Series(dtype="float64")
        averages = pd.Series(values, index=dates, dtype="float64").rolling(self.window).mean()
        return averages.iloc[self.window - 1:]

    def __iter__(self) -> Iterator[MovingAveragePoint]:
        for date, average in self._compute().items():
            yield MovingAveragePoint(date, float(average))

    def head(self, n: int) -> list[MovingAveragePoint]:
        """The leading `n` points."""
        return list(itertools.islice(self, n))

    @property
    def is_empty(self) -> bool:
        return self._compute().empty

    def __bool__(self) -> bool:
        return not self.is_empty

    def __repr__(self) -> str:
        return (
            f"MovingAverage(region={self.region!r}, window={self.window}, "
            f"align={self.align!r})"
        )


def moving_average(
    records: Sequence[Record],
    region: str,
    window: int = MOVING_AVERAGE_WINDOW,
    align: str = "records",
) -> MovingAverage:
    """Trailing `window`-point moving average of new cases for `region`.

    The result is empty when fewer than `window` qualifying values exist;
    callers should report insufficient data rather than a short window.
    """
    return MovingAverage(records, region, window=window, align=align)
