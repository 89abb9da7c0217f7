"""
Dashboard-ready output functions.

These are the primary entry points for the Streamlit view and the CLI.
Each function returns plain dicts or ready-to-print text blocks; numbers
use thousands separators, rates two decimals and moving averages one.
Aggregates that cannot be computed are rendered as placeholders instead
of being left out.
"""

import logging
from typing import Iterable, Sequence

from . import config
from .kpis import (
    by_region,
    moving_average,
    peak_day,
    rates_from,
    region_share,
    total_counts,
)
from .models import Missing, RegionTotals, Record

logger = logging.getLogger(__name__)

RATE_PLACEHOLDER = "n/a"
NO_REGION_DATA = "no data"


def format_count(value: int) -> str:
    return f"{value:,}"


def format_pct(value: float | Missing) -> str:
    """Two-decimal percentage, or the placeholder for undefined rates."""
    if isinstance(value, Missing):
        return RATE_PLACEHOLDER
    return f"{value:.2f}%"


def _title(text: str) -> list[str]:
    return [text, "=" * len(text), ""]


def _no_data(title: str) -> str:
    logger.warning("No records loaded; rendering placeholder for %s", title)
    return "\n".join(_title(title) + [config.NO_DATA_MESSAGE]) + "\n"


def select_regions(
    records: Sequence[Record],
    regions: Iterable[str] | None = None,
) -> list[str]:
    """Regions to display, in order.

    An explicit `regions` list wins, then config.DISPLAY_REGIONS; otherwise
    every region seen in the valid records is shown.
    """
    if regions is None:
        regions = config.DISPLAY_REGIONS
    if regions is None:
        return list(by_region(records))
    return list(regions)


def get_analysis_overview(records: Sequence[Record]) -> dict:
    """Plain dict of headline figures for rendering cards.

    Returns
    -------
    Dict with structure:
    {
        "records": 42, "valid": 40, "skipped": 2,
        "cases": ..., "recoveries": ..., "deaths": ...,
        "fatality_pct": float | None, "recovery_pct": float | None,
        "regions": {"RegionA": {"cases": ..., "recoveries": ..., "deaths": ...}},
    }
    """
    totals = total_counts(records)
    rates = rates_from(totals.cases, totals.recoveries, totals.deaths)
    return {
        "records": len(records),
        "valid": totals.valid_count,
        "skipped": totals.skipped_count,
        "cases": totals.cases,
        "recoveries": totals.recoveries,
        "deaths": totals.deaths,
        "fatality_pct": rates.fatality_pct if rates else None,
        "recovery_pct": rates.recovery_pct if rates else None,
        "regions": {
            region: region_totals._asdict()
            for region, region_totals in by_region(records).items()
        },
    }


def format_sample_records(records: Sequence[Record], n: int = config.SAMPLE_RECORDS) -> str:
    """First `n` records as loaded, one per line."""
    lines = [f"=== FIRST {n} RECORDS ==="]
    for i, record in enumerate(records[:n], start=1):
        if len(record) >= config.MIN_FIELDS:
            f = [record.field(j) for j in range(config.MIN_FIELDS)]
            lines.append(
                f"Record {i}: {f[0]} | {f[1]} | {f[2]} | {f[3]} cases | "
                f"{f[4]} recoveries | {f[5]} deaths"
            )
        else:
            lines.append(f"Record {i}: INCOMPLETE - {len(record)} columns")
    return "\n".join(lines) + "\n"


def format_statistics_summary(records: Sequence[Record]) -> str:
    """Overall totals, cases by region and overall rates."""
    title = "=== COVID-19 STATISTICS SUMMARY ==="
    if not records:
        return _no_data(title)

    totals = total_counts(records)
    rates = rates_from(totals.cases, totals.recoveries, totals.deaths)
    regions = by_region(records)

    lines = [title, ""]
    lines.append(f"Records analyzed: {format_count(totals.valid_count)}")
    if totals.skipped_count:
        lines.append(f"Records skipped (malformed): {format_count(totals.skipped_count)}")
    lines.append(f"Total Cases: {format_count(totals.cases)}")
    lines.append(f"Total Recoveries: {format_count(totals.recoveries)}")
    lines.append(f"Total Deaths: {format_count(totals.deaths)}")
    lines.append("")
    lines.append("--- Cases by Region ---")
    for region in select_regions(records):
        region_totals = regions.get(region)
        if region_totals is None:
            lines.append(f"{region}: {NO_REGION_DATA}")
        else:
            lines.append(f"{region}: {format_count(region_totals.cases)} cases")
    lines.append("")
    lines.append(f"Case Fatality Rate: {_rate_field(rates, 'fatality_pct')}")
    lines.append(f"Recovery Rate: {_rate_field(rates, 'recovery_pct')}")
    return "\n".join(lines) + "\n"


def _rate_field(rates, field: str) -> str:
    if isinstance(rates, Missing):
        return RATE_PLACEHOLDER
    return format_pct(getattr(rates, field))


def format_total_cases_report(
    records: Sequence[Record],
    regions: Iterable[str] | None = None,
) -> str:
    """Total cases, per-region share of the total, and peak case days."""
    title = "TOTAL COVID-19 CASES ANALYSIS"
    if not records:
        return _no_data(title)

    totals = total_counts(records)
    region_totals = by_region(records)
    shown = select_regions(records, regions)

    lines = _title(title)
    lines.append(f"Total Cases Across All Regions: {format_count(totals.cases)}")
    lines.append("")
    lines.append("Breakdown by Region:")
    for region in shown:
        rt = region_totals.get(region)
        if rt is None:
            lines.append(f"  {region}: {NO_REGION_DATA}")
            continue
        share = region_share(rt.cases, totals.cases)
        lines.append(f"  {region}: {format_count(rt.cases)} cases ({format_pct(share)})")

    lines.append("")
    lines.append("--- PEAK CASE DAYS ---")
    for region in shown:
        peak = peak_day(records, region)
        if isinstance(peak, Missing):
            lines.append(f"{region}: {NO_REGION_DATA}")
        else:
            lines.append(f"{region}: {format_count(peak.max_cases)} cases on {peak.date}")
    return "\n".join(lines) + "\n"


def format_fatality_report(
    records: Sequence[Record],
    regions: Iterable[str] | None = None,
) -> str:
    """Overall and per-region case fatality rates."""
    title = "CASE FATALITY RATE ANALYSIS"
    if not records:
        return _no_data(title)

    totals = total_counts(records)
    overall = rates_from(totals.cases, totals.recoveries, totals.deaths)
    region_totals = by_region(records)

    lines = _title(title)
    lines.append(f"Overall Fatality Rate: {_rate_field(overall, 'fatality_pct')}")
    lines.append("")
    lines.append("Regional Fatality Rates:")
    for region in select_regions(records, regions):
        rt = region_totals.get(region)
        if rt is None:
            lines.append(f"  {region}: {NO_REGION_DATA}")
            continue
        rates = rates_from(rt.cases, rt.recoveries, rt.deaths)
        lines.append(
            f"  {region}: {_rate_field(rates, 'fatality_pct')} "
            f"({format_count(rt.deaths)} deaths / {format_count(rt.cases)} cases)"
        )
    return "\n".join(lines) + "\n"


def format_moving_average(
    records: Sequence[Record],
    region: str,
    window: int = config.MOVING_AVERAGE_WINDOW,
    preview: int | None = config.MOVING_AVERAGE_PREVIEW,
    align: str = "records",
) -> str:
    """Leading moving-average points for one region, or an insufficient-data line."""
    series = moving_average(records, region, window=window, align=align)
    points = list(series) if preview is None else series.head(preview)
    if not points:
        return f"  Not enough data for {window}-day moving average\n"
    return "".join(f"  {point.date}: {point.average:,.1f} cases\n" for point in points)


def format_moving_averages_report(
    records: Sequence[Record],
    regions: Iterable[str] | None = None,
    window: int = config.MOVING_AVERAGE_WINDOW,
    preview: int | None = config.MOVING_AVERAGE_PREVIEW,
    align: str = "records",
) -> str:
    """Moving averages for each displayed region."""
    title = f"{window}-DAY MOVING AVERAGE ANALYSIS"
    if not records:
        return _no_data(title)

    parts = ["\n".join(_title(title)) + "\n"]
    for i, region in enumerate(select_regions(records, regions)):
        if i:
            parts.append("\n")
        parts.append(f"{region.upper()} - {window}-Day Moving Averages:\n")
        parts.append(format_moving_average(records, region, window, preview, align))
    return "".join(parts)


def _format_region_block(region: str, rt: RegionTotals | None) -> list[str]:
    lines = [f"=== {region.upper()} ==="]
    if rt is None:
        lines.append(f"  {NO_REGION_DATA}")
        return lines
    rates = rates_from(rt.cases, rt.recoveries, rt.deaths)
    lines.append(f"Total Cases:      {format_count(rt.cases):>10}")
    lines.append(f"Total Recoveries: {format_count(rt.recoveries):>10}")
    lines.append(f"Total Deaths:     {format_count(rt.deaths):>10}")
    lines.append(f"Recovery Rate:    {_rate_field(rates, 'recovery_pct'):>10}")
    lines.append(f"Fatality Rate:    {_rate_field(rates, 'fatality_pct'):>10}")
    return lines


def format_regional_comparison(
    records: Sequence[Record],
    regions: Iterable[str] | None = None,
) -> str:
    """Side-by-side totals and rates for each displayed region."""
    title = "REGIONAL COMPARISON ANALYSIS"
    if not records:
        return _no_data(title)

    region_totals = by_region(records)
    lines = _title(title)
    lines.append("COMPREHENSIVE REGIONAL COMPARISON:")
    for region in select_regions(records, regions):
        lines.append("")
        lines.extend(_format_region_block(region, region_totals.get(region)))
    return "\n".join(lines) + "\n"
