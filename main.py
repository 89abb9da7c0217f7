"""
COVID-19 data analysis: end-to-end command line pipeline.

Loads the daily statistics export and prints sample records, overall
statistics and per-region moving averages.

Usage:
    python main.py
    python main.py --data path/to/daily_stats.csv --region RegionA
    python main.py --simulate          # write and analyse synthetic data
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from covid_dashboard.config import (
    CLI_MOVING_AVERAGE_PREVIEW,
    DAILY_STATS_FILE,
    MOVING_AVERAGE_WINDOW,
    SAMPLE_RECORDS,
)
from covid_dashboard.dashboard import (
    format_moving_averages_report,
    format_sample_records,
    format_statistics_summary,
)
from covid_dashboard.errors import LoadError
from covid_dashboard.loaders import load_daily_stats
from covid_dashboard.simulator import generate_daily_stats, write_daily_stats

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Regional COVID-19 statistics")
    ap.add_argument("--data", default=str(DAILY_STATS_FILE), help="Path to the tab-separated daily stats file")
    ap.add_argument("--region", action="append", dest="regions", help="Region to report (repeatable); default: all")
    ap.add_argument("--window", type=int, default=MOVING_AVERAGE_WINDOW, help="Moving-average window")
    ap.add_argument("--preview", type=int, default=CLI_MOVING_AVERAGE_PREVIEW, help="Moving-average points shown per region")
    ap.add_argument("--calendar", action="store_true", help="Align moving-average windows by calendar date")
    ap.add_argument("--simulate", action="store_true", help="Generate synthetic data at --data before loading")
    args = ap.parse_args(argv)
    if args.window < 1:
        ap.error("--window must be at least 1")
    return args


def main(argv: list[str] | None = None) -> int:
    """Run the analysis pipeline and print the text reports."""
    args = parse_args(argv)

    print("COVID-19 DATA ANALYSIS")
    print("======================")

    if args.simulate:
        path = write_daily_stats(generate_daily_stats(), args.data)
        logger.info("Wrote simulated data to %s", path)

    try:
        result = load_daily_stats(args.data)
    except LoadError as e:
        print(f"\nCould not load data: {e.reason}")
        print(f"Check that {e.source} exists and is readable.")
        return 1

    if result.is_empty:
        print("\nNo data was loaded from the data file.")
        return 1

    records = result.records
    print()
    print(format_sample_records(records, SAMPLE_RECORDS))
    print(format_statistics_summary(records))
    print(format_moving_averages_report(
        records,
        regions=args.regions,
        window=args.window,
        preview=args.preview,
        align="calendar" if args.calendar else "records",
    ))

    print("ANALYSIS COMPLETE!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
