"""Data ingestion loaders for the daily regional statistics export."""

from .daily_stats import LoadResult, load_daily_stats, read_daily_stats
from .utils import parse_new_cases, parse_record, safe_int

__all__ = [
    "LoadResult",
    "load_daily_stats",
    "read_daily_stats",
    "parse_new_cases",
    "parse_record",
    "safe_int",
]
