"""
Data transforms: turn loaded records into tidy DataFrames.
"""

import logging
from typing import Sequence

import pandas as pd

from .config import COLUMN_NAMES, DATA_VIEW_ROWS
from .loaders.utils import parse_record
from .models import Record

logger = logging.getLogger(__name__)

FACT_COLUMNS = [
    "line_no", "record_id", "region", "date",
    "new_cases", "recoveries", "deaths",
]


def build_fact_daily_counts(records: Sequence[Record]) -> pd.DataFrame:
    """Build the daily counts fact table from the valid records.

    Malformed records are dropped; file order is kept.

    Returns
    -------
    fact_daily_counts DataFrame with columns:
        line_no, record_id, region, date, new_cases, recoveries, deaths
    """
    rows = []
    for record in records:
        counts = parse_record(record)
        if counts is None:
            logger.debug("Skipping malformed record on line %d: %s", record.line_no, record.fields)
            continue
        rows.append({
            "line_no": record.line_no,
            "record_id": counts.record_id,
            "region": counts.region,
            "date": counts.date,
            "new_cases": counts.new_cases,
            "recoveries": counts.recoveries,
            "deaths": counts.deaths,
        })

    if not rows:
        return pd.DataFrame(columns=FACT_COLUMNS).astype({
            "line_no": "int64", "new_cases": "int64",
            "recoveries": "int64", "deaths": "int64",
        })

    df = pd.DataFrame(rows, columns=FACT_COLUMNS)
    logger.debug("Built fact_daily_counts with %d rows", len(df))
    return df


def get_data_view(records: Sequence[Record], limit: int = DATA_VIEW_ROWS) -> pd.DataFrame:
    """Raw data view: the first `limit` records, six columns each.

    Short rows are padded with None; extra trailing fields are dropped.
    Nothing is validated, so malformed rows show as loaded.
    """
    width = len(COLUMN_NAMES)
    rows = []
    for record in records[:limit]:
        fields = list(record.fields[:width])
        fields += [None] * (width - len(fields))
        rows.append(fields)
    return pd.DataFrame(rows, columns=COLUMN_NAMES)
