"""
Shared utilities for data ingestion: integer coercion and record validation.
"""

import logging
import re
from typing import Any

from ..config import (
    DEATHS_FIELD,
    MIN_FIELDS,
    NEW_CASES_FIELD,
    RECOVERIES_FIELD,
)
from ..models import DailyCounts, Record

logger = logging.getLogger(__name__)

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

# Counts are stored in int64 columns
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
_INT64_DIGITS = 19


def safe_int(val: Any) -> int | None:
    """Coerce a value to int, returning None for non-integer values.

    Strings must be an optionally signed run of ASCII digits once
    surrounding whitespace is stripped; "12.0", "1,000" and "" are rejected.
    Values outside the int64 range are rejected too.
    """
    if val is None or isinstance(val, bool):
        return None
    if isinstance(val, str):
        val = val.strip()
        if not _INT_PATTERN.fullmatch(val) or len(val.lstrip("+-").lstrip("0")) > _INT64_DIGITS:
            return None
        val = int(val)
    if not isinstance(val, int):
        return None
    if not INT64_MIN <= val <= INT64_MAX:
        return None
    return val


def parse_record(record: Record) -> DailyCounts | None:
    """Return the record's counts, or None if the record is malformed.

    A record is valid when it has at least MIN_FIELDS fields and its new
    cases, recoveries and deaths fields all parse as integers.
    """
    if len(record) < MIN_FIELDS:
        return None

    new_cases = safe_int(record.fields[NEW_CASES_FIELD])
    recoveries = safe_int(record.fields[RECOVERIES_FIELD])
    deaths = safe_int(record.fields[DEATHS_FIELD])
    if new_cases is None or recoveries is None or deaths is None:
        return None

    return DailyCounts(
        record_id=record.record_id,
        region=record.region,
        date=record.date,
        new_cases=new_cases,
        recoveries=recoveries,
        deaths=deaths,
    )


def parse_new_cases(record: Record) -> int | None:
    """Return only the new-cases count of a record with enough fields.

    Recoveries and deaths are not checked.
    """
    if len(record) < MIN_FIELDS:
        return None
    return safe_int(record.fields[NEW_CASES_FIELD])
