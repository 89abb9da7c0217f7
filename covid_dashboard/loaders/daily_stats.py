"""
Loader for the tab-separated daily statistics export.

Source: data/daily_stats.csv (tab-delimited despite the extension)

Structure:
    Line 1 (first non-blank line): header, e.g.
        Daily ID, Region, Date, New Cases, Recoveries, Deaths
    Remaining lines: one observation per line, in chronological order.

Blank lines are dropped. Short or non-numeric rows are kept as records;
numeric validation happens in the aggregation functions.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from ..config import DELIMITER
from ..errors import LoadError
from ..models import Record
from .utils import parse_record

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadResult:
    """Records loaded from one source, in file order."""

    records: tuple[Record, ...]
    header: tuple[str, ...] | None
    blank_lines: int
    source: str

    @property
    def malformed_count(self) -> int:
        """Number of loaded records that fail numeric validation."""
        return sum(1 for record in self.records if parse_record(record) is None)

    @property
    def is_empty(self) -> bool:
        return not self.records

    def __len__(self) -> int:
        return len(self.records)


def read_daily_stats(lines: Iterable[str], source: str = "<stream>") -> LoadResult:
    """Split each line of a text stream into a Record.

    Assumptions
    -----------
    - The first non-blank line is the header. Its column count is logged
      but not checked against later rows.
    - Lines that are empty after trimming whitespace are skipped and
      counted in `blank_lines`.
    - All other lines are kept, whatever their field count.
    """
    header = None
    blank_lines = 0
    records: list[Record] = []

    for line_no, line in enumerate(lines, start=1):
        if not line.strip():
            blank_lines += 1
            continue

        fields = tuple(line.rstrip("\r\n").split(DELIMITER))

        if header is None:
            header = fields
            logger.info("Header detected: %d columns", len(header))
            continue

        records.append(Record(fields=fields, line_no=line_no))

    logger.info("Read %d records from %s", len(records), source)
    return LoadResult(
        records=tuple(records),
        header=header,
        blank_lines=blank_lines,
        source=source,
    )


def load_daily_stats(path: str | Path) -> LoadResult:
    """Load the daily statistics file.

    Raises
    ------
    LoadError
        If the file is missing, unreadable, or not valid UTF-8 text.
    """
    source = str(path)
    try:
        with open(path, encoding="utf-8") as fh:
            return read_daily_stats(fh, source=source)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Failed to read daily stats file %s: %s", source, exc)
        raise LoadError(source, str(exc)) from exc
