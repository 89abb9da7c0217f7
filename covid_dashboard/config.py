"""
Configuration: file paths, input layout, report constants.

The input file is a tab-separated export with one header line and one
record per line: id, region, date, new cases, recoveries, deaths.
"""

from pathlib import Path

# ---------------------------------------------------------------------------
# File paths: adjust these if source files move
# ---------------------------------------------------------------------------
DATA_DIR = Path(__file__).resolve().parent.parent / "data"

DAILY_STATS_FILE = DATA_DIR / "daily_stats.csv"

# ---------------------------------------------------------------------------
# Input layout
# ---------------------------------------------------------------------------
DELIMITER = "\t"
MIN_FIELDS = 6

ID_FIELD = 0
REGION_FIELD = 1
DATE_FIELD = 2
NEW_CASES_FIELD = 3
RECOVERIES_FIELD = 4
DEATHS_FIELD = 5

# Column labels for the raw data view
COLUMN_NAMES = ["Daily ID", "Region", "Date", "New Cases", "Recoveries", "Deaths"]

# ---------------------------------------------------------------------------
# Analysis
# ---------------------------------------------------------------------------
MOVING_AVERAGE_WINDOW = 7

# Regions shown in reports. None shows every region present in the data.
DISPLAY_REGIONS: list[str] | None = None

# ---------------------------------------------------------------------------
# Report constants
# ---------------------------------------------------------------------------
DASHBOARD_TITLE = "COVID-19 Data Analysis Dashboard"

# Leading moving-average points shown per region
MOVING_AVERAGE_PREVIEW = 5
CLI_MOVING_AVERAGE_PREVIEW = 3

SAMPLE_RECORDS = 5
DATA_VIEW_ROWS = 20

NO_DATA_MESSAGE = "No data available. Please check the data file."
