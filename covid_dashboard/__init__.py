"""
Regional COVID-19 Statistics Dashboard

Analytics backend for turning a tab-delimited export of regional daily
counts (new cases, recoveries, deaths) into descriptive statistics and
text reports.

To load data:
    Call loaders.load_daily_stats(path) to get a LoadResult holding the
    raw records in file order. An unreadable file raises errors.LoadError.

To compute statistics:
    The functions in kpis are pure: total_counts, rates_from, by_region,
    peak_day and moving_average all take the loaded records and recompute
    everything on each call.

To connect to Streamlit or a terminal:
    Call the format_* functions in dashboard to get ready-to-print text
    blocks for each report.
"""

__version__ = "0.1.0"
