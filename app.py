"""
COVID-19 Data Analysis: Interactive Dashboard

Run with:  streamlit run app.py
"""

import sys
from pathlib import Path

import streamlit as st

sys.path.insert(0, str(Path(__file__).resolve().parent))

from covid_dashboard.config import (
    DAILY_STATS_FILE,
    DASHBOARD_TITLE,
    DATA_VIEW_ROWS,
    MOVING_AVERAGE_PREVIEW,
    MOVING_AVERAGE_WINDOW,
)
from covid_dashboard.dashboard import (
    format_fatality_report,
    format_moving_averages_report,
    format_regional_comparison,
    format_statistics_summary,
    format_total_cases_report,
    select_regions,
)
from covid_dashboard.errors import LoadError
from covid_dashboard.loaders import load_daily_stats
from covid_dashboard.transforms import get_data_view

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title=DASHBOARD_TITLE,
    layout="wide",
)


# ---------------------------------------------------------------------------
# Data loading (cached)
# ---------------------------------------------------------------------------
@st.cache_data
def load_records(path: str):
    return load_daily_stats(path).records


# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------
st.sidebar.title(DASHBOARD_TITLE)
st.sidebar.markdown("Interactive analysis of regional COVID-19 statistics")
st.sidebar.divider()

data_path = st.sidebar.text_input("Data file", str(DAILY_STATS_FILE))

try:
    records = load_records(data_path)
except LoadError as e:
    st.error(f"Could not load data: {e.reason}")
    st.stop()

all_regions = select_regions(records)
regions = st.sidebar.multiselect("Regions", all_regions, default=all_regions)
window = st.sidebar.number_input("Moving-average window (days)", min_value=1, value=MOVING_AVERAGE_WINDOW)
align = "calendar" if st.sidebar.checkbox("Align windows by calendar date") else "records"

st.sidebar.divider()
st.sidebar.caption(f"{len(records):,} records loaded")


# ===========================================================================
# Tabs
# ===========================================================================
dashboard_tab, stats_tab, data_tab, analysis_tab = st.tabs(
    ["Dashboard", "Statistics", "Data View", "Analysis"]
)

with dashboard_tab:
    st.title(DASHBOARD_TITLE)
    st.caption("Interactive Analysis of Regional COVID-19 Statistics")

    reports = {
        "Show Total Cases": lambda: format_total_cases_report(records, regions),
        "Calculate Fatality Rate": lambda: format_fatality_report(records, regions),
        f"{window}-Day Moving Averages": lambda: format_moving_averages_report(
            records, regions, window=int(window), preview=MOVING_AVERAGE_PREVIEW, align=align,
        ),
        "Regional Comparison": lambda: format_regional_comparison(records, regions),
    }

    cols = st.columns(2)
    for i, (label, build) in enumerate(reports.items()):
        with cols[i % 2]:
            if st.button(label, use_container_width=True):
                st.session_state["results"] = build()

    st.subheader("Analysis Results")
    st.code(st.session_state.get("results", ""), language=None)

with stats_tab:
    st.title("COVID-19 Statistics Summary")
    st.code(format_statistics_summary(records), language=None)

with data_tab:
    st.title("COVID-19 Raw Data View")
    st.caption(f"First {DATA_VIEW_ROWS} records as loaded")
    st.dataframe(get_data_view(records), use_container_width=True, hide_index=True)

with analysis_tab:
    st.title("Advanced Analysis Features")
    st.markdown(
        """
        **Available analysis types**

        - Regional totals and share of all cases
        - Peak case day per region
        - Case fatality and recovery rates, overall and by region
        - Trailing moving averages of new cases, aligned by record or by calendar date
        """
    )
