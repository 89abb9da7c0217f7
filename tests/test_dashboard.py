import pandas as pd

from covid_dashboard import config
from covid_dashboard.dashboard import (
    format_fatality_report,
    format_moving_averages_report,
    format_pct,
    format_regional_comparison,
    format_sample_records,
    format_statistics_summary,
    format_total_cases_report,
    get_analysis_overview,
    select_regions,
)
from covid_dashboard.models import Missing
from covid_dashboard.transforms import build_fact_daily_counts, get_data_view

from .conftest import make_records


def test_format_pct():
    assert format_pct(8.8888) == "8.89%"
    assert format_pct(Missing.UNDEFINED_RATE) == "n/a"


def test_select_regions(mixed_records, monkeypatch):
    assert select_regions(mixed_records) == ["RegionA", "RegionB", "RegionC", "RegionD"]
    assert select_regions(mixed_records, ["RegionC"]) == ["RegionC"]
    monkeypatch.setattr(config, "DISPLAY_REGIONS", ["RegionB", "RegionA"])
    assert select_regions(mixed_records) == ["RegionB", "RegionA"]


def test_total_cases_report(mixed_records):
    report = format_total_cases_report(mixed_records)
    assert "Total Cases Across All Regions: 45" in report
    assert "  RegionA: 30 cases (66.67%)" in report
    assert "  RegionD: 3 cases (6.67%)" in report
    assert "RegionA: 20 cases on 2021-01-02" in report
    assert "RegionC: 7 cases on 2021-01-01" in report


def test_total_cases_report_unknown_region(mixed_records):
    report = format_total_cases_report(mixed_records, regions=["RegionA", "RegionZ"])
    assert "  RegionZ: no data" in report
    assert "RegionZ: no data" in report.split("--- PEAK CASE DAYS ---")[1]
    assert "RegionB" not in report


def test_reports_use_thousands_separators():
    records = make_records(("A1", "RegionA", "2021-01-01", 1234567, 1000000, 12345))
    assert "Total Cases Across All Regions: 1,234,567" in format_total_cases_report(records)
    assert "(12,345 deaths / 1,234,567 cases)" in format_fatality_report(records)


def test_fatality_report(mixed_records):
    report = format_fatality_report(mixed_records)
    assert "Overall Fatality Rate: 8.89%" in report
    assert "  RegionA: 10.00% (3 deaths / 30 cases)" in report
    assert "  RegionB: 0.00% (0 deaths / 5 cases)" in report


def test_zero_cases_render_placeholder():
    records = make_records(("Z1", "RegionZ", "2021-01-01", 0, 0, 0))
    assert "Overall Fatality Rate: n/a" in format_fatality_report(records)
    assert "  RegionZ: 0 cases (n/a)" in format_total_cases_report(records)
    comparison = format_regional_comparison(records)
    assert "Recovery Rate:" in comparison and "n/a" in comparison


def test_statistics_summary(mixed_records):
    summary = format_statistics_summary(mixed_records)
    assert "Records analyzed: 5" in summary
    assert "Records skipped (malformed): 2" in summary
    assert "Total Recoveries: 11" in summary
    assert "RegionD: 3 cases" in summary
    assert "Case Fatality Rate: 8.89%" in summary
    assert "Recovery Rate: 24.44%" in summary


def test_moving_averages_report(region_a_week):
    records = region_a_week + make_records(("B1", "RegionB", "2021-01-01", 5, 0, 0))
    report = format_moving_averages_report(records)
    assert "REGIONA - 7-Day Moving Averages:\n  2021-01-07: 40.0 cases\n" in report
    assert "REGIONB - 7-Day Moving Averages:\n  Not enough data for 7-day moving average\n" in report


def test_moving_averages_report_preview_limit():
    records = make_records(*[
        (f"A{i}", "RegionA", f"2021-01-{i:02d}", i, 0, 0) for i in range(1, 21)
    ])
    report = format_moving_averages_report(records, preview=3)
    assert report.count(" cases\n") == 3
    full = format_moving_averages_report(records, preview=None)
    assert full.count(" cases\n") == 14


def test_regional_comparison(mixed_records):
    report = format_regional_comparison(mixed_records)
    assert "=== REGIONA ===" in report
    assert "Total Cases:              30" in report
    assert "Fatality Rate:        10.00%" in report
    assert "=== REGIOND ===" in report


def test_reports_on_empty_data():
    for build in (
        format_total_cases_report,
        format_fatality_report,
        format_moving_averages_report,
        format_regional_comparison,
        format_statistics_summary,
    ):
        assert config.NO_DATA_MESSAGE in build(())


def test_sample_records(mixed_records):
    text = format_sample_records(mixed_records, n=6)
    assert "Record 1: A1 | RegionA | 2021-01-01 | 10 cases | 2 recoveries | 1 deaths" in text
    assert "Record 6: INCOMPLETE - 2 columns" in text
    assert "Record 7" not in text


def test_analysis_overview(mixed_records):
    overview = get_analysis_overview(mixed_records)
    assert overview["records"] == 7
    assert overview["valid"] == 5
    assert overview["cases"] == 45
    assert overview["regions"]["RegionA"] == {"cases": 30, "recoveries": 7, "deaths": 3}

    empty = get_analysis_overview(())
    assert empty["fatality_pct"] is None
    assert empty["regions"] == {}


def test_data_view_pads_short_rows(mixed_records):
    view = get_data_view(mixed_records)
    assert list(view.columns) == config.COLUMN_NAMES
    assert len(view) == 7
    assert view.iloc[5]["Region"] == "RegionA"
    assert pd.isna(view.iloc[5]["Deaths"])


def test_fact_daily_counts(mixed_records):
    df = build_fact_daily_counts(mixed_records)
    assert list(df["record_id"]) == ["A1", "B1", "A2", "C1", "D1"]
    assert df["new_cases"].sum() == 45
    assert build_fact_daily_counts(()).empty
