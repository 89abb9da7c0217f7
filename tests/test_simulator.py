from covid_dashboard.config import COLUMN_NAMES
from covid_dashboard.kpis import by_region, moving_average, total_counts
from covid_dashboard.loaders import load_daily_stats
from covid_dashboard.simulator import generate_daily_stats, write_daily_stats


def test_generate_daily_stats_shape():
    df = generate_daily_stats(n_days=30)
    assert list(df.columns) == COLUMN_NAMES
    assert len(df) == 90
    assert set(df["Region"]) == {"RegionA", "RegionB", "RegionC"}
    assert (df[["New Cases", "Recoveries", "Deaths"]] >= 0).all().all()


def test_generate_daily_stats_is_reproducible():
    assert generate_daily_stats(seed=7).equals(generate_daily_stats(seed=7))


def test_generated_file_round_trips_through_loader(tmp_path):
    df = generate_daily_stats(n_days=10, regions={"North": {"peak": 50, "peak_day": 5, "spread": 2}})
    path = write_daily_stats(df, tmp_path / "sim" / "daily_stats.csv")

    result = load_daily_stats(path)
    assert len(result) == 10
    assert result.malformed_count == 0
    assert total_counts(result.records).cases == int(df["New Cases"].sum())
    assert list(by_region(result.records)) == ["North"]
    assert len(list(moving_average(result.records, "North"))) == 4
