import pytest

from covid_dashboard.loaders import read_daily_stats

HEADER = "Daily ID\tRegion\tDate\tNew Cases\tRecoveries\tDeaths"


def make_lines(*rows):
    """Header plus one tab-joined line per row."""
    return [HEADER + "\n"] + ["\t".join(str(v) for v in row) + "\n" for row in rows]


def make_records(*rows):
    return read_daily_stats(make_lines(*rows)).records


@pytest.fixture
def write_tsv(tmp_path):
    def _write(lines, name="daily_stats.csv"):
        path = tmp_path / name
        path.write_text("".join(lines), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def region_a_week():
    """Seven consecutive RegionA days with new cases 10..70."""
    return make_records(*[
        (f"A{i}", "RegionA", f"2021-01-0{i}", 10 * i, 2 * i, i)
        for i in range(1, 8)
    ])


@pytest.fixture
def mixed_records():
    return make_records(
        ("A1", "RegionA", "2021-01-01", 10, 2, 1),
        ("B1", "RegionB", "2021-01-01", 5, 1, 0),
        ("A2", "RegionA", "2021-01-02", 20, 5, 2),
        ("C1", "RegionC", "2021-01-01", 7, 0, 1),
        ("B2", "RegionB", "2021-01-02", "n/a", 1, 0),
        ("X1", "RegionA"),
        ("D1", "RegionD", "2021-01-02", 3, 3, 0),
    )
