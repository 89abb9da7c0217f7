"""
Simulated data generator for the COVID-19 dashboard.

Generates a realistic regional daily-counts export in the same
tab-separated layout as the real input. All values are synthetic.
"""

from pathlib import Path

import numpy as np
import pandas as pd

from .config import COLUMN_NAMES, DELIMITER

# ---------------------------------------------------------------------------
# Typical outbreak parameters per region
# ---------------------------------------------------------------------------
# peak: expected new cases on the peak day
# peak_day: day offset of the epidemic peak
# spread: width of the wave in days
_REGION_PARAMS = {
    "RegionA": {"peak": 420, "peak_day": 30, "spread": 12},
    "RegionB": {"peak": 260, "peak_day": 45, "spread": 18},
    "RegionC": {"peak": 150, "peak_day": 20, "spread": 9},
}

_BASELINE_CASES = 5
_RECOVERY_LAG_DAYS = 14
_RECOVERY_PROB = 0.95
_FATALITY_PROB = 0.02


def generate_daily_stats(
    start_date: str = "2021-01-01",
    n_days: int = 60,
    regions: dict[str, dict] | None = None,
    seed: int = 42,
) -> pd.DataFrame:
    """Generate simulated daily counts for each region.

    New cases follow a Gaussian-shaped wave with Poisson noise. Recoveries
    are drawn from the cases reported `_RECOVERY_LAG_DAYS` earlier, deaths
    from the same day's cases. Rows are ordered by date, then region.
    """
    rng = np.random.default_rng(seed)
    regions = regions or _REGION_PARAMS
    dates = pd.date_range(start_date, periods=n_days, freq="D")
    days = np.arange(n_days)

    per_region = {}
    for region, params in regions.items():
        wave = params["peak"] * np.exp(-0.5 * ((days - params["peak_day"]) / params["spread"]) ** 2)
        cases = rng.poisson(wave + _BASELINE_CASES)
        lagged = np.concatenate([np.zeros(_RECOVERY_LAG_DAYS, dtype=int), cases[:-_RECOVERY_LAG_DAYS]])[:n_days]
        recoveries = rng.binomial(lagged, _RECOVERY_PROB)
        deaths = rng.binomial(cases, _FATALITY_PROB)
        per_region[region] = (cases, recoveries, deaths)

    rows = []
    for i, date in enumerate(dates):
        for region, (cases, recoveries, deaths) in per_region.items():
            rows.append({
                COLUMN_NAMES[0]: f"{region[-1]}{i + 1}",
                COLUMN_NAMES[1]: region,
                COLUMN_NAMES[2]: date.strftime("%Y-%m-%d"),
                COLUMN_NAMES[3]: int(cases[i]),
                COLUMN_NAMES[4]: int(recoveries[i]),
                COLUMN_NAMES[5]: int(deaths[i]),
            })

    return pd.DataFrame(rows, columns=COLUMN_NAMES)


def write_daily_stats(df: pd.DataFrame, path: str | Path) -> Path:
    """Write a generated frame as a tab-separated file with a header line."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, sep=DELIMITER, index=False)
    return path
