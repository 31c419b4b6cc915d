import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

import numpy as np
import pandas as pd

from .exceptions import InvalidInputError
from .series import Observation, validate_series

logger = logging.getLogger(__name__)

PERIOD_COLUMNS: Sequence[str] = ("Month", "month")
VALUE_COLUMNS: Sequence[str] = ("Sales", "sales")


@dataclass
class SampleDataConfig:
    periods: int = 24
    base_value: float = 10000.0
    trend: float = 200.0
    noise: float = 1000.0
    seasonality: Sequence[float] = (1.2, 1.1, 1.0, 0.9, 0.8, 0.7, 0.8, 0.9, 1.0, 1.1, 1.3, 1.4)


def _pick_column(columns: Sequence[str], candidates: Sequence[str]) -> Optional[str]:
    for candidate in candidates:
        if candidate in columns:
            return candidate
    return None


def load_sales_csv(sales_path: Path) -> List[Observation]:
    """Read a ``Month,Sales`` CSV into an ordered series.

    Rows without a month label are named ``Month <row>``; rows without a
    sales value count as zero.
    """
    try:
        df = pd.read_csv(sales_path, dtype=str, keep_default_na=False, skip_blank_lines=True)
    except pd.errors.EmptyDataError as exc:
        raise InvalidInputError(f"No valid data found in {sales_path}") from exc
    if df.empty:
        raise InvalidInputError(f"No valid data found in {sales_path}")

    period_col = _pick_column(df.columns, PERIOD_COLUMNS)
    value_col = _pick_column(df.columns, VALUE_COLUMNS)

    series: List[Observation] = []
    for idx, record in enumerate(df.to_dict("records"), start=1):
        raw_period = str(record.get(period_col, "")).strip() if period_col else ""
        raw_value = str(record.get(value_col, "")).strip() if value_col else ""

        period = raw_period or f"Month {idx}"
        value = pd.to_numeric(raw_value or "0", errors="coerce")
        if pd.isna(value) or not np.isfinite(value):
            raise InvalidInputError(f"Invalid sales value at row {idx}: {raw_value!r}")
        series.append(Observation(period=period, value=float(value)))

    logger.info("Loaded %d observations from %s", len(series), sales_path)
    return series


def series_from_frame(frame: pd.DataFrame, period_col: str = "period", value_col: str = "value") -> List[Observation]:
    missing = {period_col, value_col} - set(frame.columns)
    if missing:
        raise InvalidInputError(f"Frame missing required columns: {sorted(missing)}")
    series = [
        Observation(period=str(period), value=float(value))
        for period, value in zip(frame[period_col], frame[value_col])
    ]
    validate_series(series)
    return series


def generate_sample_data(config: Optional[SampleDataConfig] = None, seed: Optional[int] = None) -> List[Observation]:
    if config is None:
        config = SampleDataConfig()
    rng = np.random.default_rng(seed)
    season = np.asarray(config.seasonality, dtype=float)
    idx = np.arange(config.periods)
    noise = (rng.random(config.periods) - 0.5) * config.noise
    values = np.round((config.base_value + config.trend * idx) * season[idx % season.size] + noise)
    return [Observation(period=f"Month {i + 1}", value=float(v)) for i, v in zip(idx, values)]
