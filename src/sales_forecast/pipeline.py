from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import pandas as pd
from dateutil.relativedelta import relativedelta

from .backtest import evaluate_model
from .metrics import AccuracyMetrics
from .registry import predict
from .series import Forecast, Series

logger = logging.getLogger(__name__)

HIGH_CONFIDENCE = 0.8
MEDIUM_CONFIDENCE = 0.6


@dataclass
class ForecastConfig:
    model_name: str = "linear_trend"
    horizon: int = 3
    evaluate: bool = True


@dataclass
class ForecastReport:
    model_name: str
    forecasts: pd.DataFrame
    metrics: Optional[AccuracyMetrics]

    @property
    def average_confidence(self) -> float:
        if self.forecasts.empty:
            return 0.0
        return float(self.forecasts["confidence"].mean())


def confidence_tier(confidence: float) -> str:
    if confidence > HIGH_CONFIDENCE:
        return "High"
    if confidence > MEDIUM_CONFIDENCE:
        return "Medium"
    return "Low"


def _future_month_starts(series: Series, horizon: int) -> Optional[List[pd.Timestamp]]:
    # Calendar dates only when every label is an ISO date such as 2024-01.
    parsed = pd.to_datetime(pd.Series([obs.period for obs in series]), format="ISO8601", errors="coerce")
    if parsed.isna().any():
        return None
    last = parsed.iloc[-1].to_period("M").to_timestamp()
    return [last + relativedelta(months=i + 1) for i in range(horizon)]


def forecasts_to_frame(forecasts: List[Forecast], future_dates: Optional[List[pd.Timestamp]] = None) -> pd.DataFrame:
    frame = pd.DataFrame.from_records(
        [
            {
                "period": f.period,
                "predicted": f.value,
                "confidence": f.confidence,
                "confidence_tier": confidence_tier(f.confidence),
            }
            for f in forecasts
        ],
        columns=["period", "predicted", "confidence", "confidence_tier"],
    )
    if future_dates is not None:
        frame.insert(1, "ds", future_dates)
    return frame


def build_forecasts(series: Series, config: ForecastConfig) -> ForecastReport:
    forecasts = predict(config.model_name, series, config.horizon)
    frame = forecasts_to_frame(forecasts, _future_month_starts(series, config.horizon))

    metrics = None
    if config.evaluate:
        metrics = evaluate_model(config.model_name, series)
        if metrics is None:
            logger.info("Holdout metrics skipped for %s: only %d observations", config.model_name, len(series))

    logger.info("Forecast %d periods with %s", config.horizon, config.model_name)
    return ForecastReport(model_name=config.model_name, forecasts=frame, metrics=metrics)


def default_export_name(model_name: str) -> str:
    slug = "_".join(model_name.split()).lower()
    return f"sales_predictions_{slug}.csv"


def export_forecasts(forecasts: pd.DataFrame, output_path: Path) -> Path:
    export = pd.DataFrame(
        {
            "Period": forecasts["period"],
            "Predicted Sales": forecasts["predicted"].map(lambda x: f"{x:.2f}"),
            "Confidence": forecasts["confidence"].map(lambda x: f"{x * 100:.1f}%"),
        }
    )
    output_path = Path(output_path)
    export.to_csv(output_path, index=False)
    logger.info("Saved %d forecasts to %s", len(export), output_path)
    return output_path
