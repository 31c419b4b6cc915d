from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

import numpy as np

from .exceptions import InsufficientDataError, InvalidInputError
from .metrics import AccuracyMetrics, accuracy_metrics
from .series import Forecast, Series, future_periods, series_values

PredictFn = Callable[[Series, int], List[Forecast]]
EvaluateFn = Callable[..., AccuracyMetrics]

LINEAR_TREND_CONFIDENCE = 0.80
MOVING_AVERAGE_CONFIDENCE = 0.70
EXPONENTIAL_SMOOTHING_CONFIDENCE = 0.75
SEASONAL_TREND_CONFIDENCE = 0.85

MOVING_AVERAGE_WINDOW = 3
SMOOTHING_ALPHA = 0.3
SEASON_LENGTH = 12


@dataclass(frozen=True)
class ForecastModel:
    name: str
    description: str
    predict: PredictFn
    evaluate: EvaluateFn


def fit_linear_trend(values: np.ndarray) -> tuple[float, float]:
    """Return ``(intercept, slope)`` of the OLS line over 0-based indices."""
    n = values.size
    x = np.arange(n, dtype=float)
    sum_x = x.sum()
    sum_y = values.sum()
    sum_xy = (x * values).sum()
    sum_x2 = (x * x).sum()

    denom = n * sum_x2 - sum_x * sum_x
    if n < 2 or denom == 0:
        raise InsufficientDataError(f"Linear trend needs at least 2 observations, got {n}.")
    slope = (n * sum_xy - sum_x * sum_y) / denom
    intercept = (sum_y - slope * sum_x) / n
    return float(intercept), float(slope)


def predict_linear_trend(series: Series, horizon: int) -> List[Forecast]:
    values = series_values(series)
    intercept, slope = fit_linear_trend(values)
    n = values.size
    forecasts = []
    for step, period in enumerate(future_periods(series, horizon), start=1):
        # Sales cannot go negative.
        yhat = max(0.0, intercept + slope * (n + step - 1))
        forecasts.append(Forecast(period=period, value=yhat, confidence=LINEAR_TREND_CONFIDENCE))
    return forecasts


def predict_moving_average(series: Series, horizon: int) -> List[Forecast]:
    values = series_values(series)
    if values.size == 0:
        raise InsufficientDataError("Moving average needs at least 1 observation.")
    window = min(MOVING_AVERAGE_WINDOW, values.size)
    average = float(np.mean(values[-window:]))
    return [
        Forecast(period=period, value=average, confidence=MOVING_AVERAGE_CONFIDENCE)
        for period in future_periods(series, horizon)
    ]


def predict_exponential_smoothing(series: Series, horizon: int) -> List[Forecast]:
    values = series_values(series)
    if values.size == 0:
        raise InsufficientDataError("Exponential smoothing needs at least 1 observation.")
    smoothed = float(values[0])
    for value in values[1:]:
        smoothed = SMOOTHING_ALPHA * float(value) + (1 - SMOOTHING_ALPHA) * smoothed
    return [
        Forecast(period=period, value=smoothed, confidence=EXPONENTIAL_SMOOTHING_CONFIDENCE)
        for period in future_periods(series, horizon)
    ]


def seasonal_indices(values: np.ndarray, season_length: int = SEASON_LENGTH) -> np.ndarray:
    """Ratio of each phase slot's mean to the overall mean."""
    overall = float(values.mean()) if values.size else 0.0
    if overall == 0:
        raise InvalidInputError("Seasonal indices are undefined for a series with zero mean.")
    indices = np.empty(season_length, dtype=float)
    for slot in range(season_length):
        sampled = values[slot::season_length]
        if sampled.size == 0:
            raise InsufficientDataError(f"No observations for seasonal slot {slot}.")
        indices[slot] = sampled.mean() / overall
    return indices


def predict_seasonal_trend(series: Series, horizon: int) -> List[Forecast]:
    n = len(series)
    trend = predict_linear_trend(series, horizon)
    if n < SEASON_LENGTH:
        factors: Optional[np.ndarray] = None
    else:
        factors = seasonal_indices(series_values(series))

    forecasts = []
    for idx, base in enumerate(trend):
        value = base.value
        if factors is not None:
            value = value * float(factors[(n + idx) % SEASON_LENGTH])
        forecasts.append(Forecast(period=base.period, value=value, confidence=SEASONAL_TREND_CONFIDENCE))
    return forecasts


linear_trend_model = ForecastModel(
    name="linear_trend",
    description="Simple linear trend analysis",
    predict=predict_linear_trend,
    evaluate=accuracy_metrics,
)

moving_average_model = ForecastModel(
    name="moving_average",
    description="Average of recent periods",
    predict=predict_moving_average,
    evaluate=accuracy_metrics,
)

exponential_smoothing_model = ForecastModel(
    name="exponential_smoothing",
    description="Weighted average with exponential decay",
    predict=predict_exponential_smoothing,
    evaluate=accuracy_metrics,
)

seasonal_trend_model = ForecastModel(
    name="seasonal_trend",
    description="Accounts for seasonal patterns",
    predict=predict_seasonal_trend,
    evaluate=accuracy_metrics,
)

BUILTIN_MODELS: Sequence[ForecastModel] = (
    linear_trend_model,
    moving_average_model,
    exponential_smoothing_model,
    seasonal_trend_model,
)
