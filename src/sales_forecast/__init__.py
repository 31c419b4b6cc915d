"""Sales forecasting toolkit: trend, moving-average, smoothing and seasonal models."""

from .backtest import compare_models, evaluate_model
from .data import generate_sample_data, load_sales_csv, series_from_frame
from .exceptions import (
    DegenerateMetricsError,
    ForecastError,
    InsufficientDataError,
    InvalidInputError,
    UnknownModelError,
)
from .metrics import AccuracyMetrics, accuracy_metrics
from .models import ForecastModel
from .pipeline import ForecastConfig, ForecastReport, build_forecasts, export_forecasts
from .registry import MODEL_REGISTRY, available_models, get_model, predict
from .series import Forecast, Observation

__all__ = [
    "AccuracyMetrics",
    "DegenerateMetricsError",
    "Forecast",
    "ForecastConfig",
    "ForecastError",
    "ForecastModel",
    "ForecastReport",
    "InsufficientDataError",
    "InvalidInputError",
    "MODEL_REGISTRY",
    "Observation",
    "UnknownModelError",
    "accuracy_metrics",
    "available_models",
    "build_forecasts",
    "compare_models",
    "evaluate_model",
    "export_forecasts",
    "generate_sample_data",
    "get_model",
    "load_sales_csv",
    "predict",
    "series_from_frame",
]

__version__ = "0.1.0"
