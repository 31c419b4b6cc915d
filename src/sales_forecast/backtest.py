from __future__ import annotations

import logging
from typing import Iterable, List, Optional

import numpy as np
import pandas as pd

from .exceptions import ForecastError
from .metrics import AccuracyMetrics
from .registry import available_models, get_model, predict
from .series import Series

logger = logging.getLogger(__name__)

MIN_EVALUATION_LENGTH = 4


def evaluate_model(model_name: str, series: Series) -> Optional[AccuracyMetrics]:
    """One-step holdout: train on all but the last observation, score the last.

    Series of 3 or fewer observations are not scored and yield ``None``. A
    single held-out actual has no variance, so ``r2`` is ``None`` on the
    returned metrics.
    """
    model = get_model(model_name)
    if len(series) < MIN_EVALUATION_LENGTH:
        return None

    train = series[:-1]
    holdout = series[-1]
    forecast = predict(model.name, train, 1)
    return model.evaluate([holdout.value], [forecast[0].value], strict_r2=False)


def compare_models(series: Series, names: Optional[Iterable[str]] = None) -> pd.DataFrame:
    records: List[dict] = []
    for name in names if names is not None else available_models():
        try:
            metrics = evaluate_model(name, series)
        except ForecastError as exc:
            logger.warning("Holdout evaluation failed for %s: %s", name, exc)
            records.append(
                {"model": name, "mse": np.nan, "rmse": np.nan, "mae": np.nan, "r2": np.nan, "error": str(exc)}
            )
            continue

        if metrics is None:
            logger.info("Skipping %s: %d observations is too few for a holdout", name, len(series))
            records.append(
                {
                    "model": name,
                    "mse": np.nan,
                    "rmse": np.nan,
                    "mae": np.nan,
                    "r2": np.nan,
                    "error": f"needs at least {MIN_EVALUATION_LENGTH} observations",
                }
            )
            continue

        records.append(
            {
                "model": name,
                "mse": metrics.mse,
                "rmse": metrics.rmse,
                "mae": metrics.mae,
                "r2": np.nan if metrics.r2 is None else metrics.r2,
                "error": "",
            }
        )

    return pd.DataFrame.from_records(records, columns=["model", "mse", "rmse", "mae", "r2", "error"])
