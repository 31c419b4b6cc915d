from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np
from sklearn.metrics import mean_absolute_error, mean_squared_error

from .exceptions import DegenerateMetricsError, InvalidInputError


@dataclass(frozen=True)
class AccuracyMetrics:
    mse: float
    rmse: float
    mae: float
    r2: Optional[float]


def _as_finite_array(values: Sequence[float], label: str) -> np.ndarray:
    try:
        arr = np.asarray(values, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"{label} values must be numeric: {exc}") from exc
    if arr.ndim != 1:
        raise InvalidInputError(f"{label} values must be a flat sequence, got shape {arr.shape}.")
    if not np.all(np.isfinite(arr)):
        raise InvalidInputError(f"{label} values contain NaN or infinite entries.")
    return arr


def accuracy_metrics(
    actual: Sequence[float],
    predicted: Sequence[float],
    *,
    strict_r2: bool = True,
) -> AccuracyMetrics:
    """Score ``predicted`` against ``actual``.

    ``r2`` is undefined when every actual value is identical. With
    ``strict_r2`` (the default) that raises :class:`DegenerateMetricsError`;
    otherwise the returned metrics carry ``r2=None``.
    """
    actual_arr = _as_finite_array(actual, "actual")
    predicted_arr = _as_finite_array(predicted, "predicted")
    if actual_arr.size != predicted_arr.size:
        raise InvalidInputError(
            f"actual and predicted lengths differ: {actual_arr.size} != {predicted_arr.size}"
        )
    if actual_arr.size == 0:
        raise InvalidInputError("At least one actual/predicted pair is required.")

    mse = float(mean_squared_error(actual_arr, predicted_arr))
    mae = float(mean_absolute_error(actual_arr, predicted_arr))
    rmse = float(np.sqrt(mse))

    ss_res = float(np.sum((actual_arr - predicted_arr) ** 2))
    ss_tot = float(np.sum((actual_arr - actual_arr.mean()) ** 2))
    if ss_tot == 0:
        if strict_r2:
            raise DegenerateMetricsError("r2 is undefined: actual values have zero variance.")
        r2 = None
    else:
        r2 = 1.0 - ss_res / ss_tot

    return AccuracyMetrics(mse=mse, rmse=rmse, mae=mae, r2=r2)
