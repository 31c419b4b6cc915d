from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import List, Sequence

import numpy as np

from .exceptions import InsufficientDataError, InvalidInputError


@dataclass(frozen=True)
class Observation:
    period: str
    value: float


@dataclass(frozen=True)
class Forecast:
    period: str
    value: float
    confidence: float


Series = Sequence[Observation]


def validate_series(series: Series) -> None:
    if len(series) == 0:
        raise InsufficientDataError("Series must contain at least one observation.")
    for idx, obs in enumerate(series):
        if not isinstance(obs.period, str) or not obs.period.strip():
            raise InvalidInputError(f"Observation {idx} has an empty period label.")
        if isinstance(obs.value, bool) or not isinstance(obs.value, Real):
            raise InvalidInputError(f"Observation {idx} ({obs.period}) has a non-numeric value: {obs.value!r}")
        if not math.isfinite(obs.value):
            raise InvalidInputError(f"Observation {idx} ({obs.period}) has a non-finite value: {obs.value!r}")


def series_values(series: Series) -> np.ndarray:
    return np.asarray([obs.value for obs in series], dtype=float)


def future_periods(series: Series, horizon: int) -> List[str]:
    n = len(series)
    return [f"Month {n + i}" for i in range(1, horizon + 1)]
