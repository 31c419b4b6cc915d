"""Read-only lookup of the available forecasting models.

The registry is built once at import time. New strategies are added by
appending a :class:`~sales_forecast.models.ForecastModel` to
``BUILTIN_MODELS``; there is no runtime registration.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, List, Mapping, Tuple

from .exceptions import InvalidInputError, UnknownModelError
from .models import BUILTIN_MODELS, ForecastModel
from .series import Forecast, Series, validate_series


def _build_registry(models: Iterable[ForecastModel]) -> Mapping[str, ForecastModel]:
    table = {}
    for model in models:
        if model.name in table:
            raise ValueError(f"Duplicate forecast model name: {model.name}")
        table[model.name] = model
    return MappingProxyType(table)


MODEL_REGISTRY: Mapping[str, ForecastModel] = _build_registry(BUILTIN_MODELS)


def available_models() -> Tuple[str, ...]:
    return tuple(MODEL_REGISTRY)


def get_model(model_name: str) -> ForecastModel:
    try:
        return MODEL_REGISTRY[model_name]
    except (KeyError, TypeError):
        raise UnknownModelError(
            f"Unknown forecast model {model_name!r}; available: {', '.join(available_models())}"
        ) from None


def predict(model_name: str, series: Series, horizon: int) -> List[Forecast]:
    model = get_model(model_name)
    if isinstance(horizon, bool) or not isinstance(horizon, int) or horizon < 1:
        raise InvalidInputError(f"horizon must be a positive integer, got {horizon!r}")
    validate_series(series)
    return model.predict(series, horizon)
