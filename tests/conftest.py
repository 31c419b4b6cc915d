from typing import List, Sequence

import pytest

from sales_forecast.series import Observation


def make_series(values: Sequence[float]) -> List[Observation]:
    return [Observation(period=f"Month {i + 1}", value=float(v)) for i, v in enumerate(values)]


@pytest.fixture
def seasonal_values() -> List[float]:
    season = [1.2, 1.1, 1.0, 0.9, 0.8, 0.7, 0.8, 0.9, 1.0, 1.1, 1.3, 1.4]
    return [(1000 + 20 * i) * season[i % 12] for i in range(24)]
