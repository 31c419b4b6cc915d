"""
Series intake and sample data tests
"""

import pandas as pd
import pytest

from sales_forecast.data import (
    SampleDataConfig,
    generate_sample_data,
    load_sales_csv,
    series_from_frame,
)
from sales_forecast.exceptions import InvalidInputError
from sales_forecast.series import Observation


class TestLoadSalesCsv:
    """CSV intake with Month/Sales headers"""

    def test_reads_rows_in_order(self, tmp_path):
        path = tmp_path / "sales.csv"
        path.write_text("Month,Sales\nJan,100\nFeb,120.5\nMar,90\n")
        series = load_sales_csv(path)
        assert series == [
            Observation("Jan", 100.0),
            Observation("Feb", 120.5),
            Observation("Mar", 90.0),
        ]

    def test_lowercase_headers(self, tmp_path):
        path = tmp_path / "sales.csv"
        path.write_text("month,sales\n2024-01,10\n2024-02,20\n")
        assert [o.value for o in load_sales_csv(path)] == [10.0, 20.0]

    def test_missing_labels_and_values(self, tmp_path):
        path = tmp_path / "sales.csv"
        path.write_text("Month,Sales\n,5\nFeb,\n")
        series = load_sales_csv(path)
        assert series == [Observation("Month 1", 5.0), Observation("Feb", 0.0)]

    def test_invalid_value_reports_row(self, tmp_path):
        path = tmp_path / "sales.csv"
        path.write_text("Month,Sales\nJan,10\nFeb,lots\n")
        with pytest.raises(InvalidInputError, match="row 2"):
            load_sales_csv(path)

    def test_trailing_garbage_rejected(self, tmp_path):
        path = tmp_path / "sales.csv"
        path.write_text("Month,Sales\nJan,12abc\n")
        with pytest.raises(InvalidInputError, match="row 1"):
            load_sales_csv(path)

    def test_header_only(self, tmp_path):
        path = tmp_path / "sales.csv"
        path.write_text("Month,Sales\n")
        with pytest.raises(InvalidInputError):
            load_sales_csv(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "sales.csv"
        path.write_text("")
        with pytest.raises(InvalidInputError):
            load_sales_csv(path)


class TestFrames:
    """DataFrame conversion"""

    def test_from_frame(self):
        frame = pd.DataFrame({"period": ["Jan", "Feb"], "value": [1.0, 2.0]})
        series = series_from_frame(frame)
        assert series == [Observation("Jan", 1.0), Observation("Feb", 2.0)]

    def test_missing_columns(self):
        with pytest.raises(InvalidInputError):
            series_from_frame(pd.DataFrame({"month": ["Jan"], "sales": [1.0]}))

    def test_nan_rejected(self):
        frame = pd.DataFrame({"period": ["Jan"], "value": [float("nan")]})
        with pytest.raises(InvalidInputError):
            series_from_frame(frame)


class TestSampleData:
    """Synthetic seasonal series"""

    def test_shape_and_labels(self):
        series = generate_sample_data(seed=7)
        assert len(series) == 24
        assert series[0].period == "Month 1"
        assert series[-1].period == "Month 24"
        assert all(float(o.value).is_integer() for o in series)

    def test_seeded_is_reproducible(self):
        assert generate_sample_data(seed=3) == generate_sample_data(seed=3)

    def test_noise_free_pattern(self):
        config = SampleDataConfig(periods=13, noise=0.0)
        values = [o.value for o in generate_sample_data(config, seed=0)]
        assert values[0] == 12000.0
        assert values[5] == 7700.0
        assert values[12] == round(12400 * 1.2)
