from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import pandas as pd

from .backtest import compare_models
from .data import generate_sample_data, load_sales_csv
from .exceptions import ForecastError
from .metrics import AccuracyMetrics
from .pipeline import ForecastConfig, build_forecasts, default_export_name, export_forecasts
from .registry import MODEL_REGISTRY, available_models

logger = logging.getLogger(__name__)


def summarize_metrics(metrics: Optional[AccuracyMetrics]) -> str:
    if metrics is None:
        return "No holdout metrics (more than 3 observations are required)."
    lines = [
        "Holdout accuracy (last observation held out):",
        f"  MSE:  {metrics.mse:.4f}",
        f"  RMSE: {metrics.rmse:.4f}",
        f"  MAE:  {metrics.mae:.4f}",
    ]
    if metrics.r2 is not None:
        lines.append(f"  R2:   {metrics.r2:.4f}")
    return "\n".join(lines)


def summarize_comparison(comparison: pd.DataFrame) -> str:
    if comparison.empty:
        return "No models were compared."
    valid = comparison[comparison["error"].str.len().eq(0)]
    lines = ["Model comparison (lower is better):"]
    if valid.empty:
        lines.append("No model produced holdout metrics.")
    else:
        ranked = valid.set_index("model")[["mse", "rmse", "mae"]].sort_values("mae")
        lines.append(ranked.to_string(float_format=lambda x: f"{x:.4f}"))

    failed = comparison[comparison["error"].str.len().gt(0)]
    if not failed.empty:
        lines.append("\nWarnings:")
        for _, row in failed.iterrows():
            lines.append(f"- {row['model']} -> {row['error']}")
    return "\n".join(lines)


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Monthly sales forecasting with linear, moving-average, smoothing and seasonal models.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--sales-path",
        type=Path,
        help="Path to the input CSV (columns: Month, Sales).",
    )
    source.add_argument(
        "--sample",
        action="store_true",
        help="Use 24 months of generated sample data instead of a CSV.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for --sample (optional).",
    )
    parser.add_argument(
        "--model",
        choices=available_models(),
        default="linear_trend",
        help="Forecast model to use (default: linear_trend).",
    )
    parser.add_argument(
        "--horizon",
        type=int,
        default=3,
        help="Number of future months to forecast (default: 3).",
    )
    parser.add_argument(
        "--compare",
        action="store_true",
        help="Also score every registered model on a one-step holdout.",
    )
    parser.add_argument(
        "--forecast-output",
        type=Path,
        nargs="?",
        const=Path(),
        help="Write forecasts as CSV; without a value the file is named after the model.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING).",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_argument_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        if args.sample:
            series = generate_sample_data(seed=args.seed)
        else:
            series = load_sales_csv(args.sales_path)

        config = ForecastConfig(model_name=args.model, horizon=args.horizon)
        report = build_forecasts(series, config)
    except ForecastError as exc:
        logger.debug("Forecast failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    model = MODEL_REGISTRY[report.model_name]
    print(f"{model.name}: {model.description}")
    print(report.forecasts.to_string(index=False, float_format=lambda x: f"{x:.2f}"))
    print(f"\nAverage confidence: {report.average_confidence * 100:.0f}%")
    print(summarize_metrics(report.metrics))

    if args.compare:
        print()
        print(summarize_comparison(compare_models(series)))

    if args.forecast_output is not None:
        output: Path = args.forecast_output
        if output.is_dir():
            output = output / default_export_name(report.model_name)
        export_forecasts(report.forecasts, output)
        print(f"\nSaved forecasts to {output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
