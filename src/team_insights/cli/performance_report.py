#!/usr/bin/env python3
"""
Print performance trends, forecasts and insights.

Trend history is simulated around current metric values; pass --seed for a
reproducible report.
"""

import argparse
import asyncio
from pathlib import Path

from dotenv import load_dotenv

from team_insights.analysis.trends import METRIC_LABELS
from team_insights.config import configure_logging
from team_insights.models.analytics import Forecast, PerformanceInsights, TrendSeries
from team_insights.services.dashboard import create_dashboard
from team_insights.utils.charts import plot_trend_forecast
from team_insights.utils.formatting import format_change, format_metric_name


def print_trend(series: TrendSeries) -> None:
    """Print a metric's history and summary statistics."""
    print(f"--- {METRIC_LABELS[series.metric]} ({series.trend}) ---")
    for point in series.points:
        print(f"  {point.period:<10} {point.value:>10.2f}  {format_change(point.change)}")
    print(
        f"  avg {series.average:.2f}  min {series.min:.2f}  max {series.max:.2f}  "
        f"volatility {series.volatility:.2f}"
    )


def print_forecast(forecast: Forecast) -> None:
    """Print a metric's projected periods."""
    print(f"  Forecast (reliability: {forecast.reliability})")
    for point in forecast.points:
        print(
            f"  {point.period:<10} {point.predicted:>10.2f}  "
            f"[{point.range_min:.2f} - {point.range_max:.2f}]  {point.confidence}%"
        )
    print()


def print_insights(insights: PerformanceInsights) -> None:
    """Print the insight summary, insights and recommendations."""
    summary = insights.summary
    print("=" * 80)
    print("INSIGHTS")
    print("=" * 80)
    print(f"Overall trend: {summary.overall_trend}")
    if summary.improving_metrics:
        print(f"Improving: {', '.join(format_metric_name(m) for m in summary.improving_metrics)}")
    if summary.declining_metrics:
        print(f"Declining: {', '.join(format_metric_name(m) for m in summary.declining_metrics)}")
    print(f"Forecast confidence: {summary.forecast_confidence:.0%}")
    print()
    for insight in insights.insights:
        print(f"[{insight.type}] {insight.message}")
        print(f"    -> {insight.recommendation}")
    print()
    for recommendation in insights.recommendations:
        print(f"- {recommendation}")


async def build_report(args: argparse.Namespace) -> int:
    dashboard = create_dashboard(seed=args.seed, latency_scale=args.latency_scale)
    records = await dashboard.get_performance_records(args.athlete_id)

    if not records:
        print("No performance records found.")
        return 1

    trends, forecasts, insights = dashboard.analyze_performance(
        records, periods=args.periods, forecast_periods=args.forecast_periods
    )
    for metric, series in trends.items():
        print_trend(series)
        print_forecast(forecasts[metric])
        if args.chart_dir:
            saved = plot_trend_forecast(series, forecasts[metric], Path(args.chart_dir))
            print(f"  Saved chart: {saved}")
            print()

    print_insights(insights)
    return 0


def main() -> int:
    """Generate and print the performance report."""
    load_dotenv()
    parser = argparse.ArgumentParser(
        description="Print performance trends, forecasts and insights"
    )
    parser.add_argument("--athlete-id", type=int, help="Report on a single athlete")
    parser.add_argument(
        "--periods", type=int, default=6, help="Historical periods per metric (default: 6)"
    )
    parser.add_argument(
        "--forecast-periods", type=int, default=3, help="Periods to forecast (default: 3)"
    )
    parser.add_argument("--seed", type=int, help="Seed for the simulated history")
    parser.add_argument("--chart-dir", help="Save a trend and forecast chart per metric here")
    parser.add_argument(
        "--latency-scale",
        type=float,
        default=0.0,
        help="Simulated repository latency multiplier (default: 0)",
    )

    args = parser.parse_args()
    if args.periods < 1 or args.forecast_periods < 1:
        parser.error("--periods and --forecast-periods must be at least 1")

    configure_logging()
    return asyncio.run(build_report(args))


if __name__ == "__main__":
    exit(main())
