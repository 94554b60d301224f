"""
Performance trends and forecasts.

Historical series are synthesized: each period is the metric's current value
with multiplicative random variance applied, wider for older periods and
narrower for the latest one. Output is therefore random unless the engine is
given a seeded (or stubbed) random source.

Forecasts fit an ordinary least-squares line through the series and project
it forward with a confidence that drops by 10 points per step, floored at 60.
"""

import logging
import math
import random
from datetime import date, datetime
from typing import Callable, Iterable, Optional

from team_insights.models.analytics import (
    Forecast,
    ForecastPoint,
    Reliability,
    TrendDirection,
    TrendPoint,
    TrendSeries,
)
from team_insights.models.records import PerformanceRecord
from team_insights.utils.dates import month_label

logger = logging.getLogger(__name__)

# Tracked metrics in declaration order
METRICS = [
    "goals",
    "assists",
    "pass_accuracy",
    "sprint_time",
    "endurance",
    "technical_skills",
]

METRIC_LABELS = {
    "goals": "Goals",
    "assists": "Assists",
    "pass_accuracy": "Pass Accuracy",
    "sprint_time": "Sprint Time",
    "endurance": "Endurance",
    "technical_skills": "Technical Skills",
}

# Per-record fallbacks when a metric was not captured
DEFAULT_SPRINT_TIME = 12.5
DEFAULT_ENDURANCE = 75
DEFAULT_TECHNICAL_SKILLS = 80

BASE_VARIANCE = 0.15  # full width, i.e. +/-7.5%
OLDER_PERIOD_SCALE = 0.1  # extra variance per period of age
LATEST_PERIOD_SCALE = 0.5

CONFIDENCE_START = 100
CONFIDENCE_STEP = 10
CONFIDENCE_FLOOR = 60
RANGE_LOW = 0.85
RANGE_HIGH = 1.15

HIGH_RELIABILITY_VOLATILITY = 15
MEDIUM_RELIABILITY_VOLATILITY = 30


def validate_metric(metric: str) -> str:
    if metric not in METRICS:
        raise ValueError(f"Unknown metric: {metric}. Must be one of: {METRICS}")
    return metric


def current_metrics(records: Iterable[PerformanceRecord]) -> dict[str, float]:
    """
    Aggregate the current value of every tracked metric.

    Goals and assists are totals; the rest are per-record averages.
    """
    records = list(records)
    if not records:
        return {
            "goals": 0,
            "assists": 0,
            "pass_accuracy": 0,
            "sprint_time": DEFAULT_SPRINT_TIME,
            "endurance": DEFAULT_ENDURANCE,
            "technical_skills": DEFAULT_TECHNICAL_SKILLS,
        }

    count = len(records)
    return {
        "goals": sum(r.goals for r in records),
        "assists": sum(r.assists for r in records),
        "pass_accuracy": round(sum(r.pass_accuracy or 0 for r in records) / count),
        "sprint_time": round(
            sum(r.sprint_time or DEFAULT_SPRINT_TIME for r in records) / count, 2
        ),
        "endurance": round(
            sum(r.endurance_score or DEFAULT_ENDURANCE for r in records) / count
        ),
        "technical_skills": round(
            sum(r.technical_skills or DEFAULT_TECHNICAL_SKILLS for r in records) / count
        ),
    }


def percent_change(previous: float, value: float) -> float:
    if previous == 0:
        return 0.0
    return (value - previous) / previous * 100


def linear_fit(values: list[float]) -> tuple[float, float]:
    """Least-squares slope and intercept for y=values over x=1..N."""
    n = len(values)
    xs = range(1, n + 1)
    sum_x = sum(xs)
    sum_y = sum(values)
    sum_xy = sum(x * y for x, y in zip(xs, values))
    sum_xx = sum(x * x for x in xs)

    denominator = n * sum_xx - sum_x * sum_x
    if denominator == 0:
        return 0.0, (sum_y / n if n else 0.0)
    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n
    return slope, intercept


def reliability_for(volatility: float) -> Reliability:
    if volatility < HIGH_RELIABILITY_VOLATILITY:
        return Reliability.HIGH
    if volatility < MEDIUM_RELIABILITY_VOLATILITY:
        return Reliability.MEDIUM
    return Reliability.LOW


def forecast_confidence(step: int) -> int:
    """Confidence for the step-th period ahead (1-based)."""
    return max(CONFIDENCE_FLOOR, CONFIDENCE_START - CONFIDENCE_STEP * step)


class TrendEngine:
    """Builds trend series and forecasts for the tracked metrics."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], date | datetime]] = None,
        stable_threshold: float = 0.0,
    ):
        """
        Initialize the engine.

        Args:
            rng: Random source for the synthetic history (default: unseeded)
            clock: Returns "now", used to label periods (default: datetime.now)
            stable_threshold: Summed percent change below which (in absolute
                value) a trend is labelled stable. 0 never labels stable.
        """
        self.rng = rng or random.Random()
        self.clock = clock or datetime.now
        self.stable_threshold = stable_threshold

    def _variance_scale(self, age: int) -> float:
        if age == 0:
            return LATEST_PERIOD_SCALE
        return 1 + age * OLDER_PERIOD_SCALE

    def _classify(self, changes: list[float]) -> TrendDirection:
        total = sum(changes)
        if abs(total) < self.stable_threshold:
            return TrendDirection.STABLE
        if total > 0:
            return TrendDirection.INCREASING
        return TrendDirection.DECREASING

    def build_series(self, metric: str, current_value: float, periods: int = 6) -> TrendSeries:
        """
        Synthesize a history of `periods` points ending at the current month.

        Args:
            metric: Metric name
            current_value: Aggregate value the history varies around
            periods: Number of historical periods

        Returns:
            TrendSeries with per-period change and summary statistics
        """
        if periods < 1:
            raise ValueError(f"periods must be at least 1, got {periods}")

        now = self.clock()
        points: list[TrendPoint] = []
        changes: list[float] = []
        for index in range(periods):
            age = periods - 1 - index
            variance = (self.rng.random() - 0.5) * BASE_VARIANCE * self._variance_scale(age)
            value = round(current_value * (1 + variance), 2)
            change = percent_change(points[-1].value, value) if points else 0.0
            if points:
                changes.append(change)
            points.append(
                TrendPoint(period=month_label(now, -age), value=value, change=round(change, 2))
            )

        values = [p.value for p in points]
        # Unrounded changes, so tiny steps still count toward the trend
        volatility = math.sqrt(sum(c * c for c in changes) / len(changes)) if changes else 0.0

        return TrendSeries(
            metric=metric,
            points=points,
            average=round(sum(values) / len(values), 2),
            min=min(values),
            max=max(values),
            volatility=round(volatility, 2),
            trend=self._classify(changes),
        )

    def trend_analysis(
        self,
        records: Iterable[PerformanceRecord],
        metric: Optional[str] = None,
        periods: int = 6,
    ) -> TrendSeries | dict[str, TrendSeries]:
        """
        Trend series for one metric, or for every tracked metric.

        Args:
            records: Performance records the current values come from
            metric: Single metric to analyze, or None for all
            periods: Number of historical periods per series

        Returns:
            A TrendSeries when metric is given, else a mapping metric -> series
        """
        current = current_metrics(records)
        if metric is not None:
            validate_metric(metric)
            return self.build_series(metric, current[metric], periods)
        return {name: self.build_series(name, current[name], periods) for name in METRICS}

    def forecast(self, trend: TrendSeries, forecast_periods: int = 3) -> Forecast:
        """
        Project a trend series forward with a least-squares line.

        Args:
            trend: Historical series to fit
            forecast_periods: Number of periods to project

        Returns:
            Forecast with per-step prediction, confidence and range
        """
        if forecast_periods < 1:
            raise ValueError(f"forecast_periods must be at least 1, got {forecast_periods}")

        values = [p.value for p in trend.points]
        slope, intercept = linear_fit(values)
        now = self.clock()

        points = []
        for step in range(1, forecast_periods + 1):
            # Metrics are counts, percentages and times; none can go negative
            predicted = max(0.0, slope * (len(values) + step) + intercept)
            points.append(
                ForecastPoint(
                    period=month_label(now, step),
                    predicted=round(predicted, 2),
                    confidence=forecast_confidence(step),
                    range_min=round(predicted * RANGE_LOW, 2),
                    range_max=round(predicted * RANGE_HIGH, 2),
                )
            )

        return Forecast(
            metric=trend.metric,
            current_value=values[-1],
            historical_average=trend.average,
            trend=trend.trend,
            slope=round(slope, 4),
            reliability=reliability_for(trend.volatility),
            points=points,
        )

    def performance_forecast(
        self,
        records: Iterable[PerformanceRecord],
        forecast_periods: int = 3,
        periods: int = 6,
    ) -> dict[str, Forecast]:
        """Forecast every tracked metric from freshly built trend series."""
        trends = self.trend_analysis(records, periods=periods)
        forecasts = {
            metric: self.forecast(series, forecast_periods)
            for metric, series in trends.items()  # type: ignore[union-attr]
        }
        logger.debug("Built forecasts for %d metrics", len(forecasts))
        return forecasts
