"""Tests for the trend and forecast engine."""
import random

import pytest

from conftest import NOW, FixedRandom, SequenceRandom
from team_insights.analysis.trends import (
    METRICS,
    TrendEngine,
    current_metrics,
    forecast_confidence,
    linear_fit,
    reliability_for,
)
from team_insights.models.analytics import TrendPoint, TrendSeries
from team_insights.models.records import PerformanceRecord


def engine(rng=None, **kwargs):
    return TrendEngine(rng=rng or FixedRandom(), clock=lambda: NOW, **kwargs)


def series(values, volatility=0.0, trend="increasing"):
    return TrendSeries(
        metric="goals",
        points=[TrendPoint(period=f"P{i}", value=v) for i, v in enumerate(values)],
        average=sum(values) / len(values),
        min=min(values),
        max=max(values),
        volatility=volatility,
        trend=trend,
    )


class TestCurrentMetrics:
    def test_totals_and_averages(self):
        records = [
            PerformanceRecord(id=1, athlete_id=1, date="2026-09-01", goals=2, assists=1,
                              pass_accuracy=80, sprint_time=12.0, endurance_score=70,
                              technical_skills=90),
            PerformanceRecord(id=2, athlete_id=1, date="2026-10-01", goals=1, assists=2,
                              pass_accuracy=85),
        ]
        current = current_metrics(records)

        assert current["goals"] == 3
        assert current["assists"] == 3
        assert current["pass_accuracy"] == 82  # round(82.5) banker's rounding
        assert current["sprint_time"] == 12.25  # missing value defaults to 12.5
        assert current["endurance"] == 72  # (70 + 75) / 2 rounds half to even
        assert current["technical_skills"] == 85

    def test_defaults_without_records(self):
        assert current_metrics([]) == {
            "goals": 0,
            "assists": 0,
            "pass_accuracy": 0,
            "sprint_time": 12.5,
            "endurance": 75,
            "technical_skills": 80,
        }


class TestTrendSeries:
    @pytest.mark.parametrize("periods", [1, 3, 6, 12])
    def test_length_matches_periods(self, periods):
        result = engine(random.Random(7)).build_series("goals", 10, periods)

        assert len(result.points) == periods

    def test_labels_end_at_current_month(self):
        result = engine().build_series("goals", 10, 3)

        assert [p.period for p in result.points] == ["Aug 2026", "Sep 2026", "Oct 2026"]

    def test_flat_history_without_variance(self):
        result = engine().build_series("pass_accuracy", 80, 6)

        assert [p.value for p in result.points] == [80.0] * 6
        assert result.volatility == 0
        # The sign rule has no dead-zone, so a flat series reads as decreasing
        assert result.trend == "decreasing"

    def test_stable_threshold_labels_flat_history_stable(self):
        result = engine(stable_threshold=1.0).build_series("pass_accuracy", 80, 6)

        assert result.trend == "stable"

    def test_variance_is_scaled_by_age(self):
        # Draw 1.0 gives +7.5% before scaling
        result = engine(FixedRandom(1.0)).build_series("goals", 100, 3)

        # age 2: 1.2x, age 1: 1.1x, latest: 0.5x
        assert [p.value for p in result.points] == [109.0, 108.25, 103.75]
        assert result.trend == "decreasing"

    def test_summary_statistics(self):
        # Draws chosen to give 95, 105, 100 around a current value of 100
        rng = SequenceRandom([0.5 - 5 / 18, 0.5 + 5 / 16.5, 0.5])
        result = engine(rng).build_series("goals", 100, 3)

        assert [p.value for p in result.points] == [95.0, 105.0, 100.0]
        assert [p.change for p in result.points] == [0, 10.53, -4.76]
        assert result.average == 100
        assert result.min == 95
        assert result.max == 105
        assert result.volatility == pytest.approx(8.17, abs=0.01)
        assert result.trend == "increasing"

    def test_tiny_increase_reads_as_increasing(self):
        # Latest draw scaled by 0.075 gives +0.004%, which rounds to 0.0
        rng = SequenceRandom([0.5, 0.5 + 0.00004 / 0.075])
        result = engine(rng).build_series("goals", 10000, 2)

        assert [p.value for p in result.points] == [10000.0, 10000.4]
        assert [p.change for p in result.points] == [0, 0]
        assert result.trend == "increasing"

    def test_random_values_stay_within_variance_band(self):
        result = engine(random.Random()).build_series("goals", 100, 6)

        # Oldest period has the widest band: +/-7.5% * 1.5
        for point in result.points:
            assert 88.75 <= point.value <= 111.25

    def test_trend_analysis_covers_every_metric(self):
        trends = engine().trend_analysis([], periods=4)

        assert list(trends) == METRICS
        assert trends["sprint_time"].points[-1].value == 12.5

    def test_unknown_metric_is_rejected(self):
        with pytest.raises(ValueError, match="Unknown metric"):
            engine().trend_analysis([], metric="tackles")

    def test_periods_must_be_positive(self):
        with pytest.raises(ValueError):
            engine().build_series("goals", 10, 0)


class TestForecast:
    def test_linear_fit(self):
        slope, intercept = linear_fit([2, 4, 6, 8])

        assert slope == pytest.approx(2)
        assert intercept == pytest.approx(0)

    def test_linear_fit_single_point(self):
        assert linear_fit([5]) == (0.0, 5)

    def test_projects_line_forward(self):
        forecast = engine().forecast(series([10, 12, 14, 16, 18, 20]), forecast_periods=3)

        assert [p.predicted for p in forecast.points] == [22, 24, 26]
        assert [p.period for p in forecast.points] == ["Nov 2026", "Dec 2026", "Jan 2027"]
        assert forecast.points[0].range_min == 18.7
        assert forecast.points[0].range_max == 25.3
        assert forecast.current_value == 20
        assert forecast.slope == 2

    def test_confidence_never_increases(self):
        forecast = engine().forecast(series([5, 6, 7]), forecast_periods=6)
        confidences = [p.confidence for p in forecast.points]

        assert confidences == [90, 80, 70, 60, 60, 60]
        assert all(a >= b for a, b in zip(confidences, confidences[1:]))

    def test_predictions_are_not_negative(self):
        forecast = engine().forecast(series([9, 6, 3]), forecast_periods=3)

        assert [p.predicted for p in forecast.points] == [0, 0, 0]

    @pytest.mark.parametrize(
        "volatility,reliability",
        [(0, "high"), (14.9, "high"), (15, "medium"), (29.9, "medium"), (30, "low")],
    )
    def test_reliability_from_volatility(self, volatility, reliability):
        assert reliability_for(volatility) == reliability
        assert engine().forecast(series([1, 2], volatility)).reliability == reliability

    def test_forecast_confidence_floor(self):
        assert forecast_confidence(1) == 90
        assert forecast_confidence(10) == 60

    def test_performance_forecast_for_every_metric(self):
        forecasts = engine().performance_forecast([], forecast_periods=2)

        assert list(forecasts) == METRICS
        assert forecasts["endurance"].points[0].predicted == 75
        assert forecasts["endurance"].reliability == "high"
