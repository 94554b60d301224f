"""Prioritized observations drawn from trends and forecasts."""

from team_insights.analysis.trends import METRIC_LABELS, METRICS
from team_insights.models.analytics import (
    Forecast,
    Insight,
    InsightSummary,
    InsightType,
    PerformanceInsights,
    Reliability,
    TrendDirection,
    TrendSeries,
)

MAX_INSIGHTS = 5
MAX_IMPROVING = 3
MAX_DECLINING = 2
IMPROVING_METRIC_COUNT = 3

CONSISTENT_VOLATILITY = 20
ERRATIC_VOLATILITY = 25
FORECAST_GROWTH_RATIO = 1.1
FINISHING_BIAS_RATIO = 2

GENERAL_RECOMMENDATIONS = [
    "Review performance trends weekly to catch changes early",
    "Adjust training loads using forecast confidence as a guide",
    "Share key insights with coaching and medical staff",
]


def _trend_insights(trends: dict[str, TrendSeries]) -> list[Insight]:
    insights = []
    for metric in METRICS:
        series = trends.get(metric)
        if series is None:
            continue
        label = METRIC_LABELS[metric]
        if series.trend == TrendDirection.INCREASING and series.volatility < CONSISTENT_VOLATILITY:
            insights.append(Insight(
                type=InsightType.POSITIVE,
                metric=metric,
                message=f"{label} shows a consistent upward trend",
                impact="high",
                recommendation=f"Maintain the current training focus on {label.lower()}",
            ))
        elif series.trend == TrendDirection.DECREASING and series.volatility > ERRATIC_VOLATILITY:
            insights.append(Insight(
                type=InsightType.WARNING,
                metric=metric,
                message=f"{label} is declining with high variability",
                impact="high",
                recommendation=f"Review the training approach for {label.lower()}",
            ))
    return insights


def _forecast_insights(forecasts: dict[str, Forecast]) -> list[Insight]:
    insights = []
    for metric in METRICS:
        forecast = forecasts.get(metric)
        if forecast is None or not forecast.points:
            continue
        next_value = forecast.points[0].predicted
        if (
            forecast.reliability == Reliability.HIGH
            and next_value > forecast.historical_average * FORECAST_GROWTH_RATIO
        ):
            label = METRIC_LABELS[metric]
            insights.append(Insight(
                type=InsightType.POSITIVE,
                metric=metric,
                message=f"{label} is projected to rise above its historical average",
                impact="medium",
                recommendation=f"Set a stretch target for {label.lower()}",
            ))
    return insights


def _ratio_insights(current: dict[str, float]) -> list[Insight]:
    goals = current.get("goals", 0)
    assists = current.get("assists", 0)
    if assists > 0 and goals / assists > FINISHING_BIAS_RATIO:
        return [Insight(
            type=InsightType.INFO,
            metric="goals",
            message="Goal output is more than twice the assist output, a strong finishing bias",
            impact="low",
            recommendation="Add creative passing drills to balance attacking contribution",
        )]
    return []


def summarize(trends: dict[str, TrendSeries], forecasts: dict[str, Forecast]) -> InsightSummary:
    improving = [m for m in METRICS if m in trends and trends[m].trend == TrendDirection.INCREASING]
    declining = [m for m in METRICS if m in trends and trends[m].trend == TrendDirection.DECREASING]
    high = sum(1 for f in forecasts.values() if f.reliability == Reliability.HIGH)
    return InsightSummary(
        overall_trend="improving" if len(improving) > IMPROVING_METRIC_COUNT else "stable",
        improving_metrics=improving[:MAX_IMPROVING],
        declining_metrics=declining[:MAX_DECLINING],
        forecast_confidence=round(high / len(forecasts), 2) if forecasts else 0,
    )


def synthesize_insights(
    current: dict[str, float],
    trends: dict[str, TrendSeries],
    forecasts: dict[str, Forecast],
) -> PerformanceInsights:
    """
    Turn current metrics, trends and forecasts into insights.

    Rules run in a fixed order (trend rules per metric, forecast rules per
    metric, then the goal/assist ratio) and only the first five hits are kept.
    """
    insights = _trend_insights(trends) + _forecast_insights(forecasts) + _ratio_insights(current)
    return PerformanceInsights(
        summary=summarize(trends, forecasts),
        insights=insights[:MAX_INSIGHTS],
        recommendations=list(GENERAL_RECOMMENDATIONS),
    )
