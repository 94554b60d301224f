"""Tests for the insights synthesizer."""
from team_insights.analysis.insights import GENERAL_RECOMMENDATIONS, synthesize_insights
from team_insights.analysis.trends import METRICS
from team_insights.models.analytics import Forecast, ForecastPoint, TrendSeries


def trend(metric, direction="decreasing", volatility=22.0, average=10.0):
    return TrendSeries(
        metric=metric, points=[], average=average, min=average, max=average,
        volatility=volatility, trend=direction,
    )


def forecast(metric, reliability="medium", predicted=10.0, average=10.0):
    return Forecast(
        metric=metric, current_value=average, historical_average=average,
        trend="increasing", slope=0, reliability=reliability,
        points=[ForecastPoint(period="Nov 2026", predicted=predicted, confidence=90,
                              range_min=predicted * 0.85, range_max=predicted * 1.15)],
    )


def neutral_inputs():
    """Trends and forecasts that trigger no rule."""
    trends = {m: trend(m) for m in METRICS}
    forecasts = {m: forecast(m) for m in METRICS}
    return {"goals": 2, "assists": 2}, trends, forecasts


def test_no_rules_triggered():
    result = synthesize_insights(*neutral_inputs())

    assert result.insights == []
    assert result.summary.overall_trend == "stable"
    assert result.summary.declining_metrics == ["goals", "assists"]
    assert result.summary.forecast_confidence == 0
    assert result.recommendations == GENERAL_RECOMMENDATIONS


def test_consistent_improvement_is_positive():
    current, trends, forecasts = neutral_inputs()
    trends["endurance"] = trend("endurance", "increasing", volatility=10)

    result = synthesize_insights(current, trends, forecasts)

    assert len(result.insights) == 1
    assert result.insights[0].type == "positive"
    assert result.insights[0].metric == "endurance"


def test_volatile_decline_is_warning():
    current, trends, forecasts = neutral_inputs()
    trends["sprint_time"] = trend("sprint_time", "decreasing", volatility=30)

    result = synthesize_insights(current, trends, forecasts)

    assert [(i.type, i.metric) for i in result.insights] == [("warning", "sprint_time")]


def test_high_reliability_growth_forecast():
    current, trends, forecasts = neutral_inputs()
    forecasts["goals"] = forecast("goals", "high", predicted=12, average=10)
    forecasts["assists"] = forecast("assists", "high", predicted=11, average=10)

    result = synthesize_insights(current, trends, forecasts)

    # 11 is not more than 110% of 10
    assert [(i.type, i.metric) for i in result.insights] == [("positive", "goals")]
    assert result.summary.forecast_confidence == 0.33


def test_finishing_bias():
    _, trends, forecasts = neutral_inputs()

    result = synthesize_insights({"goals": 7, "assists": 3}, trends, forecasts)

    assert [(i.type, i.metric) for i in result.insights] == [("info", "goals")]


def test_no_finishing_bias_without_assists():
    _, trends, forecasts = neutral_inputs()

    result = synthesize_insights({"goals": 4, "assists": 0}, trends, forecasts)

    assert result.insights == []


def test_insights_are_ordered_and_capped_at_five():
    trends = {m: trend(m, "increasing", volatility=5) for m in METRICS}
    forecasts = {m: forecast(m, "high", predicted=20) for m in METRICS}

    result = synthesize_insights({"goals": 9, "assists": 1}, trends, forecasts)

    assert len(result.insights) == 5
    assert [i.metric for i in result.insights] == METRICS[:5]
    assert all(i.type == "positive" for i in result.insights)


def test_summary_improving_when_more_than_three_metrics_increase():
    current, trends, forecasts = neutral_inputs()
    for metric in METRICS[:4]:
        trends[metric] = trend(metric, "increasing", volatility=22)

    result = synthesize_insights(current, trends, forecasts)

    assert result.summary.overall_trend == "improving"
    assert result.summary.improving_metrics == METRICS[:3]
    assert result.summary.declining_metrics == METRICS[4:6]


def test_summary_stable_with_exactly_three_increasing():
    current, trends, forecasts = neutral_inputs()
    for metric in METRICS[:3]:
        trends[metric] = trend(metric, "increasing", volatility=22)

    result = synthesize_insights(current, trends, forecasts)

    assert result.summary.overall_trend == "stable"
