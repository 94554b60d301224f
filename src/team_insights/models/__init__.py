"""Pydantic models for the Team Insights core."""

from team_insights.models.records import (
    Athlete,
    HealthRecord,
    HealthStatus,
    PerformanceRecord,
    Position,
    TrainingSession,
)
from team_insights.models.risk import (
    InjuryRiskSignal,
    PerformanceRiskSignal,
    RiskAssessment,
    RiskLevel,
    TrainingRiskSignal,
)
from team_insights.models.analytics import (
    Forecast,
    ForecastPoint,
    Insight,
    InsightSummary,
    InsightType,
    PerformanceInsights,
    Reliability,
    TrendDirection,
    TrendPoint,
    TrendSeries,
)

__all__ = [
    # Record models
    "Position",
    "HealthStatus",
    "Athlete",
    "TrainingSession",
    "HealthRecord",
    "PerformanceRecord",
    # Risk models
    "RiskLevel",
    "TrainingRiskSignal",
    "InjuryRiskSignal",
    "PerformanceRiskSignal",
    "RiskAssessment",
    # Analytics models
    "TrendDirection",
    "Reliability",
    "InsightType",
    "TrendPoint",
    "TrendSeries",
    "ForecastPoint",
    "Forecast",
    "Insight",
    "InsightSummary",
    "PerformanceInsights",
]
