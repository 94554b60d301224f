"""Pydantic models for trends, forecasts and insights."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TrendDirection(str, Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


class Reliability(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class InsightType(str, Enum):
    POSITIVE = "positive"
    WARNING = "warning"
    INFO = "info"


class TrendPoint(BaseModel):
    """One historical period of a metric."""

    period: str
    value: float
    change: float = 0  # percent change from the prior period


class TrendSeries(BaseModel):
    """Historical series and summary statistics for a metric."""

    model_config = ConfigDict(use_enum_values=True)

    metric: str
    points: list[TrendPoint] = Field(default_factory=list)
    average: float
    min: float
    max: float
    volatility: float
    trend: TrendDirection


class ForecastPoint(BaseModel):
    """One projected period of a metric."""

    period: str
    predicted: float
    confidence: int  # percent
    range_min: float
    range_max: float


class Forecast(BaseModel):
    """Linear projection of a metric's trend series."""

    model_config = ConfigDict(use_enum_values=True)

    metric: str
    current_value: float
    historical_average: float
    trend: TrendDirection
    slope: float
    reliability: Reliability
    points: list[ForecastPoint] = Field(default_factory=list)


class Insight(BaseModel):
    """A single observation about an athlete's or squad's metrics."""

    model_config = ConfigDict(use_enum_values=True)

    type: InsightType
    metric: str
    message: str
    impact: str  # high, medium, low
    recommendation: str


class InsightSummary(BaseModel):
    overall_trend: str  # improving or stable
    improving_metrics: list[str] = Field(default_factory=list)
    declining_metrics: list[str] = Field(default_factory=list)
    forecast_confidence: float = 0  # share of forecasts with high reliability


class PerformanceInsights(BaseModel):
    summary: InsightSummary
    insights: list[Insight] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
