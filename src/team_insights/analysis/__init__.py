"""Risk scoring, trend and insight computations."""

from team_insights.analysis.signals import (
    extract_injury_signal,
    extract_injury_signals,
    extract_performance_signal,
    extract_performance_signals,
    extract_training_signal,
    extract_training_signals,
)
from team_insights.analysis.risk import (
    calculate_risk_score,
    determine_risk_level,
    filter_assessments,
    generate_recommendations,
    risk_level_color,
    risk_level_text,
    summarize_assessments,
)
from team_insights.analysis.trends import METRICS, TrendEngine, current_metrics
from team_insights.analysis.insights import synthesize_insights

__all__ = [
    # Signal extractors
    "extract_training_signal",
    "extract_training_signals",
    "extract_injury_signal",
    "extract_injury_signals",
    "extract_performance_signal",
    "extract_performance_signals",
    # Risk scoring
    "calculate_risk_score",
    "determine_risk_level",
    "generate_recommendations",
    "risk_level_text",
    "risk_level_color",
    "filter_assessments",
    "summarize_assessments",
    # Trends and insights
    "METRICS",
    "TrendEngine",
    "current_metrics",
    "synthesize_insights",
]
