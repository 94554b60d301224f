"""
Injury-risk scoring.

The composite score is the sum of three capped sub-scores:

    training load     0-40
    injury history    0-35
    performance       0-25

Each sub-score is clamped on its own, so the composite can never leave 0-100.

Missing data is scored asymmetrically on purpose: no training data costs a
fixed 10 points, no injury history costs nothing (an athlete cannot be at
risk for having too few injuries), and no performance data costs 5 points.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from team_insights.models.records import Athlete
from team_insights.models.risk import (
    InjuryRiskSignal,
    PerformanceRiskSignal,
    RiskAssessment,
    RiskLevel,
    TrainingRiskSignal,
)

logger = logging.getLogger(__name__)

TRAINING_RISK_CAP = 40
INJURY_RISK_CAP = 35
PERFORMANCE_RISK_CAP = 25

HIGH_RISK_THRESHOLD = 60
MEDIUM_RISK_THRESHOLD = 30

INSUFFICIENT_TRAINING_SCORE = 10
LIMITED_PERFORMANCE_SCORE = 5

BASE_RECOMMENDATIONS: dict[RiskLevel, list[str]] = {
    RiskLevel.HIGH: [
        "Immediate rest period recommended (2-3 days)",
        "Reduce training intensity by 40-50%",
        "Schedule medical evaluation",
        "Implement active recovery protocols",
    ],
    RiskLevel.MEDIUM: [
        "Monitor closely for next 7 days",
        "Reduce training intensity by 20-30%",
        "Focus on recovery and mobility work",
        "Consider lighter training sessions",
    ],
    RiskLevel.LOW: [
        "Continue current training regimen",
        "Maintain regular monitoring",
        "Focus on injury prevention exercises",
    ],
}

# (substring of a risk factor, recommendations it adds), in evaluation order
FACTOR_RECOMMENDATIONS: list[tuple[str, list[str]]] = [
    ("load spike", ["Implement gradual load progression"]),
    ("recent injury", ["Focus on injury site rehabilitation"]),
    (
        "performance decline",
        ["Review training methodology", "Consider sports psychology consultation"],
    ),
    ("fatigue", ["Prioritize sleep and nutrition optimization"]),
]

RISK_LEVEL_TEXT = {
    RiskLevel.HIGH: "High Risk",
    RiskLevel.MEDIUM: "Medium Risk",
    RiskLevel.LOW: "Low Risk",
}

RISK_LEVEL_COLOR = {
    RiskLevel.HIGH: "danger",
    RiskLevel.MEDIUM: "warning",
    RiskLevel.LOW: "success",
}


@dataclass
class SubScore:
    """A capped sub-score and the factors that produced it."""

    score: int = 0
    factors: list[str] = field(default_factory=list)

    def add(self, points: int, factor: str) -> None:
        self.score += points
        self.factors.append(factor)

    def capped(self, cap: int) -> "SubScore":
        return SubScore(min(self.score, cap), self.factors)


def calculate_training_risk(signal: Optional[TrainingRiskSignal]) -> SubScore:
    """Training-load sub-score (0-40)."""
    if signal is None or not signal.has_data:
        return SubScore(INSUFFICIENT_TRAINING_SCORE, ["Insufficient training data"])

    result = SubScore()
    if signal.avg_intensity > 8:
        result.add(15, "High average training intensity")
    elif signal.avg_intensity > 6:
        result.add(8, "Moderate training intensity")

    if signal.load_spike:
        result.add(20, "Recent training load spike detected")

    if signal.session_count < 8:
        result.add(12, "Low training frequency")

    if signal.recent_load > signal.total_load * 0.6:
        result.add(8, "Concentrated recent training load")

    return result.capped(TRAINING_RISK_CAP)


def calculate_injury_risk(signal: Optional[InjuryRiskSignal]) -> SubScore:
    """Injury-history sub-score (0-35). No history scores zero."""
    if signal is None or not signal.has_data:
        return SubScore()

    result = SubScore()
    if signal.recent_injuries > 0:
        result.add(
            signal.recent_injuries * 10,
            f"{signal.recent_injuries} recent injury(ies) in last 6 months",
        )

    if signal.severe_injuries > 0:
        result.add(
            signal.severe_injuries * 8,
            f"{signal.severe_injuries} severe injury(ies) in history",
        )

    if signal.total_injuries > 5:
        result.add(10, "High total injury count")
    elif signal.total_injuries > 2:
        result.add(5, "Moderate injury history")

    days = signal.days_since_last_injury
    if days is not None:
        if days < 30:
            result.add(12, "Very recent injury (within 30 days)")
        elif days < 90:
            result.add(6, "Recent injury (within 90 days)")

    return result.capped(INJURY_RISK_CAP)


def calculate_performance_risk(signal: Optional[PerformanceRiskSignal]) -> SubScore:
    """Performance sub-score (0-25)."""
    if signal is None or not signal.has_data:
        return SubScore(LIMITED_PERFORMANCE_SCORE, ["Limited performance data"])

    result = SubScore()
    if signal.recent_decline:
        result.add(15, "Recent performance decline detected")

    if signal.avg_score < 60:
        result.add(10, "Below average performance scores")
    elif signal.avg_score < 70:
        result.add(5, "Moderate performance concerns")

    if signal.fatigue_indicators > 3:
        result.add(8, "Multiple fatigue indicators detected")
    elif signal.fatigue_indicators > 1:
        result.add(4, "Some fatigue indicators present")

    days = signal.days_since_last_performance
    if days is not None and days > 14:
        result.add(3, "No recent performance data")

    return result.capped(PERFORMANCE_RISK_CAP)


def determine_risk_level(score: int) -> RiskLevel:
    """Map a composite score to its tier."""
    if score >= HIGH_RISK_THRESHOLD:
        return RiskLevel.HIGH
    if score >= MEDIUM_RISK_THRESHOLD:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def generate_recommendations(risk_level: RiskLevel, risk_factors: list[str]) -> list[str]:
    """Tier base list first, then additions triggered by the risk factors."""
    recommendations = list(BASE_RECOMMENDATIONS[RiskLevel(risk_level)])
    for keyword, additions in FACTOR_RECOMMENDATIONS:
        if any(keyword in factor for factor in risk_factors):
            recommendations.extend(additions)
    return recommendations


def calculate_risk_score(
    athlete: Athlete,
    training: Optional[TrainingRiskSignal] = None,
    injury: Optional[InjuryRiskSignal] = None,
    performance: Optional[PerformanceRiskSignal] = None,
) -> RiskAssessment:
    """
    Combine the three risk signals into an assessment.

    The result depends only on the arguments; calling it twice with the same
    inputs gives the same assessment.

    Args:
        athlete: The athlete being assessed
        training: Training-load signal, None when no sessions exist
        injury: Injury-history signal, None when no injuries exist
        performance: Performance signal, None when no records exist

    Returns:
        RiskAssessment with composite score, tier, factors and recommendations
    """
    training_risk = calculate_training_risk(training)
    injury_risk = calculate_injury_risk(injury)
    performance_risk = calculate_performance_risk(performance)

    risk_score = training_risk.score + injury_risk.score + performance_risk.score
    risk_factors = training_risk.factors + injury_risk.factors + performance_risk.factors
    risk_level = determine_risk_level(risk_score)

    logger.debug(
        "Athlete %d scored %d (%s): training=%d injury=%d performance=%d",
        athlete.id, risk_score, risk_level.value,
        training_risk.score, injury_risk.score, performance_risk.score,
    )

    return RiskAssessment(
        athlete_id=athlete.id,
        athlete_name=athlete.name,
        position=athlete.position,
        risk_score=risk_score,
        risk_level=risk_level,
        risk_factors=risk_factors,
        recommendations=generate_recommendations(risk_level, risk_factors),
        training_risk=training_risk.score,
        injury_risk=injury_risk.score,
        performance_risk=performance_risk.score,
    )


def risk_level_text(risk_level: str) -> str:
    """Display label for a tier ("High Risk"), "Unknown" otherwise."""
    try:
        return RISK_LEVEL_TEXT[RiskLevel(risk_level)]
    except ValueError:
        return "Unknown"


def risk_level_color(risk_level: str) -> str:
    """Badge variant for a tier, "secondary" otherwise."""
    try:
        return RISK_LEVEL_COLOR[RiskLevel(risk_level)]
    except ValueError:
        return "secondary"


def filter_assessments(
    assessments: Iterable[RiskAssessment],
    search: str = "",
    risk_level: str = "all",
) -> list[RiskAssessment]:
    """
    Filter assessments by name/position search and tier, highest score first.

    Args:
        assessments: Assessments to filter
        search: Case-insensitive substring of athlete name or position
        risk_level: "all" or one of low, medium, high

    Returns:
        Matching assessments sorted by risk score, descending
    """
    term = search.lower()
    matches = [
        a for a in assessments
        if (not term or term in a.athlete_name.lower() or term in a.position.lower())
        and (risk_level == "all" or a.risk_level == risk_level)
    ]
    return sorted(matches, key=lambda a: a.risk_score, reverse=True)


def summarize_assessments(assessments: Iterable[RiskAssessment]) -> dict[str, int]:
    """Count assessments per tier."""
    counts = {"total": 0, "high": 0, "medium": 0, "low": 0}
    for assessment in assessments:
        counts["total"] += 1
        counts[assessment.risk_level] += 1
    return counts
