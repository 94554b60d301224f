"""Pydantic models for risk signals and assessments."""

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RiskLevel(str, Enum):
    """Risk tiers derived from the composite score."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TrainingRiskSignal(BaseModel):
    """Training-load aggregate for one athlete."""

    athlete_id: int
    total_load: float = 0
    session_count: int = 0
    avg_intensity: float = 0
    recent_load: float = 0  # last 30 days
    load_spike: bool = False

    @property
    def has_data(self) -> bool:
        return self.session_count > 0


class InjuryRiskSignal(BaseModel):
    """Injury-history aggregate for one athlete."""

    athlete_id: int
    recent_injuries: int = 0  # last 6 months
    severe_injuries: int = 0
    total_injuries: int = 0
    last_injury_date: Optional[date] = None
    days_since_last_injury: Optional[int] = None

    @property
    def has_data(self) -> bool:
        return self.total_injuries > 0


class PerformanceRiskSignal(BaseModel):
    """Performance aggregate for one athlete."""

    athlete_id: int
    record_count: int = 0
    avg_score: float = 0
    fatigue_indicators: int = 0
    recent_decline: bool = False
    last_performance_date: Optional[date] = None
    days_since_last_performance: Optional[int] = None

    @property
    def has_data(self) -> bool:
        return self.record_count > 0


class RiskAssessment(BaseModel):
    """Composite injury-risk assessment. Always derived, never stored."""

    model_config = ConfigDict(use_enum_values=True)

    athlete_id: int
    athlete_name: str
    position: str
    risk_score: int = Field(ge=0, le=100)
    risk_level: RiskLevel
    risk_factors: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)

    # Sub-scores
    training_risk: int = Field(ge=0, le=40)
    injury_risk: int = Field(ge=0, le=35)
    performance_risk: int = Field(ge=0, le=25)
