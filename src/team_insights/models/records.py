"""Pydantic models for the records held by the repositories."""

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Position(str, Enum):
    """Playing positions on the squad."""

    GOALKEEPER = "Goalkeeper"
    DEFENDER = "Defender"
    MIDFIELDER = "Midfielder"
    FORWARD = "Forward"


class HealthStatus(str, Enum):
    """Status values a health record can carry."""

    HEALTHY = "Healthy"
    MINOR_INJURY = "Minor Injury"
    MAJOR_INJURY = "Major Injury"
    RECOVERING = "Recovering"
    UNDER_OBSERVATION = "Under Observation"


class Athlete(BaseModel):
    """A squad member."""

    model_config = ConfigDict(use_enum_values=True)

    id: int
    name: str
    position: Position
    age: Optional[int] = None
    jersey_number: Optional[int] = None

    # Contact
    email: Optional[str] = None
    phone: Optional[str] = None

    join_date: Optional[date] = None


class TrainingSession(BaseModel):
    """A logged training session."""

    id: int
    athlete_id: Optional[int] = None  # None for a whole-team session
    date: date
    intensity: float = Field(ge=0)  # load units, roughly 1-10
    duration_minutes: Optional[int] = None
    type: Optional[str] = None  # technical, tactical, fitness, recovery
    notes: str = ""

    @property
    def is_team_session(self) -> bool:
        return self.athlete_id is None


class HealthRecord(BaseModel):
    """A medical status entry for an athlete."""

    model_config = ConfigDict(use_enum_values=True)

    id: int
    athlete_id: int
    status: HealthStatus
    condition: str = Field(min_length=1)
    date: date

    # Injury metadata, required for injury statuses
    injury_type: Optional[str] = None  # Acute, Chronic, Overuse, Contact, Non-Contact
    severity: Optional[str] = None  # Minor, Moderate, Severe, Critical
    body_part: Optional[str] = None

    treatment_plan: Optional[str] = None
    recovery_timeline: Optional[str] = None
    next_checkup: Optional[date] = None
    notes: str = ""

    @property
    def is_injury(self) -> bool:
        return "Injury" in self.status

    @model_validator(mode="after")
    def check_injury_fields(self) -> "HealthRecord":
        # Recovering records describe an injury too, but are not counted as one
        if self.is_injury or self.status == HealthStatus.RECOVERING:
            missing = [
                name
                for name in ("injury_type", "severity", "body_part")
                if not getattr(self, name)
            ]
            if missing:
                raise ValueError(
                    f"{', '.join(missing)} required for status '{self.status}'"
                )
        return self


class PerformanceRecord(BaseModel):
    """Match and testing metrics for an athlete at a point in time."""

    id: int
    athlete_id: int
    date: date

    goals: int = 0
    assists: int = 0
    minutes_played: int = 0
    matches_played: int = 0

    pass_accuracy: Optional[float] = None  # percent
    sprint_time: Optional[float] = None  # seconds
    endurance_score: Optional[float] = None
    technical_skills: Optional[float] = None
    overall_score: float = 0
