"""
Pytest configuration and fixtures

Repositories are built from in-test records with latency disabled, and every
time-dependent computation is pinned to a fixed "now".
"""
from datetime import date, datetime, timedelta

import pytest

from team_insights.analysis.trends import TrendEngine
from team_insights.models.records import Athlete
from team_insights.services.dashboard import TeamDashboard
from team_insights.storage import (
    AthleteStorage,
    HealthStorage,
    PerformanceStorage,
    TrainingStorage,
)

NOW = datetime(2026, 10, 16, 9, 0)
TODAY = NOW.date()


def days_ago(days: int) -> str:
    return (TODAY - timedelta(days=days)).isoformat()


class FixedRandom:
    """Random stub returning the same draw every time."""

    def __init__(self, value: float = 0.5):
        self.value = value

    def random(self) -> float:
        return self.value


class SequenceRandom:
    """Random stub replaying a fixed sequence of draws."""

    def __init__(self, values: list[float]):
        self.values = list(values)

    def random(self) -> float:
        return self.values.pop(0)


@pytest.fixture
def athlete():
    return Athlete(id=1, name="Marcus Silva", position="Forward", age=24, jersey_number=9)


@pytest.fixture
def athlete_records():
    return [
        {"id": 1, "name": "Marcus Silva", "position": "Forward", "age": 24, "jersey_number": 9},
        {"id": 2, "name": "James Okafor", "position": "Midfielder", "age": 27, "jersey_number": 8},
        {"id": 3, "name": "Lucas Berg", "position": "Defender", "age": 29, "jersey_number": 4},
    ]


@pytest.fixture
def training_records():
    return [
        # Athlete 1: heavy recent block
        {"id": 1, "athlete_id": 1, "date": days_ago(80), "intensity": 8},
        {"id": 2, "athlete_id": 1, "date": days_ago(10), "intensity": 9},
        {"id": 3, "athlete_id": 1, "date": days_ago(5), "intensity": 10},
        # Athlete 2: steady, older sessions
        {"id": 4, "athlete_id": 2, "date": days_ago(60), "intensity": 6},
        {"id": 5, "athlete_id": 2, "date": days_ago(50), "intensity": 6},
        # Team session
        {"id": 6, "athlete_id": None, "date": days_ago(40), "intensity": 5},
    ]


@pytest.fixture
def health_records():
    return [
        {
            "id": 1, "athlete_id": 3, "status": "Major Injury", "condition": "Hamstring tear",
            "injury_type": "Non-Contact", "severity": "Severe", "body_part": "Thigh",
            "date": days_ago(20),
        },
        {
            "id": 2, "athlete_id": 3, "status": "Minor Injury", "condition": "Ankle sprain",
            "injury_type": "Contact", "severity": "Minor", "body_part": "Ankle",
            "date": days_ago(300),
        },
        {"id": 3, "athlete_id": 1, "status": "Healthy", "condition": "Screening", "date": days_ago(30)},
    ]


@pytest.fixture
def performance_records():
    return [
        {"id": 1, "athlete_id": 1, "date": days_ago(60), "goals": 2, "assists": 1,
         "pass_accuracy": 80, "sprint_time": 12.0, "endurance_score": 80,
         "technical_skills": 84, "overall_score": 85},
        {"id": 2, "athlete_id": 1, "date": days_ago(30), "goals": 1, "assists": 0,
         "pass_accuracy": 78, "sprint_time": 12.2, "endurance_score": 76,
         "technical_skills": 82, "overall_score": 80},
        {"id": 3, "athlete_id": 1, "date": days_ago(3), "goals": 0, "assists": 0,
         "pass_accuracy": 76, "sprint_time": 12.4, "endurance_score": 72,
         "technical_skills": 80, "overall_score": 75},
        {"id": 4, "athlete_id": 2, "date": days_ago(20), "goals": 0, "assists": 2,
         "pass_accuracy": 90, "overall_score": 88},
    ]


@pytest.fixture
def storages(athlete_records, training_records, health_records, performance_records):
    return {
        "athletes": AthleteStorage(records=athlete_records, latency_scale=0),
        "training": TrainingStorage(records=training_records, latency_scale=0),
        "health": HealthStorage(records=health_records, latency_scale=0),
        "performance": PerformanceStorage(records=performance_records, latency_scale=0),
    }


@pytest.fixture
def dashboard(storages):
    clock = lambda: NOW  # noqa: E731
    return TeamDashboard(
        trend_engine=TrendEngine(rng=FixedRandom(), clock=clock),
        clock=clock,
        **storages,
    )


@pytest.fixture
def today() -> date:
    return TODAY
