"""Storage modules for Team Insights."""

from team_insights.storage.base import (
    AthleteRecordStorage,
    BaseStorage,
    get_data_dir,
    get_latency_scale,
)
from team_insights.storage.athletes import AthleteStorage
from team_insights.storage.training import TrainingStorage
from team_insights.storage.health import HealthStorage
from team_insights.storage.performance import PerformanceStorage

__all__ = [
    "BaseStorage",
    "AthleteRecordStorage",
    "get_data_dir",
    "get_latency_scale",
    "AthleteStorage",
    "TrainingStorage",
    "HealthStorage",
    "PerformanceStorage",
]
