"""Repository interfaces the dashboard depends on."""

from typing import Protocol

from team_insights.models.records import (
    Athlete,
    HealthRecord,
    PerformanceRecord,
    TrainingSession,
)


class AthleteRepository(Protocol):
    async def get_all(self) -> list[Athlete]: ...

    async def get_by_id(self, record_id: int) -> Athlete: ...


class TrainingRepository(Protocol):
    async def get_all(self) -> list[TrainingSession]: ...

    async def get_by_athlete_id(
        self, athlete_id: int, include_team: bool = True
    ) -> list[TrainingSession]: ...


class HealthRepository(Protocol):
    async def get_all(self) -> list[HealthRecord]: ...

    async def get_by_athlete_id(self, athlete_id: int) -> list[HealthRecord]: ...


class PerformanceRepository(Protocol):
    async def get_all(self) -> list[PerformanceRecord]: ...

    async def get_by_athlete_id(self, athlete_id: int) -> list[PerformanceRecord]: ...
