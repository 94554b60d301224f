"""Dashboard facade wiring the repositories into the analytics core."""

import asyncio
import logging
import random
from datetime import date, datetime
from typing import Callable, Optional

from team_insights.analysis.insights import synthesize_insights
from team_insights.analysis.risk import calculate_risk_score
from team_insights.analysis.signals import (
    extract_injury_signal,
    extract_injury_signals,
    extract_performance_signal,
    extract_performance_signals,
    extract_training_signal,
    extract_training_signals,
)
from team_insights.analysis.trends import TrendEngine, current_metrics
from team_insights.models.analytics import Forecast, PerformanceInsights, TrendSeries
from team_insights.models.records import Athlete, PerformanceRecord
from team_insights.models.risk import (
    InjuryRiskSignal,
    PerformanceRiskSignal,
    RiskAssessment,
    TrainingRiskSignal,
)
from team_insights.services.ports import (
    AthleteRepository,
    HealthRepository,
    PerformanceRepository,
    TrainingRepository,
)
from team_insights.storage import (
    AthleteStorage,
    HealthStorage,
    PerformanceStorage,
    TrainingStorage,
)

logger = logging.getLogger(__name__)


class TeamDashboard:
    """
    Async entry point for risk, trend and insight queries.

    Repositories are passed in rather than imported, so callers (and tests)
    decide which record stores back the dashboard. Errors raised by the
    repositories, such as NotFoundError, propagate unchanged.
    """

    def __init__(
        self,
        athletes: AthleteRepository,
        training: TrainingRepository,
        health: HealthRepository,
        performance: PerformanceRepository,
        trend_engine: Optional[TrendEngine] = None,
        clock: Optional[Callable[[], date | datetime]] = None,
    ):
        """
        Initialize the dashboard.

        Args:
            athletes: Athlete roster repository
            training: Training session repository
            health: Health record repository
            performance: Performance record repository
            trend_engine: Engine for trends and forecasts (default: unseeded)
            clock: Returns "now" for the signal windows (default: datetime.now)
        """
        self.athletes = athletes
        self.training = training
        self.health = health
        self.performance = performance
        self.clock = clock or datetime.now
        self.trend_engine = trend_engine or TrendEngine(clock=self.clock)

    @classmethod
    def with_seed(cls, seed: int, **repositories) -> "TeamDashboard":
        """Build a dashboard whose synthetic trend history is reproducible."""
        clock = repositories.pop("clock", None)
        engine = TrendEngine(rng=random.Random(seed), clock=clock)
        return cls(trend_engine=engine, clock=clock, **repositories)

    # Risk signals

    async def get_training_risk_data(
        self, athlete_id: Optional[int] = None
    ) -> TrainingRiskSignal | dict[int, TrainingRiskSignal]:
        """Training-load signal for one athlete, or a mapping for the roster."""
        if athlete_id is not None:
            sessions = await self.training.get_by_athlete_id(athlete_id)
            return extract_training_signal(sessions, athlete_id, self.clock())
        athletes, sessions = await asyncio.gather(
            self.athletes.get_all(), self.training.get_all()
        )
        return extract_training_signals(sessions, self.clock(), roster=[a.id for a in athletes])

    async def get_injury_history(
        self, athlete_id: Optional[int] = None
    ) -> InjuryRiskSignal | dict[int, InjuryRiskSignal]:
        """Injury-history signal for one athlete, or a mapping of injured athletes."""
        if athlete_id is not None:
            records = await self.health.get_by_athlete_id(athlete_id)
            return extract_injury_signal(records, athlete_id, self.clock())
        return extract_injury_signals(await self.health.get_all(), self.clock())

    async def get_performance_risk_data(
        self, athlete_id: Optional[int] = None
    ) -> PerformanceRiskSignal | dict[int, PerformanceRiskSignal]:
        """Performance signal for one athlete, or a mapping for athletes with records."""
        if athlete_id is not None:
            records = await self.performance.get_by_athlete_id(athlete_id)
            return extract_performance_signal(records, athlete_id, self.clock())
        return extract_performance_signals(await self.performance.get_all(), self.clock())

    # Risk assessment

    def calculate_risk_score(
        self,
        athlete: Athlete,
        training: Optional[TrainingRiskSignal] = None,
        injury: Optional[InjuryRiskSignal] = None,
        performance: Optional[PerformanceRiskSignal] = None,
    ) -> RiskAssessment:
        return calculate_risk_score(athlete, training, injury, performance)

    async def get_risk_assessment(
        self, athlete_id: Optional[int] = None
    ) -> RiskAssessment | list[RiskAssessment]:
        """
        Risk assessment for one athlete, or for the whole roster.

        Args:
            athlete_id: Athlete to assess, or None for everyone

        Returns:
            A single RiskAssessment, or a list in roster order

        Raises:
            NotFoundError: If athlete_id does not match an athlete
        """
        if athlete_id is not None:
            athlete, training, injury, performance = await asyncio.gather(
                self.athletes.get_by_id(athlete_id),
                self.get_training_risk_data(athlete_id),
                self.get_injury_history(athlete_id),
                self.get_performance_risk_data(athlete_id),
            )
            return calculate_risk_score(athlete, training, injury, performance)

        athletes, sessions, injury, performance = await asyncio.gather(
            self.athletes.get_all(),
            self.training.get_all(),
            self.get_injury_history(),
            self.get_performance_risk_data(),
        )
        training = extract_training_signals(
            sessions, self.clock(), roster=[a.id for a in athletes]
        )
        assessments = [
            calculate_risk_score(
                athlete,
                training.get(athlete.id),
                injury.get(athlete.id),  # type: ignore[union-attr]
                performance.get(athlete.id),  # type: ignore[union-attr]
            )
            for athlete in athletes
        ]
        logger.info("Assessed risk for %d athletes", len(assessments))
        return assessments

    # Trends, forecasts and insights

    async def get_performance_records(
        self, athlete_id: Optional[int] = None
    ) -> list[PerformanceRecord]:
        """Performance records for one athlete, or for the whole squad."""
        if athlete_id is not None:
            return await self.performance.get_by_athlete_id(athlete_id)
        return await self.performance.get_all()

    async def get_trend_analysis(
        self,
        athlete_id: Optional[int] = None,
        metric: Optional[str] = None,
        periods: int = 6,
    ) -> TrendSeries | dict[str, TrendSeries]:
        """Trend series for one metric or all metrics, for an athlete or the squad."""
        records = await self.get_performance_records(athlete_id)
        return self.trend_engine.trend_analysis(records, metric, periods)

    async def get_performance_forecast(
        self, athlete_id: Optional[int] = None, forecast_periods: int = 3
    ) -> dict[str, Forecast]:
        """Forecasts for every metric, for an athlete or the squad."""
        records = await self.get_performance_records(athlete_id)
        return self.trend_engine.performance_forecast(records, forecast_periods)

    async def get_performance_insights(
        self, athlete_id: Optional[int] = None
    ) -> PerformanceInsights:
        """Summary, insights and recommendations for an athlete or the squad."""
        records = await self.get_performance_records(athlete_id)
        _, _, insights = self.analyze_performance(records)
        return insights

    def analyze_performance(
        self,
        records: list[PerformanceRecord],
        periods: int = 6,
        forecast_periods: int = 3,
    ) -> tuple[dict[str, TrendSeries], dict[str, Forecast], PerformanceInsights]:
        """
        Trends, forecasts and insights for every metric from one simulated history.

        Args:
            records: Performance records the current values come from
            periods: Number of historical periods per series
            forecast_periods: Number of periods to project

        Returns:
            Tuple of (trends by metric, forecasts by metric, insights)
        """
        trends: dict[str, TrendSeries] = self.trend_engine.trend_analysis(  # type: ignore[assignment]
            records, periods=periods
        )
        forecasts = {
            metric: self.trend_engine.forecast(series, forecast_periods)
            for metric, series in trends.items()
        }
        insights = synthesize_insights(current_metrics(records), trends, forecasts)
        return trends, forecasts, insights


def create_dashboard(
    seed: Optional[int] = None, latency_scale: Optional[float] = None
) -> TeamDashboard:
    """
    Build a dashboard backed by the fixture repositories.

    Args:
        seed: Seed for the synthetic trend history, None for random
        latency_scale: Latency multiplier, None to read TEAM_LATENCY_SCALE

    Returns:
        TeamDashboard over fresh in-memory repositories
    """
    repositories = {
        "athletes": AthleteStorage(latency_scale=latency_scale),
        "training": TrainingStorage(latency_scale=latency_scale),
        "health": HealthStorage(latency_scale=latency_scale),
        "performance": PerformanceStorage(latency_scale=latency_scale),
    }
    if seed is not None:
        return TeamDashboard.with_seed(seed, **repositories)
    return TeamDashboard(**repositories)
