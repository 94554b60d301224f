"""
Risk signal extractors.

Each extractor groups raw records by athlete and reduces them to the
aggregate the risk scorer consumes. Extractors never decide how missing data
is scored: an athlete without records gets a default signal whose
``has_data`` is False, and the scorer picks the penalty.
"""

import logging
from collections import defaultdict
from datetime import date, datetime
from typing import Iterable, Optional

from team_insights.models.records import HealthRecord, PerformanceRecord, TrainingSession
from team_insights.models.risk import (
    InjuryRiskSignal,
    PerformanceRiskSignal,
    TrainingRiskSignal,
)
from team_insights.utils.dates import days_between, is_within_days

logger = logging.getLogger(__name__)

RECENT_LOAD_DAYS = 30
LOAD_SPIKE_RATIO = 1.5

RECENT_INJURY_DAYS = 180
SEVERE_SEVERITIES = {"severe", "major"}

FATIGUE_SCORE_THRESHOLD = 60
DECLINE_WINDOW = 5
DECLINE_MIN_RECORDS = 3
DECLINE_RATIO = 0.85


# Training load

def _training_signal(
    athlete_id: int, sessions: list[TrainingSession], now: date | datetime
) -> TrainingRiskSignal:
    total_load = sum(s.intensity for s in sessions)
    session_count = len(sessions)
    avg_intensity = total_load / session_count if session_count else 0
    recent_load = sum(
        s.intensity for s in sessions if is_within_days(s.date, now, RECENT_LOAD_DAYS)
    )
    return TrainingRiskSignal(
        athlete_id=athlete_id,
        total_load=total_load,
        session_count=session_count,
        avg_intensity=avg_intensity,
        recent_load=recent_load,
        load_spike=recent_load > avg_intensity * LOAD_SPIKE_RATIO,
    )


def extract_training_signals(
    sessions: Iterable[TrainingSession],
    now: date | datetime,
    roster: Optional[Iterable[int]] = None,
) -> dict[int, TrainingRiskSignal]:
    """
    Build training-load signals for every athlete.

    Team sessions (no athlete_id) count for every athlete in the roster and
    every athlete that appears on an individual session.

    Args:
        sessions: Training sessions to aggregate
        now: Reference point for the recent-load window
        roster: Athlete IDs that should receive team sessions

    Returns:
        Mapping of athlete ID to signal
    """
    individual: dict[int, list[TrainingSession]] = defaultdict(list)
    team: list[TrainingSession] = []
    for session in sessions:
        if session.is_team_session:
            team.append(session)
        else:
            individual[session.athlete_id].append(session)  # type: ignore[index]

    athlete_ids = set(individual)
    if roster is not None:
        athlete_ids.update(roster)

    return {
        athlete_id: _training_signal(athlete_id, individual.get(athlete_id, []) + team, now)
        for athlete_id in sorted(athlete_ids)
    }


def extract_training_signal(
    sessions: Iterable[TrainingSession], athlete_id: int, now: date | datetime
) -> TrainingRiskSignal:
    """Training-load signal for one athlete (team sessions included)."""
    own = [s for s in sessions if s.athlete_id == athlete_id or s.is_team_session]
    return _training_signal(athlete_id, own, now)


# Injury history

def _is_severe(record: HealthRecord) -> bool:
    return (record.severity or "").lower() in SEVERE_SEVERITIES


def _injury_signal(
    athlete_id: int, records: list[HealthRecord], now: date | datetime
) -> InjuryRiskSignal:
    injuries = [r for r in records if r.is_injury]
    if not injuries:
        return InjuryRiskSignal(athlete_id=athlete_id)

    last_injury_date = max(r.date for r in injuries)
    return InjuryRiskSignal(
        athlete_id=athlete_id,
        recent_injuries=sum(
            1 for r in injuries if is_within_days(r.date, now, RECENT_INJURY_DAYS)
        ),
        severe_injuries=sum(1 for r in injuries if _is_severe(r)),
        total_injuries=len(injuries),
        last_injury_date=last_injury_date,
        days_since_last_injury=days_between(last_injury_date, now),
    )


def extract_injury_signals(
    records: Iterable[HealthRecord], now: date | datetime
) -> dict[int, InjuryRiskSignal]:
    """
    Build injury-history signals keyed by athlete ID.

    Only athletes with at least one injury record appear in the mapping.
    """
    grouped: dict[int, list[HealthRecord]] = defaultdict(list)
    for record in records:
        if record.is_injury:
            grouped[record.athlete_id].append(record)
    return {
        athlete_id: _injury_signal(athlete_id, athlete_records, now)
        for athlete_id, athlete_records in sorted(grouped.items())
    }


def extract_injury_signal(
    records: Iterable[HealthRecord], athlete_id: int, now: date | datetime
) -> InjuryRiskSignal:
    """Injury-history signal for one athlete, empty when they have no injuries."""
    return _injury_signal(athlete_id, [r for r in records if r.athlete_id == athlete_id], now)


# Performance

def _performance_signal(
    athlete_id: int, records: list[PerformanceRecord], now: date | datetime
) -> PerformanceRiskSignal:
    if not records:
        return PerformanceRiskSignal(athlete_id=athlete_id)

    ordered = sorted(records, key=lambda r: r.date)
    scores = [r.overall_score for r in ordered]
    avg_score = sum(scores) / len(scores)

    recent_decline = False
    if len(scores) >= DECLINE_MIN_RECORDS:
        latest = scores[-DECLINE_WINDOW:]
        recent_decline = sum(latest) / len(latest) < avg_score * DECLINE_RATIO

    last_performance_date = ordered[-1].date
    return PerformanceRiskSignal(
        athlete_id=athlete_id,
        record_count=len(scores),
        avg_score=avg_score,
        fatigue_indicators=sum(1 for s in scores if s < FATIGUE_SCORE_THRESHOLD),
        recent_decline=recent_decline,
        last_performance_date=last_performance_date,
        days_since_last_performance=days_between(last_performance_date, now),
    )


def extract_performance_signals(
    records: Iterable[PerformanceRecord], now: date | datetime
) -> dict[int, PerformanceRiskSignal]:
    """Build performance signals keyed by athlete ID."""
    grouped: dict[int, list[PerformanceRecord]] = defaultdict(list)
    for record in records:
        grouped[record.athlete_id].append(record)
    signals = {
        athlete_id: _performance_signal(athlete_id, athlete_records, now)
        for athlete_id, athlete_records in sorted(grouped.items())
    }
    logger.debug("Extracted performance signals for %d athletes", len(signals))
    return signals


def extract_performance_signal(
    records: Iterable[PerformanceRecord], athlete_id: int, now: date | datetime
) -> PerformanceRiskSignal:
    """Performance signal for one athlete, empty when they have no records."""
    return _performance_signal(
        athlete_id, [r for r in records if r.athlete_id == athlete_id], now
    )
