"""Training session storage."""

from datetime import date
from typing import Any, Optional

from team_insights.models.records import TrainingSession
from team_insights.storage.base import AthleteRecordStorage


class TrainingStorage(AthleteRecordStorage[TrainingSession]):
    """Storage for individual and team training sessions."""

    model = TrainingSession
    entity_name = "Training session"

    def __init__(
        self,
        records: Optional[list[dict[str, Any]]] = None,
        latency_scale: Optional[float] = None,
    ) -> None:
        """Initialize training storage from training.json."""
        super().__init__("training.json", records, latency_scale)

    async def get_by_athlete_id(
        self, athlete_id: int, include_team: bool = True
    ) -> list[TrainingSession]:
        """
        Get the sessions an athlete took part in.

        Args:
            athlete_id: The athlete's ID
            include_team: Whether whole-team sessions are included

        Returns:
            List of training sessions
        """
        await self._delay("query")
        return [
            self._copy(s) for s in self._records
            if s.athlete_id == int(athlete_id) or (include_team and s.is_team_session)
        ]

    async def get_by_date_range(self, start_date: date, end_date: date) -> list[TrainingSession]:
        """Get sessions dated between start_date and end_date, inclusive."""
        await self._delay("query")
        return [self._copy(s) for s in self._records if start_date <= s.date <= end_date]
