"""Performance record storage."""

from datetime import date
from typing import Any, Optional

from team_insights.models.records import PerformanceRecord
from team_insights.storage.base import AthleteRecordStorage


class PerformanceStorage(AthleteRecordStorage[PerformanceRecord]):
    """Storage for performance records."""

    model = PerformanceRecord
    entity_name = "Performance record"

    def __init__(
        self,
        records: Optional[list[dict[str, Any]]] = None,
        latency_scale: Optional[float] = None,
    ) -> None:
        """Initialize performance storage from performance.json."""
        super().__init__("performance.json", records, latency_scale)

    async def get_by_date_range(
        self,
        start_date: date,
        end_date: date,
        athlete_id: Optional[int] = None,
    ) -> list[PerformanceRecord]:
        """
        Get performance records dated between start_date and end_date, inclusive.

        Args:
            start_date: First day of the range
            end_date: Last day of the range
            athlete_id: Optional athlete to restrict the records to

        Returns:
            List of performance records
        """
        await self._delay("query")
        return [
            self._copy(p) for p in self._records
            if start_date <= p.date <= end_date
            and (athlete_id is None or p.athlete_id == int(athlete_id))
        ]
