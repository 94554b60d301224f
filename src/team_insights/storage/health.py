"""Health record storage."""

from typing import Any, Optional

from team_insights.models.records import HealthRecord
from team_insights.storage.base import AthleteRecordStorage


class HealthStorage(AthleteRecordStorage[HealthRecord]):
    """Storage for health and injury records."""

    model = HealthRecord
    entity_name = "Health record"

    def __init__(
        self,
        records: Optional[list[dict[str, Any]]] = None,
        latency_scale: Optional[float] = None,
    ) -> None:
        """Initialize health storage from health.json."""
        super().__init__("health.json", records, latency_scale)
