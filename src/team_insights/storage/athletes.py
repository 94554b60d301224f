"""Athlete roster storage."""

from typing import Any, Optional

from team_insights.models.records import Athlete
from team_insights.storage.base import BaseStorage


class AthleteStorage(BaseStorage[Athlete]):
    """Storage for the athlete roster."""

    model = Athlete
    entity_name = "Athlete"

    def __init__(
        self,
        records: Optional[list[dict[str, Any]]] = None,
        latency_scale: Optional[float] = None,
    ) -> None:
        """Initialize athlete storage from athletes.json."""
        super().__init__("athletes.json", records, latency_scale)
