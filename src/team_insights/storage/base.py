"""Base storage class with data directory and latency configuration."""

import asyncio
import json
import logging
import os
from pathlib import Path
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel

from team_insights.errors import NotFoundError

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def get_data_dir() -> Path:
    """
    Get the directory holding the JSON record fixtures.

    Uses TEAM_DATA_DIR environment variable if set, otherwise defaults
    to the fixtures bundled with the package.

    Returns:
        Path to the data directory
    """
    env_dir = os.environ.get("TEAM_DATA_DIR")
    if env_dir:
        return Path(env_dir)
    return Path(__file__).parent.parent / "fixtures"


def get_latency_scale() -> float:
    """Multiplier for simulated latency, from TEAM_LATENCY_SCALE (default 1.0)."""
    raw = os.environ.get("TEAM_LATENCY_SCALE")
    if not raw:
        return 1.0
    try:
        return max(float(raw), 0.0)
    except ValueError as err:
        raise ValueError(f"Invalid TEAM_LATENCY_SCALE: {raw!r}") from err


class BaseStorage(Generic[RecordT]):
    """
    In-memory record store seeded from a JSON fixture.

    Every operation sleeps for a short, operation-specific delay to mimic a
    network round trip. Mutations only live for the lifetime of the instance.
    """

    model: type[RecordT]
    entity_name = "Record"

    # Seconds per operation before scaling
    LATENCY = {
        "get_all": 0.3,
        "get_by_id": 0.2,
        "query": 0.25,
        "create": 0.4,
        "update": 0.35,
        "delete": 0.25,
    }

    def __init__(
        self,
        filename: str,
        records: Optional[list[dict[str, Any]]] = None,
        latency_scale: Optional[float] = None,
    ):
        """
        Initialize storage from a fixture file or explicit records.

        Args:
            filename: Fixture file name within the data directory
            records: Raw records to use instead of the fixture file
            latency_scale: Latency multiplier; 0 disables the delay
        """
        if records is None:
            file_path = get_data_dir() / filename
            loaded = self._load_json(file_path)
            records = loaded if isinstance(loaded, list) else []
            logger.debug("Loaded %d %s records from %s", len(records), self.entity_name, file_path)
        self._records: list[RecordT] = [self.model.model_validate(r) for r in records]
        self.latency_scale = get_latency_scale() if latency_scale is None else latency_scale

    def _load_json(self, file_path: Path) -> dict[str, Any] | list[Any] | None:
        """Load JSON from a file, returning None if it doesn't exist."""
        if not file_path.exists():
            logger.warning("Fixture file not found: %s", file_path)
            return None
        try:
            with open(file_path, "r") as f:
                return json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning("Could not read fixture %s: %s", file_path, e)
            return None

    async def _delay(self, operation: str) -> None:
        seconds = self.LATENCY[operation] * self.latency_scale
        if seconds > 0:
            await asyncio.sleep(seconds)

    def _index_of(self, record_id: int) -> int:
        for index, record in enumerate(self._records):
            if record.id == record_id:  # type: ignore[attr-defined]
                return index
        raise NotFoundError(self.entity_name, record_id)

    def _copy(self, record: RecordT) -> RecordT:
        return record.model_copy(deep=True)

    async def get_all(self) -> list[RecordT]:
        """Return copies of every record."""
        await self._delay("get_all")
        return [self._copy(r) for r in self._records]

    async def get_by_id(self, record_id: int) -> RecordT:
        """
        Get a record by ID.

        Raises:
            NotFoundError: If no record has the given ID
        """
        await self._delay("get_by_id")
        return self._copy(self._records[self._index_of(int(record_id))])

    async def create(self, data: dict[str, Any]) -> RecordT:
        """
        Create a record with the next free ID.

        Raises:
            pydantic.ValidationError: If the data does not form a valid record
        """
        await self._delay("create")
        new_id = max((r.id for r in self._records), default=0) + 1  # type: ignore[attr-defined]
        record = self.model.model_validate({**data, "id": new_id})
        self._records.append(record)
        logger.debug("Created %s %d", self.entity_name, new_id)
        return self._copy(record)

    async def update(self, record_id: int, data: dict[str, Any]) -> RecordT:
        """
        Merge fields into an existing record and revalidate it.

        Raises:
            NotFoundError: If no record has the given ID
            pydantic.ValidationError: If the merged record is invalid
        """
        await self._delay("update")
        index = self._index_of(int(record_id))
        merged = {**self._records[index].model_dump(), **data, "id": int(record_id)}
        self._records[index] = self.model.model_validate(merged)
        return self._copy(self._records[index])

    async def delete(self, record_id: int) -> bool:
        """
        Delete a record by ID.

        Raises:
            NotFoundError: If no record has the given ID
        """
        await self._delay("delete")
        del self._records[self._index_of(int(record_id))]
        return True


class AthleteRecordStorage(BaseStorage[RecordT]):
    """Storage for records that belong to one athlete."""

    async def get_by_athlete_id(self, athlete_id: int) -> list[RecordT]:
        """Return copies of the records owned by an athlete."""
        await self._delay("query")
        return [
            self._copy(r) for r in self._records
            if r.athlete_id == int(athlete_id)  # type: ignore[attr-defined]
        ]
