"""Exceptions raised by the Team Insights repositories."""


class NotFoundError(LookupError):
    """Raised when no record matches the requested id."""

    def __init__(self, entity: str, record_id: int):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} not found: {record_id}")
