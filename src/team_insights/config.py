"""Environment-driven settings for the entry points."""

import logging
import os
from typing import Optional


def configure_logging() -> None:
    """Configure root logging from TEAM_LOG_LEVEL (default INFO)."""
    logging.basicConfig(
        level=os.environ.get("TEAM_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def get_trend_seed() -> Optional[int]:
    """Seed for the simulated trend history from TEAM_TREND_SEED, if set."""
    raw = os.environ.get("TEAM_TREND_SEED")
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as err:
        raise ValueError(f"Invalid TEAM_TREND_SEED: {raw!r}") from err
