"""Utility functions for Team Insights."""

from team_insights.utils.formatting import format_change, format_metric_name
from team_insights.utils.dates import (
    as_date,
    days_between,
    is_within_days,
    month_label,
)

__all__ = [
    "format_change",
    "format_metric_name",
    "as_date",
    "days_between",
    "is_within_days",
    "month_label",
]
