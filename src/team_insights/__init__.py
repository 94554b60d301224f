"""Injury-risk scoring, performance trends and insights for team dashboards."""

__version__ = "0.1.0"
