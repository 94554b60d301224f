"""Service layer for Team Insights."""

from team_insights.services.dashboard import TeamDashboard, create_dashboard

__all__ = ["TeamDashboard", "create_dashboard"]
