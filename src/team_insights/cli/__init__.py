"""CLI tools for Team Insights."""

from team_insights.cli.performance_report import main as performance_report_main
from team_insights.cli.risk_report import main as risk_report_main

__all__ = [
    "performance_report_main",
    "risk_report_main",
]
