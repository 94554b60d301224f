"""MCP tools for Team Insights."""

from team_insights.tools.risk import register_risk_tools
from team_insights.tools.analytics import register_analytics_tools

__all__ = [
    "register_risk_tools",
    "register_analytics_tools",
]


def register_all_tools(mcp, dashboard):
    """Register all MCP tools with the server."""
    register_risk_tools(mcp, dashboard)
    register_analytics_tools(mcp, dashboard)
