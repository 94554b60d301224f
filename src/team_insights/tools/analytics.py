"""MCP tools for performance trends, forecasts and insights."""

from typing import Any, Optional

from team_insights.analysis.trends import METRICS
from team_insights.services.dashboard import TeamDashboard


def register_analytics_tools(mcp, dashboard: TeamDashboard):
    """Register trend, forecast and insight MCP tools."""

    @mcp.tool()
    async def get_trend_analysis(
        athlete_id: Optional[int] = None,
        metric: Optional[str] = None,
        periods: int = 6,
    ) -> dict[str, Any]:
        """
        Get historical trend series for performance metrics.

        The history is simulated around each metric's current value, so values
        differ between calls.

        Args:
            athlete_id: Single athlete, or omit for the whole squad
            metric: One of goals, assists, pass_accuracy, sprint_time, endurance,
                    technical_skills. Omit for all metrics.
            periods: Number of monthly periods (default: 6)

        Returns:
            Dictionary with per-period values and change, average, min, max,
            volatility and trend direction
        """
        if metric is not None and metric not in METRICS:
            return {"error": f"Invalid metric. Must be one of: {METRICS}"}
        if periods < 1:
            return {"error": "periods must be at least 1"}

        try:
            result = await dashboard.get_trend_analysis(athlete_id, metric, periods)
            if isinstance(result, dict):
                return {"data": {m: s.model_dump(mode="json") for m, s in result.items()}}
            return {"data": result.model_dump(mode="json")}
        except Exception as e:
            return {"error": str(e)}

    @mcp.tool()
    async def get_performance_forecast(
        athlete_id: Optional[int] = None, forecast_periods: int = 3
    ) -> dict[str, Any]:
        """
        Get linear-regression forecasts for every performance metric.

        Confidence drops 10 points per period ahead (never below 60%).

        Args:
            athlete_id: Single athlete, or omit for the whole squad
            forecast_periods: Number of periods to project (default: 3)

        Returns:
            Dictionary keyed by metric with predictions, confidence, ranges and
            a reliability label
        """
        if forecast_periods < 1:
            return {"error": "forecast_periods must be at least 1"}

        try:
            forecasts = await dashboard.get_performance_forecast(athlete_id, forecast_periods)
            return {"data": {m: f.model_dump(mode="json") for m, f in forecasts.items()}}
        except Exception as e:
            return {"error": str(e)}

    @mcp.tool()
    async def get_performance_insights(athlete_id: Optional[int] = None) -> dict[str, Any]:
        """
        Get prioritized performance insights.

        Args:
            athlete_id: Single athlete, or omit for the whole squad

        Returns:
            Dictionary with a summary (overall trend, improving and declining
            metrics, forecast confidence), up to five insights and general
            recommendations
        """
        try:
            insights = await dashboard.get_performance_insights(athlete_id)
            return {"data": insights.model_dump(mode="json")}
        except Exception as e:
            return {"error": str(e)}
