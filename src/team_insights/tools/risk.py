"""MCP tools for injury-risk assessment."""

from typing import Any, Optional

from team_insights.analysis.risk import (
    filter_assessments,
    risk_level_color,
    risk_level_text,
    summarize_assessments,
)
from team_insights.services.dashboard import TeamDashboard


def _dump_signals(result) -> Any:
    """Serialize a single signal or an athlete-keyed mapping of signals."""
    if isinstance(result, dict):
        return {str(athlete_id): s.model_dump(mode="json") for athlete_id, s in result.items()}
    return result.model_dump(mode="json")


def register_risk_tools(mcp, dashboard: TeamDashboard):
    """Register risk assessment MCP tools."""

    @mcp.tool()
    async def list_athletes() -> dict[str, Any]:
        """
        List the athletes on the roster.

        Returns:
            Dictionary containing athletes with id, name, position and jersey number
        """
        try:
            athletes = await dashboard.athletes.get_all()
            return {
                "data": {
                    "athletes": [a.model_dump(mode="json") for a in athletes],
                    "count": len(athletes),
                }
            }
        except Exception as e:
            return {"error": str(e)}

    @mcp.tool()
    async def get_risk_assessment(
        athlete_id: Optional[int] = None,
        risk_level: str = "all",
        search: str = "",
    ) -> dict[str, Any]:
        """
        Get injury-risk assessments.

        Each assessment combines a training-load score (0-40), an injury-history
        score (0-35) and a performance score (0-25) into a 0-100 risk score with
        a low/medium/high tier, the triggered risk factors and recommendations.

        Args:
            athlete_id: Assess a single athlete. Omit to assess the whole roster.
            risk_level: Roster filter: all, low, medium or high
            search: Roster filter on athlete name or position

        Returns:
            Dictionary with a single assessment, or roster assessments sorted by
            risk score (highest first) plus counts per tier
        """
        valid_levels = ["all", "low", "medium", "high"]
        if risk_level not in valid_levels:
            return {"error": f"Invalid risk_level. Must be one of: {valid_levels}"}

        try:
            if athlete_id is not None:
                assessment = await dashboard.get_risk_assessment(athlete_id)
                data = assessment.model_dump(mode="json")  # type: ignore[union-attr]
                data["risk_level_text"] = risk_level_text(data["risk_level"])
                data["risk_level_color"] = risk_level_color(data["risk_level"])
                return {"data": data}

            assessments = await dashboard.get_risk_assessment()
            filtered = filter_assessments(assessments, search, risk_level)  # type: ignore[arg-type]
            return {
                "data": {
                    "stats": summarize_assessments(assessments),  # type: ignore[arg-type]
                    "assessments": [a.model_dump(mode="json") for a in filtered],
                }
            }
        except Exception as e:
            return {"error": str(e)}

    @mcp.tool()
    async def get_training_risk_data(athlete_id: Optional[int] = None) -> dict[str, Any]:
        """
        Get training-load risk signals.

        Args:
            athlete_id: Single athlete, or omit for every athlete

        Returns:
            Dictionary with total load, session count, average intensity,
            30-day load and load-spike flag (keyed by athlete id for the roster)
        """
        try:
            return {"data": _dump_signals(await dashboard.get_training_risk_data(athlete_id))}
        except Exception as e:
            return {"error": str(e)}

    @mcp.tool()
    async def get_injury_history(athlete_id: Optional[int] = None) -> dict[str, Any]:
        """
        Get injury-history risk signals.

        Args:
            athlete_id: Single athlete, or omit for every athlete with injuries

        Returns:
            Dictionary with recent, severe and total injury counts and days since
            the last injury
        """
        try:
            return {"data": _dump_signals(await dashboard.get_injury_history(athlete_id))}
        except Exception as e:
            return {"error": str(e)}

    @mcp.tool()
    async def get_performance_risk_data(athlete_id: Optional[int] = None) -> dict[str, Any]:
        """
        Get performance risk signals.

        Args:
            athlete_id: Single athlete, or omit for every athlete with records

        Returns:
            Dictionary with average score, fatigue indicators, recent-decline flag
            and days since the last performance record
        """
        try:
            return {"data": _dump_signals(await dashboard.get_performance_risk_data(athlete_id))}
        except Exception as e:
            return {"error": str(e)}
