#!/usr/bin/env python3
"""
MCP server for team injury-risk and performance insights.
This server exposes risk assessments, trends, forecasts and insights as tools.
"""

import logging

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

from team_insights.config import configure_logging, get_trend_seed
from team_insights.services.dashboard import create_dashboard
from team_insights.tools import register_all_tools

load_dotenv()

logger = logging.getLogger(__name__)

mcp = FastMCP("Team Insights MCP Server")


def main() -> None:
    """Main function to start the Team Insights MCP server."""
    configure_logging()

    dashboard = create_dashboard(seed=get_trend_seed())
    register_all_tools(mcp, dashboard)

    logger.info("Starting Team Insights MCP server")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
