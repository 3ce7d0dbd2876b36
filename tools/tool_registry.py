#!/usr/bin/env python3
"""
Tool registry for the weather MCP server.
Centralizes tool registration.
"""

from mcp.server.fastmcp import FastMCP

from tools.alerts import register_alerts_tool
from tools.forecast import register_forecast_tool


def register_all_tools(app: FastMCP):
    """Register all weather tools with the FastMCP app."""
    register_alerts_tool(app)  # get-alerts
    register_forecast_tool(app)  # get-forecast
