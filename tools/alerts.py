#!/usr/bin/env python3
"""
Alerts tool for the weather server.
Provides active NWS alerts for a US state.
"""

import logging
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from utils.formatters import format_alert
from utils.nws import alerts_url, make_nws_request
from utils.nws_models import parse_alerts

tool_logger = logging.getLogger("mcp.tools")


async def get_alerts(
    state: Annotated[
        str,
        Field(
            min_length=2,
            max_length=2,
            description="Two-letter state code (e.g. CA, NY)",
        ),
    ],
) -> str:
    """Get weather alerts for a state."""
    state_code = state.upper()
    tool_logger.info("get-alerts: state=%s", state_code)

    alerts_data = await make_nws_request(alerts_url(state_code))
    if alerts_data is None:
        return "Failed to retrieve alerts data"

    alerts = parse_alerts(alerts_data)
    if not alerts:
        return f"No active alerts for {state_code}"

    formatted = "\n".join(format_alert(alert) for alert in alerts)
    return f"Active alerts for {state_code}:\n\n{formatted}"


def register_alerts_tool(app: FastMCP):
    """Register the alerts tool with the FastMCP app."""
    app.tool(name="get-alerts", description="Get weather alerts for a state")(
        get_alerts
    )
