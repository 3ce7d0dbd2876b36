#!/usr/bin/env python3
"""
Forecast tool for the weather server.
Provides the NWS forecast for a coordinate. The NWS only covers US
locations, and a forecast is found in two steps: the coordinate is first
resolved to a grid point, whose document links to the forecast.
"""

import logging
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from utils.formatters import format_number, format_period
from utils.nws import make_nws_request, points_url
from utils.nws_models import GridPoint, parse_forecast_periods

tool_logger = logging.getLogger("mcp.tools")


async def get_forecast(
    latitude: Annotated[
        float, Field(ge=-90, le=90, description="Latitude of the location")
    ],
    longitude: Annotated[
        float, Field(ge=-180, le=180, description="Longitude of the location")
    ],
) -> str:
    """Get weather forecast for a location."""
    lat, lon = format_number(latitude), format_number(longitude)
    tool_logger.info("get-forecast: latitude=%s longitude=%s", lat, lon)

    points_data = await make_nws_request(points_url(latitude, longitude))
    if points_data is None:
        return (
            f"Failed to retrieve grid point data for coordinates: {lat}, {lon}. "
            "This location may not be supported by the NWS API "
            "(only US locations are supported)."
        )

    forecast_url = GridPoint.from_document(points_data).forecast_url
    if not forecast_url:
        return "Failed to get forecast URL from grid point data"

    forecast_data = await make_nws_request(forecast_url)
    if forecast_data is None:
        return "Failed to retrieve forecast data"

    periods = parse_forecast_periods(forecast_data)
    if not periods:
        return "No forecast periods available"

    formatted = "\n".join(format_period(period) for period in periods)
    return f"Forecast for {lat}, {lon}:\n\n{formatted}"


def register_forecast_tool(app: FastMCP):
    """Register the forecast tool with the FastMCP app."""
    app.tool(name="get-forecast", description="Get weather forecast for a location")(
        get_forecast
    )
