#!/usr/bin/env python3
"""
Text formatting for weather tool responses.
Turns alert records and forecast periods into fixed-layout text blocks.
"""

from decimal import Decimal

from utils.nws_models import AlertRecord, ForecastPeriod

SEPARATOR = "---"


def format_number(value):
    """Render a number in its shortest form: 40.0 -> "40", 40.5 -> "40.5"."""
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        # positional notation, never "5e-05"
        return f"{Decimal(repr(value)):f}"
    return str(value)


def format_alert(record: AlertRecord) -> str:
    """Format one alert as a 6-line block ending in a separator."""
    return "\n".join(
        [
            f"Event: {record.event or 'Unknown'}",
            f"Area: {record.area_desc or 'Unknown'}",
            f"Severity: {record.severity or 'Unknown'}",
            f"Status: {record.status or 'Unknown'}",
            f"Headline: {record.headline or 'No headline'}",
            SEPARATOR,
        ]
    )


def format_period(period: ForecastPeriod) -> str:
    """Format one forecast period as a 5-line block ending in a separator."""
    temperature = format_number(period.temperature) if period.temperature else "Unknown"
    return "\n".join(
        [
            f"{period.name or 'Unknown'}:",
            f"Temperature: {temperature}°{period.temperature_unit or 'F'}",
            f"Wind: {period.wind_speed or 'Unknown'} {period.wind_direction or ''}",
            period.short_forecast or "No forecast available",
            SEPARATOR,
        ]
    )
