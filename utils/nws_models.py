#!/usr/bin/env python3
"""
Data models for NWS API responses.
Every field is optional: the API omits fields freely and nothing here
validates the documents beyond picking values out of them.
"""

from dataclasses import dataclass
from typing import List, Optional, Union


def _properties(document):
    """Return the GeoJSON ``properties`` object of a document, or {}."""
    if not isinstance(document, dict):
        return {}
    props = document.get("properties")
    return props if isinstance(props, dict) else {}


def _list(value):
    return value if isinstance(value, list) else []


@dataclass(frozen=True)
class AlertRecord:
    """One active alert, taken from the properties of an alert feature."""

    event: Optional[str] = None
    area_desc: Optional[str] = None
    severity: Optional[str] = None
    status: Optional[str] = None
    headline: Optional[str] = None

    @classmethod
    def from_feature(cls, feature):
        props = _properties(feature)
        return cls(
            event=props.get("event"),
            area_desc=props.get("areaDesc"),
            severity=props.get("severity"),
            status=props.get("status"),
            headline=props.get("headline"),
        )


@dataclass(frozen=True)
class ForecastPeriod:
    """One named period (e.g. "Tonight") of a forecast document."""

    name: Optional[str] = None
    temperature: Optional[Union[int, float]] = None
    temperature_unit: Optional[str] = None
    wind_speed: Optional[str] = None
    wind_direction: Optional[str] = None
    short_forecast: Optional[str] = None

    @classmethod
    def from_dict(cls, period):
        if not isinstance(period, dict):
            period = {}
        return cls(
            name=period.get("name"),
            temperature=period.get("temperature"),
            temperature_unit=period.get("temperatureUnit"),
            wind_speed=period.get("windSpeed"),
            wind_direction=period.get("windDirection"),
            short_forecast=period.get("shortForecast"),
        )


@dataclass(frozen=True)
class GridPoint:
    """Result of a /points lookup; only the forecast locator is used."""

    forecast_url: Optional[str] = None

    @classmethod
    def from_document(cls, document):
        return cls(forecast_url=_properties(document).get("forecast"))


def parse_alerts(document) -> List[AlertRecord]:
    """Alert records of an /alerts response, empty when there are none."""
    features = document.get("features") if isinstance(document, dict) else None
    return [AlertRecord.from_feature(f) for f in _list(features)]


def parse_forecast_periods(document) -> List[ForecastPeriod]:
    """Periods of a forecast response, empty when there are none."""
    periods = _properties(document).get("periods")
    return [ForecastPeriod.from_dict(p) for p in _list(periods)]
