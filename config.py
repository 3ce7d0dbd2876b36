#!/usr/bin/env python3
"""
Configuration module for the Weather MCP server.
Centralizes NWS API settings, HTTP settings, and logging options.
"""

import os


class Config:
    """Configuration class for weather server settings."""

    # Server Settings
    SERVER_NAME = "weather"
    SERVER_VERSION = "1.0.0"

    # NWS API Settings
    NWS_API_BASE = os.getenv("NWS_API_BASE", "https://api.weather.gov")
    USER_AGENT = os.getenv("NWS_USER_AGENT", "weather-app/1.0")
    ACCEPT = "application/geo+json"

    # HTTP Settings
    HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "20.0"))
    HTTP_CONNECT_TIMEOUT = float(os.getenv("HTTP_CONNECT_TIMEOUT", "10.0"))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE = os.getenv("WEATHER_LOG_FILE")
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @classmethod
    def nws_headers(cls):
        """Headers sent with every NWS request."""
        return {"User-Agent": cls.USER_AGENT, "Accept": cls.ACCEPT}

    @classmethod
    def api_url(cls, path):
        """Join a path onto the NWS API base URL."""
        return f"{cls.NWS_API_BASE.rstrip('/')}/{path.lstrip('/')}"
