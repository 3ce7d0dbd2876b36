#!/usr/bin/env python3
"""
National Weather Service API access for the weather server.
This is the only place that performs outbound network I/O.
"""

import logging

import httpx

from config import Config
from utils import http_client

logger = logging.getLogger("weather.nws")


def alerts_url(state_code):
    """URL of the active alerts query for a state code."""
    return Config.api_url(f"alerts?area={state_code}")


def points_url(latitude, longitude):
    """URL of the grid point lookup; coordinates are fixed to 4 decimals."""
    return Config.api_url(f"points/{latitude:.4f},{longitude:.4f}")


async def make_nws_request(url):
    """
    GET a NWS resource and return the decoded JSON body.

    Network failures, non-2xx statuses and undecodable bodies are logged
    and reported as None. The body is not checked against any shape.
    """
    try:
        async with http_client.create_http_client() as client:
            response = await client.get(url)
            response.raise_for_status()
            return response.json()
    except httpx.HTTPStatusError as e:
        logger.error(
            "Error making NWS request: HTTP error! status: %s (%s)",
            e.response.status_code,
            url,
        )
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.error("Error making NWS request to %s: %s", url, e)
    except ValueError as e:
        logger.error("Error decoding NWS response from %s: %s", url, e)
    return None
