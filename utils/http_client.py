#!/usr/bin/env python3
"""
HTTP client utilities for the weather server.
Builds httpx clients with the configured timeouts and NWS headers.
"""

import httpx

from config import Config


def create_http_client(transport: httpx.AsyncBaseTransport = None) -> httpx.AsyncClient:
    """Create a new HTTP client; the caller owns it and must close it."""
    timeout = httpx.Timeout(Config.HTTP_TIMEOUT, connect=Config.HTTP_CONNECT_TIMEOUT)
    return httpx.AsyncClient(
        timeout=timeout, headers=Config.nws_headers(), transport=transport
    )
