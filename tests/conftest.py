import functools

import httpx
import pytest

from config import Config
from utils import http_client

BASE = Config.NWS_API_BASE.rstrip("/")


class FakeNWS:
    """Canned NWS responses keyed by absolute URL."""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, url, response):
        self.routes[url] = response

    def add_json(self, url, payload, status_code=200):
        self.add(url, httpx.Response(status_code, json=payload))

    def handler(self, request):
        self.requests.append(request)
        response = self.routes.get(str(request.url))
        if response is None:
            return httpx.Response(404, json={"title": "Not Found"})
        if callable(response):
            return response(request)
        return response


@pytest.fixture
def nws(monkeypatch):
    fake = FakeNWS()
    transport = httpx.MockTransport(fake.handler)
    monkeypatch.setattr(
        http_client,
        "create_http_client",
        functools.partial(http_client.create_http_client, transport=transport),
    )
    return fake
