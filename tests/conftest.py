import os

# Settings require an AirNow key; tests never reach the real API
os.environ.setdefault("AIRNOW_API_KEY", "test-airnow-key")

from collections.abc import AsyncGenerator
from typing import Any

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.dependencies import get_http_client
from app.main import app


class FakeUpstream:
    """Serves canned AirNow and Nominatim responses through httpx.MockTransport."""

    FORECAST_PATH = "/aq/forecast/zipCode/"
    SEARCH_PATH = "/search"
    REVERSE_PATH = "/reverse"

    def __init__(self) -> None:
        self.forecasts: dict[str, Any] = {}
        self.search_results: Any = []
        self.reverse_result: Any = {}
        self.failing_paths: set[str] = set()
        self.error_statuses: dict[str, int] = {}
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path in self.failing_paths:
            raise httpx.ConnectError("connection refused", request=request)
        if path in self.error_statuses:
            return httpx.Response(self.error_statuses[path], text="error")
        if path == self.FORECAST_PATH:
            return httpx.Response(200, json=self.forecasts.get(request.url.params["zipCode"], []))
        if path == self.SEARCH_PATH:
            return httpx.Response(200, json=self.search_results)
        if path == self.REVERSE_PATH:
            return httpx.Response(200, json=self.reverse_result)
        return httpx.Response(404)

    def requests_to(self, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest_asyncio.fixture
async def http_client(upstream: FakeUpstream) -> AsyncGenerator[AsyncClient, None]:
    """Outbound client wired to the fake upstream APIs."""
    async with AsyncClient(transport=httpx.MockTransport(upstream.handler)) as client:
        yield client


@pytest_asyncio.fixture
async def client(http_client: AsyncClient) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""
    app.dependency_overrides[get_http_client] = lambda: http_client

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def nyc_forecast() -> list[dict]:
    """AirNow forecast response for 10001."""
    return [
        {
            "DateIssued": "2024-05-01 ",
            "DateForecast": "2024-05-01 ",
            "ReportingArea": "NYC",
            "StateCode": "NY",
            "Latitude": 40.8419,
            "Longitude": -73.8359,
            "ParameterName": "PM2.5",
            "AQI": 42,
            "Category": {"Number": 1, "Name": "Good"},
            "ActionDay": False,
        },
        {
            "DateIssued": "2024-05-01 ",
            "DateForecast": "2024-05-02 ",
            "ReportingArea": "NYC",
            "StateCode": "NY",
            "ParameterName": "PM2.5",
            "AQI": 61,
            "Category": {"Number": 2, "Name": "Moderate"},
        },
    ]


@pytest.fixture
def chicago_forecast() -> list[dict]:
    """AirNow forecast response for 60601."""
    return [
        {
            "ReportingArea": "Chicago",
            "StateCode": "IL",
            "AQI": 112,
            "Category": {"Number": 3, "Name": "Unhealthy for Sensitive Groups"},
        }
    ]
