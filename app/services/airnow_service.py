"""AirNow service for current AQI lookups by ZIP code."""

from typing import Any

import httpx
import structlog
from pydantic import ValidationError

from app.config import settings
from app.core.exceptions import UpstreamServiceException
from app.schemas.aqi import AqiReading

logger = structlog.get_logger(__name__)


class AirNowService:
    """Client for the EPA AirNow forecast-by-ZIP API."""

    FORECAST_PATH = "/aq/forecast/zipCode/"

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: str | None = None,
        base_url: str | None = None,
        distance: int | None = None,
    ):
        self.client = client
        self.api_key = api_key or settings.airnow_api_key
        self.base_url = (base_url or settings.airnow_base_url).rstrip("/")
        self.distance = distance or settings.airnow_search_distance

    async def get_forecast(self, zip_code: str) -> list[Any]:
        """
        Fetch the raw AirNow forecast entries for a ZIP code.

        Args:
            zip_code: 5-digit US ZIP code

        Returns:
            List of forecast entries as returned by AirNow

        Raises:
            UpstreamServiceException: On transport errors, non-2xx responses
                or a body that is not a JSON array
        """
        params = {
            "format": "application/json",
            "zipCode": zip_code,
            "distance": self.distance,
            "API_KEY": self.api_key,
        }
        try:
            response = await self.client.get(f"{self.base_url}{self.FORECAST_PATH}", params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            # The request URL carries the API key, so only the status is kept
            raise UpstreamServiceException("AirNow", f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise UpstreamServiceException("AirNow", e.__class__.__name__) from e
        except ValueError as e:
            raise UpstreamServiceException("AirNow", "response is not valid JSON") from e

        if not isinstance(data, list):
            raise UpstreamServiceException("AirNow", "expected a JSON array")

        return data

    async def get_current_reading(self, zip_code: str) -> AqiReading | None:
        """
        Return the first forecast entry for a ZIP code.

        Returns ``None`` when AirNow has no entries or the first one is
        malformed. Transport failures propagate as ``UpstreamServiceException``.
        """
        entries = await self.get_forecast(zip_code)
        if not entries or not entries[0]:
            logger.info("airnow_no_results", zip_code=zip_code)
            return None

        try:
            return AqiReading.model_validate(entries[0])
        except ValidationError as e:
            logger.warning("airnow_malformed_entry", zip_code=zip_code, errors=e.error_count())
            return None

    async def load_initial_props(self, zip_code: str | None) -> dict[str, Any]:
        """
        Build the initial page properties for a ZIP code carried in the URL.

        Never raises: a missing ZIP code, an empty result or any upstream
        failure yields an empty dict so the page falls back to its defaults.
        """
        if not zip_code:
            return {}

        try:
            reading = await self.get_current_reading(zip_code)
        except UpstreamServiceException as e:
            logger.warning("initial_load_failed", zip_code=zip_code, error=e.message)
            return {}

        if reading is None:
            return {}

        return {
            "aqi": reading.aqi,
            "category_number": reading.category.number,
            "category_name": reading.category.name,
            "city_state": reading.city_state,
            "zip_code": zip_code,
        }
