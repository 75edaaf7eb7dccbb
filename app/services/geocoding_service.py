"""Geocoding through OpenStreetMap Nominatim."""

from typing import Any

import httpx
import structlog
from pydantic import ValidationError

from app.config import settings
from app.core.exceptions import UpstreamServiceException
from app.schemas.aqi import GeoPoint

logger = structlog.get_logger(__name__)


class GeocodingService:
    """Forward (city/state -> point) and reverse (point -> postcode) lookups."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str | None = None,
        user_agent: str | None = None,
    ):
        self.client = client
        self.base_url = (base_url or settings.nominatim_base_url).rstrip("/")
        # Nominatim's usage policy requires an identifying User-Agent
        self.headers = {"User-Agent": user_agent or settings.nominatim_user_agent}

    async def _get_json(self, path: str, params: dict[str, Any]) -> Any:
        try:
            response = await self.client.get(
                f"{self.base_url}{path}", params=params, headers=self.headers
            )
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise UpstreamServiceException("Nominatim", f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise UpstreamServiceException("Nominatim", e.__class__.__name__) from e
        except ValueError as e:
            raise UpstreamServiceException("Nominatim", "response is not valid JSON") from e

    async def search_city(self, city: str, state: str | None = None) -> GeoPoint | None:
        """
        Look up the coordinates of a city, optionally narrowed by state.

        Args:
            city: City name
            state: State name or abbreviation; omitted from the query when empty

        Returns:
            Coordinates of the first candidate, or None if there is no
            candidate with a usable latitude/longitude pair

        Raises:
            UpstreamServiceException: If Nominatim cannot be reached
        """
        params = {"city": city}
        if state:
            params["state"] = state
        params["format"] = "json"

        results = await self._get_json("/search", params)
        if not isinstance(results, list) or not results:
            return None

        first = results[0]
        if not isinstance(first, dict):
            return None

        try:
            return GeoPoint(latitude=first.get("lat"), longitude=first.get("lon"))
        except ValidationError:
            return None

    async def reverse_postcode(self, point: GeoPoint) -> str | None:
        """
        Find the 5-character postcode for a point.

        Longer postal codes (ZIP+4) are truncated. Returns None when the
        address has no postcode of at least five characters.

        Raises:
            UpstreamServiceException: If Nominatim cannot be reached
        """
        result = await self._get_json(
            "/reverse",
            {"lat": point.latitude, "lon": point.longitude, "format": "json"},
        )
        if not isinstance(result, dict):
            return None

        address = result.get("address")
        if not isinstance(address, dict):
            return None

        postcode = str(address.get("postcode") or "")[:5]
        if len(postcode) != 5:
            return None
        return postcode
