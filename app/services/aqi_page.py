"""AQI page state and the submit pipeline that drives it."""

import httpx
import structlog
from pydantic import ValidationError

from app.config import settings
from app.core.constants import is_zip_code
from app.core.exceptions import UpstreamServiceException
from app.schemas.aqi import AqiPageState, AqiReading, GeoPoint
from app.services.geocoding_service import GeocodingService

logger = structlog.get_logger(__name__)


class AqiPage:
    """
    Resolves user input into a ZIP code and loads its AQI into the page state.

    Input is resolved through an ordered chain of steps:
    city/state -> coordinates -> postcode -> AQI reading. Each step yields a
    value or None, and None ends the chain without touching the state.
    Failures are never raised out of the public handlers.
    """

    def __init__(
        self,
        internal_client: httpx.AsyncClient,
        geocoder: GeocodingService,
        state: AqiPageState | None = None,
    ):
        self.internal_client = internal_client
        self.geocoder = geocoder
        self.state = state or AqiPageState()
        # Set after a successful fetch; the rendered page pushes it into history
        self.history_url: str | None = None

    async def submit_zip(self, raw_input: str) -> None:
        """Handle a form submission: a ZIP code, or "City, State" text otherwise."""
        if is_zip_code(raw_input):
            await self.fetch_aqi_for_zip(raw_input)
        else:
            await self.resolve_city_to_zip(raw_input)

    async def fetch_aqi_for_zip(self, zip_code: str) -> None:
        """
        Load the AQI for a ZIP code into the page state.

        On failure the display fields are cleared but ``zip_code`` keeps its
        previous value.
        """
        reading = await self._request_reading(zip_code)
        if reading is None:
            self.state.clear_reading()
            return

        self.state.apply_reading(reading, zip_code)
        self.history_url = f"/{zip_code}"

    async def resolve_city_to_zip(self, text: str) -> None:
        """Geocode "City, State" text and continue with its coordinates."""
        city, _, state = text.partition(",")
        point = await self._geocode_city(city.strip(), state.strip())
        if point is None:
            return
        await self.resolve_coords_to_zip(point)

    async def resolve_coords_to_zip(self, point: GeoPoint) -> None:
        """Reverse-geocode a point and load the AQI of its postcode."""
        zip_code = await self._reverse_geocode(point)
        if zip_code is None:
            return
        await self.fetch_aqi_for_zip(zip_code)

    async def _request_reading(self, zip_code: str) -> AqiReading | None:
        try:
            response = await self.internal_client.get(
                f"{settings.api_prefix}/aqi", params={"zipcode": zip_code}
            )
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("aqi_fetch_failed", zip_code=zip_code, error=str(e))
            return None

        if not data:
            return None

        try:
            return AqiReading.model_validate(data)
        except ValidationError:
            logger.warning("aqi_fetch_malformed", zip_code=zip_code)
            return None

    async def _geocode_city(self, city: str, state: str) -> GeoPoint | None:
        try:
            return await self.geocoder.search_city(city, state or None)
        except UpstreamServiceException as e:
            logger.warning("geocode_failed", city=city, state=state, error=e.message)
            return None

    async def _reverse_geocode(self, point: GeoPoint) -> str | None:
        try:
            return await self.geocoder.reverse_postcode(point)
        except UpstreamServiceException as e:
            logger.warning(
                "reverse_geocode_failed",
                latitude=point.latitude,
                longitude=point.longitude,
                error=e.message,
            )
            return None
