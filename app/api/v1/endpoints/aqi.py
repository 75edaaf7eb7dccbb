import structlog
from fastapi import APIRouter, Query, status

from app.core.constants import ZIP_CODE_PATTERN
from app.core.exceptions import UpstreamServiceException
from app.dependencies import AirNowServiceDep
from app.schemas.aqi import AqiReading

router = APIRouter()
logger = structlog.get_logger(__name__)


@router.get(
    "/aqi",
    response_model=AqiReading | None,
    status_code=status.HTTP_200_OK,
    tags=["AQI"],
    summary="Get current AQI by ZIP code",
)
async def get_aqi(
    airnow: AirNowServiceDep,
    zipcode: str = Query(
        ..., pattern=f"^{ZIP_CODE_PATTERN.pattern}$", description="5-digit US ZIP code"
    ),
) -> AqiReading | None:
    """
    Fetch the current AirNow reading for a ZIP code.

    The body mirrors AirNow's own field names. It is ``null`` when AirNow
    has no data for the ZIP code or cannot be reached.

    Args:
        airnow: AirNow service
        zipcode: 5-digit ZIP code

    Returns:
        First AirNow entry for the ZIP code, or None
    """
    try:
        return await airnow.get_current_reading(zipcode)
    except UpstreamServiceException as e:
        logger.warning("aqi_lookup_failed", zip_code=zipcode, error=e.message)
        return None
