"""FastAPI dependencies."""

from collections.abc import AsyncGenerator
from typing import Annotated

import httpx
from fastapi import Depends, Request

from app.config import settings
from app.services.airnow_service import AirNowService
from app.services.geocoding_service import GeocodingService


def get_http_client(request: Request) -> httpx.AsyncClient:
    """
    Get the shared outbound HTTP client created during application startup.

    Args:
        request: Request object

    Returns:
        Shared httpx client
    """
    return request.app.state.http_client


async def get_internal_client(request: Request) -> AsyncGenerator[httpx.AsyncClient, None]:
    """
    Yield a client that calls this application's own API in-process.

    Args:
        request: Request object

    Yields:
        httpx client bound to the running app through ASGITransport
    """
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=request.app),
        base_url=settings.internal_base_url,
        **settings.http_client_options,
    ) as client:
        yield client


HttpClientDep = Annotated[httpx.AsyncClient, Depends(get_http_client)]
InternalClientDep = Annotated[httpx.AsyncClient, Depends(get_internal_client)]


def get_airnow_service(client: HttpClientDep) -> AirNowService:
    """Get AirNow service instance."""
    return AirNowService(client)


def get_geocoding_service(client: HttpClientDep) -> GeocodingService:
    """Get geocoding service instance."""
    return GeocodingService(client)


AirNowServiceDep = Annotated[AirNowService, Depends(get_airnow_service)]
GeocodingServiceDep = Annotated[GeocodingService, Depends(get_geocoding_service)]
