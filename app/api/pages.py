"""Server-rendered AQI page."""

from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Form, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.core.constants import is_zip_code
from app.dependencies import AirNowServiceDep, GeocodingServiceDep, InternalClientDep
from app.schemas.aqi import AqiPageState, GeoPoint
from app.services.aqi_page import AqiPage

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

router = APIRouter(include_in_schema=False)
templates = Jinja2Templates(directory=TEMPLATES_DIR)


def render_page(
    request: Request,
    state: AqiPageState,
    history_url: str | None = None,
) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "index.html",
        {"page": state, "history_url": history_url},
    )


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    airnow: AirNowServiceDep,
    zipcode: str | None = Query(default=None),
) -> HTMLResponse:
    """Render the page, pre-populated when a ``zipcode`` query parameter is given."""
    props = await airnow.load_initial_props(zipcode)
    return render_page(request, AqiPageState(**props))


@router.get("/{zipcode}", response_class=HTMLResponse)
async def zip_page(request: Request, zipcode: str, airnow: AirNowServiceDep) -> HTMLResponse:
    """Render the page for the ZIP code in the path; any other path gets the defaults."""
    if not is_zip_code(zipcode):
        return render_page(request, AqiPageState())

    props = await airnow.load_initial_props(zipcode)
    return render_page(request, AqiPageState(**props))


@router.post("/", response_class=HTMLResponse)
@router.post("/{zipcode}", response_class=HTMLResponse)
async def submit(
    request: Request,
    internal_client: InternalClientDep,
    geocoder: GeocodingServiceDep,
    location: Annotated[str, Form()] = "",
    latitude: Annotated[float | None, Form(ge=-90, le=90)] = None,
    longitude: Annotated[float | None, Form(ge=-180, le=180)] = None,
    aqi: Annotated[int, Form()] = 0,
    category_name: Annotated[str, Form()] = "",
    category_number: Annotated[int, Form()] = 0,
    city_state: Annotated[str, Form()] = "",
    zip_code: Annotated[str, Form()] = "",
) -> HTMLResponse:
    """
    Run the lookup pipeline against the state posted back by the page.

    The form posts to the page's own URL, so a failed lookup leaves the
    address bar where it was. Coordinates from the browser take precedence
    over the text field.
    """
    page = AqiPage(
        internal_client,
        geocoder,
        AqiPageState(
            aqi=aqi,
            category_name=category_name,
            category_number=category_number,
            city_state=city_state,
            zip_code=zip_code,
        ),
    )

    if latitude is not None and longitude is not None:
        await page.resolve_coords_to_zip(GeoPoint(latitude=latitude, longitude=longitude))
    else:
        await page.submit_zip(location)

    return render_page(request, page.state, page.history_url)
