from pydantic import BaseModel, ConfigDict, Field

from app.core.constants import category_color


class AqiCategory(BaseModel):
    """AirNow severity tier."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = Field(..., alias="Name", description="Category name (e.g., Good, Moderate)")
    number: int = Field(..., alias="Number", description="Category number, 1-6")


class AqiReading(BaseModel):
    """
    A single AirNow observation or forecast entry.

    Attribute names are snake_case; the provider's field names are kept as
    aliases so the model parses and serializes AirNow JSON unchanged.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    aqi: int = Field(..., alias="AQI", description="Air Quality Index, -1 when not available")
    category: AqiCategory = Field(..., alias="Category")
    reporting_area: str = Field(..., alias="ReportingArea")
    state_code: str = Field(..., alias="StateCode")

    @property
    def city_state(self) -> str:
        """Display form of the reporting area, e.g. ``"NYC, NY"``."""
        return f"{self.reporting_area}, {self.state_code}"


class GeoPoint(BaseModel):
    """Coordinates bridging a geocoding response into the reverse lookup."""

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class AqiPageState(BaseModel):
    """Mutable fields rendered by the AQI page."""

    aqi: int = 0
    category_name: str = ""
    category_number: int = 0
    city_state: str = ""
    zip_code: str = ""

    @property
    def mapped_color(self) -> str:
        return category_color(self.category_number)

    @property
    def has_reading(self) -> bool:
        """True when a usable numeric AQI is known."""
        return self.aqi > 0

    @property
    def heading(self) -> str:
        if self.has_reading:
            return f"AQI: {self.aqi}"
        return self.category_name

    @property
    def location_line(self) -> str:
        return f"{self.city_state} {self.zip_code}".strip()

    def apply_reading(self, reading: AqiReading, zip_code: str) -> None:
        """Replace the displayed values with a fresh reading."""
        self.aqi = reading.aqi
        self.category_name = reading.category.name
        self.category_number = reading.category.number
        self.city_state = reading.city_state
        self.zip_code = zip_code

    def clear_reading(self) -> None:
        """Reset the display fields to their defaults, keeping the ZIP code."""
        self.aqi = 0
        self.category_name = ""
        self.category_number = 0
        self.city_state = ""
