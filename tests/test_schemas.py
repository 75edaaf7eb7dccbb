"""Tests for AQI schemas and page state display rules."""

from app.schemas.aqi import AqiPageState, AqiReading


def test_reading_parses_airnow_fields(nyc_forecast: list[dict]):
    """Test AirNow field names map onto the reading model."""
    reading = AqiReading.model_validate(nyc_forecast[0])

    assert reading.aqi == 42
    assert reading.category.name == "Good"
    assert reading.category.number == 1
    assert reading.city_state == "NYC, NY"


def test_reading_serializes_with_airnow_names(nyc_forecast: list[dict]):
    """Test serialization by alias drops extra fields and keeps AirNow names."""
    reading = AqiReading.model_validate(nyc_forecast[0])

    assert reading.model_dump(by_alias=True) == {
        "AQI": 42,
        "Category": {"Name": "Good", "Number": 1},
        "ReportingArea": "NYC",
        "StateCode": "NY",
    }


def test_default_page_state():
    """Test the all-default page shows nothing."""
    state = AqiPageState()

    assert state.heading == ""
    assert state.has_reading is False
    assert state.mapped_color == ""
    assert state.zip_code == ""


def test_page_state_with_reading(nyc_forecast: list[dict]):
    """Test heading, location line and color after applying a reading."""
    state = AqiPageState()
    state.apply_reading(AqiReading.model_validate(nyc_forecast[0]), "10001")

    assert state.heading == "AQI: 42"
    assert state.location_line == "NYC, NY 10001"
    assert state.mapped_color == "green"
    assert state.has_reading is True


def test_heading_falls_back_to_category_name():
    """Test a non-positive AQI shows the category name alone."""
    state = AqiPageState(aqi=-1, category_name="Moderate", category_number=2)

    assert state.heading == "Moderate"
    assert state.has_reading is False
    assert state.mapped_color == "yellow"


def test_clear_reading_keeps_zip_code():
    """Test clearing resets display fields but not the ZIP code."""
    state = AqiPageState(
        aqi=42,
        category_name="Good",
        category_number=1,
        city_state="NYC, NY",
        zip_code="10001",
    )

    state.clear_reading()

    assert state.aqi == 0
    assert state.category_name == ""
    assert state.category_number == 0
    assert state.city_state == ""
    assert state.zip_code == "10001"
