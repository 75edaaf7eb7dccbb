"""Static lookup tables."""

import re

ZIP_CODE_PATTERN = re.compile(r"[0-9]{5}")

# AirNow category number -> CSS color class used by the page
CATEGORY_COLOR_MAP: dict[int, str] = {
    1: "green",  # Good
    2: "yellow",  # Moderate
    3: "orange",  # Unhealthy for Sensitive Groups
    4: "red",  # Unhealthy
    5: "purple",  # Very Unhealthy
    6: "maroon",  # Hazardous
}


def category_color(category_number: int) -> str:
    """Return the color class for an AirNow category, or an empty string if unmapped."""
    return CATEGORY_COLOR_MAP.get(category_number, "")


def is_zip_code(value: str) -> bool:
    """Check whether a string is a 5-digit US ZIP code."""
    return bool(ZIP_CODE_PATTERN.fullmatch(value))
