"""Tests for static lookup tables."""

import pytest

from app.core.constants import CATEGORY_COLOR_MAP, category_color, is_zip_code


def test_category_color_mapped():
    """Test mapped category numbers return their color class."""
    assert category_color(3) == CATEGORY_COLOR_MAP[3]
    assert category_color(1) == "green"
    assert category_color(6) == "maroon"


@pytest.mark.parametrize("number", [0, -1, 7, 99])
def test_category_color_unmapped(number: int):
    """Test unmapped category numbers return an empty string."""
    assert category_color(number) == ""


@pytest.mark.parametrize("value", ["10001", "90210", "00501"])
def test_is_zip_code_accepts_five_digits(value: str):
    assert is_zip_code(value)


@pytest.mark.parametrize(
    "value",
    ["", "1000", "100011", "1000a", "Chicago, IL", " 10001", "10001\n", "60601-1234"],
)
def test_is_zip_code_rejects_other_input(value: str):
    assert not is_zip_code(value)
