# -*- coding: utf-8 -*-
"""Tests for the sRGB hex and 8-bit codec."""

import pytest

from color_models.srgb import RGBColor, RGBParseError
@pytest.mark.parametrize("code", ["#ff0080", "ff0080", "#FF0080", "  #ff0080 "])
def test_parse_long_form(code):
    assert RGBColor.from_hex_code(code).to_int_rgb() == (255, 0, 128)


def test_parse_short_form():
    assert RGBColor.from_hex_code("#F08").to_int_rgb() == (255, 0, 136)


@pytest.mark.parametrize("code", ["", "#ff00", "#gg0000", "#ff008000", "rgb(1,2,3)"])
def test_parse_errors(code):
    with pytest.raises(RGBParseError):
        RGBColor.from_hex_code(code)


def test_parse_error_is_value_error():
    assert issubclass(RGBParseError, ValueError)


def test_format_is_uppercase_and_rounds_half_away_from_zero():
    assert RGBColor(0.5, 0.5, 0.5).to_hex() == "#808080"
    assert str(RGBColor(1.0, 0.0, 0.5)) == "#FF0080"


def test_format_clamps_out_of_gamut():
    assert RGBColor(1.5, -0.2, 0.0).to_hex() == "#FF0000"


def test_int_rgb():
    assert RGBColor.from_int_rgb(0, 128, 255) == RGBColor(0.0, 128 / 255.0, 1.0)
    with pytest.raises(ValueError):
        RGBColor.from_int_rgb(0, 256, 0)
