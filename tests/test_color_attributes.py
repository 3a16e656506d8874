# -*- coding: utf-8 -*-
"""Tests for the perceptual attributes derived on every color type."""

import pytest

from color_models.cielab import CIELABColor
from color_models.cielch import CIELCHColor
from color_models.hsv import HSVColor
from color_models.srgb import RGBColor
from tincture_illuminants import D65
from tincture_terminal import RESET
from tincture_xyz import XYZColor


@pytest.mark.parametrize("new_hue, expected", [(370.0, 10.0), (-30.0, 330.0), (730.0, 10.0), (45.0, 45.0)])
def test_set_hue_wraps(new_hue, expected):
    color = CIELCHColor(50.0, 30.0, 100.0)
    assert color.set_hue(new_hue).hue() == pytest.approx(expected, abs=1e-6)


def test_set_hue_keeps_type_and_other_attributes():
    color = RGBColor(0.8, 0.3, 0.2)
    shifted = color.set_hue(200.0)
    assert isinstance(shifted, RGBColor)
    assert shifted.lightness() == pytest.approx(color.lightness(), abs=1e-6)
    assert shifted.chroma() == pytest.approx(color.chroma(), abs=1e-6)


@pytest.mark.parametrize("requested, expected", [(150.0, 100.0), (-5.0, 0.0), (42.0, 42.0)])
def test_set_lightness_clamps(requested, expected):
    color = CIELABColor(50.0, 10.0, 10.0)
    assert color.set_lightness(requested).lightness() == pytest.approx(expected, abs=1e-6)


def test_set_chroma_clamps_negative_only():
    color = CIELCHColor(50.0, 30.0, 100.0)
    assert color.set_chroma(-5.0).chroma() == pytest.approx(0.0, abs=1e-9)
    assert color.set_chroma(250.0).chroma() == pytest.approx(250.0, abs=1e-6)


def test_saturation():
    color = CIELCHColor(50.0, 10.0, 40.0)
    assert color.saturation() == pytest.approx(0.2, abs=1e-9)
    assert color.set_saturation(0.5).chroma() == pytest.approx(25.0, abs=1e-6)
    assert color.set_saturation(-1.0).chroma() == pytest.approx(0.0, abs=1e-9)


def test_saturation_of_black_is_zero():
    assert CIELCHColor(0.0, 0.0, 0.0).saturation() == 0.0


def test_grayscale():
    color = RGBColor(0.8, 0.2, 0.3)
    gray = color.grayscale()
    assert isinstance(gray, RGBColor)
    assert gray.chroma() == pytest.approx(0.0, abs=1e-6)
    assert gray.lightness() == pytest.approx(color.lightness(), abs=1e-6)
    assert gray.r == pytest.approx(gray.g, abs=1e-4)
    assert gray.g == pytest.approx(gray.b, abs=1e-4)


def test_xyz_setter_keeps_illuminant():
    color = XYZColor(0.3, 0.4, 0.2, D65)
    lighter = color.set_lightness(80.0)
    assert isinstance(lighter, XYZColor)
    assert lighter.illuminant == D65
    assert lighter.lightness() == pytest.approx(80.0, abs=1e-6)


def test_distance_is_symmetric_and_zero_on_self():
    a = RGBColor(0.2, 0.5, 0.7)
    b = HSVColor(30.0, 0.6, 0.9)
    assert a.distance(b) == b.distance(a)
    assert a.distance(a) == pytest.approx(0.0, abs=1e-9)


def test_visually_indistinguishable():
    gray = RGBColor(0.5, 0.5, 0.5)
    assert gray.visually_indistinguishable(RGBColor(0.501, 0.5, 0.5))
    assert not gray.visually_indistinguishable(RGBColor(1.0, 0.0, 0.0))


def test_terminal_hooks(monkeypatch):
    monkeypatch.setenv("COLORTERM", "truecolor")
    color = RGBColor.from_hex_code("#ff0080")
    assert color.write_colored_str("hi") == f"\033[38;2;255;0;128mhi{RESET}"
    assert color.write_color() == f"\033[48;2;255;0;128m  {RESET}"


@pytest.mark.parametrize("colorterm", [None, "", "256"])
def test_terminal_hooks_emit_truecolor_regardless_of_environment(monkeypatch, colorterm):
    if colorterm is None:
        monkeypatch.delenv("COLORTERM", raising=False)
    else:
        monkeypatch.setenv("COLORTERM", colorterm)
    color = RGBColor.from_hex_code("#ff0080")
    assert color.write_colored_str("hi") == f"\033[38;2;255;0;128mhi{RESET}"
    assert color.write_color(3) == f"\033[48;2;255;0;128m   {RESET}"


def test_terminal_hooks_cube_opt_in():
    color = RGBColor.from_hex_code("#ff0000")
    assert color.write_colored_str("hi", truecolor=False) == f"\033[38;5;196mhi{RESET}"
    assert color.write_color(truecolor=False) == f"\033[48;5;196m  {RESET}"
