# -*- coding: utf-8 -*-
"""Tests for mixing, averaging, gradients and imaginary-color handling."""

import numpy as np
import pytest

from color_models.cielab import CIELABColor
from color_models.cielch import CIELCHColor
from color_models.cieluv import CIELUVColor
from color_models.hsl import HSLColor
from color_models.srgb import RGBColor
from tincture_colorpoint import MismatchedWeightsError
from tincture_coord import Coord
from tincture_illuminants import D50
from tincture_visual_gamut import (
    IndeterminateClosestPointError,
    chromaticity_uv,
    closest_point_on_locus,
)
from tincture_xyz import XYZColor


def _hex(code):
    return RGBColor.from_hex_code(code)


def test_embedding_follows_field_order():
    assert CIELABColor(1.0, 2.0, 3.0).to_coord() == Coord(1.0, 2.0, 3.0)
    assert HSLColor.from_coord(Coord(10.0, 0.5, 0.25)) == HSLColor(10.0, 0.5, 0.25)


@pytest.mark.parametrize("a, b, expected", [
    ((0, 0, 255), (255, 0, 1), "#800080"),
    ((0, 0, 255), (127, 7, 19), "#400489"),
    ((255, 0, 1), (127, 7, 19), "#BF040A"),
])
def test_rgb_mix(a, b, expected):
    mixed = RGBColor.from_int_rgb(*a).mix(RGBColor.from_int_rgb(*b))
    assert mixed.to_hex() == expected


def test_hsl_mix():
    red = HSLColor(0.0, 1.0, 0.5)
    green = HSLColor(120.0, 1.0, 0.5)
    assert red.mix(green) == HSLColor(60.0, 1.0, 0.5)
    mixed = HSLColor(234.0, 0.6, 0.7).mix(HSLColor(134.0, 1.0, 0.5))
    assert mixed.h == pytest.approx(184.0)
    assert mixed.s == pytest.approx(0.8)
    assert mixed.l == pytest.approx(0.6)


def test_lch_and_luv_mix():
    lch = CIELCHColor(50.0, 40.0, 65.0).mix(CIELCHColor(60.0, 25.0, 75.0))
    assert lch == CIELCHColor(55.0, 32.5, 70.0)
    luv = CIELUVColor(45.0, 67.0, 49.0).mix(CIELUVColor(53.0, 59.0, 3.0))
    assert luv == CIELUVColor(49.0, 63.0, 26.0)


def test_euclidean_distance():
    a = CIELABColor(10.5, -45.0, 40.0)
    b = CIELABColor(54.2, 65.0, 100.0)
    assert a.euclidean_distance(b) == pytest.approx(132.70150715, abs=1e-6)


def test_weighted_average_normalises_weights():
    start = CIELABColor(0.0, 0.0, 0.0)
    result = start.weighted_average([CIELABColor(10.0, 20.0, 30.0)], [1.0, 3.0])
    assert result == CIELABColor(7.5, 15.0, 22.5)


def test_weighted_average_mismatch_raises():
    start = CIELABColor(0.0, 0.0, 0.0)
    with pytest.raises(MismatchedWeightsError):
        start.weighted_average([CIELABColor(10.0, 20.0, 30.0)], [1.0])
    with pytest.raises(ValueError):
        start.weighted_average([], [1.0, 2.0])


def test_average():
    start = CIELABColor(0.0, 0.0, 0.0)
    avg = start.average([CIELABColor(10.0, 20.0, 30.0), CIELABColor(20.0, 40.0, 60.0)])
    assert avg == CIELABColor(10.0, 20.0, 30.0)


def test_linear_gradient():
    grad = _hex("#11457c").gradient(_hex("#774bdc"))
    assert grad(0.0).to_hex() == "#11457C"
    assert grad(1.0).to_hex() == "#774BDC"
    assert grad(2.0 / 6.0).to_hex() == "#33479C"


def test_cbrt_gradient():
    grad = _hex("#11457c").cbrt_gradient(_hex("#774bdc"))
    assert grad(0.0).to_hex() == "#11457C"
    assert grad(1.0).to_hex() == "#774BDC"
    assert grad(2.0 / 6.0).to_hex() == "#5849BF"


def test_gradient_scale():
    scale = _hex("#11457c").gradient_scale(_hex("#774bdc"), 5)
    assert [c.to_hex() for c in scale] == [
        "#11457C", "#22468C", "#33479C", "#4448AC", "#5549BC", "#664ACC", "#774BDC",
    ]
    assert len(_hex("#000000").gradient_scale(_hex("#ffffff"), 0)) == 2


def test_padded_gradient():
    start = RGBColor(1.0, 0.0, 0.0)
    end = RGBColor(0.0, 0.0, 1.0)
    grad = start.padded_gradient(end, 0.25, 0.75)
    assert grad(0.0) == start.gradient(end)(0.25)
    assert grad(1.0) == start.gradient(end)(0.75)


@pytest.mark.parametrize("lower, upper", [(0.8, 0.2), (-0.1, 0.5), (0.5, 1.5)])
def test_padded_gradient_warns_on_unusual_padding(lower, upper):
    with pytest.warns(RuntimeWarning):
        RGBColor(1.0, 0.0, 0.0).padded_gradient(RGBColor(0.0, 0.0, 1.0), lower, upper)


@pytest.mark.parametrize("primary", [(1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0), (1.0, 1.0, 1.0)])
def test_srgb_colors_are_real(primary):
    assert not RGBColor(*primary).is_imaginary()


def test_black_is_real():
    assert not CIELABColor(0.0, 0.0, 0.0).is_imaginary()


def _imaginary_lab():
    # Chromaticity (x, y) = (0.1, 0.9) lies above the spectral locus
    return CIELABColor.from_xyz(XYZColor(0.1 / 0.9, 1.0, 0.0, D50))


def test_detects_imaginary_color():
    assert _imaginary_lab().is_imaginary()
    assert CIELCHColor(50.0, 400.0, 140.0).is_imaginary()


def test_closest_real_color_of_real_color_is_identity():
    color = RGBColor(0.3, 0.6, 0.2)
    assert color.closest_real_color() is color


def test_closest_real_color_projects_onto_locus():
    imaginary = _imaginary_lab()
    real = imaginary.closest_real_color()
    assert isinstance(real, CIELABColor)
    before = imaginary.to_xyz(D50)
    after = real.to_xyz(D50)
    assert after.y == pytest.approx(before.y, abs=1e-9)
    u, v = chromaticity_uv(after.x, after.y, after.z)
    cu, cv = closest_point_on_locus(u, v)
    assert (u, v) == pytest.approx((cu, cv), abs=1e-9)
    assert real.distance(imaginary) > 0.0


def test_closest_real_color_with_empty_locus_raises():
    with pytest.raises(IndeterminateClosestPointError):
        _imaginary_lab().closest_real_color(locus=np.empty((0, 2)))
