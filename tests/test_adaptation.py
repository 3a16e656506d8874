# -*- coding: utf-8 -*-
"""Tests for Bradford chromatic adaptation and XYZ hub behaviour."""

import itertools

import numpy as np
import pytest

from tincture_adaptation import ChromaticAdaptation
from tincture_illuminants import A, D50, D65, ILLUMINANTS, Illuminant
from tincture_xyz import XYZColor


SAMPLE = XYZColor(0.3, 0.4, 0.2, D65)


def test_same_illuminant_is_identity():
    assert SAMPLE.color_adapt(D65) is SAMPLE
    assert ChromaticAdaptation.adapt(SAMPLE, D65) is SAMPLE


@pytest.mark.parametrize("target", ILLUMINANTS, ids=lambda i: i.name)
def test_round_trip(target):
    back = SAMPLE.color_adapt(target).color_adapt(D65)
    assert back.illuminant == D65
    assert back.approx_equal(SAMPLE)


@pytest.mark.parametrize("mid, end", list(itertools.permutations(ILLUMINANTS, 2)),
                         ids=lambda i: i.name)
def test_adaptation_is_transitive(mid, end):
    via = SAMPLE.color_adapt(mid).color_adapt(end)
    direct = SAMPLE.color_adapt(end)
    assert via.approx_equal(direct)


@pytest.mark.parametrize("src, dst", list(itertools.permutations([D50, D65, A], 2)))
def test_white_maps_to_white(src, dst):
    adapted = XYZColor.white_point(src).color_adapt(dst)
    expected = XYZColor.white_point(dst)
    assert adapted.illuminant == dst
    assert adapted.approx_equal(expected)


def test_negative_values_are_preserved():
    imaginary = XYZColor(-0.2, 0.5, 1.3, D65)
    adapted = imaginary.color_adapt(D50)
    assert adapted.x < 0.0
    assert adapted.color_adapt(D65).approx_equal(imaginary)


def test_transform_matrix_is_cached():
    m1 = ChromaticAdaptation.calc_transform_matrix(D65, D50)
    m2 = ChromaticAdaptation.calc_transform_matrix(D65, D50)
    assert m1 is m2
    assert not m1.flags.writeable


def test_adapt_values_batch():
    batch = np.array([[0.3, 0.4, 0.2], [0.95047, 1.0, 1.08884]])
    out = ChromaticAdaptation.adapt_values(batch, D65, D50)
    assert out.shape == (2, 3)
    np.testing.assert_allclose(out[1], D50.white_point(), atol=1e-9)


def test_custom_illuminant_adaptation():
    custom = Illuminant.custom((0.9, 1.0, 1.0))
    adapted = XYZColor.white_point(D65).color_adapt(custom)
    assert adapted.approx_equal(XYZColor.white_point(custom))


def test_approx_equal_adapts_other():
    assert SAMPLE.approx_equal(SAMPLE.color_adapt(D50))
    assert not SAMPLE.approx_equal(XYZColor(0.3, 0.4, 0.21, D65))
    assert SAMPLE.approx_visually_equal(XYZColor(0.3005, 0.4, 0.2, D65))


def test_xyz_mix():
    a = XYZColor(0.5, 0.25, 0.75, D65)
    b = XYZColor(0.75, 0.5, 0.25, D65)
    mixed = a.mix(b)
    assert mixed == XYZColor(0.625, 0.375, 0.5, D65)


def test_xyz_mix_adapts_to_self_illuminant():
    a = XYZColor(0.5, 0.25, 0.75, D65)
    b = XYZColor(0.75, 0.5, 0.25, D50)
    mixed = a.mix(b)
    assert mixed.illuminant == D65
    assert mixed.approx_equal(a.mix(b.color_adapt(D65)))


def test_xyz_weighted_midpoint():
    a = XYZColor(1.0, 1.0, 1.0, D65)
    b = XYZColor(0.0, 0.0, 0.0, D65)
    assert a.weighted_midpoint(b, 0.25) == XYZColor(0.25, 0.25, 0.25, D65)


def test_xyz_from_xyz_is_identity():
    assert XYZColor.from_xyz(SAMPLE) is SAMPLE
    assert SAMPLE.to_xyz(D65) is SAMPLE
