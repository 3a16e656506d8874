# -*- coding: utf-8 -*-
"""Tests for illuminant white points."""

import pytest

from tincture_illuminants import D50, D65, ILLUMINANTS, Illuminant


@pytest.mark.parametrize("illuminant", ILLUMINANTS, ids=lambda i: i.name)
def test_standard_white_points_are_normalised(illuminant):
    assert illuminant.white_point()[1] == 1.0


def test_custom_illuminant_is_normalised_by_y():
    custom = Illuminant.custom((2.0, 2.0, 4.0))
    assert custom.white_point() == (1.0, 1.0, 2.0)
    assert custom.xyz == (2.0, 2.0, 4.0)


def test_custom_illuminants_compare_by_value():
    assert Illuminant.custom([0.9, 1.0, 1.1]) == Illuminant.custom((0.9, 1.0, 1.1))
    assert Illuminant.custom((0.96422, 1.0, 0.82521)) != D50


@pytest.mark.parametrize("bad", [(1.0, 0.0, 1.0), (1.0, 1.0)])
def test_custom_illuminant_rejects_bad_input(bad):
    with pytest.raises(ValueError):
        Illuminant.custom(bad)


def test_named_values():
    assert D65.xyz == (0.95047, 1.0, 1.08884)
    assert D50.xyz == (0.96422, 1.0, 0.82521)
