# -*- coding: utf-8 -*-
"""
Tincture: A device-independent color model
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: cielab.py — CIE 1976 L*a*b*, D50 reference white.

Uses the exact rational constants (delta = 6/29) so the piecewise cube
root is continuous and round trips are stable near black.  The reference
white is fixed at D50; values under other illuminants are adapted first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

import numpy as np

from tincture_colorpoint import ColorPoint
from tincture_consts import LAB_DELTA, LAB_EPSILON, LAB_KAPPA
from tincture_illuminants import D50, Illuminant
from tincture_xyz import XYZColor

__all__ = ["CIELABColor", "LAB_ILLUMINANT"]

LAB_ILLUMINANT: Final[Illuminant] = D50


def _lab_f(t: float) -> float:
    if t > LAB_EPSILON:
        return float(np.cbrt(t))
    return (LAB_KAPPA * t + 16.0) / 116.0


def _lab_f_inv(t: float) -> float:
    if t > LAB_DELTA:
        return t * t * t
    return (116.0 * t - 16.0) / LAB_KAPPA


@dataclass(slots=True, frozen=True)
class CIELABColor(ColorPoint):
    """CIELAB: ``l`` nominally in [0, 100], ``a`` and ``b`` unbounded."""
    l: float
    a: float
    b: float

    def to_xyz(self, illuminant: Illuminant) -> XYZColor:
        xn, yn, zn = LAB_ILLUMINANT.white_point()
        fy = (self.l + 16.0) / 116.0
        fx = fy + self.a / 500.0
        fz = fy - self.b / 200.0
        return XYZColor(
            xn * _lab_f_inv(fx),
            yn * _lab_f_inv(fy),
            zn * _lab_f_inv(fz),
            LAB_ILLUMINANT,
        ).color_adapt(illuminant)

    @classmethod
    def from_xyz(cls, xyz: XYZColor) -> CIELABColor:
        xyz_c = xyz.color_adapt(LAB_ILLUMINANT)
        xn, yn, zn = LAB_ILLUMINANT.white_point()
        fx = _lab_f(xyz_c.x / xn)
        fy = _lab_f(xyz_c.y / yn)
        fz = _lab_f(xyz_c.z / zn)
        return cls(116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz))
