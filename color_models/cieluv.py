# -*- coding: utf-8 -*-
"""
Tincture: A device-independent color model
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: cieluv.py — CIE 1976 L*u*v*, D50 reference white.

L* uses the same piecewise law as CIELAB:

    L* = (29/3)^3 * Y            for Y <= (6/29)^3
    L* = 116 * Y^(1/3) - 16      otherwise

Black has no chromaticity; ``L* == 0`` decodes to XYZ(0, 0, 0) and any value
whose ``X + 15Y + 3Z`` vanishes encodes with ``u* = v* = 0``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Tuple

import numpy as np

from tincture_colorpoint import ColorPoint
from tincture_consts import LAB_EPSILON, LAB_KAPPA
from tincture_illuminants import D50, Illuminant
from tincture_xyz import XYZColor

__all__ = ["CIELUVColor", "LUV_ILLUMINANT"]

LUV_ILLUMINANT: Final[Illuminant] = D50


def _uv_prime(x: float, y: float, z: float) -> Tuple[float, float]:
    denom = x + 15.0 * y + 3.0 * z
    return 4.0 * x / denom, 9.0 * y / denom


@dataclass(slots=True, frozen=True)
class CIELUVColor(ColorPoint):
    l: float
    u: float
    v: float

    def to_xyz(self, illuminant: Illuminant) -> XYZColor:
        if self.l == 0.0:
            return XYZColor(0.0, 0.0, 0.0, LUV_ILLUMINANT).color_adapt(illuminant)
        wx, wy, wz = LUV_ILLUMINANT.white_point()
        un, vn = _uv_prime(wx, wy, wz)
        u_p = self.u / (13.0 * self.l) + un
        v_p = self.v / (13.0 * self.l) + vn
        if self.l <= 8.0:
            y = wy * self.l / LAB_KAPPA
        else:
            y = wy * ((self.l + 16.0) / 116.0) ** 3
        if v_p == 0.0:
            # Degenerate chromaticity with no luminance contribution
            x = z = 0.0
        else:
            x = y * 9.0 * u_p / (4.0 * v_p)
            z = y * (12.0 - 3.0 * u_p - 20.0 * v_p) / (4.0 * v_p)
        return XYZColor(x, y, z, LUV_ILLUMINANT).color_adapt(illuminant)

    @classmethod
    def from_xyz(cls, xyz: XYZColor) -> CIELUVColor:
        xyz_c = xyz.color_adapt(LUV_ILLUMINANT)
        wx, wy, wz = LUV_ILLUMINANT.white_point()
        un, vn = _uv_prime(wx, wy, wz)
        y_r = xyz_c.y / wy
        if y_r <= LAB_EPSILON:
            lightness = LAB_KAPPA * y_r
        else:
            lightness = 116.0 * float(np.cbrt(y_r)) - 16.0
        if xyz_c.x + 15.0 * xyz_c.y + 3.0 * xyz_c.z == 0.0:
            return cls(lightness, 0.0, 0.0)
        u_p, v_p = _uv_prime(xyz_c.x, xyz_c.y, xyz_c.z)
        return cls(lightness, 13.0 * lightness * (u_p - un), 13.0 * lightness * (v_p - vn))
