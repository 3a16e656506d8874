# -*- coding: utf-8 -*-
"""
Tincture: A device-independent color model
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: adobe_rgb.py — Adobe RGB (1998), D65 white.

Pure power-law transfer with gamma 563/256 and no linear toe.  The power is
applied to magnitudes and the sign restored, so negative components from
out-of-gamut sources survive a round trip.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Final

import numpy as np

from tincture_bound import Bound, BoundsT
from tincture_consts import ADOBE_GAMMA, M_ADOBE_TO_XYZ, M_XYZ_TO_ADOBE
from tincture_illuminants import D65, Illuminant
from tincture_xyz import XYZColor

__all__ = ["AdobeRGBColor", "ADOBE_ILLUMINANT"]

ADOBE_ILLUMINANT: Final[Illuminant] = D65


def _signed_pow(c: float, p: float) -> float:
    return math.copysign(abs(c) ** p, c)


@dataclass(slots=True, frozen=True)
class AdobeRGBColor(Bound):
    r: float
    g: float
    b: float

    BOUNDS: ClassVar[BoundsT] = ((0.0, 1.0), (0.0, 1.0), (0.0, 1.0))

    def to_xyz(self, illuminant: Illuminant) -> XYZColor:
        linear = np.array([_signed_pow(c, ADOBE_GAMMA) for c in (self.r, self.g, self.b)])
        x, y, z = M_ADOBE_TO_XYZ @ linear
        return XYZColor(float(x), float(y), float(z), ADOBE_ILLUMINANT).color_adapt(illuminant)

    @classmethod
    def from_xyz(cls, xyz: XYZColor) -> AdobeRGBColor:
        xyz_c = xyz.color_adapt(ADOBE_ILLUMINANT)
        linear = M_XYZ_TO_ADOBE @ np.array([xyz_c.x, xyz_c.y, xyz_c.z])
        r, g, b = (_signed_pow(float(c), 1.0 / ADOBE_GAMMA) for c in linear)
        return cls(r, g, b)
