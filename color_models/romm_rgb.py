# -*- coding: utf-8 -*-
"""
Tincture: A device-independent color model
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: romm_rgb.py — ROMM RGB (ProPhoto RGB), D50 white.

Encoding per ANSI/I3A IT10.7666:

    E = 16 * L          for L < 2^-9
    E = L^(1/1.8)       otherwise

No flare offset is applied in either direction, so encode and decode are
exact inverses.  Magnitudes are transformed and the sign restored.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Final

import numpy as np

from tincture_bound import Bound, BoundsT
from tincture_consts import (
    M_ROMM_TO_XYZ,
    M_XYZ_TO_ROMM,
    ROMM_ENCODED_THRESHOLD,
    ROMM_GAMMA,
    ROMM_LINEAR_THRESHOLD,
)
from tincture_illuminants import D50, Illuminant
from tincture_xyz import XYZColor

__all__ = ["ROMMRGBColor", "ROMM_ILLUMINANT"]

ROMM_ILLUMINANT: Final[Illuminant] = D50


def _encode(c: float) -> float:
    a = abs(c)
    if a < ROMM_LINEAR_THRESHOLD:
        e = 16.0 * a
    else:
        e = a ** (1.0 / ROMM_GAMMA)
    return math.copysign(e, c)


def _decode(c: float) -> float:
    a = abs(c)
    if a < ROMM_ENCODED_THRESHOLD:
        lin = a / 16.0
    else:
        lin = a ** ROMM_GAMMA
    return math.copysign(lin, c)


@dataclass(slots=True, frozen=True)
class ROMMRGBColor(Bound):
    r: float
    g: float
    b: float

    BOUNDS: ClassVar[BoundsT] = ((0.0, 1.0), (0.0, 1.0), (0.0, 1.0))

    def to_xyz(self, illuminant: Illuminant) -> XYZColor:
        linear = np.array([_decode(self.r), _decode(self.g), _decode(self.b)])
        x, y, z = M_ROMM_TO_XYZ @ linear
        return XYZColor(float(x), float(y), float(z), ROMM_ILLUMINANT).color_adapt(illuminant)

    @classmethod
    def from_xyz(cls, xyz: XYZColor) -> ROMMRGBColor:
        xyz_c = xyz.color_adapt(ROMM_ILLUMINANT)
        r, g, b = M_XYZ_TO_ROMM @ np.array([xyz_c.x, xyz_c.y, xyz_c.z])
        return cls(_encode(float(r)), _encode(float(g)), _encode(float(b)))
