# -*- coding: utf-8 -*-
"""
Tincture: A device-independent color model
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: cielch.py — Cylindrical CIELAB (lightness, chroma, hue).

Hue is in degrees, ``[0, 360)``.  Achromatic colors (``a == b == 0``) get
hue 0.  This is the space every perceptual attribute setter on ``Color``
works in.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from color_models.cielab import CIELABColor
from tincture_colorpoint import ColorPoint
from tincture_illuminants import Illuminant
from tincture_xyz import XYZColor

__all__ = ["CIELCHColor", "polar_from_cartesian", "cartesian_from_polar"]


def polar_from_cartesian(a: float, b: float) -> Tuple[float, float]:
    """``(chroma, hue_degrees)`` with hue in ``[0, 360)`` and 0 for ``a == b == 0``."""
    chroma = math.hypot(a, b)
    if a == 0.0 and b == 0.0:
        return chroma, 0.0
    hue = math.degrees(math.atan2(b, a)) % 360.0
    if hue >= 360.0:
        hue = 0.0
    return chroma, hue


def cartesian_from_polar(chroma: float, hue: float) -> Tuple[float, float]:
    rad = math.radians(hue)
    return chroma * math.cos(rad), chroma * math.sin(rad)


@dataclass(slots=True, frozen=True)
class CIELCHColor(ColorPoint):
    l: float
    c: float
    h: float

    def to_xyz(self, illuminant: Illuminant) -> XYZColor:
        a, b = cartesian_from_polar(self.c, self.h)
        return CIELABColor(self.l, a, b).to_xyz(illuminant)

    @classmethod
    def from_xyz(cls, xyz: XYZColor) -> CIELCHColor:
        lab = CIELABColor.from_xyz(xyz)
        c, h = polar_from_cartesian(lab.a, lab.b)
        return cls(lab.l, c, h)
