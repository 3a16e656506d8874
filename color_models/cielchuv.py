# -*- coding: utf-8 -*-
"""
Tincture: A device-independent color model
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: cielchuv.py — Cylindrical CIELUV (lightness, chroma, hue).
"""

from __future__ import annotations

from dataclasses import dataclass

from color_models.cielch import cartesian_from_polar, polar_from_cartesian
from color_models.cieluv import CIELUVColor
from tincture_colorpoint import ColorPoint
from tincture_illuminants import Illuminant
from tincture_xyz import XYZColor

__all__ = ["CIELCHuvColor"]


@dataclass(slots=True, frozen=True)
class CIELCHuvColor(ColorPoint):
    """LCh(uv): hue in degrees ``[0, 360)``, 0 when ``u == v == 0``."""
    l: float
    c: float
    h: float

    def to_xyz(self, illuminant: Illuminant) -> XYZColor:
        u, v = cartesian_from_polar(self.c, self.h)
        return CIELUVColor(self.l, u, v).to_xyz(illuminant)

    @classmethod
    def from_xyz(cls, xyz: XYZColor) -> CIELCHuvColor:
        luv = CIELUVColor.from_xyz(xyz)
        c, h = polar_from_cartesian(luv.u, luv.v)
        return cls(luv.l, c, h)
