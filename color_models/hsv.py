# -*- coding: utf-8 -*-
"""
Tincture: A device-independent color model
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: hsv.py — Hue / saturation / value over sRGB.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from color_models.hsl import hue_to_rgb_sector, rgb_hue_chroma
from color_models.srgb import RGBColor
from tincture_bound import Bound, BoundsT
from tincture_illuminants import Illuminant
from tincture_xyz import XYZColor

__all__ = ["HSVColor"]


@dataclass(slots=True, frozen=True)
class HSVColor(Bound):
    """Hexagonal HSV; black has saturation 0, grays have hue 0."""
    h: float
    s: float
    v: float

    BOUNDS: ClassVar[BoundsT] = ((0.0, 360.0), (0.0, 1.0), (0.0, 1.0))

    def to_xyz(self, illuminant: Illuminant) -> XYZColor:
        chroma = self.s * self.v
        r1, g1, b1 = hue_to_rgb_sector(self.h, chroma)
        offset = self.v - chroma
        return RGBColor(r1 + offset, g1 + offset, b1 + offset).to_xyz(illuminant)

    @classmethod
    def from_xyz(cls, xyz: XYZColor) -> HSVColor:
        rgb = RGBColor.from_xyz(xyz)
        hue, chroma, max_c, _ = rgb_hue_chroma(rgb.r, rgb.g, rgb.b)
        saturation = 0.0 if max_c == 0.0 else chroma / max_c
        return cls(hue, saturation, max_c)
