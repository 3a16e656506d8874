# -*- coding: utf-8 -*-
"""
Tincture: A device-independent color model
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: hsl.py — Hue / saturation / lightness over sRGB.

Hexagonal HSL as used by CSS.  Hue is in degrees, saturation and lightness
in ``[0, 1]``.  Grays have hue 0; black and white have saturation 0.
Hue inputs outside ``[0, 360)`` are wrapped before decoding.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Final, Tuple

from color_models.srgb import RGBColor
from tincture_bound import Bound, BoundsT
from tincture_illuminants import Illuminant
from tincture_xyz import XYZColor

__all__ = ["HSLColor", "rgb_hue_chroma", "hue_to_rgb_sector"]

# Chroma below this is float noise from the XYZ round trip
_ACHROMATIC_TOL: Final[float] = 1e-12


def rgb_hue_chroma(r: float, g: float, b: float) -> Tuple[float, float, float, float]:
    """
    Hexagonal hue and chroma of an RGB triple.

    Returns:
        ``(hue, chroma, max, min)`` with hue in ``[0, 360)``.  Grays, including
        triples whose spread is float noise, get hue and chroma 0.
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    chroma = max_c - min_c
    if chroma <= _ACHROMATIC_TOL:
        return 0.0, 0.0, max_c, min_c
    if max_c == r:
        hue = (((g - b) / chroma) % 6.0) * 60.0
    elif max_c == g:
        hue = ((b - r) / chroma) * 60.0 + 120.0
    else:
        hue = ((r - g) / chroma) * 60.0 + 240.0
    if hue >= 360.0:
        hue -= 360.0
    return hue, chroma, max_c, min_c


def hue_to_rgb_sector(hue: float, chroma: float) -> Tuple[float, float, float]:
    """RGB triple with zero minimum for a hue in degrees and a chroma."""
    h = hue % 360.0
    x = chroma * (1.0 - abs((h / 60.0) % 2.0 - 1.0))
    if h < 60.0:
        return chroma, x, 0.0
    if h < 120.0:
        return x, chroma, 0.0
    if h < 180.0:
        return 0.0, chroma, x
    if h < 240.0:
        return 0.0, x, chroma
    if h < 300.0:
        return x, 0.0, chroma
    return chroma, 0.0, x


@dataclass(slots=True, frozen=True)
class HSLColor(Bound):
    h: float
    s: float
    l: float

    BOUNDS: ClassVar[BoundsT] = ((0.0, 360.0), (0.0, 1.0), (0.0, 1.0))

    def to_xyz(self, illuminant: Illuminant) -> XYZColor:
        chroma = (1.0 - abs(2.0 * self.l - 1.0)) * self.s
        r1, g1, b1 = hue_to_rgb_sector(self.h, chroma)
        offset = self.l - chroma / 2.0
        return RGBColor(r1 + offset, g1 + offset, b1 + offset).to_xyz(illuminant)

    @classmethod
    def from_xyz(cls, xyz: XYZColor) -> HSLColor:
        rgb = RGBColor.from_xyz(xyz)
        hue, chroma, max_c, min_c = rgb_hue_chroma(rgb.r, rgb.g, rgb.b)
        lightness = (max_c + min_c) / 2.0
        denom = 1.0 - abs(2.0 * lightness - 1.0)
        saturation = 0.0 if chroma == 0.0 or denom <= 0.0 else chroma / denom
        return cls(hue, saturation, lightness)
