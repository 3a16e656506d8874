# -*- coding: utf-8 -*-
"""
Tincture: A device-independent color model
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincture_xyz.py — CIE 1931 XYZ, the conversion hub.

An ``XYZColor`` is three tristimulus values plus the illuminant they are
expressed under.  Values are normalised so that the illuminant's white has
``Y = 1``.  Negative values and values above 1 are legal: they describe
out-of-gamut or imaginary stimuli and are carried exactly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from tincture_adaptation import ChromaticAdaptation
from tincture_color import Color
from tincture_consts import XYZ_APPROX_TOL, XYZ_VISUAL_TOL
from tincture_illuminants import Illuminant

__all__ = ["XYZColor"]


@dataclass(slots=True, frozen=True)
class XYZColor(Color):
    """Tristimulus value tagged with its viewing illuminant."""
    x: float
    y: float
    z: float
    illuminant: Illuminant

    # --- Conversion primitives ---

    def to_xyz(self, illuminant: Illuminant) -> XYZColor:
        return self.color_adapt(illuminant)

    @classmethod
    def from_xyz(cls, xyz: XYZColor) -> XYZColor:
        return xyz

    def _rebuild(self, other: Color) -> XYZColor:
        return other.to_xyz(self.illuminant)

    @classmethod
    def white_point(cls, illuminant: Illuminant) -> XYZColor:
        """The white of ``illuminant`` expressed under itself (``Y = 1``)."""
        x, y, z = illuminant.white_point()
        return cls(x, y, z, illuminant)

    def color_adapt(self, target: Illuminant) -> XYZColor:
        """
        Bradford adaptation to ``target``.

        Returns ``self`` unchanged when ``target`` is the current illuminant.
        """
        return ChromaticAdaptation.adapt(self, target)

    # --- Comparison ---

    def approx_equal(self, other: XYZColor, tol: Optional[float] = None) -> bool:
        """
        Component-wise comparison after adapting ``other`` to this illuminant.

        Args:
            other: Value to compare against.
            tol: Absolute per-component tolerance. Defaults to ``XYZ_APPROX_TOL``.
        """
        if tol is None:
            tol = XYZ_APPROX_TOL
        o = other.color_adapt(self.illuminant)
        return (abs(self.x - o.x) <= tol
                and abs(self.y - o.y) <= tol
                and abs(self.z - o.z) <= tol)

    def approx_visually_equal(self, other: XYZColor) -> bool:
        """Coarse comparison at ``XYZ_VISUAL_TOL``."""
        return self.approx_equal(other, XYZ_VISUAL_TOL)

    # --- Mixing ---

    def weighted_midpoint(self, other: XYZColor, weight: float) -> XYZColor:
        """
        ``self * weight + (1 - weight) * other`` after adapting ``other``
        to this illuminant.  The result keeps ``self.illuminant``.
        """
        o = other.color_adapt(self.illuminant)
        w = 1.0 - weight
        return XYZColor(self.x * weight + w * o.x,
                        self.y * weight + w * o.y,
                        self.z * weight + w * o.z,
                        self.illuminant)

    def mix(self, other: XYZColor) -> XYZColor:
        """Midpoint of ``self`` and ``other`` under this illuminant."""
        o = other.color_adapt(self.illuminant)
        return XYZColor((self.x + o.x) / 2.0,
                        (self.y + o.y) / 2.0,
                        (self.z + o.z) / 2.0,
                        self.illuminant)
