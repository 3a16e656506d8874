# -*- coding: utf-8 -*-
"""
Tincture: A device-independent color model
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincture_color.py — The universal conversion capability.

Every color type implements exactly two primitives:

    to_xyz(illuminant)  -> XYZColor   (express the value under an illuminant)
    from_xyz(xyz)       -> Self       (classmethod, accepts any illuminant)

Everything else is derived here: conversion between arbitrary types through
the XYZ hub, perceptual attributes (hue, lightness, chroma, saturation) via
CIELCH, CIEDE2000 distance via CIELAB and terminal rendering via sRGB.

Setters never mutate.  They convert to CIELCH, replace one component and
convert back to the caller's type, so a setter on an ``XYZColor`` returns an
``XYZColor`` expressed under the same illuminant as the original.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Final, Type, TypeVar

from tincture_consts import VISUAL_DELTA_E
from tincture_illuminants import D50, Illuminant

if TYPE_CHECKING:
    from color_models.cielch import CIELCHColor
    from tincture_xyz import XYZColor

__all__ = ["Color", "REFERENCE_ILLUMINANT"]

# Conversions between two non-XYZ types pass through XYZ under this white.
# D50 is the CIELAB/CIELCH reference, so the attribute round trips need no
# extra adaptation step.
REFERENCE_ILLUMINANT: Final[Illuminant] = D50

ColorT = TypeVar("ColorT", bound="Color")


class Color(abc.ABC):
    """Abstract base for every color representation."""
    __slots__ = ()

    @abc.abstractmethod
    def to_xyz(self, illuminant: Illuminant) -> XYZColor:
        """Converts the color to XYZ expressed under ``illuminant``."""

    @classmethod
    @abc.abstractmethod
    def from_xyz(cls: Type[ColorT], xyz: XYZColor) -> ColorT:
        """Builds the color from an XYZ value under any illuminant."""

    # =========================================================================
    # Conversion
    # =========================================================================

    def convert(self, target: Type[ColorT]) -> ColorT:
        """Converts to ``target`` through XYZ under the reference illuminant."""
        return target.from_xyz(self.to_xyz(REFERENCE_ILLUMINANT))

    def _rebuild(self: ColorT, other: Color) -> ColorT:
        """Converts ``other`` back into the type (and context) of ``self``."""
        return other.convert(type(self))

    def _lch(self) -> CIELCHColor:
        from color_models.cielch import CIELCHColor
        return self.convert(CIELCHColor)

    # =========================================================================
    # Perceptual attributes
    # =========================================================================

    def hue(self) -> float:
        """CIELCH hue angle in degrees, in ``[0, 360)``."""
        return self._lch().h

    def set_hue(self: ColorT, new_hue: float) -> ColorT:
        """Returns a copy with the CIELCH hue replaced, wrapped into ``[0, 360)``."""
        from color_models.cielch import CIELCHColor
        lch = self._lch()
        hue = new_hue % 360.0
        if hue >= 360.0:
            hue = 0.0
        return self._rebuild(CIELCHColor(lch.l, lch.c, hue))

    def lightness(self) -> float:
        """CIELCH lightness, nominally 0 (black) to 100 (diffuse white)."""
        return self._lch().l

    def set_lightness(self: ColorT, new_lightness: float) -> ColorT:
        """Returns a copy with lightness replaced, clamped to ``[0, 100]``."""
        from color_models.cielch import CIELCHColor
        lch = self._lch()
        lightness = min(max(new_lightness, 0.0), 100.0)
        return self._rebuild(CIELCHColor(lightness, lch.c, lch.h))

    def chroma(self) -> float:
        return self._lch().c

    def set_chroma(self: ColorT, new_chroma: float) -> ColorT:
        """
        Returns a copy with chroma replaced.

        Negative values clamp to 0.  There is no upper limit, so large chroma
        values can produce imaginary colors.
        """
        from color_models.cielch import CIELCHColor
        lch = self._lch()
        return self._rebuild(CIELCHColor(lch.l, max(new_chroma, 0.0), lch.h))

    def saturation(self) -> float:
        """Chroma relative to lightness, or 0 for black."""
        lch = self._lch()
        if lch.l == 0.0:
            return 0.0
        return lch.c / lch.l

    def set_saturation(self: ColorT, new_saturation: float) -> ColorT:
        from color_models.cielch import CIELCHColor
        lch = self._lch()
        chroma = max(new_saturation, 0.0) * lch.l
        return self._rebuild(CIELCHColor(lch.l, chroma, lch.h))

    def grayscale(self: ColorT) -> ColorT:
        """Returns the achromatic color with the same lightness."""
        return self.set_chroma(0.0)

    # =========================================================================
    # Distance
    # =========================================================================

    def distance(self, other: Color) -> float:
        """CIEDE2000 difference between ``self`` and ``other``."""
        from color_models.cielab import CIELABColor
        from tincture_metrics import delta_e_2000
        lab1 = self.convert(CIELABColor)
        lab2 = other.convert(CIELABColor)
        return delta_e_2000((lab1.l, lab1.a, lab1.b), (lab2.l, lab2.a, lab2.b))

    def visually_indistinguishable(self, other: Color) -> bool:
        """True when the CIEDE2000 difference is at most one unit."""
        return self.distance(other) <= VISUAL_DELTA_E

    # =========================================================================
    # Terminal rendering
    # =========================================================================

    def write_colored_str(self, text: str, truecolor: bool = True) -> str:
        """
        Wraps ``text`` in a foreground escape of this color.

        The escape is 24-bit unless ``truecolor`` is False, in which case the
        nearest xterm-256 cube entry is used.
        """
        from color_models.srgb import RGBColor
        from tincture_terminal import colorize
        return colorize(text, self.convert(RGBColor).to_int_rgb(), truecolor)

    def write_color(self, width: int = 2, truecolor: bool = True) -> str:
        """A solid block of this color, ``width`` cells wide."""
        from color_models.srgb import RGBColor
        from tincture_terminal import color_block
        return color_block(self.convert(RGBColor).to_int_rgb(), width, truecolor)
