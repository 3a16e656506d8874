# -*- coding: utf-8 -*-
"""
Tincture: A device-independent color model
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: srgb.py — sRGB (IEC 61966-2-1), D65 white.

Components are gamma-encoded and nominally in ``[0, 1]``.  Conversions never
clip, so out-of-gamut XYZ values produce components outside that range;
use ``RGBColor.clamp`` to force them back.  The transfer function is applied
sign-symmetrically so negative components survive a round trip.

The hex codec is the only place values are quantised to 8 bits.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import ClassVar, Final, Tuple

import numpy as np

from tincture_bound import Bound, BoundsT
from tincture_consts import (
    M_SRGB_TO_XYZ,
    M_XYZ_TO_SRGB,
    SRGB_ENCODED_THRESHOLD,
    SRGB_LINEAR_THRESHOLD,
)
from tincture_illuminants import D65, Illuminant
from tincture_xyz import XYZColor

__all__ = ["RGBColor", "RGBParseError", "SRGB_ILLUMINANT"]

SRGB_ILLUMINANT: Final[Illuminant] = D65

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class RGBParseError(ValueError):
    """Raised for malformed hexadecimal color codes."""


def _encode(c: float) -> float:
    """Linear light to sRGB-encoded value."""
    a = abs(c)
    if a <= SRGB_LINEAR_THRESHOLD:
        e = 12.92 * a
    else:
        e = 1.055 * a ** (1.0 / 2.4) - 0.055
    return math.copysign(e, c)


def _decode(c: float) -> float:
    """sRGB-encoded value to linear light."""
    a = abs(c)
    if a <= SRGB_ENCODED_THRESHOLD:
        lin = a / 12.92
    else:
        lin = ((a + 0.055) / 1.055) ** 2.4
    return math.copysign(lin, c)


def _to_byte(c: float) -> int:
    """Quantises to 0..255, rounding half away from zero."""
    scaled = min(max(c, 0.0), 1.0) * 255.0
    whole = math.floor(scaled)
    # scaled - whole is exact, unlike scaled + 0.5
    return int(whole + 1 if scaled - whole >= 0.5 else whole)


@dataclass(slots=True, frozen=True)
class RGBColor(Bound):
    """sRGB color with components in ``[0, 1]``."""
    r: float
    g: float
    b: float

    BOUNDS: ClassVar[BoundsT] = ((0.0, 1.0), (0.0, 1.0), (0.0, 1.0))

    def to_xyz(self, illuminant: Illuminant) -> XYZColor:
        linear = np.array([_decode(self.r), _decode(self.g), _decode(self.b)])
        x, y, z = M_SRGB_TO_XYZ @ linear
        return XYZColor(float(x), float(y), float(z), SRGB_ILLUMINANT).color_adapt(illuminant)

    @classmethod
    def from_xyz(cls, xyz: XYZColor) -> RGBColor:
        xyz_c = xyz.color_adapt(SRGB_ILLUMINANT)
        r, g, b = M_XYZ_TO_SRGB @ np.array([xyz_c.x, xyz_c.y, xyz_c.z])
        return cls(_encode(float(r)), _encode(float(g)), _encode(float(b)))

    # --- 8-bit and hex codec ---

    @classmethod
    def from_int_rgb(cls, r: int, g: int, b: int) -> RGBColor:
        """Builds a color from 8-bit channel values."""
        for c in (r, g, b):
            if not 0 <= c <= 255:
                raise ValueError(f"8-bit channel value out of range: {c}")
        return cls(r / 255.0, g / 255.0, b / 255.0)

    def to_int_rgb(self) -> Tuple[int, int, int]:
        """8-bit channel values, clipped to 0..255."""
        return (_to_byte(self.r), _to_byte(self.g), _to_byte(self.b))

    @classmethod
    def from_hex_code(cls, code: str) -> RGBColor:
        """
        Parses ``#RRGGBB`` or the shorthand ``#RGB`` (leading ``#`` optional).

        Raises:
            RGBParseError: If ``code`` is not a valid hex color.
        """
        match = _HEX_RE.match(code.strip())
        if match is None:
            raise RGBParseError(f"Invalid hex color code: {code!r}")
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(d * 2 for d in digits)
        return cls.from_int_rgb(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    def to_hex(self) -> str:
        """Uppercase ``#RRGGBB``."""
        return "#{:02X}{:02X}{:02X}".format(*self.to_int_rgb())

    def __str__(self) -> str:
        return self.to_hex()
