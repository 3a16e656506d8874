# -*- coding: utf-8 -*-
"""
Tincture: A device-independent color model
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincture_bound.py — Gamut bounds for device-oriented color types.

A bounded type declares its valid range as three ``(min, max)`` pairs, in
embedding order, on the class attribute ``BOUNDS``.  Clamping clips every
component independently; it is the only place in the library where values
are forced into a gamut.
"""

from __future__ import annotations

from typing import ClassVar, Tuple, Type, TypeVar

import numpy as np

from tincture_color import Color
from tincture_colorpoint import ColorPoint
from tincture_coord import Coord

__all__ = ["Bound", "BoundsT"]

BoundsT = Tuple[Tuple[float, float], Tuple[float, float], Tuple[float, float]]

ColorT = TypeVar("ColorT", bound=Color)
BoundT = TypeVar("BoundT", bound="Bound")


class Bound(ColorPoint):
    """Mixin for color types with a finite, axis-aligned gamut."""
    __slots__ = ()

    BOUNDS: ClassVar[BoundsT] = ((0.0, 1.0), (0.0, 1.0), (0.0, 1.0))

    @classmethod
    def bounds(cls) -> BoundsT:
        return cls.BOUNDS

    @classmethod
    def clamp_coord(cls, point: Coord) -> Coord:
        """Clips each component of ``point`` into its ``(min, max)`` range."""
        lo = np.array([b[0] for b in cls.BOUNDS], dtype=np.float64)
        hi = np.array([b[1] for b in cls.BOUNDS], dtype=np.float64)
        return Coord.from_array(np.clip(point.to_array(), lo, hi))

    @classmethod
    def clamp(cls: Type[BoundT], color: ColorT) -> ColorT:
        """
        Forces ``color`` into the gamut of this type.

        ``color`` is converted into this type, clipped and converted back to
        its own type.  Both conversions are skipped when ``color`` already is
        an instance of this type, which makes clamping an in-gamut value an
        exact no-op.
        """
        native = color if isinstance(color, cls) else color.convert(cls)
        clamped = cls.from_coord(cls.clamp_coord(native.to_coord()))
        if isinstance(color, cls):
            return clamped
        return color._rebuild(clamped)
