# -*- coding: utf-8 -*-
"""
Tincture: A device-independent color model
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincture_illuminants.py — Standard illuminant white points.

White points are CIE 1931 2° observer tristimulus values normalised so that
``Y = 1``.  Custom illuminants are accepted as any triplet with a non-zero
``Y``; the stored value is kept verbatim and normalised on lookup.

References:
    - CIE 15:2004 "Colorimetry", Table T.3
    - ASTM E308-01
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Sequence, Tuple

__all__ = [
    "Illuminant",
    "A",
    "C",
    "D50",
    "D55",
    "D65",
    "D75",
    "E",
    "F2",
    "F7",
    "F11",
    "ILLUMINANTS",
]


@dataclass(slots=True, frozen=True)
class Illuminant:
    """
    A named viewing illuminant.

    Two illuminants compare equal when both name and tristimulus triplet
    agree, so ``Illuminant.custom`` values with the same triplet are
    interchangeable.
    """
    name: str
    xyz: Tuple[float, float, float]

    @classmethod
    def custom(cls, xyz: Sequence[float]) -> Illuminant:
        """
        Wraps an arbitrary white point.

        Raises:
            ValueError: If ``xyz`` does not have three components or its
                ``Y`` is zero.
        """
        if len(xyz) != 3:
            raise ValueError(f"White point must have 3 components, got {len(xyz)}")
        if xyz[1] == 0:
            raise ValueError(f"White point {tuple(xyz)} has Y == 0 and cannot be normalised.")
        return cls("custom", (float(xyz[0]), float(xyz[1]), float(xyz[2])))

    def white_point(self) -> Tuple[float, float, float]:
        """White point tristimulus values scaled to ``Y = 1``."""
        x, y, z = self.xyz
        return (x / y, 1.0, z / y)


# --- Daylight series ---
D50: Final[Illuminant] = Illuminant("D50", (0.96422, 1.00000, 0.82521))
D55: Final[Illuminant] = Illuminant("D55", (0.95682, 1.00000, 0.92129))
D65: Final[Illuminant] = Illuminant("D65", (0.95047, 1.00000, 1.08884))
D75: Final[Illuminant] = Illuminant("D75", (0.94972, 1.00000, 1.22638))

# --- Incandescent, legacy daylight and equal-energy ---
A: Final[Illuminant] = Illuminant("A", (1.09850, 1.00000, 0.35585))
C: Final[Illuminant] = Illuminant("C", (0.98074, 1.00000, 1.18232))
E: Final[Illuminant] = Illuminant("E", (1.00000, 1.00000, 1.00000))

# --- Fluorescent ---
F2: Final[Illuminant] = Illuminant("F2", (0.99187, 1.00000, 0.67395))
F7: Final[Illuminant] = Illuminant("F7", (0.95044, 1.00000, 1.08755))
F11: Final[Illuminant] = Illuminant("F11", (1.00966, 1.00000, 0.64370))

ILLUMINANTS: Final[Tuple[Illuminant, ...]] = (D50, D55, D65, D75, A, C, E, F2, F7, F11)
