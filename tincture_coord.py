# -*- coding: utf-8 -*-
"""
Tincture: A device-independent color model
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincture_coord.py — Three-component coordinate value.

``Coord`` is the Euclidean embedding every mixable color type maps onto.
It carries no color semantics of its own: addition, scaling, midpoints and
distances are plain vector arithmetic over three floats.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

import numpy as np

__all__ = ["Coord"]


@dataclass(slots=True, frozen=True)
class Coord:
    """An immutable point in three-dimensional space."""
    x: float
    y: float
    z: float

    def __add__(self, other: Coord) -> Coord:
        return Coord(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Coord) -> Coord:
        return Coord(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Coord:
        return Coord(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Coord:
        return Coord(scalar * self.x, scalar * self.y, scalar * self.z)

    def __truediv__(self, scalar: float) -> Coord:
        if scalar == 0:
            raise ZeroDivisionError("Cannot divide a Coord by zero.")
        return Coord(self.x / scalar, self.y / scalar, self.z / scalar)

    def midpoint(self, other: Coord) -> Coord:
        """Point halfway between ``self`` and ``other``."""
        return (self + other) / 2.0

    def weighted_midpoint(self, other: Coord, weight: float) -> Coord:
        """
        Affine combination ``self * weight + (1 - weight) * other``.

        A weight of 1 returns ``self``, a weight of 0 returns ``other``.
        Weights outside ``[0, 1]`` extrapolate along the line.
        """
        return self * weight + (1.0 - weight) * other

    def euclidean_distance(self, other: Coord) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return math.sqrt(dx * dx + dy * dy + dz * dz)

    def average(self, others: Iterable[Coord]) -> Coord:
        """Arithmetic mean of ``self`` and every coordinate in ``others``."""
        total = self
        count = 1
        for coord in others:
            total = total + coord
            count += 1
        return total / count

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Coord:
        if len(arr) != 3:
            raise ValueError(f"Expected 3 components, got {len(arr)}")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))
