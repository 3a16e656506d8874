# -*- coding: utf-8 -*-
"""
Tincture: A device-independent color model
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincture_colorpoint.py — Colors embedded in three-dimensional space.

``ColorPoint`` is an optional capability layered on ``Color``: a type that
can be mapped onto a ``Coord`` gains geometric operations (distances,
midpoints, weighted averages, gradients) computed in its own coordinates,
plus imaginary-color detection against the visual gamut.

Dataclass color types get the embedding for free: fields map onto
``Coord(x, y, z)`` in declaration order.  Results of every operation are
built back through ``from_coord`` so they keep the caller's type.

Note that arithmetic in cylindrical spaces treats hue as a linear axis, so
the midpoint of hues 350 and 10 is 180.
"""

from __future__ import annotations

import dataclasses
import warnings
from typing import Callable, Optional, Sequence, Type, TypeVar

import numpy as np

from tincture_color import REFERENCE_ILLUMINANT, Color
from tincture_consts import ArrayFloat
from tincture_coord import Coord
from tincture_visual_gamut import (
    chromaticity_uv,
    closest_point_on_locus,
    is_inside_locus,
    uv_prime_to_xyz,
)
from tincture_xyz import XYZColor

__all__ = ["ColorPoint", "MismatchedWeightsError"]

PointT = TypeVar("PointT", bound="ColorPoint")


class MismatchedWeightsError(ValueError):
    """Raised when the number of weights differs from the number of colors."""


class ColorPoint(Color):
    """Mixin giving an embeddable color type its geometric operations."""
    __slots__ = ()

    # =========================================================================
    # Embedding
    # =========================================================================

    def to_coord(self) -> Coord:
        x, y, z = (getattr(self, f.name) for f in dataclasses.fields(self))
        return Coord(x, y, z)

    @classmethod
    def from_coord(cls: Type[PointT], coord: Coord) -> PointT:
        return cls(coord.x, coord.y, coord.z)

    # =========================================================================
    # Geometry
    # =========================================================================

    def euclidean_distance(self, other: PointT) -> float:
        """Straight-line distance in this type's coordinates (not perceptual)."""
        return self.to_coord().euclidean_distance(other.to_coord())

    def weighted_midpoint(self: PointT, other: PointT, weight: float) -> PointT:
        """``self * weight + (1 - weight) * other`` in this type's coordinates."""
        return self.from_coord(self.to_coord().weighted_midpoint(other.to_coord(), weight))

    def midpoint(self: PointT, other: PointT) -> PointT:
        return self.from_coord(self.to_coord().midpoint(other.to_coord()))

    def mix(self: PointT, other: PointT) -> PointT:
        """Equal-parts mix, the midpoint in this type's coordinates."""
        return self.midpoint(other)

    def weighted_average(self: PointT, others: Sequence[PointT], weights: Sequence[float]) -> PointT:
        """
        Weighted mean of ``self`` followed by ``others``.

        Weights are normalised by their sum, so only their ratios matter.

        Raises:
            MismatchedWeightsError: If ``len(weights) != len(others) + 1``.
        """
        if len(weights) != len(others) + 1:
            raise MismatchedWeightsError(
                f"Expected {len(others) + 1} weights for {len(others) + 1} colors, got {len(weights)}"
            )
        total = float(sum(weights))
        coords = [self.to_coord()] + [c.to_coord() for c in others]
        acc = Coord(0.0, 0.0, 0.0)
        for coord, w in zip(coords, weights):
            acc = acc + coord * (w / total)
        return self.from_coord(acc)

    def average(self: PointT, others: Sequence[PointT]) -> PointT:
        """Arithmetic mean of ``self`` and ``others``."""
        return self.from_coord(self.to_coord().average(c.to_coord() for c in others))

    # =========================================================================
    # Gradients
    # =========================================================================

    def gradient(self: PointT, other: PointT) -> Callable[[float], PointT]:
        """
        Linear interpolation from ``self`` (at 0) to ``other`` (at 1).
        """
        def _gradient(x: float) -> PointT:
            return other.weighted_midpoint(self, x)
        return _gradient

    def cbrt_gradient(self: PointT, other: PointT) -> Callable[[float], PointT]:
        """
        Gradient evaluated at ``cbrt(x)``, which spends more of ``[0, 1]``
        near ``other`` and compensates for the cube-root response of
        lightness.
        """
        linear = self.gradient(other)

        def _gradient(x: float) -> PointT:
            return linear(float(np.cbrt(x)))
        return _gradient

    def padded_gradient(self: PointT, other: PointT, lower_pad: float, upper_pad: float) -> Callable[[float], PointT]:
        """
        Gradient restricted to ``[lower_pad, upper_pad]`` of the full range:
        ``x`` is remapped to ``lower_pad + (upper_pad - lower_pad) * x``.

        Inverted padding reverses the direction of the gradient, padding
        outside ``[0, 1]`` extrapolates beyond the end colors.  Both are
        allowed but reported with a ``RuntimeWarning``.
        """
        if lower_pad > upper_pad:
            warnings.warn(
                f"Gradient padding is inverted ({lower_pad} > {upper_pad}); "
                "the gradient will run from the end color to the start color.",
                RuntimeWarning,
                stacklevel=2,
            )
        if not (0.0 <= lower_pad <= 1.0 and 0.0 <= upper_pad <= 1.0):
            warnings.warn(
                f"Gradient padding ({lower_pad}, {upper_pad}) lies outside [0, 1] and will extrapolate.",
                RuntimeWarning,
                stacklevel=2,
            )
        linear = self.gradient(other)
        span = upper_pad - lower_pad

        def _gradient(x: float) -> PointT:
            return linear(lower_pad + span * x)
        return _gradient

    def gradient_scale(self: PointT, other: PointT, n: int) -> list[PointT]:
        """
        ``n + 2`` evenly spaced colors from ``self`` to ``other`` inclusive,
        i.e. ``n`` intermediate steps.
        """
        if n < 0:
            raise ValueError(f"Number of intermediate colors must be non-negative, got {n}")
        grad = self.gradient(other)
        return [grad(i / (n + 1)) for i in range(n + 2)]

    # =========================================================================
    # Visual gamut
    # =========================================================================

    def is_imaginary(self, locus: Optional[ArrayFloat] = None) -> bool:
        """
        True when the chromaticity falls outside the spectral locus.

        Black has no chromaticity and is considered real.

        Args:
            locus: Optional (N, 2) ``(u', v')`` boundary to test against.
                Defaults to the bundled CIE 1931 2° locus.
        """
        xyz = self.to_xyz(REFERENCE_ILLUMINANT)
        uv = chromaticity_uv(xyz.x, xyz.y, xyz.z)
        if uv is None:
            return False
        return not is_inside_locus(uv[0], uv[1], locus)

    def closest_real_color(self: PointT, locus: Optional[ArrayFloat] = None) -> PointT:
        """
        Nearest realisable color with the same luminance.

        Real colors are returned unchanged.  Imaginary colors have their
        ``(u', v')`` chromaticity projected onto the locus boundary.

        Raises:
            IndeterminateClosestPointError: If ``locus`` is empty.
        """
        if not self.is_imaginary(locus):
            return self
        xyz = self.to_xyz(REFERENCE_ILLUMINANT)
        u, v = chromaticity_uv(xyz.x, xyz.y, xyz.z)
        cu, cv = closest_point_on_locus(u, v, locus)
        x, y, z = uv_prime_to_xyz(cu, cv, xyz.y)
        return type(self).from_xyz(XYZColor(x, y, z, REFERENCE_ILLUMINANT))
