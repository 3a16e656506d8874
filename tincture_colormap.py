# -*- coding: utf-8 -*-
"""
Tincture: A device-independent color model
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincture_colormap.py — Scalar-to-color mappings.

A colormap turns numbers into colors.  Inputs are clamped into ``[0, 1]``
before evaluation, so callers can pass raw normalised data without
pre-filtering outliers.

Two families are provided:

  1.  GradientColorMap — a (possibly non-linear, possibly padded) gradient
      between two colors of any embeddable type.
  2.  ListedColorMap — a table of sRGB anchors on an equally spaced grid,
      interpolated linearly or with one of the smooth ``scipy.interpolate``
      schemes.
"""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterable, List, Sequence, Tuple, Type, TypeVar, Union

import numpy as np
from scipy.interpolate import Akima1DInterpolator, CubicSpline, PchipInterpolator

from color_models.srgb import RGBColor
from tincture_color import Color
from tincture_colorpoint import ColorPoint

__all__ = [
    "ColorMap",
    "NormalizeMapping",
    "GradientColorMap",
    "ListedColorMap",
    "INTERPOLATION_KINDS",
]

T = TypeVar("T", bound=Color)
P = TypeVar("P", bound=ColorPoint)


def _clamp_unit(x: float) -> float:
    return min(max(float(x), 0.0), 1.0)


class ColorMap(abc.ABC, Generic[T]):
    """Maps scalars in ``[0, 1]`` to colors."""
    __slots__ = ()

    @abc.abstractmethod
    def transform_single(self, x: float) -> T:
        """Color for one scalar; values outside ``[0, 1]`` are clamped."""

    def transform(self, values: Iterable[float]) -> List[T]:
        return [self.transform_single(x) for x in values]


class NormalizeMapping(enum.Enum):
    """Built-in reshaping of ``[0, 1]`` applied before gradient evaluation."""
    LINEAR = "linear"
    CBRT = "cbrt"


Normalization = Union[NormalizeMapping, Callable[[float], float]]


# =============================================================================
# 1. GRADIENT COLORMAP
# =============================================================================

@dataclass(frozen=True)
class GradientColorMap(ColorMap[P]):
    """
    Gradient between ``start`` and ``end``.

    Args:
        start: Color at 0.
        end: Color at 1.
        normalization: ``NormalizeMapping`` member or any callable mapping
            ``[0, 1]`` onto ``[0, 1]``.
        padding: ``(lower, upper)`` fraction of the full gradient to use.
            ``(0.25, 0.75)`` drops the outer quarter at each end.
    """
    start: P
    end: P
    normalization: Normalization = NormalizeMapping.LINEAR
    padding: Tuple[float, float] = (0.0, 1.0)
    _gradient: Callable[[float], P] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        lower, upper = self.padding
        object.__setattr__(self, "_gradient", self.start.padded_gradient(self.end, lower, upper))

    @classmethod
    def new_linear(cls, start: P, end: P) -> GradientColorMap[P]:
        return cls(start, end, NormalizeMapping.LINEAR)

    @classmethod
    def new_cbrt(cls, start: P, end: P) -> GradientColorMap[P]:
        return cls(start, end, NormalizeMapping.CBRT)

    def _normalize(self, x: float) -> float:
        if self.normalization is NormalizeMapping.LINEAR:
            return x
        if self.normalization is NormalizeMapping.CBRT:
            return float(np.cbrt(x))
        return float(self.normalization(x))

    def transform_single(self, x: float) -> P:
        return self._gradient(self._normalize(_clamp_unit(x)))


# =============================================================================
# 2. LISTED COLORMAP
# =============================================================================

def _build_interpolant(kind: str, grid: np.ndarray, values: np.ndarray) -> Callable[[float], np.ndarray]:
    """Per-channel interpolant over the anchor grid, evaluated at one point."""
    methods = {
        "linear": lambda g, v: (lambda x: np.array([np.interp(x, g, v[:, i]) for i in range(3)])),
        "cubicspline": lambda g, v: CubicSpline(g, v, axis=0),
        "pchip": lambda g, v: PchipInterpolator(g, v, axis=0),
        "akima": lambda g, v: Akima1DInterpolator(g, v, axis=0, method="akima"),
        "makima": lambda g, v: Akima1DInterpolator(g, v, axis=0, method="makima"),
    }
    if kind not in methods:
        raise ValueError(
            f"Unknown interpolation type '{kind}'. "
            f"Choose from: {list(methods.keys())}"
        )
    return methods[kind](grid, values)


INTERPOLATION_KINDS: Tuple[str, ...] = ("linear", "cubicspline", "pchip", "akima", "makima")


class ListedColorMap(ColorMap[Any]):
    """
    Colormap defined by a table of sRGB anchors.

    Anchor ``i`` of ``N`` sits at ``i / (N - 1)``.  A scalar between two
    anchors is interpolated from the bracketing pair using its local
    fraction between them.

    Args:
        values: Sequence of ``(r, g, b)`` triples in ``[0, 1]``, at least two.
        output_type: Color type returned by ``transform_single``.
        interpolation: One of ``INTERPOLATION_KINDS``.  Smooth schemes can
            overshoot; their output is clipped to ``[0, 1]``.
    """
    __slots__ = ("values", "output_type", "interpolation", "_grid", "_interp")

    def __init__(self, values: Sequence[Sequence[float]],
                 output_type: Type[Color] = RGBColor,
                 interpolation: str = "linear") -> None:
        table = np.asarray(values, dtype=np.float64)
        if table.ndim != 2 or table.shape[1] != 3:
            raise ValueError(f"Anchor table must have shape (N, 3), got {table.shape}")
        if table.shape[0] < 2:
            raise ValueError(f"A listed colormap needs at least 2 anchors, got {table.shape[0]}")
        self.values = table
        self.output_type = output_type
        self.interpolation = interpolation
        self._grid = np.linspace(0.0, 1.0, table.shape[0])
        self._interp = _build_interpolant(interpolation, self._grid, table)

    @classmethod
    def from_colors(cls, colors: Iterable[Color], output_type: Type[Color] = RGBColor,
                    interpolation: str = "linear") -> ListedColorMap:
        """Builds the anchor table from colors of any type."""
        anchors = []
        for color in colors:
            rgb = color.convert(RGBColor)
            anchors.append((rgb.r, rgb.g, rgb.b))
        return cls(anchors, output_type, interpolation)

    def __len__(self) -> int:
        return self.values.shape[0]

    def transform_single(self, x: float) -> Color:
        r, g, b = np.clip(self._interp(_clamp_unit(x)), 0.0, 1.0)
        rgb = RGBColor(float(r), float(g), float(b))
        if self.output_type is RGBColor:
            return rgb
        return rgb.convert(self.output_type)
