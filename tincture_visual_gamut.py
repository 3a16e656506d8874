# -*- coding: utf-8 -*-
"""
Tincture: A device-independent color model
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincture_visual_gamut.py — The gamut of human vision.

The set of physically realisable chromaticities is the region bounded by the
spectral locus and closed by the line of purples (the straight segment
joining the two spectral extremes).  Tests are performed in the CIE 1976
``(u', v')`` diagram, where the region is a polygon built from the locus
samples.

The bundled table holds the CIE 1931 2° observer locus from 380 nm to
700 nm in 5 nm steps as ``wavelength,x,y`` rows.  Any table of the same
layout can be loaded with ``load_locus``.
"""

from __future__ import annotations

import functools
import logging
from pathlib import Path
from typing import Final, Optional, Tuple, Union

import numpy as np
from numba import njit

from tincture_consts import ArrayFloat

__all__ = [
    "DEFAULT_LOCUS_PATH",
    "IndeterminateClosestPointError",
    "load_locus",
    "default_locus",
    "xy_to_uv_prime",
    "chromaticity_uv",
    "uv_prime_to_xyz",
    "is_inside_locus",
    "closest_point_on_locus",
]

logger = logging.getLogger(__name__)

DEFAULT_LOCUS_PATH: Final[Path] = (
    Path(__file__).resolve().parent / "color_models" / "data" / "cie1931_locus.csv"
)


class IndeterminateClosestPointError(RuntimeError):
    """Raised when no closest boundary point exists (empty locus)."""


# =============================================================================
# 1. LOCUS DATA
# =============================================================================

def xy_to_uv_prime(xy: ArrayFloat) -> ArrayFloat:
    """
    CIE 1931 ``(x, y)`` to CIE 1976 ``(u', v')``, shape (N, 2) -> (N, 2).

    u' = 4x / (-2x + 12y + 3),  v' = 9y / (-2x + 12y + 3)
    """
    xy = np.atleast_2d(np.asarray(xy, dtype=np.float64))
    if xy.shape[-1] != 2:
        raise ValueError(f"Expected last dimension size 2, got {xy.shape[-1]}")
    x = xy[:, 0]
    y = xy[:, 1]
    denom = -2.0 * x + 12.0 * y + 3.0
    return np.column_stack((4.0 * x / denom, 9.0 * y / denom))


@functools.lru_cache(maxsize=4)
def _load_locus_cached(path: str) -> ArrayFloat:
    logger.debug("Loading spectral locus from %s", path)
    table = np.loadtxt(path, delimiter=",", skiprows=1, ndmin=2)
    if table.shape[1] != 3:
        raise ValueError(f"Locus table must have 3 columns (wavelength,x,y), got {table.shape[1]}")
    uv = xy_to_uv_prime(table[:, 1:3])
    uv.setflags(write=False)
    return uv


def load_locus(path: Union[str, Path]) -> ArrayFloat:
    """
    Loads a ``wavelength,x,y`` CSV table as a read-only (N, 2) ``(u', v')`` array.

    Tables are cached per path for the lifetime of the process.
    """
    return _load_locus_cached(str(path))


def default_locus() -> ArrayFloat:
    """The bundled CIE 1931 2° spectral locus in ``(u', v')``."""
    return load_locus(DEFAULT_LOCUS_PATH)


# =============================================================================
# 2. CHROMATICITY
# =============================================================================

def chromaticity_uv(x: float, y: float, z: float) -> Optional[Tuple[float, float]]:
    """
    ``(u', v')`` of a tristimulus value, or ``None`` when the denominator
    ``X + 15Y + 3Z`` vanishes (black has no chromaticity).
    """
    denom = x + 15.0 * y + 3.0 * z
    if denom == 0.0:
        return None
    return (4.0 * x / denom, 9.0 * y / denom)


def uv_prime_to_xyz(u: float, v: float, lum: float) -> Tuple[float, float, float]:
    """
    Rebuilds tristimulus values from ``(u', v')`` and luminance ``Y``.

    Chromaticities with ``v' == 0`` carry no luminance and map to black.
    """
    if v == 0.0:
        return (0.0, 0.0, 0.0)
    x = lum * 9.0 * u / (4.0 * v)
    z = lum * (12.0 - 3.0 * u - 20.0 * v) / (4.0 * v)
    return (x, lum, z)


# =============================================================================
# 3. GEOMETRY KERNELS
# =============================================================================

@njit(cache=True, fastmath=False)
def _point_in_polygon(px: float, py: float, poly: ArrayFloat) -> bool:
    """Even-odd ray casting; the polygon is implicitly closed."""
    n = poly.shape[0]
    inside = False
    j = n - 1
    for i in range(n):
        xi = poly[i, 0]
        yi = poly[i, 1]
        xj = poly[j, 0]
        yj = poly[j, 1]
        if (yi > py) != (yj > py):
            x_cross = (xj - xi) * (py - yi) / (yj - yi) + xi
            if px < x_cross:
                inside = not inside
        j = i
    return inside


@njit(cache=True, fastmath=False)
def _closest_point_on_polygon(px: float, py: float, poly: ArrayFloat) -> Tuple[float, float]:
    """Closest point on the closed polyline through ``poly``."""
    n = poly.shape[0]
    best_d2 = np.inf
    best_x = poly[0, 0]
    best_y = poly[0, 1]
    for i in range(n):
        ax = poly[i, 0]
        ay = poly[i, 1]
        bx = poly[(i + 1) % n, 0]
        by = poly[(i + 1) % n, 1]
        dx = bx - ax
        dy = by - ay
        seg_len2 = dx * dx + dy * dy
        t = 0.0
        if seg_len2 > 0.0:
            t = ((px - ax) * dx + (py - ay) * dy) / seg_len2
            if t < 0.0:
                t = 0.0
            elif t > 1.0:
                t = 1.0
        cx = ax + t * dx
        cy = ay + t * dy
        d2 = (px - cx) * (px - cx) + (py - cy) * (py - cy)
        if d2 < best_d2:
            best_d2 = d2
            best_x = cx
            best_y = cy
    return best_x, best_y


# =============================================================================
# 4. PUBLIC QUERIES
# =============================================================================

def is_inside_locus(u: float, v: float, locus: Optional[ArrayFloat] = None) -> bool:
    """True when ``(u', v')`` lies inside the closed spectral locus."""
    poly = default_locus() if locus is None else np.ascontiguousarray(locus, dtype=np.float64)
    if poly.shape[0] < 3:
        return False
    return bool(_point_in_polygon(float(u), float(v), poly))


def closest_point_on_locus(u: float, v: float, locus: Optional[ArrayFloat] = None) -> Tuple[float, float]:
    """
    Projects ``(u', v')`` onto the nearest point of the locus boundary,
    line of purples included.

    Raises:
        IndeterminateClosestPointError: If the locus holds no points.
    """
    poly = default_locus() if locus is None else np.ascontiguousarray(locus, dtype=np.float64)
    if poly.ndim != 2 or poly.shape[0] == 0:
        raise IndeterminateClosestPointError("Cannot project onto an empty spectral locus.")
    cu, cv = _closest_point_on_polygon(float(u), float(v), poly)
    return (float(cu), float(cv))
