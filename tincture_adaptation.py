# -*- coding: utf-8 -*-
"""
Tincture: A device-independent color model
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincture_adaptation.py — Bradford chromatic adaptation.

Adaptation is a von Kries scaling performed in the Bradford "sharpened"
cone space with full adaptation (D = 1):

    M_composite = M_B^-1 @ diag(lms_dst / lms_src) @ M_B

The composite matrix only depends on the pair of white points, so it is
cached per pair.  Results are never clipped: adapting an imaginary or
out-of-gamut color yields the exact (possibly negative) tristimulus values.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING, Tuple

import numpy as np

from tincture_consts import ArrayFloat, M_BRADFORD, M_BRADFORD_INV
from tincture_illuminants import Illuminant

if TYPE_CHECKING:
    from tincture_xyz import XYZColor

__all__ = ["ChromaticAdaptation"]

logger = logging.getLogger(__name__)

WhiteTuple = Tuple[float, float, float]


@functools.lru_cache(maxsize=64)
def _get_cached_bradford_matrix(src_white: WhiteTuple, dst_white: WhiteTuple) -> ArrayFloat:
    """Cached worker building the composite Bradford matrix for one white-point pair."""
    logger.debug("Building Bradford matrix %s -> %s", src_white, dst_white)
    src_lms = M_BRADFORD @ np.array(src_white, dtype=np.float64)
    dst_lms = M_BRADFORD @ np.array(dst_white, dtype=np.float64)
    gain = np.diag(dst_lms / src_lms)
    matrix = M_BRADFORD_INV @ gain @ M_BRADFORD
    matrix.setflags(write=False)
    return matrix


class ChromaticAdaptation:
    """Handles white point adaptation (Bradford method)."""

    @staticmethod
    def calc_transform_matrix(src: Illuminant, dst: Illuminant) -> ArrayFloat:
        """
        Computes the Bradford adaptation matrix between two illuminants.

        Args:
            src: Illuminant the values are currently expressed under.
            dst: Illuminant to adapt to.

        Returns:
            Read-only 3x3 matrix for column-vector multiplication.
        """
        return _get_cached_bradford_matrix(src.white_point(), dst.white_point())

    @staticmethod
    def adapt_values(xyz: ArrayFloat, src: Illuminant, dst: Illuminant) -> ArrayFloat:
        """
        Adapts raw XYZ values, shape (3,) or (N, 3), from ``src`` to ``dst``.
        """
        arr = np.asarray(xyz, dtype=np.float64)
        if src == dst:
            return arr
        matrix = ChromaticAdaptation.calc_transform_matrix(src, dst)
        return arr @ matrix.T

    @staticmethod
    def adapt(xyz: XYZColor, target: Illuminant) -> XYZColor:
        """
        Re-expresses ``xyz`` under ``target``.

        Returns ``xyz`` itself when it is already expressed under ``target``.
        """
        if xyz.illuminant == target:
            return xyz
        x, y, z = ChromaticAdaptation.adapt_values(
            np.array([xyz.x, xyz.y, xyz.z], dtype=np.float64), xyz.illuminant, target
        )
        return type(xyz)(float(x), float(y), float(z), target)
