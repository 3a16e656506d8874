# -*- coding: utf-8 -*-
"""
Tincture: A device-independent color model
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincture_metrics.py — CIEDE2000 and CIE76 color difference.

The CIEDE2000 kernel follows Sharma, Wu & Dalal (2005) step by step,
including the exact zero-chroma branches of the hue difference and mean hue.
It is compiled with ``fastmath=False``: reassociation would break both the
``C1' * C2' == 0`` branch tests and the exact symmetry ``dE(a, b) == dE(b, a)``.

``delta_e_2000`` accepts single triplets or ``(N, 3)`` tables; both paths run
the same per-pair kernel.

References:
    - Sharma, G., Wu, W., & Dalal, E. N. (2005). "The CIEDE2000
      color-difference formula: Implementation notes, supplementary test
      data, and mathematical observations". Color Res. Appl. 30(1).
"""

from typing import Sequence, Tuple, Union

import numpy as np
from numba import float64, njit, prange

from tincture_consts import ArrayFloat, C25_7, DEG2RAD, RAD2DEG

__all__ = ["delta_e_2000", "delta_e_76"]


# =============================================================================
# 1. KERNELS
# =============================================================================

@njit(float64(float64, float64, float64, float64, float64, float64, float64, float64, float64), cache=True, fastmath=False)
def _delta_e_2000_single(L1: float, a1: float, b1: float, L2: float, a2: float, b2: float,
                         k_L: float, k_C: float, k_H: float) -> float:
    """Single-pair CIEDE2000 with parametric factors."""
    # Step 1: chroma-dependent a' correction
    C1 = np.hypot(a1, b1)
    C2 = np.hypot(a2, b2)
    C_bar = (C1 + C2) * 0.5
    C_bar_7 = C_bar ** 7
    G = 0.5 * (1.0 - np.sqrt(C_bar_7 / (C_bar_7 + C25_7)))
    a1_p = (1.0 + G) * a1
    a2_p = (1.0 + G) * a2
    C1_p = np.hypot(a1_p, b1)
    C2_p = np.hypot(a2_p, b2)

    if a1_p == 0.0 and b1 == 0.0:
        h1_p = 0.0
    else:
        h1_p = (np.arctan2(b1, a1_p) * RAD2DEG) % 360.0
    if a2_p == 0.0 and b2 == 0.0:
        h2_p = 0.0
    else:
        h2_p = (np.arctan2(b2, a2_p) * RAD2DEG) % 360.0
    # -tiny % 360 rounds to 360.0
    if h1_p >= 360.0:
        h1_p -= 360.0
    if h2_p >= 360.0:
        h2_p -= 360.0

    # Step 2: differences
    dL_p = L2 - L1
    dC_p = C2_p - C1_p
    C_prod = C1_p * C2_p
    if C_prod == 0.0:
        dh_p = 0.0
    else:
        diff = h2_p - h1_p
        if abs(diff) <= 180.0:
            dh_p = diff
        elif diff > 180.0:
            dh_p = diff - 360.0
        else:
            dh_p = diff + 360.0
    dH_p = 2.0 * np.sqrt(C_prod) * np.sin(dh_p * DEG2RAD * 0.5)

    # Step 3: weighting functions
    L_bar_p = (L1 + L2) * 0.5
    C_bar_p = (C1_p + C2_p) * 0.5
    h_sum = h1_p + h2_p
    if C_prod == 0.0:
        h_bar_p = h_sum
    elif abs(h1_p - h2_p) <= 180.0:
        h_bar_p = h_sum * 0.5
    elif h_sum < 360.0:
        h_bar_p = (h_sum + 360.0) * 0.5
    else:
        h_bar_p = (h_sum - 360.0) * 0.5

    T = (1.0
         - 0.17 * np.cos((h_bar_p - 30.0) * DEG2RAD)
         + 0.24 * np.cos((2.0 * h_bar_p) * DEG2RAD)
         + 0.32 * np.cos((3.0 * h_bar_p + 6.0) * DEG2RAD)
         - 0.20 * np.cos((4.0 * h_bar_p - 63.0) * DEG2RAD))
    d_theta = 30.0 * np.exp(-((h_bar_p - 275.0) / 25.0) ** 2)
    C_bar_p_7 = C_bar_p ** 7
    R_C = 2.0 * np.sqrt(C_bar_p_7 / (C_bar_p_7 + C25_7))
    R_T = -np.sin(2.0 * d_theta * DEG2RAD) * R_C
    L_term = (L_bar_p - 50.0) ** 2
    S_L = 1.0 + (0.015 * L_term) / np.sqrt(20.0 + L_term)
    S_C = 1.0 + 0.045 * C_bar_p
    S_H = 1.0 + 0.015 * C_bar_p * T

    # Step 4: combine
    t_L = dL_p / (k_L * S_L)
    t_C = dC_p / (k_C * S_C)
    t_H = dH_p / (k_H * S_H)
    return np.sqrt(t_L * t_L + t_C * t_C + t_H * t_H + R_T * t_C * t_H)


@njit(cache=True, fastmath=False, parallel=True)
def _batch_delta_e_2000(lab1: ArrayFloat, lab2: ArrayFloat, k_L: float, k_C: float, k_H: float) -> ArrayFloat:
    """One kernel call per row pair."""
    n = len(lab1)
    res = np.empty(n, dtype=np.float64)
    for i in prange(n):
        res[i] = _delta_e_2000_single(lab1[i, 0], lab1[i, 1], lab1[i, 2],
                                      lab2[i, 0], lab2[i, 1], lab2[i, 2],
                                      k_L, k_C, k_H)
    return res


@njit(cache=True, fastmath=False, parallel=True)
def _batch_delta_e_76(lab1: ArrayFloat, lab2: ArrayFloat) -> ArrayFloat:
    n = len(lab1)
    res = np.empty(n, dtype=np.float64)
    for i in prange(n):
        dL = lab1[i, 0] - lab2[i, 0]
        da = lab1[i, 1] - lab2[i, 1]
        db = lab1[i, 2] - lab2[i, 2]
        res[i] = np.sqrt(dL * dL + da * da + db * db)
    return res


# =============================================================================
# 2. PUBLIC API
# =============================================================================

LabInput = Union[Sequence[float], ArrayFloat]


def _pair_rows(lab1: ArrayFloat, lab2: ArrayFloat) -> Tuple[ArrayFloat, ArrayFloat]:
    """Two dense ``(N, 3)`` tables; a single triplet is repeated against the other side."""
    rows1 = np.ascontiguousarray(np.atleast_2d(lab1), dtype=np.float64)
    rows2 = np.ascontiguousarray(np.atleast_2d(lab2), dtype=np.float64)
    if rows1.ndim != 2 or rows2.ndim != 2 or rows1.shape[1] != 3 or rows2.shape[1] != 3:
        raise ValueError(f"L*a*b* input must be a triplet or an (N, 3) table, got {rows1.shape} and {rows2.shape}")
    n1, n2 = rows1.shape[0], rows2.shape[0]
    if n1 == n2:
        return rows1, rows2
    if n1 == 1:
        return np.repeat(rows1, n2, axis=0), rows2
    if n2 == 1:
        return rows1, np.repeat(rows2, n1, axis=0)
    raise ValueError(f"Cannot pair {n1} colors with {n2} colors")


def delta_e_2000(lab1: LabInput, lab2: LabInput,
                 k_L: float = 1.0, k_C: float = 1.0, k_H: float = 1.0,
                 textiles: bool = False) -> Union[float, ArrayFloat]:
    """
    CIEDE2000 difference between L*a*b* colors.

    Two triplets give a float, which is what ``Color.distance`` uses.  An
    ``(N, 3)`` table on either side gives an array of ``N`` differences,
    computed in parallel; a single triplet on the other side is compared
    against every row.

    Args:
        lab1, lab2: ``(L*, a*, b*)`` triplets or ``(N, 3)`` tables.
        k_L, k_C, k_H: Parametric weights; all 1 for reference conditions.
        textiles: Use the textile weighting ``k_L = 2`` (overrides the
            weights passed in).

    Raises:
        ValueError: On malformed shapes or row counts that cannot be paired.
    """
    if textiles:
        k_L, k_C, k_H = 2.0, 1.0, 1.0
    arr1 = np.asarray(lab1, dtype=np.float64)
    arr2 = np.asarray(lab2, dtype=np.float64)
    if arr1.shape == (3,) and arr2.shape == (3,):
        return float(_delta_e_2000_single(arr1[0], arr1[1], arr1[2],
                                          arr2[0], arr2[1], arr2[2],
                                          float(k_L), float(k_C), float(k_H)))
    rows1, rows2 = _pair_rows(arr1, arr2)
    return _batch_delta_e_2000(rows1, rows2, float(k_L), float(k_C), float(k_H))


def delta_e_76(lab1: LabInput, lab2: LabInput) -> Union[float, ArrayFloat]:
    """CIE 1976 difference, the Euclidean distance in L*a*b*.  Same shapes as ``delta_e_2000``."""
    arr1 = np.asarray(lab1, dtype=np.float64)
    arr2 = np.asarray(lab2, dtype=np.float64)
    if arr1.shape == (3,) and arr2.shape == (3,):
        return float(np.sqrt(np.sum((arr1 - arr2) ** 2)))
    rows1, rows2 = _pair_rows(arr1, arr2)
    return _batch_delta_e_76(rows1, rows2)
