# -*- coding: utf-8 -*-
"""
Tincture: A device-independent color model
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincture_consts.py — Matrices and exact CIE constants.

All RGB matrices are stored column-vector style (``xyz = M @ rgb``).  The
inverse of every forward matrix is derived with ``np.linalg.inv`` at import
time instead of being transcribed from a table, so a forward/inverse pair
round-trips to machine precision.

References:
    - CIE 15:2004 "Colorimetry"
    - IEC 61966-2-1:1999 (sRGB Standard)
    - Adobe RGB (1998) Color Image Encoding, Version 2005-05
    - ANSI/I3A IT10.7666:2003 (ROMM RGB)
"""

from typing import Final, Tuple, TypeAlias

import numpy as np

from tincture_illuminants import D65

__all__ = [
    "ArrayFloat",
    "LAB_DELTA",
    "LAB_EPSILON",
    "LAB_KAPPA",
    "C25_7",
    "DEG2RAD",
    "RAD2DEG",
    "M_SRGB_TO_XYZ",
    "M_XYZ_TO_SRGB",
    "M_ADOBE_TO_XYZ",
    "M_XYZ_TO_ADOBE",
    "M_ROMM_TO_XYZ",
    "M_XYZ_TO_ROMM",
    "M_BRADFORD",
    "M_BRADFORD_INV",
    "SRGB_LINEAR_THRESHOLD",
    "SRGB_ENCODED_THRESHOLD",
    "ADOBE_GAMMA",
    "ROMM_LINEAR_THRESHOLD",
    "ROMM_ENCODED_THRESHOLD",
    "ROMM_GAMMA",
    "XYZ_APPROX_TOL",
    "XYZ_VISUAL_TOL",
    "VISUAL_DELTA_E",
]

ArrayFloat: TypeAlias = np.typing.NDArray[np.floating]

# =============================================================================
# 1. CIE RATIONAL CONSTANTS
# =============================================================================
# Exact rational forms (CIE 15:2004) instead of the rounded 0.008856 / 903.3.
LAB_DELTA: Final[float] = 6.0 / 29.0
LAB_EPSILON: Final[float] = LAB_DELTA ** 3
LAB_KAPPA: Final[float] = (29.0 / 3.0) ** 3

C25_7: Final[float] = 25.0 ** 7
DEG2RAD: Final[float] = np.pi / 180.0
RAD2DEG: Final[float] = 180.0 / np.pi

# =============================================================================
# 2. RGB PRIMARIES
# =============================================================================

def _rgb_to_xyz_matrix(primaries: Tuple[Tuple[float, float], ...],
                       white: Tuple[float, float, float]) -> ArrayFloat:
    """RGB -> XYZ matrix whose unit RGB maps exactly onto ``white``."""
    p = np.array([[x / y, 1.0, (1.0 - x - y) / y] for x, y in primaries], dtype=np.float64).T
    scale = np.linalg.solve(p, np.asarray(white, dtype=np.float64))
    return p * scale


# sRGB / Rec. 709 primaries (IEC 61966-2-1), scaled to the D65 white used here
_SRGB_PRIMARIES: Final[Tuple[Tuple[float, float], ...]] = ((0.64, 0.33), (0.30, 0.60), (0.15, 0.06))
_M_SRGB_TO_XYZ_BASE = _rgb_to_xyz_matrix(_SRGB_PRIMARIES, D65.xyz)
M_SRGB_TO_XYZ: Final[ArrayFloat] = _M_SRGB_TO_XYZ_BASE
M_XYZ_TO_SRGB: Final[ArrayFloat] = np.linalg.inv(_M_SRGB_TO_XYZ_BASE)

# Adobe RGB (1998), D65 white.  The published table is the XYZ -> RGB direction.
_M_XYZ_TO_ADOBE_BASE = np.array([
    [ 2.04159, -0.56501, -0.34473],
    [-0.96924,  1.87957,  0.04156],
    [ 0.01344, -0.11836,  1.01517]
], dtype=np.float64)
M_XYZ_TO_ADOBE: Final[ArrayFloat] = _M_XYZ_TO_ADOBE_BASE
M_ADOBE_TO_XYZ: Final[ArrayFloat] = np.linalg.inv(_M_XYZ_TO_ADOBE_BASE)

# ROMM RGB (ProPhoto), D50 white
_M_XYZ_TO_ROMM_BASE = np.array([
    [ 1.3460, -0.2556, -0.0511],
    [-0.5446,  1.5082,  0.0205],
    [ 0.0000,  0.0000,  1.2123]
], dtype=np.float64)
M_XYZ_TO_ROMM: Final[ArrayFloat] = _M_XYZ_TO_ROMM_BASE
M_ROMM_TO_XYZ: Final[ArrayFloat] = np.linalg.inv(_M_XYZ_TO_ROMM_BASE)

# =============================================================================
# 3. CHROMATIC ADAPTATION
# =============================================================================
# Bradford "sharpened" cone response matrix (Lam 1985)
M_BRADFORD: Final[ArrayFloat] = np.array([
    [ 0.8951,  0.2664, -0.1614],
    [-0.7502,  1.7135,  0.0367],
    [ 0.0389, -0.0685,  1.0296]
], dtype=np.float64)
M_BRADFORD_INV: Final[ArrayFloat] = np.linalg.inv(M_BRADFORD)

# =============================================================================
# 4. TRANSFER FUNCTIONS
# =============================================================================
SRGB_LINEAR_THRESHOLD: Final[float] = 0.0031308
SRGB_ENCODED_THRESHOLD: Final[float] = 0.04045

# Adobe RGB gamma is exactly 2 + 51/256
ADOBE_GAMMA: Final[float] = 563.0 / 256.0

ROMM_GAMMA: Final[float] = 1.8
ROMM_LINEAR_THRESHOLD: Final[float] = 2.0 ** -9
ROMM_ENCODED_THRESHOLD: Final[float] = 16.0 * ROMM_LINEAR_THRESHOLD

# =============================================================================
# 5. TOLERANCES
# =============================================================================
# Absolute per-component thresholds, applied after adapting to a common white.
XYZ_APPROX_TOL: Final[float] = 1e-9
XYZ_VISUAL_TOL: Final[float] = 1e-3
# CIEDE2000 just-noticeable difference
VISUAL_DELTA_E: Final[float] = 1.0
