# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Color space conversions used for perceptual mixing.

Conversion chain: sRGB → Linear RGB → OKLab (and back)

References:
- OKLab: https://bottosson.github.io/posts/oklab/

All conversions are pure NumPy and operate on arrays of shape (..., 3).
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================

# Piecewise breakpoint, encoded and linear side
_SRGB_THRESHOLD = 0.04045
_LINEAR_THRESHOLD = _SRGB_THRESHOLD / 12.92


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Remove the sRGB transfer curve from values in [0, 1].

    Piecewise: v/12.92 up to 0.04045, ((v + 0.055) / 1.055) ^ 2.4 above.
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= _SRGB_THRESHOLD,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4),
    )


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """Apply the sRGB transfer curve; output is clipped to [0, 1]."""
    linear = np.maximum(np.asarray(linear, dtype=np.float64), 0.0)
    srgb = np.where(
        linear <= _LINEAR_THRESHOLD,
        linear * 12.92,
        1.055 * np.power(linear, 1.0 / 2.4) - 0.055,
    )
    return np.clip(srgb, 0.0, 1.0)


# =============================================================================
# Linear RGB ↔ OKLab
# =============================================================================

# Linear sRGB to LMS (cone responses)
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS (cube root) to OKLab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

_M1_INV = np.linalg.inv(_M1)
_M2_INV = np.linalg.inv(_M2)


def linear_rgb_to_oklab(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Linear RGB (..., 3) to OKLab (L, a, b)."""
    rgb = np.asarray(rgb, dtype=np.float64)
    lms = np.einsum('...j,ij->...i', rgb, _M1)
    lms_cbrt = np.cbrt(lms)
    return np.einsum('...j,ij->...i', lms_cbrt, _M2)


def oklab_to_linear_rgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """OKLab (L, a, b) to linear RGB (..., 3); may leave the sRGB gamut."""
    lab = np.asarray(lab, dtype=np.float64)
    lms = np.einsum('...j,ij->...i', lab, _M2_INV) ** 3
    return np.einsum('...j,ij->...i', lms, _M1_INV)


# =============================================================================
# Convenience: sRGB ↔ OKLab (full chain)
# =============================================================================


def srgb_to_oklab(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB [0, 1] to OKLab.

    Args:
        srgb: Array of shape (..., 3) with sRGB values [0, 1]

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    return linear_rgb_to_oklab(srgb_to_linear(srgb))


def oklab_to_srgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to sRGB [0, 1].

    Out-of-gamut results are clipped to [0, 1].
    """
    return linear_to_srgb(oklab_to_linear_rgb(lab))
