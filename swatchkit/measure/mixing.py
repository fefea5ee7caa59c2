# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Color composition: mixing two colors and scaling opacity.

These are the only operations that derive one color from others. Both are
deterministic, so re-running them on decoded parameters reproduces the
original result up to hex quantization of the inputs.
"""

from __future__ import annotations

import numpy as np

from swatchkit.schema.color_value import ColorSpace, RGBAColor
from swatchkit.measure.colorspace import oklab_to_srgb, srgb_to_oklab


def mix(
    color: RGBAColor,
    other: RGBAColor,
    fraction: float,
    space: ColorSpace = ColorSpace.PERCEPTUAL,
) -> RGBAColor:
    """
    Interpolate from ``color`` toward ``other``.

    Args:
        color: Starting color (returned at fraction 0.0)
        other: Target color (returned at fraction 1.0)
        fraction: Interpolation amount. Not clamped; values outside 0-1
            extrapolate and the result is clipped into gamut.
        space: DEVICE interpolates sRGB components directly,
            PERCEPTUAL interpolates in OKLab. Alpha is always linear.

    Returns:
        The mixed color
    """
    rgb1 = np.array(color.as_tuple()[:3], dtype=np.float64)
    rgb2 = np.array(other.as_tuple()[:3], dtype=np.float64)

    if space is ColorSpace.DEVICE:
        rgb = rgb1 + (rgb2 - rgb1) * fraction
    else:
        lab1 = srgb_to_oklab(rgb1)
        lab2 = srgb_to_oklab(rgb2)
        # Far extrapolation overflows the LMS cube
        with np.errstate(over="ignore", invalid="ignore"):
            rgb = oklab_to_srgb(lab1 + (lab2 - lab1) * fraction)

    alpha = color.alpha + (other.alpha - color.alpha) * fraction
    rgb = np.nan_to_num(rgb, nan=0.0, posinf=1.0, neginf=0.0)
    r, g, b = np.clip(rgb, 0.0, 1.0)
    return RGBAColor(
        red=float(r),
        green=float(g),
        blue=float(b),
        alpha=float(np.clip(alpha, 0.0, 1.0)),
    )


def opacity(color: RGBAColor, factor: float) -> RGBAColor:
    """Scale the alpha channel by ``factor``; color channels are unchanged."""
    alpha = min(max(color.alpha * factor, 0.0), 1.0)
    return RGBAColor(color.red, color.green, color.blue, alpha)
