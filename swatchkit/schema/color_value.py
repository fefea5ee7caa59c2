# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Color value types.

Design principles:
- Immutable: All types are frozen dataclasses or enums
- Exact: Channels are stored as given, in sRGB, 0.0-1.0
- Hex is a snapshot: 8 bits per channel, so hex round trips are lossy
  below 1/255 and colors are compared with CHANNEL_TOLERANCE, never ==

Hex formats:
    #RRGGBB     opaque color
    #RRGGBBAA   color with alpha
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


# =============================================================================
# Tolerance
# =============================================================================

# Absolute per-channel difference below which two channels are equal.
# Shared by the system color registry and palette duplicate detection.
CHANNEL_TOLERANCE = 0.001


# =============================================================================
# Enumerations
# =============================================================================


class ColorSpace(Enum):
    """
    Interpolation space used when mixing two colors.

    DEVICE mixes the raw sRGB components; PERCEPTUAL mixes in OKLab.
    """
    DEVICE = "device"
    PERCEPTUAL = "perceptual"

    @classmethod
    def parse(cls, value: object) -> ColorSpace:
        """Read a wire value, falling back to PERCEPTUAL for anything unknown."""
        for space in cls:
            if space.value == value:
                return space
        return cls.PERCEPTUAL


_INTENSITY_OPACITY = {
    "primary": 1.0,
    "secondary": 0.8,
    "tertiary": 0.6,
    "quaternary": 0.4,
    "quinary": 0.2,
}


class ColorIntensity(Enum):
    """
    Named opacity levels applied to a base color.

    Levels sort from most to least opaque: PRIMARY < SECONDARY < ... < QUINARY.
    """
    PRIMARY = "primary"        # 1.0
    SECONDARY = "secondary"    # 0.8
    TERTIARY = "tertiary"      # 0.6
    QUATERNARY = "quaternary"  # 0.4
    QUINARY = "quinary"        # 0.2

    @property
    def opacity(self) -> float:
        """Alpha multiplier for this level."""
        return _INTENSITY_OPACITY[self.value]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ColorIntensity):
            return NotImplemented
        return self.opacity > other.opacity

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ColorIntensity):
            return NotImplemented
        return self.opacity >= other.opacity

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ColorIntensity):
            return NotImplemented
        return self.opacity < other.opacity

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ColorIntensity):
            return NotImplemented
        return self.opacity <= other.opacity


# =============================================================================
# Core Color Type
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGBAColor:
    """
    A single color as sRGB components plus alpha.

    Attributes:
        red: Red channel (0.0-1.0)
        green: Green channel (0.0-1.0)
        blue: Blue channel (0.0-1.0)
        alpha: Opacity (0.0 = fully transparent, 1.0 = opaque)
    """
    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def __post_init__(self) -> None:
        """Validate channels are finite and within 0-1."""
        for label, value in (
            ("red", self.red),
            ("green", self.green),
            ("blue", self.blue),
            ("alpha", self.alpha),
        ):
            if not math.isfinite(value) or not 0.0 <= value <= 1.0:
                raise ValueError(f"Channel {label} must be 0-1, got {value}")

    @property
    def hex(self) -> str:
        """Hex string like "#3941C8" (alpha dropped)."""
        return color_to_hex(self)

    def as_tuple(self) -> tuple[float, float, float, float]:
        """Channels as (red, green, blue, alpha)."""
        return (self.red, self.green, self.blue, self.alpha)

    def is_close(self, other: RGBAColor, tolerance: float = CHANNEL_TOLERANCE) -> bool:
        """True if every channel differs from ``other`` by less than ``tolerance``."""
        return all(
            abs(a - b) < tolerance
            for a, b in zip(self.as_tuple(), other.as_tuple())
        )

    @classmethod
    def from_bytes(cls, r: int, g: int, b: int, a: int = 255) -> RGBAColor:
        """Build from 8-bit components (0-255)."""
        return cls(red=r / 255, green=g / 255, blue=b / 255, alpha=a / 255)


# Fully transparent color substituted whenever a color cannot be resolved.
CLEAR = RGBAColor(0.0, 0.0, 0.0, 0.0)


# =============================================================================
# Hex Conversion
# =============================================================================

_HEX_RE = re.compile(r"#([0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})")


def hex_to_color(hex_string: str) -> Optional[RGBAColor]:
    """
    Parse "#RRGGBB" or "#RRGGBBAA" into a color.

    Surrounding whitespace is ignored and digits are case-insensitive.
    The leading "#" is mandatory.

    Returns:
        The parsed color, or None for any other input
    """
    if not isinstance(hex_string, str):
        return None
    m = _HEX_RE.fullmatch(hex_string.strip())
    if not m:
        return None
    digits = m.group(1)
    channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    return RGBAColor.from_bytes(*channels)


def _channel_to_byte(value: float) -> int:
    # Round half up, matching how the hex snapshot was always produced
    return int(value * 255 + 0.5)


def color_to_hex(color: RGBAColor) -> str:
    """
    Format a color as "#RRGGBB" (uppercase, alpha dropped).

    Returns:
        Hex string like "#FF3B30"
    """
    r, g, b = (_channel_to_byte(c) for c in (color.red, color.green, color.blue))
    return f"#{r:02X}{g:02X}{b:02X}"


def color_to_hex_with_alpha(color: RGBAColor) -> str:
    """Format a color as "#RRGGBBAA" (uppercase)."""
    return color_to_hex(color) + f"{_channel_to_byte(color.alpha):02X}"


def hex_snapshot(color: RGBAColor, include_alpha: bool = True) -> str:
    """
    Hex form used when a color has to be stored by value.

    Opaque colors use "#RRGGBB". Translucent colors keep their alpha as
    "#RRGGBBAA" unless ``include_alpha`` is False.
    """
    if include_alpha and _channel_to_byte(color.alpha) != 255:
        return color_to_hex_with_alpha(color)
    return color_to_hex(color)
