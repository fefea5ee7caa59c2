# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Creation methods: how a NamedColor was produced.

Exactly one variant is attached to every NamedColor. The variant is set when
the color is constructed (or decoded) and is the authority for serialization;
the resolved color is derived from it, never the other way around.

    HexLiteral        "#FF0000"                  → hexString
    DirectColor       RGBAColor supplied as-is     → hexString or systemColor
    SystemColor       "red"                        → systemColor
    MixedColors       base + mix + fraction/space  → mixedColors
    IntensityScaled   base + ColorIntensity        → colorWithIntensity
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from swatchkit.schema.color_value import ColorIntensity, ColorSpace, RGBAColor


class ColorEncoding(Enum):
    """Wire tag identifying the shape of an encoded record."""
    HEX_STRING = "hexString"
    SYSTEM_COLOR = "systemColor"
    MIXED_COLORS = "mixedColors"
    COLOR_WITH_INTENSITY = "colorWithIntensity"


@dataclass(frozen=True, slots=True)
class SystemColorRef:
    """A reference to a registry entry by name, kept unresolved."""
    name: str


@dataclass(frozen=True, slots=True)
class HexLiteral:
    """
    Built from a hex string.

    Attributes:
        hex: The string exactly as supplied, even if it did not parse
    """
    hex: str

    @property
    def encoding(self) -> ColorEncoding:
        return ColorEncoding.HEX_STRING


@dataclass(frozen=True, slots=True)
class DirectColor:
    """Built from a color value that matched no system color."""

    @property
    def encoding(self) -> ColorEncoding:
        # Resolved at encode time: systemColor if the value matches, else hexString
        return ColorEncoding.HEX_STRING


@dataclass(frozen=True, slots=True)
class SystemColor:
    """Built from (or classified as) a system color."""
    name: str

    @property
    def encoding(self) -> ColorEncoding:
        return ColorEncoding.SYSTEM_COLOR


@dataclass(frozen=True, slots=True)
class MixedColors:
    """
    Built by mixing two colors.

    Attributes:
        base_hex: Hex snapshot of the starting color
        mix_hex: Hex snapshot of the color mixed in
        fraction: Amount of ``mix_hex`` (0.0-1.0)
        space: Interpolation space
    """
    base_hex: str
    mix_hex: str
    fraction: float
    space: ColorSpace = ColorSpace.PERCEPTUAL

    @property
    def encoding(self) -> ColorEncoding:
        return ColorEncoding.MIXED_COLORS


@dataclass(frozen=True, slots=True)
class IntensityScaled:
    """
    Built by applying an intensity (opacity level) to a base color.

    Attributes:
        base: The unscaled base: a color value, a system color name, or a
            hex string kept verbatim as decoded
        intensity: Opacity level applied to the base
    """
    base: Union[RGBAColor, SystemColorRef, HexLiteral]
    intensity: ColorIntensity = ColorIntensity.PRIMARY

    @property
    def encoding(self) -> ColorEncoding:
        return ColorEncoding.COLOR_WITH_INTENSITY


CreationMethod = Union[HexLiteral, DirectColor, SystemColor, MixedColors, IntensityScaled]
