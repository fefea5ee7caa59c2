# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Schema definitions for named colors.

All types in this module are immutable (frozen dataclasses or enums).
A NamedColor's creation method is fixed at construction and is the
authority for serialization.
"""

from swatchkit.schema.color_value import (
    CHANNEL_TOLERANCE,
    CLEAR,
    ColorIntensity,
    ColorSpace,
    RGBAColor,
    color_to_hex,
    color_to_hex_with_alpha,
    hex_snapshot,
    hex_to_color,
)
from swatchkit.schema.creation import (
    ColorEncoding,
    CreationMethod,
    DirectColor,
    HexLiteral,
    IntensityScaled,
    MixedColors,
    SystemColor,
    SystemColorRef,
)
from swatchkit.schema.system_colors import (
    SYSTEM_COLORS,
    SystemColorRegistry,
    lookup_by_name,
    lookup_by_value,
    system_color,
)
from swatchkit.schema.named_color import NamedColor, new_color_id, resolve_color
from swatchkit.schema.catalog import EXAMPLE, NAMED_COLORS, named_color, sample_colors

__all__ = [
    # Values
    "RGBAColor",
    "ColorSpace",
    "ColorIntensity",
    "CLEAR",
    "CHANNEL_TOLERANCE",
    "hex_to_color",
    "color_to_hex",
    "color_to_hex_with_alpha",
    "hex_snapshot",
    # Creation methods (tagged union)
    "ColorEncoding",
    "CreationMethod",
    "HexLiteral",
    "DirectColor",
    "SystemColor",
    "SystemColorRef",
    "MixedColors",
    "IntensityScaled",
    # System color registry
    "SystemColorRegistry",
    "SYSTEM_COLORS",
    "lookup_by_name",
    "lookup_by_value",
    "system_color",
    # Named colors
    "NamedColor",
    "new_color_id",
    "resolve_color",
    # Catalogue
    "EXAMPLE",
    "NAMED_COLORS",
    "named_color",
    "sample_colors",
]
