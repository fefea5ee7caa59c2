# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Swatchkit -- Named colors that remember how they were made.

A NamedColor records its construction method (hex literal, system color,
mix of two colors, or intensity-scaled base) and serializes that method,
so decoding rebuilds the same recipe rather than a flattened RGBA value.

Quick start::

    from swatchkit import NamedColor, system_color

    c = NamedColor.mixed("Violet", system_color("red"), system_color("blue"), 0.5)
    text = c.to_json()              # {"data": {"encoding": "mixedColors", ...}}
    NamedColor.from_json(text)      # same recipe, same id
"""

from __future__ import annotations

__version__ = "1.0.0"

from swatchkit.schema import (
    CHANNEL_TOLERANCE,
    CLEAR,
    ColorIntensity,
    ColorSpace,
    NamedColor,
    RGBAColor,
    SYSTEM_COLORS,
    system_color,
)
from swatchkit.runtime import (
    CodecConfig,
    DecodeError,
    MalformedRecordError,
    UnknownEncodingError,
    decode,
    encode,
    loads,
    to_json,
)
from swatchkit.palette import ImportResult, Palette

__all__ = [
    # Core types
    "NamedColor",
    "RGBAColor",
    "ColorIntensity",
    "ColorSpace",
    "CLEAR",
    "CHANNEL_TOLERANCE",
    # System colors
    "SYSTEM_COLORS",
    "system_color",
    # Codec
    "encode",
    "decode",
    "to_json",
    "loads",
    "CodecConfig",
    "DecodeError",
    "MalformedRecordError",
    "UnknownEncodingError",
    # Palette
    "Palette",
    "ImportResult",
    # Version
    "__version__",
]
