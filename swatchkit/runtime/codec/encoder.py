# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Encoder: NamedColor → strategy-tagged record.

The creation method picks the record shape. Every record carries
``name``, ``id`` and ``encoding`` plus exactly the fields its encoding
requires; optional fields are omitted rather than written as null.

Example (colorWithIntensity)::

    {
      "name": "Faded Blue",
      "id": "6F1C...",
      "encoding": "colorWithIntensity",
      "intensity": "tertiary",
      "baseSystemColorName": "blue"
    }
"""

from __future__ import annotations

from typing import Iterable, Optional, Union

from swatchkit.runtime.codec.base import CodecConfig
from swatchkit.schema.color_value import ColorSpace, RGBAColor, hex_snapshot
from swatchkit.schema.creation import (
    ColorEncoding,
    DirectColor,
    HexLiteral,
    IntensityScaled,
    MixedColors,
    SystemColor,
    SystemColorRef,
)
from swatchkit.schema.named_color import NamedColor
from swatchkit.schema.system_colors import SYSTEM_COLORS


def encode(named_color: NamedColor, *, config: Optional[CodecConfig] = None) -> dict:
    """
    Encode a NamedColor as a record (without the ``data`` envelope).

    Args:
        named_color: The color to encode
        config: Encoding settings (uses defaults if None)

    Returns:
        Record dict ready for JSON serialization
    """
    cfg = config or CodecConfig()
    method = named_color.creation_method

    if isinstance(method, HexLiteral):
        return _record(named_color, ColorEncoding.HEX_STRING, hexString=method.hex)

    if isinstance(method, SystemColor):
        return _record(named_color, ColorEncoding.SYSTEM_COLOR, systemColorName=method.name)

    if isinstance(method, DirectColor):
        return _encode_by_value(named_color, cfg)

    if isinstance(method, MixedColors):
        return _record(
            named_color,
            ColorEncoding.MIXED_COLORS,
            baseHexString=method.base_hex,
            mixHexString=method.mix_hex,
            mixFraction=float(method.fraction),
            colorSpace=color_space_value(method.space),
        )

    if isinstance(method, IntensityScaled):
        return _record(
            named_color,
            ColorEncoding.COLOR_WITH_INTENSITY,
            intensity=method.intensity.value,
            **_intensity_base_fields(method.base, cfg),
        )

    raise TypeError(f"Unsupported creation method: {method!r}")


def encode_many(
    colors: Iterable[NamedColor],
    *,
    config: Optional[CodecConfig] = None,
) -> list[dict]:
    """Encode each color independently, preserving order."""
    return [encode(c, config=config) for c in colors]


def color_space_value(space: object) -> str:
    """Wire value for a color space; anything but DEVICE is "perceptual"."""
    if space is ColorSpace.DEVICE:
        return ColorSpace.DEVICE.value
    return ColorSpace.PERCEPTUAL.value


def _record(named_color: NamedColor, encoding: ColorEncoding, **fields: object) -> dict:
    record: dict = {
        "name": named_color.name,
        "id": named_color.id,
        "encoding": encoding.value,
    }
    record.update(fields)
    return record


def _encode_by_value(named_color: NamedColor, cfg: CodecConfig) -> dict:
    """Infer an encoding for a color that carries no construction metadata."""
    system_name = SYSTEM_COLORS.lookup_by_value(named_color.color, cfg.tolerance)
    if system_name is not None:
        return _record(named_color, ColorEncoding.SYSTEM_COLOR, systemColorName=system_name)
    return _record(
        named_color,
        ColorEncoding.HEX_STRING,
        hexString=hex_snapshot(named_color.color, cfg.alpha_in_hex_snapshot),
    )


def _intensity_base_fields(
    base: Union[RGBAColor, SystemColorRef, HexLiteral],
    cfg: CodecConfig,
) -> dict:
    if isinstance(base, SystemColorRef):
        return {"baseSystemColorName": base.name}
    if isinstance(base, HexLiteral):
        return {"baseColorHex": base.hex}
    # Same inference as _encode_by_value, applied to the unscaled base
    system_name = SYSTEM_COLORS.lookup_by_value(base, cfg.tolerance)
    if system_name is not None:
        return {"baseSystemColorName": system_name}
    return {"baseColorHex": hex_snapshot(base, cfg.alpha_in_hex_snapshot)}
