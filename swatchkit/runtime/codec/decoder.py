# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Decoder: strategy-tagged record → NamedColor.

Two failure tiers:

- Structural problems (unknown encoding tag, required field absent or
  null, unusable field type) raise a DecodeError and construct nothing.
- Bad values inside otherwise complete records (unparseable hex, unknown
  system color name) resolve to CLEAR and decoding continues. The
  creation method keeps the raw values so re-encoding reproduces the
  record.

A record's ``id`` is kept verbatim; records without one get a fresh id.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Iterable, Mapping

from swatchkit.runtime.codec.base import (
    MalformedRecordError,
    UnknownEncodingError,
)
from swatchkit.schema.color_value import ColorIntensity, ColorSpace
from swatchkit.schema.creation import (
    ColorEncoding,
    CreationMethod,
    HexLiteral,
    IntensityScaled,
    MixedColors,
    SystemColor,
    SystemColorRef,
)
from swatchkit.schema.named_color import NamedColor, new_color_id


def decode(record: Mapping[str, Any]) -> NamedColor:
    """
    Decode a record (without the ``data`` envelope) into a NamedColor.

    Raises:
        UnknownEncodingError: If ``encoding`` is not a known tag
        MalformedRecordError: If a field the encoding requires is absent,
            null, or of an unusable type
    """
    if not isinstance(record, Mapping):
        raise MalformedRecordError("data", reason="not an object")

    tag = record.get("encoding")
    if tag is None:
        raise MalformedRecordError("encoding")
    encoding = parse_encoding(tag)

    name = _require_str(record, "name", tag)
    raw_id = record.get("id")
    color_id = str(raw_id) if raw_id is not None else new_color_id()

    method = _METHOD_READERS[encoding](record, tag)
    return NamedColor.from_creation_method(name, method, id=color_id)


def decode_many(records: Iterable[Mapping[str, Any]]) -> list[NamedColor]:
    """Decode each record independently; the first failure propagates."""
    return [decode(r) for r in records]


def parse_encoding(tag: object) -> ColorEncoding:
    """Map a wire tag to ColorEncoding or raise UnknownEncodingError."""
    try:
        return ColorEncoding(tag)
    except ValueError:
        raise UnknownEncodingError(tag) from None


# =============================================================================
# Field Access
# =============================================================================


def _require(record: Mapping[str, Any], field: str, tag: str) -> Any:
    value = record.get(field)
    if value is None:
        raise MalformedRecordError(field, tag)
    return value


def _require_str(record: Mapping[str, Any], field: str, tag: str) -> str:
    value = _require(record, field, tag)
    if not isinstance(value, str):
        raise MalformedRecordError(field, tag, reason="not a string")
    return value


def _require_fraction(record: Mapping[str, Any], field: str, tag: str) -> float:
    value = _require(record, field, tag)
    # bool is an int subclass but never a valid fraction
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedRecordError(field, tag, reason="not a finite number")
    try:
        fraction = float(value)
    except OverflowError:
        raise MalformedRecordError(field, tag, reason="not a finite number") from None
    if not math.isfinite(fraction):
        raise MalformedRecordError(field, tag, reason="not a finite number")
    return fraction


# =============================================================================
# Per-encoding Readers
# =============================================================================


def _read_hex_string(record: Mapping[str, Any], tag: str) -> CreationMethod:
    return HexLiteral(_require_str(record, "hexString", tag))


def _read_system_color(record: Mapping[str, Any], tag: str) -> CreationMethod:
    return SystemColor(_require_str(record, "systemColorName", tag))


def _read_mixed_colors(record: Mapping[str, Any], tag: str) -> CreationMethod:
    base_hex = _require_str(record, "baseHexString", tag)
    mix_hex = _require_str(record, "mixHexString", tag)
    fraction = _require_fraction(record, "mixFraction", tag)
    space = ColorSpace.parse(_require(record, "colorSpace", tag))
    return MixedColors(base_hex=base_hex, mix_hex=mix_hex, fraction=fraction, space=space)


def _read_color_with_intensity(record: Mapping[str, Any], tag: str) -> CreationMethod:
    raw_intensity = _require(record, "intensity", tag)
    try:
        intensity = ColorIntensity(raw_intensity)
    except ValueError:
        raise MalformedRecordError("intensity", tag, reason="not a known intensity") from None

    # Both bases keep the raw wire string; resolution happens in NamedColor
    base: HexLiteral | SystemColorRef
    if record.get("baseSystemColorName") is not None:
        base = SystemColorRef(_require_str(record, "baseSystemColorName", tag))
    elif record.get("baseColorHex") is not None:
        base = HexLiteral(_require_str(record, "baseColorHex", tag))
    else:
        raise MalformedRecordError("baseSystemColorName|baseColorHex", tag)

    return IntensityScaled(base=base, intensity=intensity)


_METHOD_READERS: dict[ColorEncoding, Callable[[Mapping[str, Any], str], CreationMethod]] = {
    ColorEncoding.HEX_STRING: _read_hex_string,
    ColorEncoding.SYSTEM_COLOR: _read_system_color,
    ColorEncoding.MIXED_COLORS: _read_mixed_colors,
    ColorEncoding.COLOR_WITH_INTENSITY: _read_color_with_intensity,
}
