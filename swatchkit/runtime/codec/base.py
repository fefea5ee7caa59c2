# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""Base types shared by the encoder and decoder: field names, errors, config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from swatchkit.schema.color_value import CHANNEL_TOLERANCE
from swatchkit.schema.creation import ColorEncoding

# Envelope key wrapping every record
ENVELOPE_KEY = "data"

# Fields present on every record
COMMON_FIELDS = ("name", "id", "encoding")

# Fields each encoding requires, in emission order
REQUIRED_FIELDS = {
    ColorEncoding.HEX_STRING: ("hexString",),
    ColorEncoding.SYSTEM_COLOR: ("systemColorName",),
    ColorEncoding.MIXED_COLORS: ("baseHexString", "mixHexString", "mixFraction", "colorSpace"),
    ColorEncoding.COLOR_WITH_INTENSITY: ("intensity",),
}

# colorWithIntensity carries exactly one of these, name preferred on decode
INTENSITY_BASE_FIELDS = ("baseSystemColorName", "baseColorHex")


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for encoding."""

    # Channel tolerance for matching colors against the system registry
    tolerance: float = CHANNEL_TOLERANCE

    # Keep alpha ("#RRGGBBAA") when a translucent color is stored by value
    # (DirectColor values and color-valued intensity bases). False writes
    # "#RRGGBB" and drops alpha for those. Hex strings already held by a
    # creation method (hexString, mixedColors, decoded baseColorHex) are
    # written verbatim either way.
    alpha_in_hex_snapshot: bool = True


class DecodeError(ValueError):
    """A record could not be decoded. Nothing was constructed."""


class MalformedRecordError(DecodeError):
    """
    A record with a known encoding is missing a required field, or a
    required field holds an unusable value.

    Attributes:
        field: Name of the offending field
        encoding: The record's encoding tag, if it was read
    """

    def __init__(self, field: str, encoding: Optional[str] = None, reason: str = "missing") -> None:
        self.field = field
        self.encoding = encoding
        self.reason = reason
        where = f" for {encoding} encoding" if encoding else ""
        super().__init__(f"Field '{field}' is {reason}{where}")


class UnknownEncodingError(DecodeError):
    """
    A record's encoding tag is not one of the known encodings.

    Attributes:
        encoding: The unrecognized tag value
    """

    def __init__(self, encoding: object) -> None:
        self.encoding = encoding
        known = ", ".join(e.value for e in ColorEncoding)
        super().__init__(f"Unknown encoding {encoding!r} (expected one of: {known})")
