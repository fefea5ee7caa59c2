# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Codec for NamedColor records.

The encoder picks one of four record shapes from a color's creation
method; the decoder reverses that choice and rebuilds both the color and
its creation method.
"""

from swatchkit.runtime.codec.base import (
    CodecConfig,
    DecodeError,
    MalformedRecordError,
    UnknownEncodingError,
)
from swatchkit.runtime.codec.encoder import encode, encode_many
from swatchkit.runtime.codec.decoder import decode, decode_many
from swatchkit.runtime.codec.document import loads, loads_many, loads_one, to_json, unwrap, wrap

__all__ = [
    "CodecConfig",
    "DecodeError",
    "MalformedRecordError",
    "UnknownEncodingError",
    "encode",
    "encode_many",
    "decode",
    "decode_many",
    "wrap",
    "unwrap",
    "to_json",
    "loads",
    "loads_one",
    "loads_many",
]
