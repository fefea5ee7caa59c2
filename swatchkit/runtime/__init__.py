# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Serialization runtime for Swatchkit.

Strategy-tagged JSON encoding and decoding of NamedColor values.
The runtime never alters a color; it only chooses how to write it down.
"""

from swatchkit.runtime.codec import (
    CodecConfig,
    DecodeError,
    MalformedRecordError,
    UnknownEncodingError,
    decode,
    decode_many,
    encode,
    encode_many,
    loads,
    loads_many,
    loads_one,
    to_json,
    unwrap,
    wrap,
)

__all__ = [
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
    "CodecConfig",
    "DecodeError",
    "MalformedRecordError",
    "UnknownEncodingError",
]
