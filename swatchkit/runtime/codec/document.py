# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
JSON documents of NamedColors.

A single color is an envelope object; a collection is an array of them::

    {"data": {"name": "Test Red", "id": "...", "encoding": "hexString",
              "hexString": "#FF0000"}}

    [{"data": {...}}, {"data": {...}}]

The ``data`` envelope is fixed and required on every value.
"""

from __future__ import annotations

import json
from typing import Any, Iterable, Optional, Union

from swatchkit.runtime.codec.base import ENVELOPE_KEY, CodecConfig, MalformedRecordError
from swatchkit.runtime.codec.decoder import decode
from swatchkit.runtime.codec.encoder import encode
from swatchkit.schema.named_color import NamedColor


def wrap(named_color: NamedColor, *, config: Optional[CodecConfig] = None) -> dict:
    """Encode a color inside the ``data`` envelope."""
    return {ENVELOPE_KEY: encode(named_color, config=config)}


def unwrap(envelope: Any) -> NamedColor:
    """
    Decode a color from its ``data`` envelope.

    Raises:
        MalformedRecordError: If ``envelope`` is not an object with a
            ``data`` object
        DecodeError: For any record-level failure (see decoder.decode)
    """
    if not isinstance(envelope, dict) or not isinstance(envelope.get(ENVELOPE_KEY), dict):
        raise MalformedRecordError(ENVELOPE_KEY)
    return decode(envelope[ENVELOPE_KEY])


def to_json(
    colors: Union[NamedColor, Iterable[NamedColor]],
    *,
    indent: Optional[int] = None,
    sort_keys: bool = False,
    config: Optional[CodecConfig] = None,
) -> str:
    """
    Serialize one color (JSON object) or a collection (JSON array).

    Args:
        colors: A NamedColor or any iterable of them
        indent: Passed to json.dumps; None for compact output
        sort_keys: Sort record keys alphabetically
        config: Encoding settings (uses defaults if None)
    """
    if isinstance(colors, NamedColor):
        payload: Any = wrap(colors, config=config)
    else:
        payload = [wrap(c, config=config) for c in colors]
    return json.dumps(payload, indent=indent, sort_keys=sort_keys)


def loads(text: Union[str, bytes]) -> Union[NamedColor, list[NamedColor]]:
    """
    Parse a JSON document of one color or an array of colors.

    Raises:
        json.JSONDecodeError: If ``text`` is not valid JSON
        DecodeError: If any value fails to decode
    """
    payload = json.loads(text)
    if isinstance(payload, list):
        return [unwrap(item) for item in payload]
    return unwrap(payload)


def loads_one(text: Union[str, bytes]) -> NamedColor:
    """Parse a JSON document holding exactly one color object."""
    return unwrap(json.loads(text))


def loads_many(text: Union[str, bytes]) -> list[NamedColor]:
    """
    Parse a JSON array of colors.

    Raises:
        MalformedRecordError: If the document is not an array
    """
    payload = json.loads(text)
    if not isinstance(payload, list):
        raise MalformedRecordError(ENVELOPE_KEY, reason="not inside an array")
    return [unwrap(item) for item in payload]
