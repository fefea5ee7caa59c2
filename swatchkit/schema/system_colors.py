# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
System color registry.

A fixed, ordered table of well-known color names. The table is part of the
wire format: records tagged ``systemColor`` carry only the name, so every
reader must agree on both the names and their values.

Order matters for reverse lookup. The first entry whose channels all match
within tolerance wins, so a value shared by two entries always resolves to
the earlier one.

Registry (light appearance, sRGB):

    #   name          value
    1   clear         transparent black
    2   black         #000000
    3   white         #FFFFFF
    4   gray          #8E8E93
    5   red           #FF3B30
    6   green         #34C759
    7   blue          #007AFF
    8   orange        #FF9500
    9   yellow        #FFCC00
    10  pink          #FF2D55
    11  purple        #AF52DE
    12  primary       #000000 at 85% opacity
    13  secondary     #3C3C43 at 60% opacity
    14  accentColor   #5856D6
"""

from __future__ import annotations

from typing import Iterator, Optional

from swatchkit.schema.color_value import CHANNEL_TOLERANCE, CLEAR, RGBAColor


class SystemColorRegistry:
    """
    Read-only ordered mapping between system color names and values.

    Built once at import and never mutated, so concurrent reads need no
    locking.
    """

    __slots__ = ("_entries", "_by_name")

    def __init__(self, entries: tuple[tuple[str, RGBAColor], ...]) -> None:
        names = [name for name, _ in entries]
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate system color names in {names}")
        self._entries = entries
        self._by_name = dict(entries)

    def __iter__(self) -> Iterator[tuple[str, RGBAColor]]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    @property
    def names(self) -> tuple[str, ...]:
        """Registry names in declaration order."""
        return tuple(name for name, _ in self._entries)

    def lookup_by_name(self, name: str) -> Optional[RGBAColor]:
        """Return the color registered under ``name``, or None."""
        return self._by_name.get(name)

    def lookup_by_value(
        self,
        color: RGBAColor,
        tolerance: float = CHANNEL_TOLERANCE,
    ) -> Optional[str]:
        """
        Find the first registry entry matching ``color``.

        All four channels are compared independently; each absolute
        difference must be below ``tolerance``.

        Returns:
            The entry name, or None if nothing matches
        """
        for name, value in self._entries:
            if color.is_close(value, tolerance):
                return name
        return None


SYSTEM_COLORS = SystemColorRegistry((
    ("clear", CLEAR),
    ("black", RGBAColor(0.0, 0.0, 0.0)),
    ("white", RGBAColor(1.0, 1.0, 1.0)),
    ("gray", RGBAColor.from_bytes(0x8E, 0x8E, 0x93)),
    ("red", RGBAColor.from_bytes(0xFF, 0x3B, 0x30)),
    ("green", RGBAColor.from_bytes(0x34, 0xC7, 0x59)),
    ("blue", RGBAColor.from_bytes(0x00, 0x7A, 0xFF)),
    ("orange", RGBAColor.from_bytes(0xFF, 0x95, 0x00)),
    ("yellow", RGBAColor.from_bytes(0xFF, 0xCC, 0x00)),
    ("pink", RGBAColor.from_bytes(0xFF, 0x2D, 0x55)),
    ("purple", RGBAColor.from_bytes(0xAF, 0x52, 0xDE)),
    ("primary", RGBAColor(0.0, 0.0, 0.0, 0.85)),
    ("secondary", RGBAColor(0x3C / 255, 0x3C / 255, 0x43 / 255, 0.6)),
    ("accentColor", RGBAColor.from_bytes(0x58, 0x56, 0xD6)),
))


def lookup_by_name(name: str) -> Optional[RGBAColor]:
    """Forward lookup in the default registry."""
    return SYSTEM_COLORS.lookup_by_name(name)


def lookup_by_value(color: RGBAColor, tolerance: float = CHANNEL_TOLERANCE) -> Optional[str]:
    """Reverse lookup in the default registry."""
    return SYSTEM_COLORS.lookup_by_value(color, tolerance)


def system_color(name: str) -> RGBAColor:
    """
    Get a system color by name.

    Raises:
        KeyError: If ``name`` is not registered
    """
    color = SYSTEM_COLORS.lookup_by_name(name)
    if color is None:
        raise KeyError(f"No system color named '{name}'")
    return color
