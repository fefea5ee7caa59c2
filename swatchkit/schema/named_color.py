# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
NamedColor: a color value that remembers how it was made.

A NamedColor pairs a resolved RGBA value with the CreationMethod that
produced it. The method is what gets serialized, so a color mixed from two
system colors comes back as a mix, and a system color comes back by name
rather than as a lossy hex snapshot.

Construction::

    NamedColor.from_hex("Brand", "#FF5733")
    NamedColor.from_color("Ink", RGBAColor(0.1, 0.1, 0.1))
    NamedColor.from_system_color("Alert", "red")
    NamedColor.mixed("Violet", red, blue, 0.5)
    NamedColor.with_intensity("Faded Blue", blue, ColorIntensity.TERTIARY)
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from typing import Optional, Union

from swatchkit.schema.color_value import (
    CLEAR,
    ColorIntensity,
    ColorSpace,
    RGBAColor,
    hex_snapshot,
    hex_to_color,
)
from swatchkit.schema.creation import (
    CreationMethod,
    DirectColor,
    HexLiteral,
    IntensityScaled,
    MixedColors,
    SystemColor,
    SystemColorRef,
)
from swatchkit.schema.system_colors import SYSTEM_COLORS

log = logging.getLogger(__name__)


def new_color_id() -> str:
    """Fresh opaque identifier (UUID4 text)."""
    return str(uuid.uuid4()).upper()


# =============================================================================
# Resolution
# =============================================================================


def _resolve_hex(hex_string: str, name: str) -> RGBAColor:
    color = hex_to_color(hex_string)
    if color is None:
        log.debug("NamedColor %r: invalid hex string %r, using clear", name, hex_string)
        return CLEAR
    return color


def _resolve_system_name(system_name: str, name: str) -> RGBAColor:
    color = SYSTEM_COLORS.lookup_by_name(system_name)
    if color is None:
        log.debug("NamedColor %r: unknown system color %r, using clear", name, system_name)
        return CLEAR
    return color


def _resolve_base(base: Union[RGBAColor, SystemColorRef, HexLiteral], name: str) -> RGBAColor:
    if isinstance(base, SystemColorRef):
        return _resolve_system_name(base.name, name)
    if isinstance(base, HexLiteral):
        return _resolve_hex(base.hex, name)
    return base


def resolve_color(method: CreationMethod, name: str = "") -> RGBAColor:
    """
    Compute the color a creation method describes.

    Unparseable hex strings and unknown system color names resolve to
    CLEAR instead of raising.

    Args:
        method: Any variant except DirectColor, which carries no value
        name: Color name, used only in diagnostics

    Raises:
        ValueError: If ``method`` is DirectColor
    """
    from swatchkit.measure.mixing import mix, opacity

    if isinstance(method, HexLiteral):
        return _resolve_hex(method.hex, name)
    if isinstance(method, SystemColor):
        return _resolve_system_name(method.name, name)
    if isinstance(method, MixedColors):
        base = _resolve_hex(method.base_hex, name)
        other = _resolve_hex(method.mix_hex, name)
        return mix(base, other, method.fraction, method.space)
    if isinstance(method, IntensityScaled):
        return opacity(_resolve_base(method.base, name), method.intensity.opacity)
    raise ValueError(f"Cannot resolve a color from {method!r}")


# =============================================================================
# NamedColor
# =============================================================================


@dataclass(frozen=True, slots=True)
class NamedColor:
    """
    A named color and the method that created it.

    Prefer the factory classmethods; they keep ``color`` and
    ``creation_method`` consistent.

    Attributes:
        name: Display name (may be empty)
        color: Resolved color value
        creation_method: How the color was built; drives serialization
        id: Opaque identifier, generated once per construction
    """
    name: str
    color: RGBAColor
    creation_method: CreationMethod
    id: str = field(default_factory=new_color_id)

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def from_creation_method(
        cls,
        name: str,
        method: CreationMethod,
        id: Optional[str] = None,
    ) -> NamedColor:
        """Build from a creation method, resolving its color."""
        return cls(
            name=name,
            color=resolve_color(method, name),
            creation_method=method,
            id=id if id is not None else new_color_id(),
        )

    @classmethod
    def from_hex(cls, name: str = "", hex_string: str = "") -> NamedColor:
        """
        Build from "#RRGGBB" or "#RRGGBBAA".

        An invalid string yields CLEAR but is kept verbatim in the
        creation method.
        """
        return cls.from_creation_method(name, HexLiteral(hex_string))

    @classmethod
    def from_color(cls, name: str = "", color: RGBAColor = CLEAR) -> NamedColor:
        """
        Build from a color value.

        The value is classified immediately: a match in the system color
        registry becomes SystemColor, anything else DirectColor.
        """
        system_name = SYSTEM_COLORS.lookup_by_value(color)
        method: CreationMethod
        if system_name is not None:
            method = SystemColor(system_name)
        else:
            method = DirectColor()
        return cls(name=name, color=color, creation_method=method)

    @classmethod
    def from_system_color(cls, name: str = "", system_name: str = "") -> NamedColor:
        """Build from a registry name; unknown names resolve to CLEAR."""
        return cls.from_creation_method(name, SystemColor(system_name))

    @classmethod
    def mixed(
        cls,
        name: str = "",
        base: RGBAColor = CLEAR,
        mix_color: RGBAColor = CLEAR,
        fraction: float = 0.5,
        space: ColorSpace = ColorSpace.PERCEPTUAL,
    ) -> NamedColor:
        """
        Build by mixing ``mix_color`` into ``base``.

        The resolved color is mixed from the exact inputs; the creation
        method keeps their hex snapshots.
        """
        from swatchkit.measure.mixing import mix

        return cls(
            name=name,
            color=mix(base, mix_color, fraction, space),
            creation_method=MixedColors(
                base_hex=hex_snapshot(base),
                mix_hex=hex_snapshot(mix_color),
                fraction=float(fraction),
                space=space,
            ),
        )

    @classmethod
    def with_intensity(
        cls,
        name: str = "",
        base: Union[RGBAColor, SystemColorRef, HexLiteral, str] = CLEAR,
        intensity: ColorIntensity = ColorIntensity.PRIMARY,
    ) -> NamedColor:
        """
        Build by applying an intensity to a base color.

        Args:
            name: Display name
            base: A color value, a system color name (str or
                SystemColorRef) kept by reference, or a HexLiteral kept
                verbatim
            intensity: Opacity level
        """
        if isinstance(base, str):
            base = SystemColorRef(base)
        return cls.from_creation_method(name, IntensityScaled(base, intensity))

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict:
        """Serialize to the ``{"data": {...}}`` envelope."""
        from swatchkit.runtime.codec.document import wrap
        return wrap(self)

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize to a JSON string."""
        from swatchkit.runtime.codec.document import to_json
        return to_json(self, indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> NamedColor:
        """Deserialize from the ``{"data": {...}}`` envelope."""
        from swatchkit.runtime.codec.document import unwrap
        return unwrap(data)

    @classmethod
    def from_json(cls, json_str: str) -> NamedColor:
        """Deserialize from a JSON string holding a single color."""
        from swatchkit.runtime.codec.document import loads_one
        return loads_one(json_str)
