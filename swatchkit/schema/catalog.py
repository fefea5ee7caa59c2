# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Built-in named colors.

A crayon-box catalogue: twelve grays from Licorice to Snow, followed by
twelve dark, twelve full-strength and twelve light hues. All entries are
hex literals and encode as ``hexString``.
"""

from __future__ import annotations

from swatchkit.schema.color_value import ColorIntensity, ColorSpace
from swatchkit.schema.named_color import NamedColor
from swatchkit.schema.system_colors import system_color

EXAMPLE = NamedColor.from_hex("Example", "#FF5733")

_CATALOG = (
    # Grays
    ("Licorice", "#000000"),
    ("Lead", "#191919"),
    ("Tungsten", "#333333"),
    ("Iron", "#4c4c4c"),
    ("Steel", "#666666"),
    ("Tin", "#7f7f7f"),
    ("Nickel", "#808080"),
    ("Aluminum", "#999999"),
    ("Magnesium", "#b3b3b3"),
    ("Silver", "#cccccc"),
    ("Mercury", "#e6e6e6"),
    ("Snow", "#ffffff"),
    # Dark
    ("Cayenne", "#800000"),
    ("Mocha", "#804000"),
    ("Asparagus", "#808000"),
    ("Fern", "#408000"),
    ("Clover", "#008000"),
    ("Moss", "#008040"),
    ("Teal", "#008080"),
    ("Ocean", "#004080"),
    ("Midnight", "#000080"),
    ("Eggplant", "#400080"),
    ("Plum", "#800080"),
    ("Maroon", "#800040"),
    # Full strength
    ("Maraschino", "#ff0000"),
    ("Tangerine", "#ff8000"),
    ("Lemon", "#ffff00"),
    ("Lime", "#80ff00"),
    ("Spring", "#00ff00"),
    ("Sea Foam", "#00ff80"),
    ("Turquoise", "#00ffff"),
    ("Aqua", "#0080ff"),
    ("Blueberry", "#0000ff"),
    ("Grape", "#8000ff"),
    ("Magenta", "#ff00ff"),
    ("Strawberry", "#ff0080"),
    # Light
    ("Salmon", "#ff6666"),
    ("Cantaloupe", "#ffcc66"),
    ("Banana", "#ffff66"),
    ("Honeydew", "#ccff66"),
    ("Flora", "#66ff66"),
    ("Spindrift", "#66ffcc"),
    ("Ice", "#66ffff"),
    ("Sky", "#66ccff"),
    ("Orchid", "#6666ff"),
    ("Lavender", "#cc66ff"),
    ("Bubblegum", "#ff66ff"),
    ("Carnation", "#ff6fcf"),
)

NAMED_COLORS: tuple[NamedColor, ...] = tuple(
    NamedColor.from_hex(name, hex_string) for name, hex_string in _CATALOG
)


def named_color(name: str) -> NamedColor:
    """
    Get a catalogue color by name.

    Raises:
        KeyError: If no catalogue entry has that name
    """
    for color in NAMED_COLORS:
        if color.name == name:
            return color
    raise KeyError(f"No named color '{name}'")


def sample_colors() -> list[NamedColor]:
    """
    A small palette exercising every construction method.

    Fresh instances (and ids) on every call.
    """
    red = system_color("red")
    blue = system_color("blue")
    green = system_color("green")
    orange = system_color("orange")
    yellow = system_color("yellow")
    white = system_color("white")
    return [
        # Hex literals
        NamedColor.from_hex("Cherry Red", "#DC143C"),
        NamedColor.from_hex("Ocean Blue", "#006994"),
        NamedColor.from_hex("Forest Green", "#228B22"),
        # System colors
        NamedColor.from_color("System Orange", orange),
        NamedColor.from_system_color("System Indigo", "accentColor"),
        # Intensities
        NamedColor.with_intensity("Faded Purple", system_color("purple"), ColorIntensity.TERTIARY),
        NamedColor.with_intensity("Subtle Pink", "pink", ColorIntensity.QUATERNARY),
        NamedColor.with_intensity("Light Blue", blue, ColorIntensity.SECONDARY),
        # Mixes
        NamedColor.mixed("Sunset", orange, red, 0.3, ColorSpace.PERCEPTUAL),
        NamedColor.mixed("Ocean Mist", blue, green, 0.6, ColorSpace.DEVICE),
        NamedColor.mixed("Spring Green", green, yellow, 0.4),
        NamedColor.mixed("Lavender Mix", system_color("purple"), white, 0.7),
        # Catalogue
        named_color("Maraschino"),
        named_color("Snow"),
        named_color("Flora"),
    ]
