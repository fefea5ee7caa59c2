# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""Tests for RGBAColor, enums and hex conversion."""

import pytest

from swatchkit.schema.color_value import (
    CHANNEL_TOLERANCE,
    CLEAR,
    ColorIntensity,
    ColorSpace,
    RGBAColor,
    color_to_hex,
    color_to_hex_with_alpha,
    hex_snapshot,
    hex_to_color,
)


class TestRGBAColor:

    def test_defaults_to_opaque(self):
        assert RGBAColor(0.1, 0.2, 0.3).alpha == 1.0

    def test_invalid_channel(self):
        with pytest.raises(ValueError, match="red"):
            RGBAColor(1.5, 0.0, 0.0)

    def test_negative_alpha(self):
        with pytest.raises(ValueError, match="alpha"):
            RGBAColor(0.0, 0.0, 0.0, -0.1)

    def test_nan_rejected(self):
        with pytest.raises(ValueError):
            RGBAColor(float("nan"), 0.0, 0.0)

    def test_frozen(self):
        c = RGBAColor(0.1, 0.2, 0.3)
        with pytest.raises(AttributeError):
            c.red = 0.5

    def test_from_bytes(self):
        c = RGBAColor.from_bytes(255, 0, 51, 128)
        assert c.as_tuple() == pytest.approx((1.0, 0.0, 0.2, 128 / 255))

    def test_is_close_within_tolerance(self):
        a = RGBAColor(0.5, 0.5, 0.5)
        b = RGBAColor(0.5 + CHANNEL_TOLERANCE / 2, 0.5, 0.5)
        assert a.is_close(b)

    def test_is_close_checks_alpha(self):
        assert not RGBAColor(0.5, 0.5, 0.5, 1.0).is_close(RGBAColor(0.5, 0.5, 0.5, 0.9))

    def test_is_close_custom_tolerance(self):
        a = RGBAColor(0.5, 0.5, 0.5)
        b = RGBAColor(0.505, 0.5, 0.5)
        assert not a.is_close(b)
        assert a.is_close(b, tolerance=0.01)

    def test_clear_is_transparent(self):
        assert CLEAR.as_tuple() == (0.0, 0.0, 0.0, 0.0)

    def test_hex_property(self):
        assert RGBAColor(1.0, 0.0, 0.0).hex == "#FF0000"


class TestHexToColor:

    def test_six_digits(self):
        c = hex_to_color("#FF0000")
        assert c == RGBAColor(1.0, 0.0, 0.0, 1.0)

    def test_eight_digits(self):
        c = hex_to_color("#0000FF80")
        assert c.blue == 1.0
        assert c.alpha == pytest.approx(128 / 255)

    def test_lowercase(self):
        assert hex_to_color("#ff6fcf") == hex_to_color("#FF6FCF")

    def test_whitespace_stripped(self):
        assert hex_to_color("  #00FF00\n") == RGBAColor(0.0, 1.0, 0.0)

    @pytest.mark.parametrize("bad", [
        "FF0000",       # missing prefix
        "#FFF",         # short form
        "#FF00000",     # 7 digits
        "#GG0000",      # not hex
        "#FF0000FF00",  # too long
        "",
        "invalid",
        "#",
    ])
    def test_invalid_returns_none(self, bad):
        assert hex_to_color(bad) is None

    def test_non_string_returns_none(self):
        assert hex_to_color(None) is None


class TestColorToHex:

    def test_uppercase_six_digits(self):
        assert color_to_hex(RGBAColor.from_bytes(0xAB, 0xCD, 0xEF)) == "#ABCDEF"

    def test_alpha_dropped(self):
        assert color_to_hex(RGBAColor(1.0, 1.0, 1.0, 0.5)) == "#FFFFFF"

    def test_rounds_half_up(self):
        assert color_to_hex(RGBAColor(0.5, 0.5, 0.5)) == "#808080"

    def test_with_alpha(self):
        assert color_to_hex_with_alpha(CLEAR) == "#00000000"
        assert color_to_hex_with_alpha(RGBAColor(1.0, 0.0, 0.0)) == "#FF0000FF"

    def test_roundtrip_bytes(self):
        c = RGBAColor.from_bytes(0x12, 0x34, 0x56)
        assert hex_to_color(color_to_hex(c)) == c


class TestHexSnapshot:

    def test_opaque_uses_six_digits(self):
        assert hex_snapshot(RGBAColor(0.0, 0.0, 1.0)) == "#0000FF"

    def test_translucent_keeps_alpha(self):
        assert hex_snapshot(RGBAColor.from_bytes(0, 0, 255, 128)) == "#0000FF80"

    def test_alpha_can_be_dropped(self):
        assert hex_snapshot(RGBAColor.from_bytes(0, 0, 255, 128), include_alpha=False) == "#0000FF"


class TestColorIntensity:

    @pytest.mark.parametrize("level, expected", [
        (ColorIntensity.PRIMARY, 1.0),
        (ColorIntensity.SECONDARY, 0.8),
        (ColorIntensity.TERTIARY, 0.6),
        (ColorIntensity.QUATERNARY, 0.4),
        (ColorIntensity.QUINARY, 0.2),
    ])
    def test_opacity(self, level, expected):
        assert level.opacity == expected

    def test_sorts_most_opaque_first(self):
        shuffled = [ColorIntensity.QUINARY, ColorIntensity.PRIMARY, ColorIntensity.TERTIARY]
        assert sorted(shuffled) == [
            ColorIntensity.PRIMARY,
            ColorIntensity.TERTIARY,
            ColorIntensity.QUINARY,
        ]

    def test_comparisons(self):
        assert ColorIntensity.PRIMARY < ColorIntensity.SECONDARY
        assert ColorIntensity.QUINARY > ColorIntensity.QUATERNARY
        assert ColorIntensity.TERTIARY <= ColorIntensity.TERTIARY

    def test_wire_values(self):
        assert [i.value for i in ColorIntensity] == [
            "primary", "secondary", "tertiary", "quaternary", "quinary",
        ]


class TestColorSpace:

    def test_parse_known(self):
        assert ColorSpace.parse("device") is ColorSpace.DEVICE
        assert ColorSpace.parse("perceptual") is ColorSpace.PERCEPTUAL

    @pytest.mark.parametrize("value", ["linear", "", None, 3, "Device"])
    def test_parse_unknown_defaults_to_perceptual(self, value):
        assert ColorSpace.parse(value) is ColorSpace.PERCEPTUAL
