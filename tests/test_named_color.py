# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""Tests for NamedColor construction and the built-in catalogue."""

import pytest

from swatchkit.measure import mix, opacity
from swatchkit.schema import (
    CLEAR,
    EXAMPLE,
    NAMED_COLORS,
    ColorIntensity,
    ColorSpace,
    DirectColor,
    HexLiteral,
    IntensityScaled,
    MixedColors,
    NamedColor,
    RGBAColor,
    SystemColor,
    SystemColorRef,
    named_color,
    resolve_color,
    sample_colors,
    system_color,
)


class TestFromHex:

    def test_valid(self):
        c = NamedColor.from_hex("Test Red", "#FF0000")
        assert c.name == "Test Red"
        assert c.color.as_tuple() == (1.0, 0.0, 0.0, 1.0)
        assert c.creation_method == HexLiteral("#FF0000")

    def test_with_alpha(self):
        c = NamedColor.from_hex("Semi-transparent Blue", "#0000FF80")
        assert c.color.alpha == pytest.approx(128 / 255)

    def test_invalid_falls_back_to_clear(self):
        c = NamedColor.from_hex("Invalid Color", "invalid")
        assert c.color == CLEAR
        assert c.creation_method == HexLiteral("invalid")

    def test_invalid_logs_debug(self, caplog):
        with caplog.at_level("DEBUG", logger="swatchkit.schema.named_color"):
            NamedColor.from_hex("Broken", "#ZZZZZZ")
        assert "invalid hex string" in caplog.text

    def test_default_name_is_empty(self):
        assert NamedColor.from_hex(hex_string="#123456").name == ""


class TestFromColor:

    def test_system_color_is_classified(self):
        c = NamedColor.from_color("Red", system_color("red"))
        assert c.creation_method == SystemColor("red")
        assert c.color == system_color("red")

    def test_primary(self):
        c = NamedColor.from_color("Primary", system_color("primary"))
        assert c.creation_method == SystemColor("primary")

    def test_pure_black_is_black_not_primary(self):
        c = NamedColor.from_color("Ink", RGBAColor(0.0, 0.0, 0.0))
        assert c.creation_method == SystemColor("black")

    def test_other_color_is_direct(self):
        value = RGBAColor(0.2, 0.4, 0.6)
        c = NamedColor.from_color("Custom", value)
        assert c.creation_method == DirectColor()
        assert c.color == value


class TestFromSystemColor:

    def test_known(self):
        c = NamedColor.from_system_color("Alert", "orange")
        assert c.color == system_color("orange")
        assert c.creation_method == SystemColor("orange")

    def test_unknown_falls_back_to_clear(self):
        c = NamedColor.from_system_color("Mystery", "chartreuse")
        assert c.color == CLEAR
        assert c.creation_method == SystemColor("chartreuse")


class TestMixed:

    def test_color_and_method(self):
        red, blue = system_color("red"), system_color("blue")
        c = NamedColor.mixed("Purple Mix", red, blue, 0.3)
        assert c.color == mix(red, blue, 0.3, ColorSpace.PERCEPTUAL)
        assert c.creation_method == MixedColors("#FF3B30", "#007AFF", 0.3, ColorSpace.PERCEPTUAL)

    def test_device_space(self):
        green, yellow = system_color("green"), system_color("yellow")
        c = NamedColor.mixed("Lime Mix", green, yellow, 0.7, ColorSpace.DEVICE)
        assert c.creation_method.space is ColorSpace.DEVICE
        assert c.color == mix(green, yellow, 0.7, ColorSpace.DEVICE)

    def test_translucent_inputs_keep_alpha_in_hex(self):
        c = NamedColor.mixed("Glass", RGBAColor.from_bytes(255, 0, 0, 128), system_color("white"), 0.5)
        assert c.creation_method.base_hex == "#FF000080"


class TestWithIntensity:

    @pytest.mark.parametrize("intensity", list(ColorIntensity))
    def test_scales_opacity(self, intensity):
        blue = system_color("blue")
        c = NamedColor.with_intensity("Blue", blue, intensity)
        assert c.color == opacity(blue, intensity.opacity)
        assert c.creation_method == IntensityScaled(blue, intensity)

    def test_base_by_name(self):
        c = NamedColor.with_intensity("Faded Primary", "primary", ColorIntensity.TERTIARY)
        assert c.creation_method.base == SystemColorRef("primary")
        assert c.color.alpha == pytest.approx(0.85 * 0.6)

    def test_unknown_base_name_falls_back_to_clear(self):
        c = NamedColor.with_intensity("Nothing", "nope", ColorIntensity.SECONDARY)
        assert c.color == CLEAR

    def test_default_intensity_is_primary(self):
        c = NamedColor.with_intensity("Full", system_color("pink"))
        assert c.creation_method.intensity is ColorIntensity.PRIMARY
        assert c.color == system_color("pink")


class TestIdentity:

    def test_ids_are_unique(self):
        ids = {NamedColor.from_hex("Same", "#FF0000").id for _ in range(50)}
        assert len(ids) == 50

    def test_id_is_string(self):
        assert isinstance(NamedColor.from_hex("X", "#FF0000").id, str)

    def test_explicit_id_kept(self):
        c = NamedColor.from_creation_method("X", HexLiteral("#FF0000"), id="abc")
        assert c.id == "abc"

    def test_frozen(self):
        c = NamedColor.from_hex("X", "#FF0000")
        with pytest.raises(AttributeError):
            c.name = "Y"


class TestResolveColor:

    def test_direct_color_cannot_be_resolved(self):
        with pytest.raises(ValueError, match="Cannot resolve"):
            resolve_color(DirectColor())

    def test_mixed_with_bad_hex_uses_clear(self):
        method = MixedColors("nope", "#0000FF", 0.5, ColorSpace.DEVICE)
        expected = mix(CLEAR, RGBAColor(0.0, 0.0, 1.0), 0.5, ColorSpace.DEVICE)
        assert resolve_color(method) == expected


class TestCatalog:

    def test_size(self):
        assert len(NAMED_COLORS) == 48

    def test_order_endpoints(self):
        assert NAMED_COLORS[0].name == "Licorice"
        assert NAMED_COLORS[11].name == "Snow"
        assert NAMED_COLORS[24].name == "Maraschino"
        assert NAMED_COLORS[-1].name == "Carnation"

    def test_all_hex_literals(self):
        assert all(isinstance(c.creation_method, HexLiteral) for c in NAMED_COLORS)

    def test_named_color_lookup(self):
        assert named_color("Snow").color == RGBAColor(1.0, 1.0, 1.0)

    def test_named_color_unknown(self):
        with pytest.raises(KeyError):
            named_color("Unobtainium")

    def test_example(self):
        assert EXAMPLE.color.hex == "#FF5733"

    def test_sample_colors_cover_every_method(self):
        kinds = {type(c.creation_method) for c in sample_colors()}
        assert kinds == {HexLiteral, SystemColor, IntensityScaled, MixedColors}
