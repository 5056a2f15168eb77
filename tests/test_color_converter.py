"""Tests for hex / RGB / HSL conversion."""

import pytest

from hobbycard_api.core.exceptions import InvalidFormatError
from hobbycard_api.services.color_converter import (
    hex_to_complementary,
    hex_to_rgb,
    hsl_to_rgb,
    invert_color,
    normalize_hex,
    rgb_to_hex,
    rgb_to_hsl,
)

SAMPLE_RGB = [
    (0, 0, 0),
    (255, 255, 255),
    (1, 2, 3),
    (255, 165, 0),
    (18, 52, 86),
    (200, 16, 46),
    (127, 128, 129),
    (0, 255, 170),
]


def hue_distance(a: float, b: float) -> float:
    diff = abs(a - b) % 1
    return min(diff, 1 - diff)


# ── hex_to_rgb ──────────────────────────────────────────────────────


class TestHexToRgb:
    def test_shorthand_white(self) -> None:
        assert hex_to_rgb("#fff") == (255, 255, 255)

    def test_hash_is_optional(self) -> None:
        assert hex_to_rgb("abc") == hex_to_rgb("#abc") == (170, 187, 204)

    def test_full_length(self) -> None:
        assert hex_to_rgb("#FFA500") == (255, 165, 0)

    def test_case_insensitive(self) -> None:
        assert hex_to_rgb("#a1b2c3") == hex_to_rgb("#A1B2C3")

    @pytest.mark.parametrize("value", ["12345", "#12", "", "#", "1234567", "#ggg", "#12345z"])
    def test_invalid_raises(self, value: str) -> None:
        with pytest.raises(InvalidFormatError):
            hex_to_rgb(value)

    def test_invalid_format_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="Invalid HEX color"):
            hex_to_rgb("12345")

    def test_error_code(self) -> None:
        with pytest.raises(InvalidFormatError) as exc_info:
            hex_to_rgb("12345")
        assert exc_info.value.code == "INVALID_FORMAT"
        assert exc_info.value.details == {"value": "12345"}

    def test_normalize_hex(self) -> None:
        assert normalize_hex("#ABC") == "aabbcc"


# ── rgb_to_hex ──────────────────────────────────────────────────────


class TestRgbToHex:
    def test_zero_padding(self) -> None:
        assert rgb_to_hex(0, 0, 0) == "#000000"
        assert rgb_to_hex(1, 2, 3) == "#010203"

    def test_lowercase(self) -> None:
        assert rgb_to_hex(255, 165, 0) == "#ffa500"

    @pytest.mark.parametrize("rgb", SAMPLE_RGB)
    def test_rgb_round_trip(self, rgb: tuple[int, int, int]) -> None:
        assert hex_to_rgb(rgb_to_hex(*rgb)) == rgb

    @pytest.mark.parametrize("value", ["#A1B2C3", "#000000", "#ffffff", "#00ff7f"])
    def test_hex_round_trip(self, value: str) -> None:
        assert rgb_to_hex(*hex_to_rgb(value)) == value.lower()


# ── rgb_to_hsl / hsl_to_rgb ─────────────────────────────────────────


class TestHsl:
    def test_pure_blue(self) -> None:
        h, s, l = rgb_to_hsl(0, 0, 255)  # noqa: E741
        assert h == pytest.approx(2 / 3)
        assert s == pytest.approx(1.0)
        assert l == pytest.approx(0.5)

    def test_gray_is_achromatic(self) -> None:
        assert rgb_to_hsl(128, 128, 128) == (0, 0, 128 / 255)

    def test_red_max_with_blue_above_green_wraps(self) -> None:
        h, _, _ = rgb_to_hsl(255, 0, 255)
        assert h == pytest.approx(5 / 6)

    def test_light_color_saturation(self) -> None:
        _, s, l = rgb_to_hsl(255, 204, 204)  # noqa: E741
        assert l > 0.5
        assert s == pytest.approx(1.0)

    @pytest.mark.parametrize("rgb", SAMPLE_RGB)
    def test_hue_is_a_fraction_of_a_circle(self, rgb: tuple[int, int, int]) -> None:
        h, s, l = rgb_to_hsl(*rgb)  # noqa: E741
        assert 0 <= h < 1
        assert 0 <= s <= 1
        assert 0 <= l <= 1

    def test_gray_rounds_half_up(self) -> None:
        assert hsl_to_rgb(0, 0, 0.5) == (128, 128, 128)

    def test_pure_blue_back(self) -> None:
        assert hsl_to_rgb(2 / 3, 1, 0.5) == (0, 0, 255)

    @pytest.mark.parametrize("rgb", SAMPLE_RGB)
    def test_round_trip_through_hsl(self, rgb: tuple[int, int, int]) -> None:
        assert hsl_to_rgb(*rgb_to_hsl(*rgb)) == rgb


# ── hex_to_complementary ────────────────────────────────────────────


class TestComplementary:
    def test_red_to_cyan(self) -> None:
        assert hex_to_complementary("#ff0000") == "#00ffff"

    def test_green_to_magenta(self) -> None:
        assert hex_to_complementary("#0f0") == "#ff00ff"

    def test_orange(self) -> None:
        assert hex_to_complementary("#FFA500") == "#005aff"

    def test_double_rotation_is_identity(self) -> None:
        assert hex_to_complementary(hex_to_complementary("#ffa500")) == "#ffa500"

    @pytest.mark.parametrize("value", ["#3366cc", "#8a2be2", "#c8102e", "#2e8b57"])
    def test_double_rotation_restores_hue(self, value: str) -> None:
        original = rgb_to_hsl(*hex_to_rgb(value))
        twice = rgb_to_hsl(*hex_to_rgb(hex_to_complementary(hex_to_complementary(value))))
        assert hue_distance(original[0], twice[0]) < 0.01

    def test_keeps_lightness(self) -> None:
        _, _, l_before = rgb_to_hsl(*hex_to_rgb("#3366cc"))
        _, _, l_after = rgb_to_hsl(*hex_to_rgb(hex_to_complementary("#3366cc")))
        assert l_after == pytest.approx(l_before, abs=0.01)

    def test_gray_has_no_complement(self) -> None:
        assert hex_to_complementary("#808080") == "#808080"

    def test_invalid_raises(self) -> None:
        with pytest.raises(InvalidFormatError):
            hex_to_complementary("#12345")


# ── invert_color ────────────────────────────────────────────────────


class TestInvertColor:
    def test_inverts_each_channel(self) -> None:
        assert invert_color("#ffa500") == "#005aff"

    def test_shorthand(self) -> None:
        assert invert_color("abc") == "#554433"

    @pytest.mark.parametrize("value", ["#ffa500", "#010203", "#A1B2C3", "#000000"])
    def test_double_inversion_is_identity(self, value: str) -> None:
        assert invert_color(invert_color(value, False), False) == value.lower()

    def test_black_white_on_white(self) -> None:
        assert invert_color("#FFFFFF", True) == "#000000"

    def test_black_white_on_black(self) -> None:
        assert invert_color("#000000", True) == "#FFFFFF"

    def test_black_white_threshold(self) -> None:
        assert invert_color("#b9b9b9", True) == "#FFFFFF"
        assert invert_color("#bbbbbb", True) == "#000000"

    @pytest.mark.parametrize("value", ["12", "#1234", "#1234567"])
    def test_invalid_raises(self, value: str) -> None:
        with pytest.raises(InvalidFormatError):
            invert_color(value)
