"""
Color and font parser tests.

Canonical strings are compared exactly: renderers receive them verbatim.
"""

import pytest

from vector_tile_styles.parsers import (
    OPAQUE_BLACK,
    format_number,
    literal_number,
    literal_number_array,
    literal_pair,
    parse_color,
    parse_font,
)


class TestParseColorHex:
    def test_six_digit_hex(self):
        assert parse_color("#ff0000", 1) == "rgba(255, 0, 0, 1)"

    def test_opacity_is_applied(self):
        assert parse_color("#0000ff", 0.5) == "rgba(0, 0, 255, 0.5)"

    def test_default_opacity_is_one(self):
        assert parse_color("#102030") == "rgba(16, 32, 48, 1)"

    def test_integral_float_opacity_has_no_decimal(self):
        assert parse_color("#ffffff", 1.0) == "rgba(255, 255, 255, 1)"

    def test_uppercase_hex(self):
        assert parse_color("#ABCDEF", 1) == "rgba(171, 205, 239, 1)"

    def test_shorthand_is_expanded(self):
        assert parse_color("#abc", 1) == "rgba(170, 187, 204, 1)"

    def test_alpha_pair_is_ignored(self):
        assert parse_color("#ff000080", 0.25) == "rgba(255, 0, 0, 0.25)"

    def test_unreadable_hex_is_opaque_black(self):
        assert parse_color("#zzzzzz", 0.5) == OPAQUE_BLACK

    def test_too_short_hex_is_opaque_black(self):
        assert parse_color("#12", 1) == OPAQUE_BLACK


class TestParseColorRgb:
    def test_rgb_rewritten_to_rgba_with_opacity(self):
        assert parse_color("rgb(10,20,30)", 0.5) == "rgba(10,20,30, 0.5)"

    def test_rgb_unchanged_at_full_opacity(self):
        assert parse_color("rgb(10,20,30)", 1) == "rgb(10,20,30)"

    def test_rgba_never_rewritten(self):
        assert parse_color("rgba(10,20,30,0.4)", 0.5) == "rgba(10,20,30,0.4)"


class TestParseColorNamed:
    def test_white(self):
        assert parse_color("white", 1) == "rgba(255, 255, 255, 1)"

    @pytest.mark.parametrize("name,expected", [
        ("black", "rgba(0, 0, 0, 1)"),
        ("red", "rgba(255, 0, 0, 1)"),
        ("green", "rgba(0, 128, 0, 1)"),
        ("blue", "rgba(0, 0, 255, 1)"),
    ])
    def test_table(self, name, expected):
        assert parse_color(name, 1) == expected

    def test_named_color_keeps_opacity(self):
        assert parse_color("blue", 0.3) == "rgba(0, 0, 255, 0.3)"

    @pytest.mark.parametrize("value", ["White", "RED", " blue", "green "])
    def test_named_color_matched_exactly(self, value):
        assert parse_color(value, 0.5) == value

    def test_unknown_name_passes_through(self):
        assert parse_color("cornflowerblue", 0.5) == "cornflowerblue"

    def test_hsl_passes_through(self):
        assert parse_color("hsl(120, 50%, 50%)", 0.5) == "hsl(120, 50%, 50%)"


class TestParseColorNonString:
    @pytest.mark.parametrize("value", [123, None, ["get", "color"], {"stops": []}, 1.5, True])
    def test_non_string_is_opaque_black(self, value):
        assert parse_color(value, 1) == "rgba(0, 0, 0, 1)"

    def test_non_string_ignores_opacity(self):
        assert parse_color(123, 0.2) == "rgba(0, 0, 0, 1)"


class TestParseFont:
    def test_default_family_and_size(self):
        assert parse_font() == "12px Arial, sans-serif"

    def test_families_joined(self):
        result = parse_font(["Open Sans Regular", "Arial Unicode MS Regular"], 14)
        assert result == "14px Open Sans Regular, Arial Unicode MS Regular"

    def test_empty_families_use_default(self):
        assert parse_font([], 10) == "10px Arial, sans-serif"

    def test_float_size_rendered_without_decimal(self):
        assert parse_font(["Noto Sans"], 16.0) == "16px Noto Sans"

    def test_fractional_size_kept(self):
        assert parse_font(["Noto Sans"], 11.5) == "11.5px Noto Sans"

    def test_expression_families_use_default(self):
        assert parse_font(["literal", ["Noto Sans"]], 12) == "12px Arial, sans-serif"

    def test_non_numeric_size_uses_default(self):
        assert parse_font(["Noto Sans"], ["get", "size"]) == "12px Noto Sans"


class TestLiteralCoercion:
    def test_literal_number(self):
        assert literal_number(3, 1) == 3
        assert literal_number(["zoom"], 1) == 1
        assert literal_number(True, 1) == 1
        assert literal_number("3", 1) == 1

    @pytest.mark.parametrize("value", [10 ** 400, -(10 ** 400), float("nan"), float("inf"), float("-inf")])
    def test_unrepresentable_numbers_use_default(self, value):
        assert literal_number(value, 5) == 5

    def test_unrepresentable_members_reject_arrays(self):
        assert literal_pair([0, 10 ** 400]) is None
        assert literal_number_array([2, float("nan")]) is None

    def test_large_finite_number_kept(self):
        assert literal_number(10 ** 300, 5) == 10 ** 300

    def test_literal_pair(self):
        assert literal_pair([0, 1.5]) == (0, 1.5)
        assert literal_pair([1, 2, 3]) is None
        assert literal_pair(["literal", [0, 1]]) is None

    def test_literal_number_array(self):
        assert literal_number_array([2, 1]) == (2, 1)
        assert literal_number_array([]) is None
        assert literal_number_array(["literal", [2, 1]]) is None

    def test_format_number(self):
        assert format_number(1) == "1"
        assert format_number(1.0) == "1"
        assert format_number(0.25) == "0.25"
