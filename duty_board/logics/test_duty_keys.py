"""
Unit tests for duty code normalization, ordering and labels.

Run with:
    python3 -m pytest duty_board/logics/test_duty_keys.py -v
"""

import pytest
from duty_board.logics.duty_keys import (
    CELL_DUTY_LABEL,
    DUTY_DISPLAY_ORDER,
    clean_duty_code,
    compare_duty_keys,
    duty_code_text,
    get_display_label,
    get_duty_priority,
    is_numeric_duty_key,
    normalize_duty_key,
    sort_duty_keys
)


class TestCleanDutyCode:
    """Test text coercion and cleaning."""

    def test_uppercases_and_strips_punctuation(self):
        assert clean_duty_code(" nn-12 ") == "NN12"
        assert clean_duty_code("d.d/12") == "DD12"

    def test_none_becomes_empty(self):
        assert duty_code_text(None) == ""
        assert clean_duty_code(None) == ""

    def test_integral_float_loses_decimal_point(self):
        assert duty_code_text(3.0) == "3"
        assert clean_duty_code(3.0) == "3"
        assert duty_code_text(7) == "7"

    def test_non_ascii_letters_are_dropped(self):
        assert clean_duty_code("오프") == ""


class TestNormalizeDutyKey:
    """Test the ordered normalization rules."""

    @pytest.mark.parametrize("raw", ["v", "V", "VF", "ov", "OV", "w", "W", "of", "OF", "o-f"])
    def test_off_duty_spellings(self, raw):
        assert normalize_duty_key(raw) == "OFF"

    def test_nn12_is_not_absorbed_by_night_prefix(self):
        assert normalize_duty_key("nn12") == "NN12"
        assert normalize_duty_key("NN-12") == "NN12"

    @pytest.mark.parametrize("raw", ["n", "N", "night", "NN", "N8", "nn13"])
    def test_night_prefix_collapses(self, raw):
        assert normalize_duty_key(raw) == "N"

    def test_digit_strings_pass_through(self):
        assert normalize_duty_key("03") == "03"
        assert normalize_duty_key("1") == "1"
        assert normalize_duty_key("16") == "16"
        assert normalize_duty_key(" 3 ") == "3"

    def test_numeric_cell_values(self):
        assert normalize_duty_key(3) == "3"
        assert normalize_duty_key(3.0) == "3"

    @pytest.mark.parametrize("raw, expected", [
        ("p", "P3"),
        ("c", "C"),
        ("e1", "E1"),
        ("st", "ST"),
        ("d5", "D5"),
        ("db", "DB"),
        ("dc", "DC"),
    ])
    def test_exact_matches(self, raw, expected):
        assert normalize_duty_key(raw) == expected

    def test_d_prefix_variants_are_kept(self):
        assert normalize_duty_key("dd") == "DD"
        assert normalize_duty_key("dd12") == "DD12"
        assert normalize_duty_key("D") == "D"

    def test_e_prefix_variants_are_kept(self):
        assert normalize_duty_key("ea") == "EA"
        assert normalize_duty_key("E") == "E"

    def test_unknown_codes_are_cleaned_only(self):
        assert normalize_duty_key("p3") == "P3"
        assert normalize_duty_key("x-ray") == "XRAY"
        assert normalize_duty_key("VV") == "VV"

    def test_empty_and_garbage_input(self):
        assert normalize_duty_key("") == ""
        assert normalize_duty_key(None) == ""
        assert normalize_duty_key("--") == ""

    @pytest.mark.parametrize("key", list(DUTY_DISPLAY_ORDER) + ["03", "DD12", "EA", "XRAY"])
    def test_idempotent_on_canonical_keys(self, key):
        assert normalize_duty_key(normalize_duty_key(key)) == normalize_duty_key(key)


class TestDutyPriority:
    """Test ordering of canonical keys."""

    def test_recognized_keys_are_tier_zero(self):
        for index, key in enumerate(DUTY_DISPLAY_ORDER):
            assert get_duty_priority(key) == (0, index)

    def test_lowercase_key_is_recognized(self):
        assert get_duty_priority("off") == get_duty_priority("OFF")

    def test_unrecognized_keys_are_tier_one(self):
        assert get_duty_priority("03") == (1, "03")
        assert get_duty_priority("xray") == (1, "XRAY")
        assert get_duty_priority("17") == (1, "17")

    def test_numeric_keys_sort_numerically(self):
        assert compare_duty_keys("2", "16") < 0
        assert compare_duty_keys("16", "D5") < 0
        assert compare_duty_keys("10", "9") > 0

    def test_recognized_before_unrecognized(self):
        assert compare_duty_keys("ST", "AA") < 0
        assert compare_duty_keys("03", "1") > 0

    def test_unrecognized_keys_sort_alphabetically(self):
        assert compare_duty_keys("ZZ", "AB") > 0
        assert compare_duty_keys("ab", "AB") == 0

    def test_sort_duty_keys(self):
        keys = ["OFF", "XRAY", "2", "N", "10", "03", "1", "D5", "ABC", "C"]
        assert sort_duty_keys(keys) == ["1", "2", "10", "D5", "C", "N", "OFF", "03", "ABC", "XRAY"]

    def test_numeric_duty_keys(self):
        assert is_numeric_duty_key("1")
        assert is_numeric_duty_key("16")
        assert not is_numeric_duty_key("17")
        assert not is_numeric_duty_key("01")


class TestDisplayLabel:
    """Test labels shown for canonical keys."""

    @pytest.mark.parametrize("key, label", [
        ("1", "1R"),
        ("03", "03R"),
        ("C", CELL_DUTY_LABEL),
        ("E1", "E"),
        ("OFF", "OFF"),
        ("ST", "Station"),
        ("DD12", "DD12"),
        ("N", "N"),
    ])
    def test_labels(self, key, label):
        assert get_display_label(key) == label

    @pytest.mark.parametrize("key", ["²", "١٢", "3 ", ""])
    def test_only_ascii_digit_keys_get_suffix(self, key):
        assert get_display_label(key) == key
