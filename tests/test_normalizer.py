"""Tests for numplan/analysis/normalizer.py and the full-number regex."""
from __future__ import annotations

from numplan.analysis.normalizer import to_canonical
from numplan.analysis.patterns import full_number_regex, prefix_length


class TestToCanonical:
    def test_national_number_gets_calling_code(self, us):
        assert to_canonical("2025551234", us) == "12025551234"

    def test_calling_code_kept_once(self, us):
        assert to_canonical("12025551234", us) == "12025551234"

    def test_trunk_prefix_dropped(self, gb):
        assert to_canonical("02071234567", gb) == "442071234567"

    def test_international_prefix_with_own_calling_code(self, gb):
        # Rule 1 wins: the number reads as a complete GB number.
        assert to_canonical("00442071234567", gb) == "442071234567"

    def test_foreign_international_prefix_becomes_plus(self, us):
        assert to_canonical("011442071234567", us) == "+442071234567"

    def test_pattern_international_prefix(self, sg):
        assert to_canonical("001442071234567", sg) == "+442071234567"

    def test_unmatched_number_prefixed_verbatim(self, us):
        assert to_canonical("555", us) == "1555"

    def test_empty_input_never_fails(self, us):
        assert to_canonical("", us) == "1"

    def test_non_digit_input_prefixed_verbatim(self, gb):
        assert to_canonical("abc", gb) == "44abc"


class TestFullNumberRegex:
    def test_calling_code_required_by_default(self, us):
        regex = full_number_regex(us)
        assert regex.match("2025551234") is None
        assert regex.match("12025551234") is not None

    def test_calling_code_optional(self, us):
        regex = full_number_regex(us, calling_code_optional=True)
        assert regex.match("2025551234") is not None

    def test_possible_kind_uses_possible_pattern(self, us):
        assert full_number_regex(us).match("15551234") is None
        assert full_number_regex(us, "possible").match("15551234") is not None

    def test_prefix_length_counts_trunk_prefix(self, gb):
        match = full_number_regex(gb).match("4402071234567")
        assert match.group("national") == "2071234567"
        assert prefix_length(gb, match) == 3

    def test_prefix_length_counts_international_prefix(self, gb):
        match = full_number_regex(gb).match("00442071234567")
        assert prefix_length(gb, match) == 4

    def test_no_general_category_returns_none(self, us):
        from numplan.metadata.region import CategoryPatterns, RegionMetadata

        bare = RegionMetadata(
            id="XX",
            calling_code="999",
            international_prefix="00",
            categories={"mobile": CategoryPatterns(valid=r"\d{6}")},
        )
        assert full_number_regex(bare) is None
        assert to_canonical("123456", bare) == "999123456"
