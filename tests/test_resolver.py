"""Tests for numplan/analysis/resolver.py — single-region resolution."""
from __future__ import annotations

from numplan.analysis.resolver import Redetect, parse_canonical, resolve_region


class TestParseCanonical:
    def test_valid_number(self, us):
        result = parse_canonical("12025551234", us)
        entry = result["US"]
        assert entry.national_number == "2025551234"
        assert entry.valid_categories == {"fixed_or_mobile"}
        assert entry.region_id == "US"
        assert entry.calling_code == "1"

    def test_possible_only_number_has_no_valid_categories(self, us):
        entry = parse_canonical("15551234", us)["US"]
        assert entry.national_number == "5551234"
        assert entry.valid_categories == frozenset()
        assert entry.possible_categories == {"fixed_or_mobile"}

    def test_unmatched_number_returns_none(self, us):
        assert parse_canonical("1555", us) is None

    def test_missing_calling_code_returns_none(self, gb):
        assert parse_canonical("2071234567", gb) is None

    def test_trunk_prefix_removed_from_national_number(self, gb):
        entry = parse_canonical("4402071234567", gb)["GB"]
        assert entry.national_number == "2071234567"

    def test_format_selected(self, gb):
        entry = parse_canonical("442071234567", gb)["GB"]
        assert entry.format_national() == "20 7123 4567"

    def test_entry_echoes_scalar_metadata(self, india):
        entry = parse_canonical("919876543210", india)["IN"]
        assert entry.double_prefix is True
        assert entry.national_prefix == "0"
        assert entry.international_prefix == "00"
        assert entry.e164() == "+919876543210"


class TestResolveRegion:
    def test_national_number(self, store):
        result = resolve_region("2025551234", "US", store)
        assert result["US"].national_number == "2025551234"

    def test_region_id_case_insensitive(self, store):
        result = resolve_region("2025551234", "us", store)
        assert "US" in result

    def test_unknown_region_is_no_match(self, store):
        assert resolve_region("2025551234", "ZZ", store) is None

    def test_no_region_is_no_match(self, store):
        assert resolve_region("2025551234", None, store) is None

    def test_international_prefix_requests_redetection(self, store):
        outcome = resolve_region("011442071234567", "US", store)
        assert outcome == Redetect("442071234567")

    def test_number_foreign_to_region(self, store):
        assert resolve_region("12345", "SG", store) is None
