"""Tests for numplan/metadata/phonenumbers_source.py."""
from __future__ import annotations

import phonenumbers
import pytest

from numplan.analysis.analyzer import PhoneAnalyzer
from numplan.metadata.phonenumbers_source import (
    _possible_pattern,
    load_phonenumbers_regions,
    region_from_phonenumbers,
)
from numplan.metadata.store import MetadataStore


@pytest.fixture(scope="module")
def pn_analyzer() -> PhoneAnalyzer:
    store = MetadataStore.from_phonenumbers(["GB", "US", "IN"], double_prefix_regions=["IN"])
    return PhoneAnalyzer(store)


def _example(region_code: str, number_type: int) -> str:
    example = phonenumbers.example_number_for_type(region_code, number_type)
    return str(example.national_number)


class TestRegionFromPhonenumbers:
    def test_us_scalars(self):
        region = region_from_phonenumbers("US")
        assert region.id == "US"
        assert region.calling_code == "1"
        assert region.international_prefix == "011"
        assert region.national_prefix == "1"
        assert region.double_prefix is False

    def test_categories_present(self):
        region = region_from_phonenumbers("GB")
        assert {"general", "fixed_line", "mobile", "toll_free"} <= set(region.categories)

    def test_templates_use_backreferences(self):
        region = region_from_phonenumbers("GB")
        assert region.formats
        assert all("$" not in rule.template for rule in region.formats)

    def test_lower_case_code(self):
        assert region_from_phonenumbers("gb").id == "GB"

    def test_unknown_region(self):
        assert region_from_phonenumbers("ZZ") is None

    def test_double_prefix_flag(self):
        assert region_from_phonenumbers("IN", double_prefix=True).double_prefix is True


class TestPossiblePattern:
    def test_lengths_joined(self):
        assert _possible_pattern((10, 7)) == r"\d{7}|\d{10}"

    def test_not_applicable_lengths_ignored(self):
        assert _possible_pattern((-1,)) is None

    def test_no_lengths(self):
        assert _possible_pattern(None) is None


class TestLoadPhonenumbersRegions:
    def test_selected_regions_sorted(self):
        regions = load_phonenumbers_regions(["US", "GB"], double_prefix_regions=["gb"])
        assert [r.id for r in regions] == ["GB", "US"]
        assert regions[0].double_prefix is True
        assert regions[1].double_prefix is False


class TestAnalyzeWithPhonenumbersMetadata:
    def test_gb_mobile_example(self, pn_analyzer):
        national = _example("GB", phonenumbers.PhoneNumberType.MOBILE)
        entry = pn_analyzer.analyze(national, "GB")["GB"]
        assert entry.national_number == national
        assert "mobile" in entry.valid_categories

    def test_gb_mobile_detected_from_plus_form(self, pn_analyzer):
        national = _example("GB", phonenumbers.PhoneNumberType.MOBILE)
        result = pn_analyzer.analyze(f"+44{national}")
        assert "GB" in result
        assert result["GB"].is_valid

    def test_us_fixed_line_example(self, pn_analyzer):
        national = _example("US", phonenumbers.PhoneNumberType.FIXED_LINE)
        entry = pn_analyzer.analyze(national, "US")["US"]
        assert entry.is_valid
        assert entry.national_number == national
