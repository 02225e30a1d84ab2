"""Analysis result types.

An ``AnalysisEntry`` describes how one region reads a number; an
``AnalysisResult`` maps region id to entry.  Both are created fresh for
every ``analyze()`` call and never mutated by the analyzer afterwards.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from numplan.metadata.region import FormatRule, RegionMetadata

AnalysisResult = dict[str, "AnalysisEntry"]


@dataclass(frozen=True)
class AnalysisEntry:
    """One region's reading of a number.

    Carries the region's scalar metadata; the category-pattern table and
    the format list are consumed while building the entry and not echoed.
    """

    region_id: str
    calling_code: str
    international_prefix: str | None
    national_prefix: str | None
    double_prefix: bool
    national_number: str
    selected_format: FormatRule
    valid_categories: frozenset[str]
    possible_categories: frozenset[str]

    @classmethod
    def for_region(
        cls,
        region: RegionMetadata,
        national_number: str,
        selected_format: FormatRule,
        valid_categories: frozenset[str],
        possible_categories: frozenset[str],
    ) -> AnalysisEntry:
        return cls(
            region_id=region.id,
            calling_code=region.calling_code,
            international_prefix=region.international_prefix,
            national_prefix=region.national_prefix,
            double_prefix=region.double_prefix,
            national_number=national_number,
            selected_format=selected_format,
            valid_categories=valid_categories,
            possible_categories=possible_categories,
        )

    @property
    def is_valid(self) -> bool:
        return bool(self.valid_categories)

    @property
    def is_possible(self) -> bool:
        return bool(self.possible_categories)

    def format_national(self) -> str:
        """Return the national number rendered with the selected format."""
        return self.selected_format.apply(self.national_number)

    def e164(self) -> str:
        return f"+{self.calling_code}{self.national_number}"


def has_valid(result: Mapping[str, AnalysisEntry] | None) -> bool:
    """Return True if any entry of *result* has a valid category."""
    return bool(result) and any(entry.is_valid for entry in result.values())


def has_possible(result: Mapping[str, AnalysisEntry] | None) -> bool:
    """Return True if any entry of *result* has a possible category."""
    return bool(result) and any(entry.is_possible for entry in result.values())


def merge_results(*results: Mapping[str, AnalysisEntry] | None) -> AnalysisResult:
    """Merge *results* into a fresh mapping.

    The first entry seen for a region id wins; later ones never overwrite it.
    """
    merged: AnalysisResult = {}
    for result in results:
        if not result:
            continue
        for region_id, entry in result.items():
            merged.setdefault(region_id, entry)
    return merged
