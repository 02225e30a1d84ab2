"""Single-region resolver.

Reads a raw number as belonging to exactly one region: normalize it for
that region, cut the national number off the canonical form, match it
against the region's categories and pick a display format.

When normalization shows the number actually starts with the region's
international prefix, the resolver does not guess further; it returns a
``Redetect`` carrying the digits after the prefix and lets the analyzer
restart detection across every region.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from numplan.analysis.categories import match_categories
from numplan.analysis.formats import select_format
from numplan.analysis.normalizer import PLUS_SIGN, to_canonical
from numplan.analysis.patterns import full_number_regex, prefix_length
from numplan.analysis.result import AnalysisEntry, AnalysisResult
from numplan.core.constants import POSSIBLE_PATTERN, VALID_PATTERN
from numplan.metadata.region import RegionMetadata
from numplan.metadata.store import MetadataStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Redetect:
    """The number carried an international prefix; detect over all regions."""

    phone: str


def parse_canonical(phone: str, region: RegionMetadata) -> AnalysisResult | None:
    """Match a calling-code prefixed *phone* against *region*.

    Returns a one-entry result keyed by the region id, or ``None`` when the
    number fits neither the general valid nor the general possible pattern.
    A number that only fits the possible pattern gets an entry with no
    valid categories.
    """
    not_valid = False
    regex = full_number_regex(region, VALID_PATTERN)
    match = regex.match(phone) if regex is not None else None
    if match is None:
        regex = full_number_regex(region, POSSIBLE_PATTERN)
        match = regex.match(phone) if regex is not None else None
        if match is None:
            return None
        not_valid = True

    national = phone[prefix_length(region, match):]
    valid, possible = match_categories(national, region, not_valid)
    if not_valid:
        valid = frozenset()

    entry = AnalysisEntry.for_region(
        region,
        national_number=national,
        selected_format=select_format(national, region.formats),
        valid_categories=valid,
        possible_categories=possible,
    )
    return {region.id: entry}


def resolve_region(
    phone: str,
    region_id: str | None,
    store: MetadataStore,
) -> AnalysisResult | Redetect | None:
    """Read *phone* as a number of region *region_id*.

    Returns ``None`` when the region is unknown or the number does not fit
    it, and ``Redetect`` when the number starts with the region's
    international prefix.
    """
    region = store.lookup(region_id)
    if region is None:
        if region_id:
            logger.debug("resolver: no metadata for region %r", region_id)
        return None

    canonical = to_canonical(phone, region)
    if canonical.startswith(PLUS_SIGN):
        return Redetect(canonical[len(PLUS_SIGN):])

    return parse_canonical(canonical, region)
