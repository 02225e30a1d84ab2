"""Multi-region detector.

Used when no region hint is usable: every region in the store reads the
raw digits (which are expected to start with a calling code) and every
region that finds the number at least possible contributes an entry.
Regions sharing a calling code can therefore all appear in one result.

Double prefix
-------------
Some plans have subscriber numbers that begin with the plan's own calling
code, so the calling code ends up written twice — or, when the writer
drops the "duplicate", once too few.  For regions flagged
``double_prefix`` the detector retries with the calling code toggled
(``changed_double_prefixed_phone``) and keeps the stronger reading.
"""
from __future__ import annotations

import logging

from numplan.analysis.arbiter import better_result
from numplan.analysis.resolver import parse_canonical
from numplan.analysis.result import AnalysisResult, merge_results
from numplan.metadata.region import RegionMetadata
from numplan.metadata.store import MetadataStore

logger = logging.getLogger(__name__)


def changed_double_prefixed_phone(region: RegionMetadata, phone: str) -> str:
    """Return *phone* with the calling code removed once or added once.

    A number that starts with the calling code twice loses one copy; any
    other number gets the calling code prepended.
    """
    calling_code = region.calling_code
    if phone.startswith(calling_code * 2):
        return phone[len(calling_code):]
    return f"{calling_code}{phone}"


def double_prefix_allowed(
    region: RegionMetadata,
    phone: str,
    parsed: AnalysisResult | None,
    international: bool = False,
) -> bool:
    """Return True if detection should retry *phone* with the prefix toggled.

    Requires a flagged region, digits starting with its calling code, no
    leading ``+`` on the original input, and a plain attempt that was not
    already valid for this region.
    """
    if not region.double_prefix or international:
        return False
    if not phone.startswith(region.calling_code):
        return False
    entry = (parsed or {}).get(region.id)
    return entry is None or not entry.is_valid


def detect_and_parse(
    phone: str,
    store: MetadataStore,
    *,
    international: bool = False,
) -> AnalysisResult:
    """Return every region's reading of *phone*, merged into one result."""
    found: list[AnalysisResult] = []
    for region in store:
        parsed = parse_canonical(phone, region)
        if double_prefix_allowed(region, phone, parsed, international):
            retried = parse_canonical(changed_double_prefixed_phone(region, phone), region)
            parsed = better_result(parsed, retried)
        if parsed:
            found.append(parsed)

    result = merge_results(*found)
    logger.debug(
        "detector: %d of %d regions matched (length=%d)",
        len(result),
        len(store),
        len(phone),
    )
    return result
