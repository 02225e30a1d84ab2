"""Region metadata built from the ``phonenumbers`` distribution.

``phonenumbers`` bundles Google's libphonenumber metadata for every
supported region.  This module maps a region's ``PhoneMetadata`` onto our
``RegionMetadata`` so the analyzer can run against the full, current
numbering plans without any hand-maintained YAML.

Mapping rules
-------------
* each populated number descriptor becomes a category; the descriptor's
  national number pattern is the *valid* pattern and its possible lengths
  become the *possible* pattern (``\\d{7}|\\d{10}``)
* number formats keep their most specific (last) leading-digits pattern;
  templates are kept as ``\\1`` backreferences (``$1`` forms are rewritten)
* libphonenumber has no double-prefix notion, so the flag comes from the
  caller (``NUMPLAN_DOUBLE_PREFIX_REGIONS``)
"""
from __future__ import annotations

import logging
import re
from typing import Iterable

import phonenumbers
from phonenumbers import PhoneMetadata

from numplan.core.constants import (
    FIXED_LINE,
    GENERAL,
    MOBILE,
    PAGER,
    PERSONAL_NUMBER,
    PREMIUM_RATE,
    SHARED_COST,
    TOLL_FREE,
    UAN,
    VOICEMAIL,
    VOIP,
)
from numplan.metadata.region import CategoryPatterns, FormatRule, RegionMetadata

logger = logging.getLogger(__name__)

# Category tag → PhoneMetadata attribute.
_DESCRIPTORS: dict[str, str] = {
    GENERAL: "general_desc",
    FIXED_LINE: "fixed_line",
    MOBILE: "mobile",
    TOLL_FREE: "toll_free",
    PREMIUM_RATE: "premium_rate",
    SHARED_COST: "shared_cost",
    PERSONAL_NUMBER: "personal_number",
    VOIP: "voip",
    PAGER: "pager",
    UAN: "uan",
    VOICEMAIL: "voicemail",
}

_GROUP_REFERENCE = re.compile(r"\$(\d)")


def _possible_pattern(lengths: Iterable[int] | None) -> str | None:
    usable = sorted({n for n in (lengths or ()) if n > 0})
    if not usable:
        return None
    return "|".join(f"\\d{{{n}}}" for n in usable)


def _category_patterns(metadata: PhoneMetadata) -> dict[str, CategoryPatterns]:
    general = metadata.general_desc
    general_lengths = general.possible_length if general is not None else None

    categories: dict[str, CategoryPatterns] = {}
    for tag, attribute in _DESCRIPTORS.items():
        desc = getattr(metadata, attribute, None)
        if desc is None or not desc.national_number_pattern:
            continue
        lengths = desc.possible_length if desc.possible_length else general_lengths
        categories[tag] = CategoryPatterns(
            valid=desc.national_number_pattern,
            possible=_possible_pattern(lengths),
        )
    return categories


def _format_rules(metadata: PhoneMetadata) -> tuple[FormatRule, ...]:
    rules: list[FormatRule] = []
    for number_format in metadata.number_format or ():
        leading = number_format.leading_digits_pattern
        rules.append(
            FormatRule(
                pattern=number_format.pattern,
                template=_GROUP_REFERENCE.sub(r"\\\1", number_format.format),
                leading_digits=leading[-1] if leading else None,
            )
        )
    return tuple(rules)


def region_from_phonenumbers(region_code: str, *, double_prefix: bool = False) -> RegionMetadata | None:
    """Return ``RegionMetadata`` for *region_code*, or ``None``.

    ``None`` is returned for unknown codes and for non-geographic entries
    that carry no general description.
    """
    metadata = PhoneMetadata.metadata_for_region(region_code.upper(), None)
    if metadata is None:
        return None

    categories = _category_patterns(metadata)
    if GENERAL not in categories:
        logger.debug("phonenumbers_source: %s has no general description", region_code)
        return None

    return RegionMetadata(
        id=region_code,
        calling_code=str(metadata.country_code),
        international_prefix=metadata.international_prefix or None,
        categories=categories,
        formats=_format_rules(metadata),
        national_prefix=metadata.national_prefix or None,
        national_prefix_for_parsing=metadata.national_prefix_for_parsing or None,
        double_prefix=double_prefix,
    )


def load_phonenumbers_regions(
    region_codes: Iterable[str] | None = None,
    *,
    double_prefix_regions: Iterable[str] = (),
) -> list[RegionMetadata]:
    """Return regions for *region_codes* (default: every supported region).

    Regions are returned sorted by code so detection order is stable
    across runs.
    """
    codes = sorted(region_codes if region_codes is not None else phonenumbers.SUPPORTED_REGIONS)
    double_prefix = {code.upper() for code in double_prefix_regions}

    regions: list[RegionMetadata] = []
    for code in codes:
        region = region_from_phonenumbers(code, double_prefix=code.upper() in double_prefix)
        if region is not None:
            regions.append(region)
    logger.debug("phonenumbers_source: built %d regions", len(regions))
    return regions
