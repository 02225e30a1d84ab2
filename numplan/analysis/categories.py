"""Category matcher.

Given a national number and one region, works out which categories the
number is *valid* for (strict pattern) and which it is merely *possible*
for (shape/length pattern).

Categories are data-driven: every tag in the region's table is checked,
except the structural ones in ``NOT_FOR_CHECK``.  Fixed line and mobile
are checked separately — as a single ``fixed_or_mobile`` tag when the
region gives both the same patterns — and a final reconciliation step
collapses a ``fixed_line`` + ``mobile`` pair into ``fixed_or_mobile``.
"""
from __future__ import annotations

from numplan.analysis.patterns import full_match
from numplan.core.constants import FIXED_LINE, FIXED_OR_MOBILE, MOBILE, NOT_FOR_CHECK
from numplan.metadata.region import CategoryPatterns, RegionMetadata

_FIXED_AND_MOBILE = frozenset({FIXED_LINE, MOBILE})


def fixed_and_mobile_tags(region: RegionMetadata) -> list[str]:
    fixed = region.categories.get(FIXED_LINE)
    if fixed is not None and fixed == region.categories.get(MOBILE):
        return [FIXED_OR_MOBILE]
    return [FIXED_LINE, MOBILE]


def categories_for_check(region: RegionMetadata) -> list[str]:
    """Return the category tags to evaluate for *region*, in table order."""
    tags = [tag for tag in region.categories if tag not in NOT_FOR_CHECK]
    return tags + fixed_and_mobile_tags(region)


def number_valid_and_possible(
    number: str,
    patterns: CategoryPatterns | None,
    not_valid: bool = False,
) -> tuple[bool, bool]:
    """Return ``(valid, possible)`` for *number* against one pattern pair.

    A missing pair matches nothing.  The valid pattern also counts as a
    possible match when the possible pattern misses.
    """
    if patterns is None:
        return False, False
    valid_match = full_match(patterns.valid, number)
    possible = valid_match or full_match(patterns.possible, number)
    return valid_match and not not_valid, possible


def sanitize_fixed_mobile(tags: set[str]) -> frozenset[str]:
    """Replace a ``fixed_line`` + ``mobile`` pair with ``fixed_or_mobile``."""
    if _FIXED_AND_MOBILE <= tags:
        tags = (tags - _FIXED_AND_MOBILE) | {FIXED_OR_MOBILE}
    return frozenset(tags)


def match_categories(
    national: str,
    region: RegionMetadata,
    not_valid: bool = False,
) -> tuple[frozenset[str], frozenset[str]]:
    """Return ``(valid_categories, possible_categories)`` for *national*.

    *not_valid* is set when the number already failed the region's general
    valid pattern; no category can then be valid.
    """
    valid: set[str] = set()
    possible: set[str] = set()

    for tag in categories_for_check(region):
        is_valid, is_possible = number_valid_and_possible(
            national, region.patterns_for(tag), not_valid
        )
        if is_valid:
            valid.add(tag)
        if is_possible:
            possible.add(tag)

    return sanitize_fixed_mobile(valid), sanitize_fixed_mobile(possible)
