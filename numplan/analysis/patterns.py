"""Regular expression helpers shared by the analysis steps.

The full-number regex reads a digit string as::

    [international prefix] calling code [national prefix] national number

with named groups ``intl``, ``cc``, ``np`` and ``national``.  Region
patterns are wrapped in named groups so capturing groups inside the
metadata never shift the positions we read.
"""
from __future__ import annotations

import re
from functools import lru_cache

from numplan.core.constants import GENERAL, POSSIBLE_PATTERN, VALID_PATTERN
from numplan.metadata.region import CategoryPatterns, RegionMetadata, compile_pattern


def full_match(pattern: str | None, text: str) -> bool:
    """Return True if *pattern* matches the whole of *text*."""
    if not pattern:
        return False
    return compile_pattern(pattern).fullmatch(text) is not None


def starts_with(pattern: str | None, text: str) -> bool:
    """Return True if *pattern* matches at the start of *text*."""
    if not pattern:
        return False
    return compile_pattern(pattern).match(text) is not None


def pattern_of_kind(patterns: CategoryPatterns, kind: str) -> str:
    if kind == POSSIBLE_PATTERN:
        return patterns.possible or patterns.valid
    return patterns.valid


@lru_cache(maxsize=4096)
def _full_number_regex(
    international_prefix: str | None,
    calling_code: str,
    trunk_prefix: str | None,
    national: str,
    calling_code_optional: bool,
) -> re.Pattern[str]:
    parts = ["^"]
    if international_prefix:
        parts.append(f"(?P<intl>{international_prefix})?")
    parts.append(f"(?P<cc>{re.escape(calling_code)})")
    if calling_code_optional:
        parts.append("?")
    if trunk_prefix:
        parts.append(f"(?P<np>{trunk_prefix})?")
    parts.append(f"(?P<national>{national})$")
    return re.compile("".join(parts))


def full_number_regex(
    region: RegionMetadata,
    kind: str = VALID_PATTERN,
    *,
    calling_code_optional: bool = False,
) -> re.Pattern[str] | None:
    """Return the full-number regex for *region*'s general description.

    ``None`` when the region has no ``general`` category.
    """
    general = region.categories.get(GENERAL)
    if general is None:
        return None
    return _full_number_regex(
        region.international_prefix,
        region.calling_code,
        region.trunk_prefix,
        pattern_of_kind(general, kind),
        calling_code_optional,
    )


def prefix_length(region: RegionMetadata, match: re.Match[str]) -> int:
    """Return how many leading digits precede the national number.

    That is the calling code plus whatever the international-prefix and
    national-prefix groups captured.
    """
    groups = match.groupdict()
    return (
        len(region.calling_code)
        + len(groups.get("intl") or "")
        + len(groups.get("np") or "")
    )
