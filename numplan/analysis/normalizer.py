"""Canonical form of a raw number for one region.

The first matching rule wins:

1. the number fits the region's general valid pattern, read with an
   optional international prefix, calling code and national prefix →
   calling code + the national part
2. the number starts with the region's international prefix → the
   prefix is replaced by ``+``
3. otherwise → calling code + the number as given

Never fails; judging the result is left to the category matcher.
"""
from __future__ import annotations

import logging

from numplan.analysis.patterns import full_number_regex
from numplan.metadata.region import RegionMetadata, compile_pattern

logger = logging.getLogger(__name__)

PLUS_SIGN = "+"


def to_canonical(phone: str, region: RegionMetadata) -> str:
    """Return *phone* in canonical form for *region*.

    The result is either calling-code prefixed (no ``+``) or, when the
    number carries the region's international prefix, ``+`` followed by the
    digits after that prefix.
    """
    regex = full_number_regex(region, calling_code_optional=True)
    match = regex.match(phone) if regex is not None else None
    if match:
        national = match.group("national")
        return f"{region.calling_code}{national}"

    if region.international_prefix:
        prefix = compile_pattern(f"^(?:{region.international_prefix})")
        if prefix.match(phone):
            logger.debug("normalizer: %s international prefix found", region.id)
            return prefix.sub(PLUS_SIGN, phone, count=1)

    return f"{region.calling_code}{phone}"
