"""Phone-number category tags and shared analysis constants.

Categories
----------
Category tags are data-driven: a region's metadata may carry any tag, and
the analyzer evaluates every tag it finds.  Four tags are structural and
never evaluated as independent leaf categories:

general          — whole-plan description; gates validity of everything else
fixed_line       — geographic numbers
mobile           — mobile numbers
fixed_or_mobile  — reported when a number is both fixed line and mobile

The remaining tags listed in ``KNOWN_CATEGORIES`` are the ones shipped by
the bundled metadata and by the phonenumbers source.
"""
from __future__ import annotations

GENERAL = "general"
FIXED_LINE = "fixed_line"
MOBILE = "mobile"
FIXED_OR_MOBILE = "fixed_or_mobile"

TOLL_FREE = "toll_free"
PREMIUM_RATE = "premium_rate"
SHARED_COST = "shared_cost"
PERSONAL_NUMBER = "personal_number"
VOIP = "voip"
PAGER = "pager"
UAN = "uan"
VOICEMAIL = "voicemail"

KNOWN_CATEGORIES: frozenset[str] = frozenset({
    GENERAL,
    FIXED_LINE,
    MOBILE,
    FIXED_OR_MOBILE,
    TOLL_FREE,
    PREMIUM_RATE,
    SHARED_COST,
    PERSONAL_NUMBER,
    VOIP,
    PAGER,
    UAN,
    VOICEMAIL,
})

# Tags skipped by the generic per-category loop.
NOT_FOR_CHECK: frozenset[str] = frozenset({GENERAL, FIXED_LINE, MOBILE, FIXED_OR_MOBILE})

# Pattern kinds of a CategoryPatterns pair.
VALID_PATTERN = "valid"
POSSIBLE_PATTERN = "possible"
