"""Display format selection."""
from __future__ import annotations

from typing import Iterable

from numplan.analysis.patterns import full_match, starts_with
from numplan.metadata.region import FormatRule

# Pass-through rule used when no region rule fits.
DEFAULT_FORMAT = FormatRule(pattern=r"(\d+)", template=r"\1")


def select_format(national: str, formats: Iterable[FormatRule]) -> FormatRule:
    """Return the first rule whose leading digits and pattern fit *national*."""
    for rule in formats:
        if rule.leading_digits is not None and not starts_with(rule.leading_digits, national):
            continue
        if full_match(rule.pattern, national):
            return rule
    return DEFAULT_FORMAT
