"""Result arbiter: choose between two candidate results.

A result with at least one valid category outranks one with only
possible matches, and an empty or purely speculative base never blocks
an alternative.
"""
from __future__ import annotations

from numplan.analysis.result import AnalysisResult, has_possible, has_valid


def better_result(
    base: AnalysisResult | None,
    alt: AnalysisResult | None = None,
) -> AnalysisResult:
    """Return *alt* or *base* by the fixed precedence rule.

    ``None`` for *alt* means no second attempt was made.
    """
    if alt is None:
        return base or {}

    if not has_possible(base):
        return alt

    if has_valid(alt):
        return alt

    return base or {}
