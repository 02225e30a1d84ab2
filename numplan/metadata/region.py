"""Region metadata dataclasses.

A ``RegionMetadata`` is created once when the store is built and never
changed afterwards.  Its mappings are wrapped in read-only proxies so the
same instance can be shared by any number of concurrent analyses.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Mapping

from numplan.core.constants import FIXED_LINE, FIXED_OR_MOBILE, GENERAL


@lru_cache(maxsize=4096)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile *pattern* as a non-capturing group, cached."""
    return re.compile(f"(?:{pattern})")


@dataclass(frozen=True)
class CategoryPatterns:
    """Possible/valid regular expression pair for one category.

    ``possible`` is the loose shape or length check; when a region ships no
    possible pattern the valid pattern stands in for it.
    """

    valid: str
    possible: str | None = None


@dataclass(frozen=True)
class FormatRule:
    """A display formatting rule for national numbers."""

    pattern: str
    template: str
    leading_digits: str | None = None

    def apply(self, national: str) -> str:
        """Return *national* rendered with ``template``.

        The number is returned unchanged when ``pattern`` does not match it
        in full.
        """
        regex = compile_pattern(self.pattern)
        if regex.fullmatch(national) is None:
            return national
        return regex.sub(self.template, national, count=1)


@dataclass(frozen=True)
class RegionMetadata:
    """Numbering-plan data for one region."""

    id: str
    calling_code: str
    international_prefix: str | None
    categories: Mapping[str, CategoryPatterns]
    formats: tuple[FormatRule, ...] = ()

    # Not every plan has a trunk prefix.
    national_prefix: str | None = None
    national_prefix_for_parsing: str | None = None
    double_prefix: bool = False
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", self.id.upper())
        object.__setattr__(self, "categories", MappingProxyType(dict(self.categories)))
        object.__setattr__(self, "formats", tuple(self.formats))
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

    @property
    def general(self) -> CategoryPatterns | None:
        return self.categories.get(GENERAL)

    @property
    def trunk_prefix(self) -> str | None:
        """Pattern for national prefix digits stripped while parsing."""
        return self.national_prefix_for_parsing or self.national_prefix

    def patterns_for(self, category: str) -> CategoryPatterns | None:
        """Return the pattern pair for *category*, or ``None``.

        ``fixed_or_mobile`` borrows the ``fixed_line`` pair when the region
        has no dedicated entry for it.
        """
        patterns = self.categories.get(category)
        if patterns is None and category == FIXED_OR_MOBILE:
            patterns = self.categories.get(FIXED_LINE)
        return patterns
