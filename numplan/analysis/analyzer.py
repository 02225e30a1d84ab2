"""Phone analyzer — the entry point of the analysis pipeline.

Usage
-----
    from numplan.analysis.analyzer import PhoneAnalyzer
    from numplan.metadata.store import MetadataStore

    analyzer = PhoneAnalyzer(MetadataStore.from_directory(), default_region="US")
    result = analyzer.analyze("2025551234")
    entry = result["US"]

Control flow
------------
1. the hint (case-insensitive) or, without one, the default region is
   tried on its own
2. when that attempt found nothing valid, a second attempt is made:
   * no hint given → detection over every region
   * hint given, input without ``+``, region flagged ``double_prefix`` →
     the same region again with the calling code toggled
3. the arbiter picks the stronger of the two

A number that starts with the tried region's international prefix is
re-analyzed without a hint, at most once per call.

Safety rule: raw numbers are never logged.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from numplan.analysis.arbiter import better_result
from numplan.analysis.detector import changed_double_prefixed_phone, detect_and_parse
from numplan.analysis.normalizer import PLUS_SIGN
from numplan.analysis.resolver import Redetect, resolve_region
from numplan.analysis.result import AnalysisResult, has_valid
from numplan.metadata.store import MetadataStore

if TYPE_CHECKING:
    from numplan.core.settings import Settings

logger = logging.getLogger(__name__)

# Hint-less re-analysis after an international prefix never nests deeper.
MAX_REDETECT_DEPTH = 1


class PhoneAnalyzer:
    """Resolve numbers against a ``MetadataStore``.

    Holds no per-call state, so one instance may serve concurrent callers.
    """

    def __init__(self, store: MetadataStore, default_region: str | None = None) -> None:
        self.store = store
        self.default_region = default_region.upper() if default_region else None

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> PhoneAnalyzer:
        if settings is None:
            from numplan.core.settings import get_settings

            settings = get_settings()
        return cls(MetadataStore.from_settings(settings), default_region=settings.default_region)

    def analyze(self, raw: str, region_hint: str | None = None) -> AnalysisResult:
        """Return every region's reading of *raw*.

        *raw* is a digit string, optionally with a leading ``+``.  The result
        maps region id to ``AnalysisEntry`` and is empty when no region
        recognises the number.  Never raises.
        """
        international = raw.startswith(PLUS_SIGN)
        phone = raw[len(PLUS_SIGN):] if international else raw
        hint = self._usable_hint(phone, region_hint, international)

        result = self._analyze(phone, hint, international, depth=0)
        logger.debug(
            "analyzer: %d region(s) for input (length=%d, hint=%s)",
            len(result),
            len(phone),
            hint,
        )
        return result

    def _usable_hint(self, phone: str, region_hint: str | None, international: bool) -> str | None:
        if not region_hint:
            return None

        region = self.store.lookup(region_hint)
        if region is None:
            logger.debug("analyzer: unknown region hint %r ignored", region_hint)
            return None

        # An explicit calling code outranks a hint that disagrees with it.
        if international and not phone.startswith(region.calling_code):
            logger.debug("analyzer: hint %s conflicts with calling code, ignored", region.id)
            return None

        return region.id

    def _analyze(self, phone: str, hint: str | None, international: bool, depth: int) -> AnalysisResult:
        result = self._try_region(phone, hint or self.default_region, international, depth)

        second: AnalysisResult | None = None
        if not has_valid(result):
            if hint is None:
                second = detect_and_parse(phone, self.store, international=international)
            elif not international and self._can_double_prefix(hint):
                changed = changed_double_prefixed_phone(self.store.lookup(hint), phone)
                second = self._try_region(changed, hint, international, depth)

        return better_result(result, second)

    def _try_region(
        self,
        phone: str,
        region_id: str | None,
        international: bool,
        depth: int,
    ) -> AnalysisResult | None:
        outcome = resolve_region(phone, region_id, self.store)
        if isinstance(outcome, Redetect):
            if depth >= MAX_REDETECT_DEPTH:
                logger.debug("analyzer: nested international prefix for %s dropped", region_id)
                return None
            logger.debug("analyzer: %s international prefix, detecting without hint", region_id)
            return self._analyze(outcome.phone, None, international, depth + 1)
        return outcome

    def _can_double_prefix(self, region_id: str) -> bool:
        region = self.store.lookup(region_id)
        return region is not None and region.double_prefix


@lru_cache(maxsize=1)
def get_analyzer() -> PhoneAnalyzer:
    """Return the process-wide analyzer configured from ``Settings``."""
    return PhoneAnalyzer.from_settings()


def analyze(raw: str, region_hint: str | None = None) -> AnalysisResult:
    """Analyze *raw* with the analyzer configured from ``Settings``."""
    return get_analyzer().analyze(raw, region_hint)
