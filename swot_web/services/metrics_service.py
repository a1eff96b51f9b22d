from __future__ import annotations

import logging
from typing import Any, Iterable

from swot_web.domain.models import Analysis, MetricsCounters, UserMetricsSummary, Variant
from swot_web.repositories.json_store import Store

logger = logging.getLogger(__name__)

COLLECTION = "metrics"


class MetricsStore:
    """
    Process-wide A/B counters (views and conversions per variant).

    Built once by the app factory and handed to the services that need it.
    Counters only ever go up, and every increment is written through to the
    store immediately. If that write fails the in-memory counters remain
    correct for the life of the process.
    """

    def __init__(self, store: Store):
        self._store = store
        existing = store.load(COLLECTION, None)
        self._counters = MetricsCounters.from_dict(existing)
        if not isinstance(existing, dict):
            self._persist()

    def _persist(self) -> None:
        self._store.store(COLLECTION, self._counters.to_dict())

    def snapshot(self) -> MetricsCounters:
        return self._counters.copy()

    def record_view(self, variant: Variant) -> MetricsCounters:
        if variant is Variant.A:
            self._counters.views_a += 1
        else:
            self._counters.views_b += 1
        self._persist()
        return self.snapshot()

    def record_conversion(self, raw_variant: Any) -> MetricsCounters:
        variant = Variant.parse(raw_variant)
        if variant is Variant.A:
            self._counters.conversions_a += 1
        elif variant is Variant.B:
            self._counters.conversions_b += 1
        else:
            # Unknown labels count toward B. Kept for compatibility with existing dashboards.
            logger.warning("Conversion with unknown variant %r attributed to B", raw_variant)
            self._counters.conversions_b += 1
        self._persist()
        return self.snapshot()


def user_summary(owner_id: str, analyses: Iterable[Analysis], counters: MetricsCounters) -> UserMetricsSummary:
    """
    Per-user rollup: analysis count and variant tally are filtered by owner,
    conversions are the global counters copied as-is.
    """
    owned = [a for a in analyses if a.owner_id == owner_id]
    return UserMetricsSummary(
        analysis_count=len(owned),
        variant_a=sum(1 for a in owned if a.variant == Variant.A.value),
        variant_b=sum(1 for a in owned if a.variant == Variant.B.value),
        conversions_a=counters.conversions_a,
        conversions_b=counters.conversions_b,
    )
