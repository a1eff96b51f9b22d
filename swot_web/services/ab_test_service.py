from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from swot_web.domain.models import MetricsCounters, Variant
from swot_web.services.metrics_service import MetricsStore
from swot_web.services.variant_assigner import VariantAssigner


@dataclass
class AbTestService:
    assigner: VariantAssigner
    metrics: MetricsStore

    def serve_variant(self) -> Variant:
        """Fresh assignment; counts as one view of the chosen variant."""
        variant = self.assigner.assign()
        self.metrics.record_view(variant)
        return variant

    def record_conversion(self, raw_variant: Any) -> MetricsCounters:
        return self.metrics.record_conversion(raw_variant)

    def counters(self) -> MetricsCounters:
        return self.metrics.snapshot()
