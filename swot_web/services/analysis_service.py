from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import Any, Callable, List

from swot_web.domain.errors import NotFoundError
from swot_web.domain.models import Analysis, CompetitorInput, GenerationResult, UserMetricsSummary
from swot_web.repositories.analysis_repository import AnalysisRepository
from swot_web.services.ab_test_service import AbTestService
from swot_web.services.metrics_service import user_summary
from swot_web.services.swot_extractor import SwotExtractor

logger = logging.getLogger(__name__)


@dataclass
class AnalysisService:
    """
    Service layer: SWOT generation plus the stored-analysis use cases.
    Keeps controllers/routes thin.
    """
    extractor: SwotExtractor
    ab_test: AbTestService
    analysis_repo: AnalysisRepository
    clock: Callable[[], float] = field(default=time.time)

    def generate(self, raw_competitors: Any) -> GenerationResult:
        """Anonymous flow: every call draws a fresh variant."""
        results = self.extractor.analyze_all(raw_competitors)
        variant = self.ab_test.serve_variant()
        return GenerationResult(variant=variant, results=results)

    def create(self, owner_id: str, raw_competitors: Any) -> Analysis:
        generated = self.generate(raw_competitors)
        competitors = raw_competitors if isinstance(raw_competitors, list) else []

        # Metrics were already written by generate(); this is a second, independent write.
        analysis = Analysis(
            id=str(uuid.uuid4()),
            owner_id=owner_id,
            timestamp=int(self.clock() * 1000),
            competitors=[CompetitorInput.from_raw(c).to_dict() for c in competitors],
            results=[r.to_dict() for r in generated.results],
            variant=generated.variant.value,
        )
        self.analysis_repo.add(analysis)
        logger.info("Stored analysis %s (%d competitors, variant %s)",
                    analysis.id, len(analysis.results), analysis.variant)
        return analysis

    def list_for(self, owner_id: str) -> List[Analysis]:
        return self.analysis_repo.list_by_owner(owner_id)

    def all_analyses(self) -> List[Analysis]:
        return self.analysis_repo.list_all()

    def get(self, owner_id: str, analysis_id: str) -> Analysis:
        analysis = self.analysis_repo.get_for_owner(owner_id, analysis_id)
        if analysis is None:
            raise NotFoundError("Analysis not found")
        return analysis

    def delete(self, owner_id: str, analysis_id: str) -> None:
        if not self.analysis_repo.delete_for_owner(owner_id, analysis_id):
            raise NotFoundError("Analysis not found")

    def user_summary(self, owner_id: str) -> UserMetricsSummary:
        return user_summary(owner_id, self.analysis_repo.list_all(), self.ab_test.counters())
