from __future__ import annotations

from typing import List

import pytest

from swot_web.domain.errors import NotFoundError
from swot_web.domain.models import Variant
from swot_web.repositories.analysis_repository import AnalysisRepository
from swot_web.services.ab_test_service import AbTestService
from swot_web.services.analysis_service import AnalysisService
from swot_web.services.metrics_service import MetricsStore
from swot_web.services.swot_extractor import SwotExtractor
from swot_web.services.variant_assigner import VariantAssigner


# -----------------------------
# Test doubles
# -----------------------------
class ScriptedRandom:
    """Returns the given draws in order, then repeats the last one."""

    def __init__(self, draws: List[float]):
        self._draws = list(draws)

    def __call__(self) -> float:
        if len(self._draws) > 1:
            return self._draws.pop(0)
        return self._draws[0]


# -----------------------------
# Helpers
# -----------------------------
def make_service(store, clock, draws: List[float]) -> AnalysisService:
    metrics = MetricsStore(store)
    ab_test = AbTestService(assigner=VariantAssigner(random_source=ScriptedRandom(draws)), metrics=metrics)
    return AnalysisService(
        extractor=SwotExtractor(),
        ab_test=ab_test,
        analysis_repo=AnalysisRepository(store),
        clock=clock,
    )


COMPETITORS = [
    {"name": "Acme", "description": "Acme is fast. Acme is expensive."},
    {"description": "no keywords here"},
]


def test_generate_returns_variant_and_results_and_counts_a_view(memory_store, clock):
    svc = make_service(memory_store, clock, [0.1])

    result = svc.generate(COMPETITORS)

    assert result.variant is Variant.A
    assert [r.name for r in result.results] == ["Acme", "Unnamed competitor"]
    assert memory_store.data["metrics"]["variantA"] == 1
    assert memory_store.data["analyses"] == []      # anonymous flow stores nothing


def test_generate_wire_shape(memory_store, clock):
    out = make_service(memory_store, clock, [0.9]).generate(COMPETITORS[:1]).to_dict()
    assert out["variant"] == "B"
    assert out["results"][0]["swot"]["strengths"] == ["Acme is fast"]
    assert out["results"][0]["swot"]["weaknesses"] == ["Acme is expensive"]


def test_generate_with_non_list_input_still_assigns_variant(memory_store, clock):
    result = make_service(memory_store, clock, [0.7]).generate("nope")
    assert result.results == []
    assert result.variant is Variant.B


def test_anonymous_flow_reassigns_each_call(memory_store, clock):
    svc = make_service(memory_store, clock, [0.1, 0.9])
    assert svc.generate([]).variant is Variant.A
    assert svc.generate([]).variant is Variant.B


def test_create_stores_analysis_for_owner(memory_store, clock):
    svc = make_service(memory_store, clock, [0.2])

    analysis = svc.create("u1", COMPETITORS)

    assert analysis.owner_id == "u1"
    assert analysis.variant == "A"
    assert analysis.timestamp == int(clock.now * 1000)
    assert analysis.competitors == [
        {"name": "Acme", "description": "Acme is fast. Acme is expensive."},
        {"name": "", "description": "no keywords here"},
    ]
    assert len(analysis.results) == 2

    stored = memory_store.data["analyses"]
    assert stored[0]["id"] == analysis.id
    assert stored[0]["userId"] == "u1"
    assert memory_store.data["metrics"]["variantA"] == 1


def test_get_and_delete_are_owner_scoped(memory_store, clock):
    svc = make_service(memory_store, clock, [0.2])
    analysis = svc.create("u1", COMPETITORS)

    assert svc.get("u1", analysis.id) == analysis
    with pytest.raises(NotFoundError):
        svc.get("u2", analysis.id)
    with pytest.raises(NotFoundError):
        svc.delete("u2", analysis.id)

    svc.delete("u1", analysis.id)
    assert svc.list_for("u1") == []
    with pytest.raises(NotFoundError):
        svc.delete("u1", analysis.id)


def test_user_summary_uses_owner_analyses_and_global_conversions(memory_store, clock):
    svc = make_service(memory_store, clock, [0.1, 0.1, 0.9, 0.9])
    svc.create("u1", [])
    svc.create("u1", [])
    svc.create("u1", [])
    svc.create("u2", [])
    svc.ab_test.record_conversion("A")
    svc.ab_test.record_conversion("B")

    summary = svc.user_summary("u1").to_dict()

    assert summary == {"analyses": 3, "variantA": 2, "variantB": 1, "conversionsA": 1, "conversionsB": 1}
