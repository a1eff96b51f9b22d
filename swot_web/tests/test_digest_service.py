from __future__ import annotations

from datetime import datetime

from swot_web.domain.models import Analysis
from swot_web.services.digest_service import DigestService


def _analysis(analysis_id: str, competitors) -> Analysis:
    return Analysis(id=analysis_id, owner_id="u1", timestamp=0, competitors=competitors, results=[], variant="A")


def test_generate_one_entry_per_analysis(memory_store):
    now = datetime(2026, 3, 7, 9, 30).timestamp()
    svc = DigestService(store=memory_store, clock=lambda: now)

    entries = svc.generate([
        _analysis("a1", [{"name": "Acme", "description": ""}, {"name": "", "description": "x"}, {"name": "Globex"}]),
        _analysis("a2", []),
    ])

    assert [e.analysis_id for e in entries] == ["a1", "a2"]
    assert entries[0].summary == "Daily digest for Acme, Globex on 3/7/2026."
    assert entries[1].summary == "Daily digest for Unknown on 3/7/2026."
    assert entries[0].timestamp == int(now * 1000)


def test_generate_replaces_stored_digest(memory_store):
    svc = DigestService(store=memory_store, clock=lambda: 0.0)
    svc.generate([_analysis("a1", [])])
    svc.generate([_analysis("a2", [])])

    assert [e.analysis_id for e in svc.load()] == ["a2"]
    assert memory_store.data["digest"][0]["analysisId"] == "a2"


def test_load_without_digest_is_empty(memory_store):
    assert DigestService(store=memory_store).load() == []
