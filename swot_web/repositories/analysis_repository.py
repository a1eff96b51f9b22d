from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from swot_web.domain.models import Analysis
from swot_web.repositories.json_store import Store

COLLECTION = "analyses"


@dataclass
class AnalysisRepository:
    """
    Repository pattern: the analyses collection, loaded once and kept resident.
    Every mutation overwrites the whole collection through the store.
    """
    store: Store
    _analyses: List[Analysis] = field(init=False, default_factory=list)

    def __post_init__(self) -> None:
        raw = self.store.load(COLLECTION, [])
        if not isinstance(raw, list):
            raw = []
        self._analyses = [Analysis.from_dict(a) for a in raw if isinstance(a, dict)]
        self._save()

    def _save(self) -> None:
        self.store.store(COLLECTION, [a.to_dict() for a in self._analyses])

    def add(self, analysis: Analysis) -> None:
        self._analyses.append(analysis)
        self._save()

    def list_all(self) -> List[Analysis]:
        return list(self._analyses)

    def list_by_owner(self, owner_id: str) -> List[Analysis]:
        return [a for a in self._analyses if a.owner_id == owner_id]

    def get_for_owner(self, owner_id: str, analysis_id: str) -> Optional[Analysis]:
        return next((a for a in self._analyses if a.id == analysis_id and a.owner_id == owner_id), None)

    def delete_for_owner(self, owner_id: str, analysis_id: str) -> bool:
        for idx, a in enumerate(self._analyses):
            if a.id == analysis_id and a.owner_id == owner_id:
                del self._analyses[idx]
                self._save()
                return True
        return False
