from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Iterable, List

from swot_web.domain.models import Analysis, DigestEntry
from swot_web.repositories.json_store import Store

COLLECTION = "digest"


def _us_date(dt: datetime) -> str:
    return f"{dt.month}/{dt.day}/{dt.year}"


@dataclass
class DigestService:
    """
    Placeholder daily digest: one line per stored analysis naming its
    competitors. Each run replaces the whole stored digest.
    """
    store: Store
    clock: Callable[[], float] = field(default=time.time)

    def generate(self, analyses: Iterable[Analysis]) -> List[DigestEntry]:
        now = self.clock()
        date_str = _us_date(datetime.fromtimestamp(now))
        entries = []
        for analysis in analyses:
            names = ", ".join(
                str(c.get("name")) for c in analysis.competitors if isinstance(c, dict) and c.get("name")
            )
            names = names or "Unknown"
            entries.append(DigestEntry(
                analysis_id=analysis.id,
                summary=f"Daily digest for {names} on {date_str}.",
                timestamp=int(now * 1000),
            ))
        self.store.store(COLLECTION, [e.to_dict() for e in entries])
        return entries

    def load(self) -> List[DigestEntry]:
        raw = self.store.load(COLLECTION, [])
        if not isinstance(raw, list):
            return []
        return [DigestEntry.from_dict(e) for e in raw if isinstance(e, dict)]
