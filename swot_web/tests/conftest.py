from __future__ import annotations

import copy
from typing import Any, Dict

import pytest

from swot_web.repositories.json_store import Store


class InMemoryStore(Store):
    """Store port backed by a dict; values are deep-copied like a file round trip."""

    def __init__(self, data: Dict[str, Any] | None = None):
        self.data: Dict[str, Any] = dict(data or {})
        self.writes: Dict[str, int] = {}

    def load(self, collection: str, default: Any) -> Any:
        if collection not in self.data:
            return default
        return copy.deepcopy(self.data[collection])

    def store(self, collection: str, value: Any) -> None:
        self.data[collection] = copy.deepcopy(value)
        self.writes[collection] = self.writes.get(collection, 0) + 1


class FakeClock:
    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def memory_store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
