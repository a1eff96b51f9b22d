from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet

POSITIVE_KEYWORDS: FrozenSet[str] = frozenset({
    "fast", "easy", "popular", "affordable", "flexible",
    "scalable", "intuitive", "efficient", "user-friendly",
})
NEGATIVE_KEYWORDS: FrozenSet[str] = frozenset({
    "expensive", "slow", "bug", "bugs", "complicated",
    "complex", "limited", "difficult", "unreliable",
})


@dataclass(frozen=True)
class KeywordMatch:
    is_positive: bool
    is_negative: bool


@dataclass(frozen=True)
class KeywordMatcher:
    """
    Case-insensitive substring matching against two fixed keyword sets.
    A sentence can be flagged positive and negative at the same time.
    """
    positive: FrozenSet[str] = POSITIVE_KEYWORDS
    negative: FrozenSet[str] = NEGATIVE_KEYWORDS

    def classify(self, sentence: str) -> KeywordMatch:
        lower = (sentence or "").lower()
        return KeywordMatch(
            is_positive=any(k in lower for k in self.positive),
            is_negative=any(k in lower for k in self.negative),
        )
