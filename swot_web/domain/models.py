######## models.py
########

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

UNNAMED_COMPETITOR = "Unnamed competitor"


class Variant(str, Enum):
    """UI treatment served to a visitor: A = card layout, B = table layout."""
    A = "A"
    B = "B"

    @classmethod
    def parse(cls, raw: Any) -> Optional["Variant"]:
        if raw == cls.A.value:
            return cls.A
        if raw == cls.B.value:
            return cls.B
        return None


def as_text(raw: Any) -> str:
    """Falsy -> "", strings as-is, anything else stringified."""
    if not raw:
        return ""
    return raw if isinstance(raw, str) else str(raw)


def as_int(raw: Any) -> int:
    """Stored numbers only; strings, bools and junk read as 0."""
    if isinstance(raw, bool):
        return 0
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and math.isfinite(raw):
        return int(raw)
    return 0


@dataclass(frozen=True)
class CompetitorInput:
    name: str = ""
    description: str = ""

    @staticmethod
    def from_raw(raw: Any) -> "CompetitorInput":
        if not isinstance(raw, dict):
            return CompetitorInput()
        return CompetitorInput(
            name=as_text(raw.get("name")),
            description=as_text(raw.get("description")),
        )

    @property
    def display_name(self) -> str:
        return self.name or UNNAMED_COMPETITOR

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "description": self.description}


@dataclass(frozen=True)
class SwotResult:
    strengths: List[str]
    weaknesses: List[str]
    opportunities: List[str]    # always 2
    threats: List[str]          # always 2

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            "strengths": list(self.strengths),
            "weaknesses": list(self.weaknesses),
            "opportunities": list(self.opportunities),
            "threats": list(self.threats),
        }


@dataclass(frozen=True)
class CompetitorResult:
    name: str
    swot: SwotResult

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "swot": self.swot.to_dict()}


@dataclass(frozen=True)
class GenerationResult:
    variant: Variant
    results: List[CompetitorResult]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "variant": self.variant.value,
            "results": [r.to_dict() for r in self.results],
        }


_COUNTER_KEYS = ("variantA", "variantB", "conversionsA", "conversionsB")


@dataclass
class MetricsCounters:
    """
    Global A/B counters. Persisted and served under the keys
    variantA / variantB (views) and conversionsA / conversionsB.
    """
    views_a: int = 0
    views_b: int = 0
    conversions_a: int = 0
    conversions_b: int = 0

    @staticmethod
    def from_dict(raw: Any) -> "MetricsCounters":
        values = {key: 0 for key in _COUNTER_KEYS}
        if isinstance(raw, dict):
            for key in _COUNTER_KEYS:
                values[key] = as_int(raw.get(key))
        return MetricsCounters(
            views_a=values["variantA"],
            views_b=values["variantB"],
            conversions_a=values["conversionsA"],
            conversions_b=values["conversionsB"],
        )

    def to_dict(self) -> Dict[str, int]:
        return {
            "variantA": self.views_a,
            "variantB": self.views_b,
            "conversionsA": self.conversions_a,
            "conversionsB": self.conversions_b,
        }

    def copy(self) -> "MetricsCounters":
        return MetricsCounters(self.views_a, self.views_b, self.conversions_a, self.conversions_b)


@dataclass(frozen=True)
class UserMetricsSummary:
    analysis_count: int
    variant_a: int
    variant_b: int
    conversions_a: int          # global, not attributed per user
    conversions_b: int          # global, not attributed per user

    def to_dict(self) -> Dict[str, int]:
        return {
            "analyses": self.analysis_count,
            "variantA": self.variant_a,
            "variantB": self.variant_b,
            "conversionsA": self.conversions_a,
            "conversionsB": self.conversions_b,
        }


@dataclass(frozen=True)
class Analysis:
    id: str
    owner_id: str
    timestamp: int              # epoch milliseconds
    competitors: List[Dict[str, Any]]
    results: List[Dict[str, Any]]
    variant: Optional[str]      # "A" | "B" for anything this app wrote

    @staticmethod
    def from_dict(raw: Dict[str, Any]) -> "Analysis":
        return Analysis(
            id=str(raw.get("id", "")),
            owner_id=str(raw.get("userId", "")),
            timestamp=as_int(raw.get("timestamp")),
            competitors=raw.get("competitors") if isinstance(raw.get("competitors"), list) else [],
            results=raw.get("results") if isinstance(raw.get("results"), list) else [],
            variant=raw.get("variant"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "userId": self.owner_id,
            "timestamp": self.timestamp,
            "competitors": self.competitors,
            "results": self.results,
            "variant": self.variant,
        }


@dataclass(frozen=True)
class User:
    id: str
    username: str
    password_hash: str

    @staticmethod
    def from_dict(raw: Dict[str, Any]) -> "User":
        return User(
            id=str(raw.get("id", "")),
            username=str(raw.get("username", "")),
            password_hash=str(raw.get("passwordHash", "")),
        )

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "username": self.username, "passwordHash": self.password_hash}


@dataclass(frozen=True)
class Session:
    user_id: str
    created_at: int             # epoch milliseconds

    @staticmethod
    def from_dict(raw: Dict[str, Any]) -> "Session":
        return Session(user_id=str(raw.get("userId", "")), created_at=as_int(raw.get("createdAt")))

    def to_dict(self) -> Dict[str, Any]:
        return {"userId": self.user_id, "createdAt": self.created_at}


@dataclass(frozen=True)
class DigestEntry:
    analysis_id: str
    summary: str
    timestamp: int

    @staticmethod
    def from_dict(raw: Dict[str, Any]) -> "DigestEntry":
        return DigestEntry(
            analysis_id=str(raw.get("analysisId", "")),
            summary=str(raw.get("summary", "")),
            timestamp=as_int(raw.get("timestamp")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"analysisId": self.analysis_id, "summary": self.summary, "timestamp": self.timestamp}
