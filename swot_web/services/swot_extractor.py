from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, List

from swot_web.domain.models import CompetitorInput, CompetitorResult, SwotResult
from swot_web.services.keyword_matcher import KeywordMatcher

# No abbreviation or decimal handling: "e.g." and "2.5x" are split as well.
_SENTENCE_BREAK = re.compile(r"[.!?;]")

STRENGTH_FALLBACK = "{name} is positioned to deliver value to its users with proper execution."
WEAKNESS_FALLBACK = "{name} may face challenges around cost, speed or complexity that need to be addressed."
OPPORTUNITY_TEMPLATES = (
    "There is room for {name} to expand into adjacent markets or add complementary features.",
    "Leveraging new technologies such as AI could open up differentiation for {name}.",
)
THREAT_TEMPLATES = (
    "Competitors with more resources could outpace {name} in product development.",
    "Regulatory or market changes could impact {name}'s growth prospects.",
)


def split_sentences(text: str) -> List[str]:
    flat = (text or "").replace("\n", " ")
    return [s.strip() for s in _SENTENCE_BREAK.split(flat) if s.strip()]


@dataclass
class SwotExtractor:
    """
    Heuristic SWOT: sentences with positive keywords become strengths,
    sentences with negative keywords become weaknesses, and opportunities /
    threats are templated from the competitor name alone.
    """
    matcher: KeywordMatcher = field(default_factory=KeywordMatcher)

    def extract(self, description: str, display_name: str) -> SwotResult:
        strengths: List[str] = []
        weaknesses: List[str] = []

        for sentence in split_sentences(description):
            match = self.matcher.classify(sentence)
            if match.is_positive:
                strengths.append(sentence)
            if match.is_negative:
                weaknesses.append(sentence)

        if not strengths:
            strengths.append(STRENGTH_FALLBACK.format(name=display_name))
        if not weaknesses:
            weaknesses.append(WEAKNESS_FALLBACK.format(name=display_name))

        return SwotResult(
            strengths=strengths,
            weaknesses=weaknesses,
            opportunities=[t.format(name=display_name) for t in OPPORTUNITY_TEMPLATES],
            threats=[t.format(name=display_name) for t in THREAT_TEMPLATES],
        )

    def analyze(self, competitor: CompetitorInput) -> CompetitorResult:
        name = competitor.display_name
        return CompetitorResult(name=name, swot=self.extract(competitor.description, name))

    def analyze_all(self, raw_competitors: Any) -> List[CompetitorResult]:
        """Anything that is not a list is treated as no competitors."""
        if not isinstance(raw_competitors, list):
            return []
        return [self.analyze(CompetitorInput.from_raw(c)) for c in raw_competitors]
