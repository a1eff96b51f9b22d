from .ab_test_service import AbTestService
from .analysis_service import AnalysisService
from .auth_service import AuthService
from .digest_service import DigestService
from .keyword_matcher import KeywordMatcher
from .metrics_service import MetricsStore, user_summary
from .swot_extractor import SwotExtractor
from .variant_assigner import VariantAssigner

__all__ = [
    "AbTestService",
    "AnalysisService",
    "AuthService",
    "DigestService",
    "KeywordMatcher",
    "MetricsStore",
    "SwotExtractor",
    "VariantAssigner",
    "user_summary",
]
