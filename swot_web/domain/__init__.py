from .errors import AuthenticationError, ConflictError, NotFoundError, SwotWebError, ValidationError
from .models import (
    Analysis,
    CompetitorInput,
    CompetitorResult,
    DigestEntry,
    GenerationResult,
    MetricsCounters,
    Session,
    SwotResult,
    User,
    UserMetricsSummary,
    Variant,
)

__all__ = [
    "Analysis",
    "AuthenticationError",
    "CompetitorInput",
    "CompetitorResult",
    "ConflictError",
    "DigestEntry",
    "GenerationResult",
    "MetricsCounters",
    "NotFoundError",
    "Session",
    "SwotResult",
    "SwotWebError",
    "User",
    "UserMetricsSummary",
    "ValidationError",
    "Variant",
]
