from .analysis_repository import AnalysisRepository
from .json_store import JsonFileStore, Store
from .user_repository import SessionRepository, UserRepository

__all__ = [
    "AnalysisRepository",
    "JsonFileStore",
    "SessionRepository",
    "Store",
    "UserRepository",
]
