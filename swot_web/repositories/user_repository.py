from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from swot_web.domain.models import Session, User
from swot_web.repositories.json_store import Store

USERS = "users"
SESSIONS = "sessions"


@dataclass
class UserRepository:
    """Users collection: a JSON array of {id, username, passwordHash}."""
    store: Store
    _users: List[User] = field(init=False, default_factory=list)

    def __post_init__(self) -> None:
        raw = self.store.load(USERS, [])
        if not isinstance(raw, list):
            raw = []
        self._users = [User.from_dict(u) for u in raw if isinstance(u, dict)]
        self._save()

    def _save(self) -> None:
        self.store.store(USERS, [u.to_dict() for u in self._users])

    def find_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self._users if u.username == username), None)

    def add(self, user: User) -> None:
        self._users.append(user)
        self._save()


@dataclass
class SessionRepository:
    """Sessions collection: a JSON object mapping token -> {userId, createdAt}."""
    store: Store
    _sessions: Dict[str, Session] = field(init=False, default_factory=dict)

    def __post_init__(self) -> None:
        raw = self.store.load(SESSIONS, {})
        if not isinstance(raw, dict):
            raw = {}
        self._sessions = {
            token: Session.from_dict(s) for token, s in raw.items() if isinstance(s, dict)
        }
        self._save()

    def _save(self) -> None:
        self.store.store(SESSIONS, {token: s.to_dict() for token, s in self._sessions.items()})

    def get(self, token: str) -> Optional[Session]:
        return self._sessions.get(token)

    def put(self, token: str, session: Session) -> None:
        self._sessions[token] = session
        self._save()

    def delete(self, token: str) -> bool:
        if token not in self._sessions:
            return False
        del self._sessions[token]
        self._save()
        return True
