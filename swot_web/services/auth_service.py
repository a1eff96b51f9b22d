from __future__ import annotations

import logging
import secrets
import time
import uuid
from dataclasses import dataclass, field
from typing import Callable, Optional

import bcrypt

from swot_web.domain.errors import AuthenticationError, ConflictError, ValidationError
from swot_web.domain.models import Session, User
from swot_web.repositories.user_repository import SessionRepository, UserRepository

logger = logging.getLogger(__name__)

DEFAULT_SESSION_TTL_SECONDS = 7 * 24 * 60 * 60
# bcrypt only looks at the first 72 bytes and newer releases refuse longer input.
MAX_PASSWORD_BYTES = 72


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    raw = password.encode("utf-8")
    if len(raw) > MAX_PASSWORD_BYTES or not password_hash:
        return False
    try:
        return bcrypt.checkpw(raw, password_hash.encode("utf-8"))
    except ValueError:
        # stored hash is not a bcrypt hash
        return False


def generate_token() -> str:
    return secrets.token_hex(32)


def bearer_token(header: Optional[str]) -> Optional[str]:
    """Token from an 'Authorization: Bearer <token>' header, else None."""
    if not header:
        return None
    parts = header.split(" ")
    if len(parts) == 2 and parts[0].lower() == "bearer" and parts[1]:
        return parts[1]
    return None


@dataclass
class AuthService:
    """
    Username/password accounts with opaque session tokens.
    Sessions expire a fixed time after creation; an expired token is
    dropped on first use and the caller is simply unauthenticated.
    """
    users: UserRepository
    sessions: SessionRepository
    session_ttl_seconds: int = DEFAULT_SESSION_TTL_SECONDS
    clock: Callable[[], float] = field(default=time.time)

    def _now_ms(self) -> int:
        return int(self.clock() * 1000)

    def _open_session(self, user_id: str) -> str:
        token = generate_token()
        self.sessions.put(token, Session(user_id=user_id, created_at=self._now_ms()))
        return token

    def register(self, username: str, password: str) -> str:
        if not username or not password:
            raise ValidationError("Username and password required")
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        if self.users.find_by_username(username) is not None:
            raise ConflictError("User already exists")

        user = User(id=str(uuid.uuid4()), username=username, password_hash=hash_password(password))
        self.users.add(user)
        logger.info("Registered user %s", user.id)
        return self._open_session(user.id)

    def login(self, username: str, password: str) -> str:
        if not username or not password:
            raise ValidationError("Username and password required")
        user = self.users.find_by_username(username)
        if user is None or not verify_password(password, user.password_hash):
            raise AuthenticationError("Invalid credentials")
        return self._open_session(user.id)

    def logout(self, token: Optional[str]) -> None:
        if token:
            self.sessions.delete(token)

    def resolve_user_id(self, token: Optional[str]) -> Optional[str]:
        if not token:
            return None
        session = self.sessions.get(token)
        if session is None:
            return None
        if self._now_ms() - session.created_at < self.session_ttl_seconds * 1000:
            return session.user_id

        self.sessions.delete(token)
        logger.info("Session for user %s expired", session.user_id)
        return None
