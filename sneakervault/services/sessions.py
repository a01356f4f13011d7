"""Server-side login sessions.

A session is a row in ``sessions``; the browser holds only its random bearer
token in the ``auth_session`` cookie. Sessions are issued on login/signup, looked
up on every authenticated request, and deleted on logout or as soon as a lookup
finds them expired. Expiry is fixed at issue time: using a session never
extends it.

Several sessions may exist per user (one per login), so logging in on a second
device does not log the first one out.
"""

import logging
import secrets
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from enum import Enum

from sqlalchemy.orm import Session

from sneakervault.config import get_settings
from sneakervault.models.session import AuthSession
from sneakervault.models.user import User
from sneakervault.services.users import UserRepository

logger = logging.getLogger(__name__)

# 32 random bytes, hex encoded: 256 bits of entropy, 64 characters
TOKEN_BYTES = 32

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands timezone-aware columns back as naive datetimes
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class SessionState(str, Enum):
    """What a request's session cookie turned out to be."""

    NO_COOKIE = "no_cookie"
    UNRESOLVED = "unresolved"
    EXPIRED = "expired"
    ORPHANED = "orphaned"
    VALID = "valid"


@dataclass
class Resolution:
    state: SessionState
    user: User | None = None

    @property
    def is_valid(self) -> bool:
        return self.state == SessionState.VALID

    @property
    def had_cookie(self) -> bool:
        return self.state != SessionState.NO_COOKIE


@dataclass
class IssuedSession:
    record: AuthSession
    token: str


class SessionStore:
    """CRUD against the ``sessions`` table."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, user_id: str, token: str, expires_at: datetime) -> AuthSession:
        record = AuthSession(user_id=user_id, token=token, expires_at=expires_at)
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        return record

    def find_by_token(self, token: str) -> AuthSession | None:
        return self.db.query(AuthSession).filter(AuthSession.token == token).first()

    def delete(self, record: AuthSession) -> None:
        self.db.delete(record)
        self.db.commit()

    def delete_by_token(self, token: str) -> bool:
        deleted = (
            self.db.query(AuthSession)
            .filter(AuthSession.token == token)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted > 0

    def delete_for_user(self, user_id: str) -> int:
        deleted = (
            self.db.query(AuthSession)
            .filter(AuthSession.user_id == user_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted

    def delete_expired(self, now: datetime) -> int:
        deleted = (
            self.db.query(AuthSession)
            .filter(AuthSession.expires_at <= now)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted


class SessionManager:
    """Issues, resolves and revokes sessions. Holds no state between requests."""

    def __init__(
        self,
        store: SessionStore,
        users: UserRepository,
        ttl: timedelta | None = None,
        clock: Clock = utc_now,
    ):
        self.store = store
        self.users = users
        self.ttl = ttl if ttl is not None else get_settings().session_ttl
        self.clock = clock

    @classmethod
    def for_db(cls, db: Session, **kwargs) -> "SessionManager":
        return cls(SessionStore(db), UserRepository(db), **kwargs)

    def issue(self, user_id: str) -> IssuedSession:
        """Create a new session for ``user_id`` and return the cookie value."""
        token = secrets.token_hex(TOKEN_BYTES)
        expires_at = self.clock() + self.ttl
        record = self.store.create(user_id=user_id, token=token, expires_at=expires_at)
        logger.info(f"Issued session {record.id} for user {user_id}")
        return IssuedSession(record=record, token=token)

    def resolve_state(self, token: str | None) -> Resolution:
        """Classify a cookie value, deleting expired and orphaned rows on the way."""
        if not token:
            return Resolution(SessionState.NO_COOKIE)

        record = self.store.find_by_token(token)
        if record is None:
            return Resolution(SessionState.UNRESOLVED)

        # Valid only while now < expires_at
        if _as_utc(record.expires_at) <= self.clock():
            logger.debug(f"Session {record.id} expired, removing")
            self.store.delete(record)
            return Resolution(SessionState.EXPIRED)

        user = self.users.find_by_id(record.user_id)
        if user is None:
            logger.warning(f"Session {record.id} points at missing user {record.user_id}")
            self.store.delete(record)
            return Resolution(SessionState.ORPHANED)

        return Resolution(SessionState.VALID, user)

    def resolve(self, token: str | None) -> User | None:
        """Return the user a cookie value stands for, or None."""
        return self.resolve_state(token).user

    def revoke(self, token: str | None) -> None:
        """Delete the session behind ``token``. Unknown tokens are ignored."""
        if token and self.store.delete_by_token(token):
            logger.info("Revoked session")

    def revoke_all_for_user(self, user_id: str) -> int:
        count = self.store.delete_for_user(user_id)
        logger.info(f"Revoked {count} sessions for user {user_id}")
        return count

    def purge_expired(self) -> int:
        """Delete every session past its expiry."""
        return self.store.delete_expired(self.clock())
