"""Session binding: opaque token -> user id, with a fixed expiry window.

Two backends share the same interface. ``MemorySessionStore`` keeps the
bindings in a dict (tests, single process); ``SqlSessionStore`` persists
them in ``user_sessions`` keyed by the token's SHA-256 digest so a leaked
database never yields usable tokens.
"""
import logging
import threading
import time
from typing import Callable

from sqlalchemy import delete, select

from gamerverse.core.config import Settings
from gamerverse.core.security import hash_session_token, new_session_token
from gamerverse.db.session import Database
from gamerverse.models.session import UserSession

logger = logging.getLogger(__name__)

DEFAULT_MAX_AGE = 60 * 60 * 24 * 7  # 7 days
DEFAULT_SWEEP_INTERVAL = 60 * 60  # 1 hour


class SessionStore:
    """Interface for session backends."""

    def __init__(
        self,
        max_age: int = DEFAULT_MAX_AGE,
        clock: Callable[[], float] = time.time,
        sweep_interval: float = DEFAULT_SWEEP_INTERVAL,
    ):
        self.max_age = max_age
        self.clock = clock
        self.sweep_interval = sweep_interval
        self._last_sweep = clock()

    def create(self, user_id: int) -> str:
        raise NotImplementedError

    def resolve(self, token: str | None) -> int | None:
        raise NotImplementedError

    def destroy(self, token: str | None) -> None:
        raise NotImplementedError

    def sweep_expired(self) -> int:
        raise NotImplementedError

    def maybe_sweep(self) -> int:
        """Sweep when at least ``sweep_interval`` seconds passed since the last one."""
        now = self.clock()
        if now - self._last_sweep < self.sweep_interval:
            return 0
        self._last_sweep = now
        swept = self.sweep_expired()
        if swept:
            logger.info("Swept %d expired sessions", swept)
        return swept


class MemorySessionStore(SessionStore):
    def __init__(
        self,
        max_age: int = DEFAULT_MAX_AGE,
        clock: Callable[[], float] = time.time,
        sweep_interval: float = DEFAULT_SWEEP_INTERVAL,
    ):
        super().__init__(max_age, clock, sweep_interval)
        self._entries: dict[str, tuple[int, float]] = {}
        self._lock = threading.Lock()

    def create(self, user_id: int) -> str:
        self.maybe_sweep()
        token = new_session_token()
        with self._lock:
            self._entries[token] = (user_id, self.clock() + self.max_age)
        return token

    def resolve(self, token: str | None) -> int | None:
        if not token:
            return None
        with self._lock:
            entry = self._entries.get(token)
            if entry is None:
                return None
            user_id, expires_at = entry
            if expires_at <= self.clock():
                del self._entries[token]
                return None
            return user_id

    def destroy(self, token: str | None) -> None:
        if not token:
            return
        with self._lock:
            self._entries.pop(token, None)

    def sweep_expired(self) -> int:
        now = self.clock()
        with self._lock:
            expired = [t for t, (_, expires_at) in self._entries.items() if expires_at <= now]
            for token in expired:
                del self._entries[token]
        return len(expired)

    def __len__(self) -> int:
        return len(self._entries)


class SqlSessionStore(SessionStore):
    def __init__(
        self,
        database: Database,
        max_age: int = DEFAULT_MAX_AGE,
        clock: Callable[[], float] = time.time,
        sweep_interval: float = DEFAULT_SWEEP_INTERVAL,
    ):
        super().__init__(max_age, clock, sweep_interval)
        self.database = database

    def create(self, user_id: int) -> str:
        self.maybe_sweep()
        token = new_session_token()
        now = self.clock()
        with self.database.session() as db:
            db.add(
                UserSession(
                    token_hash=hash_session_token(token),
                    user_id=user_id,
                    created_at=now,
                    expires_at=now + self.max_age,
                )
            )
            db.commit()
        return token

    def resolve(self, token: str | None) -> int | None:
        if not token:
            return None
        token_hash = hash_session_token(token)
        with self.database.session() as db:
            row = db.execute(
                select(UserSession).where(UserSession.token_hash == token_hash)
            ).scalar_one_or_none()
            if row is None:
                return None
            if row.expires_at <= self.clock():
                db.delete(row)
                db.commit()
                return None
            return row.user_id

    def destroy(self, token: str | None) -> None:
        if not token:
            return
        with self.database.session() as db:
            db.execute(delete(UserSession).where(UserSession.token_hash == hash_session_token(token)))
            db.commit()

    def sweep_expired(self) -> int:
        with self.database.session() as db:
            result = db.execute(delete(UserSession).where(UserSession.expires_at <= self.clock()))
            db.commit()
            return result.rowcount or 0


def build_session_store(settings: Settings, database: Database) -> SessionStore:
    """Pick the backend named by ``settings.session_backend``."""
    backend = settings.session_backend.lower()
    if backend == "memory":
        return MemorySessionStore(
            max_age=settings.session_max_age, sweep_interval=settings.session_sweep_interval
        )
    if backend == "sql":
        return SqlSessionStore(
            database, max_age=settings.session_max_age, sweep_interval=settings.session_sweep_interval
        )
    raise ValueError(f"Unknown session backend: {settings.session_backend!r}")
