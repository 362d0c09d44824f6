"""Signup, login and logout over the credential store and session binding."""
import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from gamerverse.core.errors import AuthError, ValidationError
from gamerverse.core.security import dummy_verify, hash_password, verify_password
from gamerverse.db.session import store_guard
from gamerverse.models.user import User
from gamerverse.services.sessions import SessionStore

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


def _require(*values: str | None) -> None:
    if any(not v for v in values):
        raise ValidationError("Missing fields")


def sign_up(
    db: Session,
    sessions: SessionStore,
    name: str | None,
    email: str | None,
    password: str | None,
) -> tuple[User, str]:
    """Create a user and bind a new session to it. Returns (user, token)."""
    _require(name, email, password)

    user = User(name=name, email=email, password_hash=hash_password(password))
    with store_guard(db, "signup", conflict_message="Email already exists"):
        db.add(user)
        db.commit()
        db.refresh(user)

    logger.info("User %s signed up", user.id)
    return user, sessions.create(user.id)


def log_in(
    db: Session,
    sessions: SessionStore,
    email: str | None,
    password: str | None,
) -> tuple[User, str]:
    """Verify credentials and bind a new session. Returns (user, token)."""
    _require(email, password)

    with store_guard(db, "login"):
        user = db.execute(select(User).where(User.email == email)).scalar_one_or_none()

    if user is None:
        dummy_verify()
        logger.info("Login failed")
        raise AuthError(INVALID_CREDENTIALS)
    if not verify_password(password, user.password_hash):
        logger.info("Login failed")
        raise AuthError(INVALID_CREDENTIALS)

    return user, sessions.create(user.id)


def log_out(sessions: SessionStore, token: str | None) -> None:
    """Drop the session binding; missing or stale tokens are fine."""
    sessions.destroy(token)
