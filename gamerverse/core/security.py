"""Password hashing and opaque session tokens."""
import hashlib
import secrets

from passlib.context import CryptContext

from gamerverse.core.config import get_settings

DEFAULT_BCRYPT_ROUNDS = 10


def build_password_context(rounds: int = DEFAULT_BCRYPT_ROUNDS) -> CryptContext:
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


pwd_context = build_password_context(get_settings().bcrypt_rounds)


def configure_password_hashing(rounds: int) -> None:
    """Change the bcrypt cost of the shared context."""
    pwd_context.update(bcrypt__rounds=rounds)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def dummy_verify() -> None:
    """Spend about the same time as a real verify (unknown login email)."""
    pwd_context.dummy_verify()


def new_session_token() -> str:
    return secrets.token_urlsafe(32)


def hash_session_token(token: str) -> str:
    """Digest stored in place of the raw token."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()
