"""Engine/session ownership and the request-scoped DB dependency."""
import logging
from contextlib import contextmanager
from pathlib import Path

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from gamerverse.core.errors import ConflictError, StoreError

logger = logging.getLogger(__name__)

Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE unless enabled per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Owns the engine and session factory for one application instance."""

    def __init__(self, url: str, echo: bool = False):
        self.url = make_url(url)
        self.engine = None
        self.SessionLocal = None
        self._echo = echo

    @property
    def is_sqlite(self) -> bool:
        return self.url.get_backend_name() == "sqlite"

    def open(self) -> None:
        connect_args = {}
        if self.is_sqlite:
            connect_args["check_same_thread"] = False
            if self.url.database and self.url.database != ":memory:":
                Path(self.url.database).parent.mkdir(parents=True, exist_ok=True)

        self.engine = create_engine(
            self.url,
            echo=self._echo,
            connect_args=connect_args,
            pool_pre_ping=True,
        )
        if self.is_sqlite:
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        logger.info("Opened database at %s", self.url.render_as_string(hide_password=True))

    def create_all(self) -> None:
        # models must be registered on Base before create_all
        import gamerverse.db.base  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        if self.SessionLocal is None:
            raise RuntimeError("Database is not open")
        return self.SessionLocal()

    def close(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
            logger.info("Closed database")
        self.engine = None
        self.SessionLocal = None


def get_db(request: Request):
    """FastAPI dependency: one Session per request, closed afterwards."""
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def store_guard(db: Session, action: str, conflict_message: str | None = None):
    """Roll back on failure and translate store errors into domain errors.

    A UNIQUE violation becomes ConflictError when ``conflict_message`` is
    given; everything else is logged and surfaced as an opaque StoreError.
    """
    try:
        yield
    except IntegrityError as exc:
        db.rollback()
        if conflict_message and "UNIQUE" in str(exc.orig).upper():
            raise ConflictError(conflict_message) from exc
        logger.exception("%s failed", action)
        raise StoreError() from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("%s failed", action)
        raise StoreError() from exc
