"""Gamerverse - FastAPI app factory."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.concurrency import run_in_threadpool
from sqlalchemy.exc import SQLAlchemyError

from gamerverse.core.config import Settings, ensure_data_dirs, get_settings
from gamerverse.core.errors import AppError, StoreError
from gamerverse.core.log import configure_logging
from gamerverse.core.security import configure_password_hashing
from gamerverse.db.session import Database
from gamerverse.routers import api, auth, library, profile
from gamerverse.routers.deps import route_requires_session
from gamerverse.services.sessions import build_session_store
from gamerverse.services.uploads import UPLOADS_URL_PREFIX

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return _error(exc.status_code, exc.message)

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Unhandled store error on %s %s", request.method, request.url.path, exc_info=exc)
        return _error(StoreError.status_code, StoreError.default_message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # the body is parsed before dependencies run; a bad body must not mask a missing session
        route = request.scope.get("route")
        if route is not None and route_requires_session(route):
            token = request.cookies.get(request.app.state.settings.session_cookie_name)
            user_id = await run_in_threadpool(request.app.state.sessions.resolve, token)
            if user_id is None:
                return _error(401, "Unauthorized")
        return _error(400, "Invalid request")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    configure_password_hashing(settings.bcrypt_rounds)
    ensure_data_dirs(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database = Database(settings.resolved_database_url, echo=settings.debug)
        database.open()
        database.create_all()

        sessions = build_session_store(settings, database)
        swept = sessions.sweep_expired()
        if swept:
            logger.info("Swept %d expired sessions", swept)

        app.state.database = database
        app.state.sessions = sessions
        try:
            yield
        finally:
            database.close()

    app = FastAPI(
        title=settings.app_name,
        description="Personal game library: collection, wishlist, profile and stats",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Uploaded photos, read-only
    app.mount(
        UPLOADS_URL_PREFIX,
        StaticFiles(directory=settings.resolved_upload_dir),
        name="uploads",
    )

    register_error_handlers(app)

    app.include_router(auth.router)
    app.include_router(profile.router)
    app.include_router(library.router)
    app.include_router(api.router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app
