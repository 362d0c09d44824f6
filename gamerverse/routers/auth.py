"""Auth routes: signup, login, logout. Server-side sessions via http-only cookie."""
from typing import Annotated

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from gamerverse.core.config import Settings
from gamerverse.db.session import get_db
from gamerverse.schemas.auth import LoginOutSchema, LoginSchema, SignupOutSchema, SignupSchema
from gamerverse.services import auth as auth_service
from gamerverse.services.sessions import SessionStore
from gamerverse.routers.deps import get_app_settings, get_session_token, get_sessions

router = APIRouter(prefix="/api", tags=["auth"])


def _set_session_cookie(response: Response, settings: Settings, token: str) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_max_age,
        httponly=True,
        samesite="lax",
        path="/",
    )


@router.post("/signup", response_model=SignupOutSchema)
def signup(
    response: Response,
    db: Annotated[Session, Depends(get_db)],
    sessions: Annotated[SessionStore, Depends(get_sessions)],
    settings: Annotated[Settings, Depends(get_app_settings)],
    previous_token: Annotated[str | None, Depends(get_session_token)],
    body: SignupSchema | None = None,
):
    """Create an account and log it in."""
    body = body or SignupSchema()
    user, token = auth_service.sign_up(db, sessions, body.name, body.email, body.password)
    sessions.destroy(previous_token)
    _set_session_cookie(response, settings, token)
    return SignupOutSchema(userId=user.id)


@router.post("/login", response_model=LoginOutSchema)
def login(
    response: Response,
    db: Annotated[Session, Depends(get_db)],
    sessions: Annotated[SessionStore, Depends(get_sessions)],
    settings: Annotated[Settings, Depends(get_app_settings)],
    previous_token: Annotated[str | None, Depends(get_session_token)],
    body: LoginSchema | None = None,
):
    body = body or LoginSchema()
    user, token = auth_service.log_in(db, sessions, body.email, body.password)
    sessions.destroy(previous_token)
    _set_session_cookie(response, settings, token)
    return LoginOutSchema(userId=user.id, name=user.name, email=user.email)


@router.post("/logout")
def logout(
    response: Response,
    sessions: Annotated[SessionStore, Depends(get_sessions)],
    settings: Annotated[Settings, Depends(get_app_settings)],
    token: Annotated[str | None, Depends(get_session_token)],
):
    """Always succeeds, with or without a live session."""
    auth_service.log_out(sessions, token)
    # path must match the one used in set_cookie()
    response.delete_cookie(settings.session_cookie_name, path="/")
    return {"ok": True}
