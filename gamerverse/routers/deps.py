"""Shared dependencies: settings, session store, current user id."""
from typing import Annotated

from fastapi import Depends, Request

from gamerverse.core.config import Settings
from gamerverse.core.errors import AuthError
from gamerverse.services.sessions import SessionStore


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_sessions(request: Request) -> SessionStore:
    return request.app.state.sessions


def get_session_token(
    request: Request,
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> str | None:
    return request.cookies.get(settings.session_cookie_name)


def require_user_id(
    token: Annotated[str | None, Depends(get_session_token)],
    sessions: Annotated[SessionStore, Depends(get_sessions)],
) -> int:
    """Resolve the session cookie to a user id or fail with 401."""
    user_id = sessions.resolve(token)
    if user_id is None:
        raise AuthError("Unauthorized")
    return user_id


def route_requires_session(route) -> bool:
    """True when ``require_user_id`` is anywhere in the route's dependency tree."""
    dependant = getattr(route, "dependant", None)
    if dependant is None:
        return False
    pending = list(dependant.dependencies)
    while pending:
        dep = pending.pop()
        if dep.call is require_user_id:
            return True
        pending.extend(dep.dependencies)
    return False
