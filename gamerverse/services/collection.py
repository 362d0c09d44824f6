"""Owned-games collection, always scoped to one user."""
import math

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from gamerverse.db.session import store_guard
from gamerverse.models.game import Game

UNTITLED = "Untitled"

# SQLite INTEGER is a signed 64-bit value
MAX_INT64 = 2**63 - 1
MIN_INT64 = -(2**63)


def coerce_hours(value) -> int:
    """Non-numeric or missing -> 0; otherwise a non-negative int."""
    if value is None or isinstance(value, bool):
        return 0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(number):
        return 0
    return min(max(0, int(number)), MAX_INT64)


def is_storable_id(row_id: int) -> bool:
    return MIN_INT64 <= row_id <= MAX_INT64


def title_or_default(title: str | None) -> str:
    return title if title and title.strip() else UNTITLED


def add_game(
    db: Session,
    user_id: int,
    title: str | None,
    genre: str | None = None,
    hours=None,
    img_url: str | None = None,
) -> int:
    game = Game(
        user_id=user_id,
        title=title_or_default(title),
        genre=genre or "",
        hours=coerce_hours(hours),
        owned=True,
        img_url=img_url or "",
    )
    with store_guard(db, "collection insert"):
        db.add(game)
        db.commit()
        db.refresh(game)
    return game.id


def list_games(db: Session, user_id: int) -> list[Game]:
    """Owned games of the user, newest first."""
    with store_guard(db, "collection select"):
        result = db.execute(
            select(Game)
            .where(Game.user_id == user_id, Game.owned == True)  # noqa: E712
            .order_by(Game.id.desc())
        )
        return list(result.scalars().all())


def remove_game(db: Session, user_id: int, game_id: int) -> int:
    """Delete one of the user's games. Returns rows deleted (0 or 1)."""
    if not is_storable_id(game_id):
        return 0
    with store_guard(db, "collection delete"):
        result = db.execute(delete(Game).where(Game.id == game_id, Game.user_id == user_id))
        db.commit()
    return result.rowcount or 0
