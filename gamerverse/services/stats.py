"""Derived stats: games/hours totals, win ratio and level progress."""
import math

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from gamerverse.core.errors import NotFoundError
from gamerverse.db.session import store_guard
from gamerverse.models.game import Game
from gamerverse.models.user import User
from gamerverse.schemas.stats import StatsSchema

MAX_LEVEL_PROGRESS = 100


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (round() is banker's)."""
    return math.floor(value + 0.5)


def compute_win_ratio(wins: int, losses: int) -> int:
    """Integer percentage of wins over decided games; 0 when none."""
    decided = wins + losses
    if decided == 0:
        return 0
    return round_half_up(100 * wins / decided)


def compute_level_progress(level: int) -> int:
    # level / 100 * 100 is kept as-is: it is min(level, 100) in practice
    return min(round_half_up(level / 100 * 100), MAX_LEVEL_PROGRESS)


def get_stats(db: Session, user_id: int) -> StatsSchema:
    with store_guard(db, "stats query"):
        total_games, total_hours = db.execute(
            select(func.count(Game.id), func.coalesce(func.sum(Game.hours), 0))
            .where(Game.user_id == user_id, Game.owned == True)  # noqa: E712
        ).one()
        row = db.execute(
            select(User.level, User.wins, User.losses).where(User.id == user_id)
        ).one_or_none()

    if row is None:
        raise NotFoundError("User not found")

    level = row.level or 1
    wins = row.wins or 0
    losses = row.losses or 0

    return StatsSchema(
        totalGames=total_games or 0,
        totalHours=total_hours or 0,
        level=level,
        levelProgress=compute_level_progress(level),
        winRatio=compute_win_ratio(wins, losses),
    )
