"""API routes: aggregate stats."""
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from gamerverse.db.session import get_db
from gamerverse.routers.deps import require_user_id
from gamerverse.schemas.stats import StatsOutSchema
from gamerverse.services.stats import get_stats

router = APIRouter(prefix="/api", tags=["api"])


@router.get("/stats", response_model=StatsOutSchema)
def read_stats(
    user_id: Annotated[int, Depends(require_user_id)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get totals, level, level progress and win ratio."""
    return StatsOutSchema(stats=get_stats(db, user_id))
