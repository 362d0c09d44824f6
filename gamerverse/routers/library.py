"""Collection and wishlist routes: JSON CRUD scoped to the session's user."""
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from gamerverse.db.session import get_db
from gamerverse.routers.deps import require_user_id
from gamerverse.schemas.library import (
    CreatedOutSchema,
    DeletedOutSchema,
    GameCreateSchema,
    GameSchema,
    GamesOutSchema,
    WishCreateSchema,
    WishSchema,
)
from gamerverse.services import collection, wishlist

router = APIRouter(prefix="/api", tags=["library"])


# ---------- collection ----------

@router.post("/collection", response_model=CreatedOutSchema)
def add_game(
    user_id: Annotated[int, Depends(require_user_id)],
    db: Annotated[Session, Depends(get_db)],
    body: GameCreateSchema | None = None,
):
    body = body or GameCreateSchema()
    game_id = collection.add_game(db, user_id, body.title, body.genre, body.hours, body.img_url)
    return CreatedOutSchema(id=game_id)


@router.get("/collection", response_model=GamesOutSchema)
def list_games(
    user_id: Annotated[int, Depends(require_user_id)],
    db: Annotated[Session, Depends(get_db)],
):
    games = collection.list_games(db, user_id)
    return GamesOutSchema(games=[GameSchema.model_validate(g) for g in games])


@router.delete("/collection/{game_id}", response_model=DeletedOutSchema)
def remove_game(
    game_id: int,
    user_id: Annotated[int, Depends(require_user_id)],
    db: Annotated[Session, Depends(get_db)],
):
    return DeletedOutSchema(deleted=collection.remove_game(db, user_id, game_id))


# ---------- wishlist ----------

@router.post("/wishlist", response_model=CreatedOutSchema)
def add_wish(
    user_id: Annotated[int, Depends(require_user_id)],
    db: Annotated[Session, Depends(get_db)],
    body: WishCreateSchema | None = None,
):
    body = body or WishCreateSchema()
    wish_id = wishlist.add_wish(db, user_id, body.title, body.genre, body.expected_release)
    return CreatedOutSchema(id=wish_id)


@router.get("/wishlist")
def list_wishlist(
    user_id: Annotated[int, Depends(require_user_id)],
    db: Annotated[Session, Depends(get_db)],
):
    wishes = [WishSchema.model_validate(w) for w in wishlist.list_wishlist(db, user_id)]
    # "list" mirrors "wishlist" for older frontends
    return {"ok": True, "wishlist": wishes, "list": wishes}


@router.delete("/wishlist/{wish_id}", response_model=DeletedOutSchema)
def remove_wish(
    wish_id: int,
    user_id: Annotated[int, Depends(require_user_id)],
    db: Annotated[Session, Depends(get_db)],
):
    return DeletedOutSchema(deleted=wishlist.remove_wish(db, user_id, wish_id))
