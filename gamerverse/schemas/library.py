"""Pydantic schemas for the owned-games collection and the wishlist."""
from datetime import datetime

from pydantic import BaseModel


class GameCreateSchema(BaseModel):
    title: str | None = None
    genre: str | None = None
    # coerced to a non-negative int by the collection service
    hours: int | float | str | None = None
    img_url: str | None = None


class GameSchema(BaseModel):
    id: int
    user_id: int
    title: str
    genre: str | None = None
    hours: int
    owned: bool
    img_url: str | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class GamesOutSchema(BaseModel):
    ok: bool = True
    games: list[GameSchema]


class WishCreateSchema(BaseModel):
    title: str | None = None
    genre: str | None = None
    expected_release: str | None = None


class WishSchema(BaseModel):
    id: int
    user_id: int
    title: str
    genre: str | None = None
    expected_release: str | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class CreatedOutSchema(BaseModel):
    ok: bool = True
    id: int


class DeletedOutSchema(BaseModel):
    ok: bool = True
    deleted: int
