"""Pydantic schemas for the profile view."""
from pydantic import BaseModel


class ProfileSchema(BaseModel):
    id: int
    name: str
    email: str
    favorite_genre: str | None = None
    hours_played: int = 0
    wins: int = 0
    losses: int = 0
    level: int = 1
    photo: str | None = None
    bio: str | None = None

    class Config:
        from_attributes = True


class ProfileOutSchema(BaseModel):
    ok: bool = True
    profile: ProfileSchema
