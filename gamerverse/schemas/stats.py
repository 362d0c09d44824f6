"""Pydantic schemas for aggregate stats."""
from pydantic import BaseModel


class StatsSchema(BaseModel):
    totalGames: int
    totalHours: int
    level: int
    levelProgress: int
    winRatio: int


class StatsOutSchema(BaseModel):
    ok: bool = True
    stats: StatsSchema
