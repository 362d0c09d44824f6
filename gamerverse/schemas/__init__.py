from gamerverse.schemas.auth import LoginSchema, SignupSchema
from gamerverse.schemas.library import GameCreateSchema, GameSchema, WishCreateSchema, WishSchema
from gamerverse.schemas.profile import ProfileSchema
from gamerverse.schemas.stats import StatsSchema

__all__ = [
    "GameCreateSchema",
    "GameSchema",
    "LoginSchema",
    "ProfileSchema",
    "SignupSchema",
    "StatsSchema",
    "WishCreateSchema",
    "WishSchema",
]
