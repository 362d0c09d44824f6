"""SQLAlchemy declarative base and model imports for Alembic."""
from gamerverse.db.session import Base

# Import all models so Alembic can see them
from gamerverse.models.game import Game  # noqa: F401
from gamerverse.models.session import UserSession  # noqa: F401
from gamerverse.models.user import User  # noqa: F401
from gamerverse.models.wishlist import WishlistEntry  # noqa: F401

__all__ = ["Base", "User", "Game", "WishlistEntry", "UserSession"]
