from gamerverse.models.user import User
from gamerverse.models.game import Game
from gamerverse.models.wishlist import WishlistEntry
from gamerverse.models.session import UserSession

__all__ = ["User", "Game", "WishlistEntry", "UserSession"]
