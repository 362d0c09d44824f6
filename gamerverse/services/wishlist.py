"""Wishlist entries, scoped to one user like the collection."""
from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from gamerverse.db.session import store_guard
from gamerverse.models.wishlist import WishlistEntry
from gamerverse.services.collection import is_storable_id, title_or_default


def add_wish(
    db: Session,
    user_id: int,
    title: str | None,
    genre: str | None = None,
    expected_release: str | None = None,
) -> int:
    wish = WishlistEntry(
        user_id=user_id,
        title=title_or_default(title),
        genre=genre or "",
        expected_release=expected_release or "",
    )
    with store_guard(db, "wishlist insert"):
        db.add(wish)
        db.commit()
        db.refresh(wish)
    return wish.id


def list_wishlist(db: Session, user_id: int) -> list[WishlistEntry]:
    with store_guard(db, "wishlist select"):
        result = db.execute(
            select(WishlistEntry)
            .where(WishlistEntry.user_id == user_id)
            .order_by(WishlistEntry.id.desc())
        )
        return list(result.scalars().all())


def remove_wish(db: Session, user_id: int, wish_id: int) -> int:
    if not is_storable_id(wish_id):
        return 0
    with store_guard(db, "wishlist delete"):
        result = db.execute(
            delete(WishlistEntry).where(WishlistEntry.id == wish_id, WishlistEntry.user_id == user_id)
        )
        db.commit()
    return result.rowcount or 0
