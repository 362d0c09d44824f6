"""Profile read/update for the signed-in user."""
from sqlalchemy.orm import Session

from gamerverse.core.errors import NotFoundError
from gamerverse.db.session import store_guard
from gamerverse.models.user import User


def get_profile(db: Session, user_id: int) -> User:
    with store_guard(db, "profile read"):
        user = db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


def update_profile(
    db: Session,
    user_id: int,
    name: str | None = None,
    email: str | None = None,
    bio: str | None = None,
    photo: str | None = None,
) -> None:
    """Apply only the supplied fields. ``photo=None`` keeps the stored one."""
    user = get_profile(db, user_id)

    if name is not None:
        user.name = name
    if email is not None:
        user.email = email
    if bio is not None:
        user.bio = bio
    if photo is not None:
        user.photo = photo

    with store_guard(db, "profile update", conflict_message="Email already exists"):
        db.commit()
