"""User model: credentials, profile fields and game counters."""
from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from gamerverse.db.session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    # exact match, case-sensitive
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    favorite_genre = Column(String(64), nullable=True)
    hours_played = Column(Integer, nullable=False, default=0, server_default="0")
    wins = Column(Integer, nullable=False, default=0, server_default="0")
    losses = Column(Integer, nullable=False, default=0, server_default="0")
    level = Column(Integer, nullable=False, default=1, server_default="1")
    photo = Column(String(512), nullable=True)  # /uploads/<filename>
    bio = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)

    games = relationship("Game", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
    wishlist = relationship(
        "WishlistEntry", back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )
    sessions = relationship(
        "UserSession", back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )
