"""Durable session binding. Only the token digest is stored."""
from sqlalchemy import Column, Integer, String, Float, ForeignKey
from sqlalchemy.orm import relationship

from gamerverse.db.session import Base


class UserSession(Base):
    __tablename__ = "user_sessions"

    token_hash = Column(String(64), primary_key=True)  # sha256 hex
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(Float, nullable=False)  # epoch seconds
    expires_at = Column(Float, nullable=False, index=True)

    user = relationship("User", back_populates="sessions")
