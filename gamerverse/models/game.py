"""Game model: one owned entry in a user's collection."""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, true
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from gamerverse.db.session import Base


class Game(Base):
    __tablename__ = "games"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    genre = Column(String(64), nullable=True)
    hours = Column(Integer, nullable=False, default=0, server_default="0")
    owned = Column(Boolean, nullable=False, default=True, server_default=true())
    img_url = Column(String(1024), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)

    user = relationship("User", back_populates="games")
