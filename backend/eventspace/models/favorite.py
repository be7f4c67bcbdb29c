"""User favorite: one row per (user_id, venue_id). venues.favorites is the denormalized count."""
from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint

from eventspace.db.base import Base


class VenueFavorite(Base):
    __tablename__ = "venue_favorites"
    __table_args__ = (UniqueConstraint("user_id", "venue_id", name="uq_venue_favorites_user_venue"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(64), nullable=False, index=True)
    venue_id = Column(String(64), ForeignKey("venues.id", ondelete="CASCADE"), nullable=False, index=True)
