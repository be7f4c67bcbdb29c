"""Per-user recently viewed venues. One row per (user_id, venue_id); seq orders the list (highest = newest).
venue_service keeps at most RECENTLY_VIEWED_LIMIT rows per user.
"""
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.sql import func

from eventspace.db.base import Base


class RecentlyViewed(Base):
    __tablename__ = "recently_viewed"
    __table_args__ = (UniqueConstraint("user_id", "venue_id", name="uq_recently_viewed_user_venue"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(64), nullable=False, index=True)
    venue_id = Column(String(64), ForeignKey("venues.id", ondelete="CASCADE"), nullable=False, index=True)
    seq = Column(Integer, nullable=False)
    viewed_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
