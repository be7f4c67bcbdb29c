"""
Venue reviews. Each new review folds into the venue's running rating average and review_count.
"""
import logging
import uuid
from datetime import datetime, timezone

from pydantic import Field
from sqlalchemy.orm import Session

from eventspace.core.constants import MAX_RATING, MIN_RATING, REVIEW_ID_PREFIX
from eventspace.models.review import Review
from eventspace.services import venue_service
from eventspace.services.catalog import CamelModel

logger = logging.getLogger(__name__)


class ReviewCreate(CamelModel):
    rating: int = Field(..., ge=1, le=5)
    comment: str = Field("", max_length=4000)


class ReviewRecord(CamelModel):
    id: str
    venue_id: str
    user_id: str
    rating: int
    comment: str
    created_at: datetime | None = None


def running_average(current: float, count: int, new_rating: int) -> float:
    """Average after adding one rating to `count` existing ones, kept in [0, 5]."""
    avg = (current * count + new_rating) / (count + 1)
    return round(min(max(avg, MIN_RATING), MAX_RATING), 2)


def list_reviews(db: Session, venue_id: str) -> list[ReviewRecord]:
    venue_service.get_venue_row(db, venue_id)
    rows = db.query(Review).filter(Review.venue_id == venue_id).order_by(Review.created_at.desc()).all()
    return [ReviewRecord.model_validate(r) for r in rows]


def add_review(db: Session, venue_id: str, user_id: str, data: ReviewCreate) -> ReviewRecord:
    venue = venue_service.get_venue_row(db, venue_id)
    row = Review(
        id=f"{REVIEW_ID_PREFIX}-{uuid.uuid4().hex[:12]}",
        venue_id=venue_id,
        user_id=user_id,
        rating=data.rating,
        comment=data.comment,
        created_at=datetime.now(timezone.utc),
    )
    venue.rating = running_average(venue.rating or 0.0, venue.review_count or 0, data.rating)
    venue.review_count = (venue.review_count or 0) + 1
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info("Review added: venue=%s user=%s rating=%s new_avg=%s", venue_id, user_id, data.rating, venue.rating)
    return ReviewRecord.model_validate(row)
