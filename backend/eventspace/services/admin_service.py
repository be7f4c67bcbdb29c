"""
Admin: venue moderation (ban / feature / activate) and catalog reset.
Tables: venues, bookings, reviews, venue_favorites, recently_viewed (see eventspace.db.tables).
"""
import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from eventspace.models.booking import Booking
from eventspace.models.enums import VenueStatus
from eventspace.models.favorite import VenueFavorite
from eventspace.models.recently_viewed import RecentlyViewed
from eventspace.models.review import Review
from eventspace.models.venue import Venue
from eventspace.services import venue_service
from eventspace.services.catalog import VenueRecord

logger = logging.getLogger(__name__)


def list_all_venues(db: Session) -> list[VenueRecord]:
    """Every venue, every status (BANNED included), insertion order."""
    return venue_service.load_venues(db)


def set_venue_status(db: Session, venue_id: str, status: VenueStatus, actor: str | None = None) -> VenueRecord:
    row = venue_service.get_venue_row(db, venue_id)
    previous = row.status
    row.status = status.value
    row.updated_at = datetime.now(timezone.utc)
    db.commit()
    db.refresh(row)
    logger.info("Venue status: id=%s %s -> %s by=%s", venue_id, previous, status.value, actor or "-")
    return venue_service.to_record(row)


def reset_catalog(db: Session) -> dict[str, int]:
    """
    Delete all rows from catalog tables (children first).
    Returns dict of table -> deleted count.
    """
    deleted: dict[str, int] = {}
    deleted["recently_viewed"] = db.query(RecentlyViewed).delete()
    deleted["venue_favorites"] = db.query(VenueFavorite).delete()
    deleted["reviews"] = db.query(Review).delete()
    deleted["bookings"] = db.query(Booking).delete()
    deleted["venues"] = db.query(Venue).delete()
    db.commit()
    logger.info("reset_catalog: %s", deleted)
    return deleted
