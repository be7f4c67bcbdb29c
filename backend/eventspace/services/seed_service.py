"""
Demo data for a fresh dev database: venues, a few bookings (dates relative to today), reviews
and the help center FAQs (inserted once; catalog resets keep them).
Runs on startup when SEED_DEMO_DATA is on, and from scripts/seed_demo_data.py.
"""
import logging
import uuid
from datetime import datetime, timedelta, timezone

from sqlalchemy.orm import Session

from eventspace.core.constants import BOOKING_ID_PREFIX, REVIEW_ID_PREFIX
from eventspace.data.demo_venues import DEMO_BOOKINGS, DEMO_CLIENT_ID, DEMO_FAQS, DEMO_REVIEWS, DEMO_VENUES
from eventspace.models.booking import Booking
from eventspace.models.faq import FAQ
from eventspace.models.review import Review
from eventspace.models.venue import Venue
from eventspace.services import venue_service
from eventspace.services.catalog import catalog_today
from eventspace.services.pricing import compute_total

logger = logging.getLogger(__name__)


def seed_demo_data(db: Session, force: bool = False) -> dict[str, int]:
    """
    Insert the demo catalog. Skips (returns zeros) when venues already exist unless force=True.
    Returns dict of table -> inserted count.
    """
    if not force and db.query(Venue).first() is not None:
        logger.info("seed_demo_data: venues already present, skipping")
        return {"venues": 0, "bookings": 0, "reviews": 0, "faqs": 0}

    now = datetime.now(timezone.utc)
    seq = venue_service.next_seq(db)
    for i, data in enumerate(DEMO_VENUES):
        db.add(Venue(seq=seq + i, created_at=now, updated_at=now, **data))
    db.flush()

    today = catalog_today()
    venues = {v["id"]: venue_service.to_record(db.get(Venue, v["id"])) for v in DEMO_VENUES}
    for venue_id, offset, status, guests, service_ids, method, notes in DEMO_BOOKINGS:
        venue = venues[venue_id]
        db.add(
            Booking(
                id=f"{BOOKING_ID_PREFIX}-{uuid.uuid4().hex[:12]}",
                venue_id=venue_id,
                client_id=DEMO_CLIENT_ID,
                provider_id=venue.provider_id,
                date=today + timedelta(days=offset),
                status=status,
                guest_count=guests,
                selected_service_ids=list(service_ids),
                total_price=compute_total(venue, guests, service_ids),
                payment_method=method,
                notes=notes,
                created_at=now,
                updated_at=now,
            )
        )

    # Demo venues already carry their aggregate rating; these rows only fill the review list.
    for i, (venue_id, user_id, rating, comment) in enumerate(DEMO_REVIEWS):
        db.add(
            Review(
                id=f"{REVIEW_ID_PREFIX}-{uuid.uuid4().hex[:12]}",
                venue_id=venue_id,
                user_id=user_id,
                rating=rating,
                comment=comment,
                created_at=now - timedelta(days=len(DEMO_REVIEWS) - i),
            )
        )
    faqs = 0
    if db.query(FAQ).first() is None:
        for i, (faq_id, category, question, answer) in enumerate(DEMO_FAQS, start=1):
            db.add(FAQ(id=faq_id, seq=i, category=category, question=question, answer=answer, created_at=now, updated_at=now))
        faqs = len(DEMO_FAQS)
    db.commit()
    inserted = {
        "venues": len(DEMO_VENUES),
        "bookings": len(DEMO_BOOKINGS),
        "reviews": len(DEMO_REVIEWS),
        "faqs": faqs,
    }
    logger.info("seed_demo_data: %s", inserted)
    return inserted

