"""
Venue catalog over the DB: listing, detail (view counter), availability, recommendations,
provider CRUD and favorites.

Reads load a snapshot of VenueRecord ordered by insertion (seq) and hand it to the pure
catalog functions. Counter bumps (views, favorites) are plain read-modify-write: concurrent
requests may lose an increment, which is acceptable for these counters.
"""
import logging
import uuid
from datetime import date, datetime, timezone

from sqlalchemy import func
from sqlalchemy.orm import Session

from eventspace.core.constants import RECENTLY_VIEWED_LIMIT, RECOMMENDED_LIMIT, VENUE_ID_PREFIX
from eventspace.core.errors import NotFoundError
from eventspace.models.booking import Booking
from eventspace.models.enums import BookingStatus, VenueStatus
from eventspace.models.favorite import VenueFavorite
from eventspace.models.recently_viewed import RecentlyViewed
from eventspace.models.review import Review
from eventspace.models.venue import Venue
from eventspace.services.catalog import (
    DateAvailability,
    PaginatedResponse,
    SearchFilters,
    VenueCreate,
    VenueRecord,
    VenueUpdate,
    build_month_availability,
    catalog_today,
    month_bounds,
    recommend_venues,
    search_venues,
)

logger = logging.getLogger(__name__)

MSG_VENUE_NOT_FOUND = "Venue not found"
MSG_VENUE_NOT_FOUND_OR_NOT_OWNED = "Venue not found or not owned by this provider"


def _now() -> datetime:
    return datetime.now(timezone.utc)


def new_venue_id() -> str:
    return f"{VENUE_ID_PREFIX}-{uuid.uuid4().hex[:12]}"


def to_record(row: Venue) -> VenueRecord:
    return VenueRecord.model_validate(row)


def load_venues(db: Session) -> list[VenueRecord]:
    """Snapshot of every venue (all statuses) in insertion order."""
    rows = db.query(Venue).order_by(Venue.seq.asc()).all()
    return [to_record(r) for r in rows]


def get_venue_row(db: Session, venue_id: str) -> Venue:
    row = db.query(Venue).filter(Venue.id == venue_id).first()
    if not row:
        raise NotFoundError(MSG_VENUE_NOT_FOUND)
    return row


def _owned_venue_row(db: Session, venue_id: str, provider_id: str) -> Venue:
    row = db.query(Venue).filter(Venue.id == venue_id, Venue.provider_id == provider_id).first()
    if not row:
        raise NotFoundError(MSG_VENUE_NOT_FOUND_OR_NOT_OWNED)
    return row


# --- Catalog reads ---


def list_venues(db: Session, filters: SearchFilters) -> PaginatedResponse[VenueRecord]:
    """Filtered, ranked, paginated listing. No side effects."""
    result = search_venues(load_venues(db), filters)
    logger.debug(
        "list_venues: filters=%s total=%s page=%s/%s",
        filters.model_dump(exclude_none=True),
        result.total,
        result.page,
        result.total_pages,
    )
    return result


def get_venue(db: Session, venue_id: str) -> VenueRecord:
    """Venue detail without touching the view counter (pricing, bookings, availability)."""
    return to_record(get_venue_row(db, venue_id))


def view_venue(db: Session, venue_id: str, user_id: str | None = None) -> VenueRecord:
    """
    Venue detail for a visitor: increments views by one on every successful lookup.
    A known caller also gets the venue moved to the front of their recently viewed list.
    """
    row = get_venue_row(db, venue_id)
    row.views = (row.views or 0) + 1
    if user_id:
        _remember_view(db, venue_id, user_id)
    db.commit()
    db.refresh(row)
    return to_record(row)


def booked_dates(db: Session, venue_id: str, start: date, end: date) -> set[date]:
    """Dates in [start, end] occupied by a non-cancelled booking."""
    rows = (
        db.query(Booking.date)
        .filter(
            Booking.venue_id == venue_id,
            Booking.status != BookingStatus.CANCELLED.value,
            Booking.date >= start,
            Booking.date <= end,
        )
        .all()
    )
    return {r[0] for r in rows}


def get_availability(
    db: Session,
    venue_id: str,
    month: int,
    year: int,
    today: date | None = None,
) -> list[DateAvailability]:
    """Full month calendar (month 0-indexed). Unknown venue -> NotFoundError; bad month/year -> ValidationError."""
    get_venue_row(db, venue_id)
    first, last = month_bounds(month, year)
    taken = booked_dates(db, venue_id, first, last)
    return build_month_availability(month, year, taken, today or catalog_today())


def _remember_view(db: Session, venue_id: str, user_id: str) -> None:
    """Move venue_id to the front of the user's list (no duplicates), keep the newest RECENTLY_VIEWED_LIMIT."""
    rows = db.query(RecentlyViewed).filter(RecentlyViewed.user_id == user_id).all()
    top = max((r.seq for r in rows), default=0) + 1
    entry = next((r for r in rows if r.venue_id == venue_id), None)
    if entry is None:
        entry = RecentlyViewed(user_id=user_id, venue_id=venue_id)
        db.add(entry)
        rows.append(entry)
    entry.seq = top
    entry.viewed_at = _now()
    for stale in sorted(rows, key=lambda r: r.seq, reverse=True)[RECENTLY_VIEWED_LIMIT:]:
        db.delete(stale)


def get_recently_viewed(db: Session, user_id: str) -> list[VenueRecord]:
    """Caller's recently viewed venues, newest first. BANNED venues are left out."""
    rows = (
        db.query(Venue)
        .join(RecentlyViewed, RecentlyViewed.venue_id == Venue.id)
        .filter(RecentlyViewed.user_id == user_id, Venue.status != VenueStatus.BANNED.value)
        .order_by(RecentlyViewed.seq.desc())
        .all()
    )
    return [to_record(r) for r in rows]


def get_recommended(db: Session, limit: int = RECOMMENDED_LIMIT) -> list[VenueRecord]:
    return recommend_venues(load_venues(db), limit)


def get_provider_venues(db: Session, provider_id: str) -> list[VenueRecord]:
    """Every venue of a provider, any status (provider dashboard)."""
    rows = db.query(Venue).filter(Venue.provider_id == provider_id).order_by(Venue.seq.asc()).all()
    return [to_record(r) for r in rows]


# --- Provider CRUD ---


def next_seq(db: Session) -> int:
    return (db.query(func.max(Venue.seq)).scalar() or 0) + 1


def create_venue(db: Session, provider_id: str, data: VenueCreate) -> VenueRecord:
    """New venue starts PENDING (not bookable until an admin activates it)."""
    now = _now()
    row = Venue(
        id=new_venue_id(),
        seq=next_seq(db),
        provider_id=provider_id,
        name=data.name,
        description=data.description,
        address=data.address,
        zone=data.zone,
        category=data.category.value,
        price=data.price,
        capacity=data.capacity,
        images=list(data.images),
        payment_methods=[m.value for m in data.payment_methods],
        amenities=list(data.amenities),
        services=[s.model_dump() for s in data.services],
        status=VenueStatus.PENDING.value,
        rating=0.0,
        review_count=0,
        views=0,
        favorites=0,
        created_at=now,
        updated_at=now,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info("Venue created: id=%s provider=%s name=%r", row.id, provider_id, row.name)
    return to_record(row)


def update_venue(db: Session, venue_id: str, provider_id: str, data: VenueUpdate) -> VenueRecord:
    row = _owned_venue_row(db, venue_id, provider_id)
    changes = data.model_dump(exclude_none=True)
    for field, value in changes.items():
        if field == "category":
            value = data.category.value
        elif field == "payment_methods":
            value = [m.value for m in data.payment_methods]
        setattr(row, field, value)
    row.updated_at = _now()
    db.commit()
    db.refresh(row)
    logger.info("Venue updated: id=%s fields=%s", venue_id, sorted(changes))
    return to_record(row)


def delete_venue(db: Session, venue_id: str, provider_id: str) -> None:
    """Remove a venue and the rows that reference it."""
    row = _owned_venue_row(db, venue_id, provider_id)
    deleted = {
        "bookings": db.query(Booking).filter(Booking.venue_id == venue_id).delete(),
        "reviews": db.query(Review).filter(Review.venue_id == venue_id).delete(),
        "favorites": db.query(VenueFavorite).filter(VenueFavorite.venue_id == venue_id).delete(),
        "recently_viewed": db.query(RecentlyViewed).filter(RecentlyViewed.venue_id == venue_id).delete(),
    }
    db.delete(row)
    db.commit()
    logger.info("Venue deleted: id=%s provider=%s dependents=%s", venue_id, provider_id, deleted)


# --- Favorites ---


def _favorite_row(db: Session, venue_id: str, user_id: str) -> VenueFavorite | None:
    return (
        db.query(VenueFavorite)
        .filter(VenueFavorite.venue_id == venue_id, VenueFavorite.user_id == user_id)
        .first()
    )


def add_favorite(db: Session, venue_id: str, user_id: str) -> dict:
    """Idempotent per user: favoriting twice counts once."""
    row = get_venue_row(db, venue_id)
    if not _favorite_row(db, venue_id, user_id):
        db.add(VenueFavorite(venue_id=venue_id, user_id=user_id))
        row.favorites = (row.favorites or 0) + 1
        db.commit()
        db.refresh(row)
    return {"venue_id": venue_id, "favorited": True, "favorites": row.favorites}


def remove_favorite(db: Session, venue_id: str, user_id: str) -> dict:
    row = get_venue_row(db, venue_id)
    fav = _favorite_row(db, venue_id, user_id)
    if fav:
        db.delete(fav)
        row.favorites = max((row.favorites or 0) - 1, 0)
        db.commit()
        db.refresh(row)
    return {"venue_id": venue_id, "favorited": False, "favorites": row.favorites}
