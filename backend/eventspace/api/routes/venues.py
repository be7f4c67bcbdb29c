"""
Venues API: catalog listing, detail (counts a view), availability calendar, recommendations,
provider CRUD, reviews and favorites.

Static paths (/recommended, /recent, /provider/{id}) are declared before /{venue_id}.
"""
from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from eventspace.api.deps import current_user_id, optional_user_id
from eventspace.core.constants import RECOMMENDED_LIMIT, RECOMMENDED_MAX_LIMIT
from eventspace.db.session import get_db
from eventspace.services import review_service, venue_service
from eventspace.services.catalog import (
    CamelModel,
    DateAvailability,
    PaginatedResponse,
    SearchFilters,
    VenueCreate,
    VenueRecord,
    VenueUpdate,
)
from eventspace.services.review_service import ReviewCreate, ReviewRecord

router = APIRouter()


class FavoriteStatus(CamelModel):
    venue_id: str
    favorited: bool
    favorites: int


# --- Catalog ---


@router.get("", response_model=PaginatedResponse[VenueRecord])
def list_venues(
    db: Session = Depends(get_db),
    query: str | None = Query(None),
    zone: str | None = Query(None),
    category: str | None = Query(None),
    price_min: str | None = Query(None, alias="priceMin"),
    price_max: str | None = Query(None, alias="priceMax"),
    capacity: str | None = Query(None),
    page: str | None = Query(None),
    page_size: str | None = Query(None, alias="pageSize"),
):
    """
    Filtered, ranked page of venues (BANNED never listed). FEATURED first, then rating desc.
    Raw strings go to SearchFilters so a malformed value is a 422 with the field named;
    blank values mean "no constraint".
    """
    filters = SearchFilters.from_params(
        {
            "query": query,
            "zone": zone,
            "category": category,
            "price_min": price_min,
            "price_max": price_max,
            "capacity": capacity,
            "page": page,
            "page_size": page_size,
        }
    )
    return venue_service.list_venues(db, filters)


@router.get("/recommended", response_model=list[VenueRecord])
def recommended_venues(
    db: Session = Depends(get_db),
    limit: int = Query(RECOMMENDED_LIMIT, ge=1, le=RECOMMENDED_MAX_LIMIT),
):
    """Most favorited non-banned venues."""
    return venue_service.get_recommended(db, limit)


@router.get("/recent", response_model=list[VenueRecord])
def recently_viewed(db: Session = Depends(get_db), user_id: str = Depends(current_user_id)):
    """Caller's last viewed venues, newest first (at most 5)."""
    return venue_service.get_recently_viewed(db, user_id)


@router.get("/provider/{provider_id}", response_model=list[VenueRecord])
def provider_venues(provider_id: str, db: Session = Depends(get_db)):
    return venue_service.get_provider_venues(db, provider_id)


@router.get("/{venue_id}", response_model=VenueRecord)
def get_venue(
    venue_id: str,
    db: Session = Depends(get_db),
    user_id: str | None = Depends(optional_user_id),
):
    """Venue detail. Every successful call increments views; a known caller's recent list is updated."""
    return venue_service.view_venue(db, venue_id, user_id)


@router.get("/{venue_id}/availability", response_model=list[DateAvailability])
def venue_availability(
    venue_id: str,
    db: Session = Depends(get_db),
    month: int = Query(..., description="0 = January ... 11 = December"),
    year: int = Query(...),
):
    return venue_service.get_availability(db, venue_id, month, year)


# --- Provider CRUD ---


@router.post("", response_model=VenueRecord, status_code=201)
def create_venue(
    body: VenueCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(current_user_id),
):
    """Caller becomes the provider. New venues start PENDING until an admin activates them."""
    return venue_service.create_venue(db, user_id, body)


@router.put("/{venue_id}", response_model=VenueRecord)
def update_venue(
    venue_id: str,
    body: VenueUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(current_user_id),
):
    return venue_service.update_venue(db, venue_id, user_id, body)


@router.delete("/{venue_id}", status_code=204)
def delete_venue(
    venue_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(current_user_id),
):
    venue_service.delete_venue(db, venue_id, user_id)
    return Response(status_code=204)


# --- Reviews ---


@router.get("/{venue_id}/reviews", response_model=list[ReviewRecord])
def list_reviews(venue_id: str, db: Session = Depends(get_db)):
    """Newest first."""
    return review_service.list_reviews(db, venue_id)


@router.post("/{venue_id}/reviews", response_model=ReviewRecord, status_code=201)
def add_review(
    venue_id: str,
    body: ReviewCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(current_user_id),
):
    return review_service.add_review(db, venue_id, user_id, body)


# --- Favorites ---


@router.post("/{venue_id}/favorite", response_model=FavoriteStatus)
def favorite_venue(
    venue_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(current_user_id),
):
    return venue_service.add_favorite(db, venue_id, user_id)


@router.delete("/{venue_id}/favorite", response_model=FavoriteStatus)
def unfavorite_venue(
    venue_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(current_user_id),
):
    return venue_service.remove_favorite(db, venue_id, user_id)
