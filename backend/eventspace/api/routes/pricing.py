"""
Pricing API: quote for a venue given guest count and selected services.

The quote is informational; POST /api/bookings recomputes the same total server-side.
"""
import logging

from fastapi import APIRouter, Depends
from pydantic import Field
from sqlalchemy.orm import Session

from eventspace.db.session import get_db
from eventspace.services import venue_service
from eventspace.services.catalog import CamelModel
from eventspace.services.pricing import Quote, clamp_guest_count, quote

router = APIRouter()
logger = logging.getLogger(__name__)


class QuoteRequest(CamelModel):
    venue_id: str = Field(..., min_length=1)
    guest_count: int
    selected_service_ids: list[str] = Field(default_factory=list)


@router.post("/quote", response_model=Quote)
def quote_venue(body: QuoteRequest, db: Session = Depends(get_db)):
    """
    Guest count is clamped to [1, capacity] before pricing (the engine itself never clamps).
    Unknown service ids add nothing. Does not count a view.
    """
    venue = venue_service.get_venue(db, body.venue_id)
    guests = clamp_guest_count(body.guest_count, venue.capacity)
    if guests != body.guest_count:
        logger.debug("quote: guest_count %s clamped to %s for venue=%s", body.guest_count, guests, venue.id)
    return quote(venue, guests, body.selected_service_ids)
