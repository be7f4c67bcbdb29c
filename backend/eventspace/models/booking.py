"""Booking of one venue for one calendar date.

total_price is always computed server side (pricing.quote) from guest_count and selected_service_ids.
Any status other than CANCELLED occupies the date for availability.
"""
from sqlalchemy import JSON, Column, Date, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from eventspace.db.base import Base


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(String(64), primary_key=True)
    venue_id = Column(String(64), ForeignKey("venues.id", ondelete="CASCADE"), nullable=False, index=True)
    client_id = Column(String(64), nullable=False, index=True)
    provider_id = Column(String(64), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    status = Column(String(16), nullable=False, default="PENDING")
    guest_count = Column(Integer, nullable=False)
    selected_service_ids = Column(JSON, nullable=False, default=list)
    total_price = Column(Float, nullable=False)
    payment_method = Column(String(16), nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    venue = relationship("Venue")

    @property
    def venue_name(self) -> str:
        return self.venue.name if self.venue is not None else ""
