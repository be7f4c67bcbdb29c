"""Rentable venue. Listing/search reads these rows into VenueRecord snapshots.

seq: insertion sequence; listings load rows by seq so equal sort keys keep insertion order.
images / payment_methods / amenities / services: JSON lists (services = [{id, name, description, price, is_optional}]).
status: PENDING | ACTIVE | FEATURED | BANNED (BANNED never listed).
"""
from sqlalchemy import JSON, Column, DateTime, Float, Integer, String, Text
from sqlalchemy.sql import func

from eventspace.db.base import Base


class Venue(Base):
    __tablename__ = "venues"

    id = Column(String(64), primary_key=True)
    seq = Column(Integer, nullable=False, index=True)
    provider_id = Column(String(64), nullable=False, index=True)
    name = Column(String(256), nullable=False)
    description = Column(Text, nullable=False, default="")
    address = Column(String(512), nullable=False, default="")
    zone = Column(String(128), nullable=False, index=True)
    category = Column(String(32), nullable=False, index=True)
    price = Column(Float, nullable=False)
    capacity = Column(Integer, nullable=False)
    images = Column(JSON, nullable=False, default=list)
    payment_methods = Column(JSON, nullable=False, default=list)
    amenities = Column(JSON, nullable=False, default=list)
    services = Column(JSON, nullable=True)  # NULL on older rows = no services
    status = Column(String(16), nullable=False, default="PENDING", index=True)
    rating = Column(Float, nullable=False, default=0.0)
    review_count = Column(Integer, nullable=False, default=0)
    views = Column(Integer, nullable=False, default=0)
    favorites = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
