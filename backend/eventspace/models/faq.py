"""Help center question. category is free text (Reservaciones, Pagos, ...)."""
from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from eventspace.db.base import Base


class FAQ(Base):
    __tablename__ = "faqs"

    id = Column(String(64), primary_key=True)
    seq = Column(Integer, nullable=False, index=True)
    question = Column(String(512), nullable=False)
    answer = Column(Text, nullable=False)
    category = Column(String(64), nullable=False, default="")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
