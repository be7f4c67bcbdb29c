"""
Month availability calendar for one venue.

month is 0-indexed (0 = January ... 11 = December), matching the frontend date library.
A day is available when it is not in the past (catalog timezone, date only) and no
non-cancelled booking occupies it. Recomputed on every call.
"""
import calendar
from datetime import date, datetime
from typing import Collection
from zoneinfo import ZoneInfo

from eventspace.config import settings
from eventspace.core.errors import ValidationError
from eventspace.services.catalog.types import DateAvailability

MIN_YEAR = 1
MAX_YEAR = 9999


def catalog_today() -> date:
    """Today's date in the catalog timezone (America/Mexico_City by default)."""
    return datetime.now(ZoneInfo(settings.catalog_timezone)).date()


def validate_month(month: int, year: int) -> None:
    if not 0 <= month <= 11:
        raise ValidationError(f"month must be between 0 (January) and 11 (December), got {month}")
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ValidationError(f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}")


def month_bounds(month: int, year: int) -> tuple[date, date]:
    """First and last calendar day of a 0-indexed month."""
    validate_month(month, year)
    days_in_month = calendar.monthrange(year, month + 1)[1]
    return date(year, month + 1, 1), date(year, month + 1, days_in_month)


def build_month_availability(
    month: int,
    year: int,
    booked_dates: Collection[date],
    today: date,
) -> list[DateAvailability]:
    """One DateAvailability per day of the month, in calendar order."""
    first, last = month_bounds(month, year)
    booked = set(booked_dates)
    out = []
    for day in range(first.day, last.day + 1):
        d = date(year, month + 1, day)
        out.append(DateAvailability(date=d.isoformat(), is_available=d not in booked and d >= today))
    return out
