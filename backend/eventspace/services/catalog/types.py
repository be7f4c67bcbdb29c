"""Catalog schemas. Same shape for service calls and JSON (camelCase on the wire).

VenueRecord is a read snapshot of a venues row; search/pricing functions only ever see these.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Generic, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from eventspace.core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from eventspace.core.errors import ValidationError
from eventspace.models.enums import PaymentMethod, VenueCategory, VenueStatus

T = TypeVar("T")


class CamelModel(BaseModel):
    """Accepts snake_case or camelCase input; serializes camelCase (FastAPI response_model uses aliases)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class VenueServiceItem(CamelModel):
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: str | None = None
    price: float = Field(0.0, ge=0)
    is_optional: bool = True


class VenueRecord(CamelModel):
    id: str
    provider_id: str
    name: str
    description: str = ""
    address: str = ""
    zone: str
    category: VenueCategory
    price: float
    capacity: int
    images: list[str] = Field(default_factory=list)
    payment_methods: list[PaymentMethod] = Field(default_factory=list)
    amenities: list[str] = Field(default_factory=list)
    services: list[VenueServiceItem] = Field(default_factory=list)
    status: VenueStatus
    rating: float = 0.0
    review_count: int = 0
    views: int = 0
    favorites: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("images", "payment_methods", "amenities", "services", mode="before")
    @classmethod
    def missing_list_is_empty(cls, v: Any) -> Any:
        # Older rows store NULL services; treat as no services
        return [] if v is None else v


class VenueCreate(CamelModel):
    """Provider input for a new venue. Invariants: capacity > 0, price >= 0."""

    name: str = Field(..., min_length=1, max_length=256)
    description: str = ""
    address: str = Field("", max_length=512)
    zone: str = Field(..., min_length=1, max_length=128)
    category: VenueCategory
    price: float = Field(..., ge=0)
    capacity: int = Field(..., gt=0)
    images: list[str] = Field(default_factory=list)
    payment_methods: list[PaymentMethod] = Field(
        default_factory=lambda: [PaymentMethod.TRANSFERENCIA, PaymentMethod.EFECTIVO],
        min_length=1,
    )
    amenities: list[str] = Field(default_factory=list)
    services: list[VenueServiceItem] = Field(default_factory=list)

    @field_validator("services")
    @classmethod
    def unique_service_ids(cls, v: list[VenueServiceItem]) -> list[VenueServiceItem]:
        ids = [s.id for s in v]
        if len(ids) != len(set(ids)):
            raise ValueError("service ids must be unique within a venue")
        return v


class VenueUpdate(CamelModel):
    """Partial update; None means unchanged."""

    name: str | None = Field(None, min_length=1, max_length=256)
    description: str | None = None
    address: str | None = Field(None, max_length=512)
    zone: str | None = Field(None, min_length=1, max_length=128)
    category: VenueCategory | None = None
    price: float | None = Field(None, ge=0)
    capacity: int | None = Field(None, gt=0)
    images: list[str] | None = None
    payment_methods: list[PaymentMethod] | None = Field(None, min_length=1)
    amenities: list[str] | None = None
    services: list[VenueServiceItem] | None = None

    @field_validator("services")
    @classmethod
    def unique_service_ids(cls, v: list[VenueServiceItem] | None) -> list[VenueServiceItem] | None:
        if v is not None and len({s.id for s in v}) != len(v):
            raise ValueError("service ids must be unique within a venue")
        return v


class SearchFilters(CamelModel):
    """
    Venue listing query. Every filter is optional: absent (None) means no constraint.
    A present but malformed value is rejected (ValidationError) before any filtering.
    """

    query: str | None = None
    zone: str | None = None
    category: VenueCategory | None = None
    price_min: float | None = Field(None, ge=0)
    price_max: float | None = Field(None, ge=0)
    capacity: int | None = Field(None, ge=0)
    page: int = Field(DEFAULT_PAGE, ge=1)
    page_size: int = Field(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)

    @field_validator("query", "zone", mode="before")
    @classmethod
    def blank_is_absent(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> SearchFilters:
        """
        Build filters from raw query-string values (camelCase or snake_case keys).
        None and blank strings are dropped (absent); anything else must parse.
        """
        raw = {}
        for key, value in params.items():
            if value is None:
                continue
            if isinstance(value, str):
                value = value.strip()
                if not value:
                    continue
            raw[key] = value
        try:
            return cls.model_validate(raw)
        except PydanticValidationError as e:
            raise ValidationError(_describe_errors(e)) from e


def _describe_errors(exc: PydanticValidationError) -> str:
    parts = []
    for err in exc.errors():
        field = ".".join(str(p) for p in err.get("loc") or ()) or "filters"
        parts.append(f"{field}: {err.get('msg')}")
    return "Invalid filters: " + "; ".join(parts)


class DateAvailability(CamelModel):
    date: str  # YYYY-MM-DD
    is_available: bool


class PaginatedResponse(CamelModel, Generic[T]):
    data: list[T]
    total: int
    page: int
    page_size: int
    total_pages: int
