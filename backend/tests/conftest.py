"""
Shared fixtures: in-memory SQLite per test, get_db override, TestClient and a small seeded catalog.

TestClient is not used as a context manager, so the app lifespan (create_all + demo seed on the
configured DATABASE_URL) never runs in tests.
"""
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from eventspace.db.base import Base
from eventspace.db.session import get_db
from eventspace.main import app
from eventspace.models import Venue
from eventspace.services.catalog import VenueRecord

PROVIDER_ID = "p1"
OTHER_PROVIDER_ID = "p2"
CLIENT_ID = "c1"
ADMIN_ID = "admin"

_SERVICES_V1 = [
    {"id": "s1", "name": "Mobiliario", "price": 0, "is_optional": False},
    {"id": "s2", "name": "Limpieza post-evento", "price": 800, "is_optional": True},
    {"id": "s3", "name": "Seguridad privada", "price": 1500, "is_optional": True},
]

# (id, provider, name, zone, category, price, capacity, status, rating, favorites)
CATALOG = [
    ("v1", PROVIDER_ID, "Hacienda Los Arcos", "Tlalpan", "HACIENDA", 85000, 350, "FEATURED", 4.8, 234),
    ("v2", PROVIDER_ID, "Terraza Skyline", "Polanco", "TERRAZA", 18000, 200, "FEATURED", 4.6, 178),
    ("v3", PROVIDER_ID, "Jardín Botánico Roma", "Roma Norte", "JARDIN", 45000, 100, "ACTIVE", 4.9, 145),
    ("v4", PROVIDER_ID, "Salón Imperial Condesa", "Condesa", "SALON_EVENTOS", 15000, 180, "ACTIVE", 4.7, 312),
    ("v5", PROVIDER_ID, "Bodega Industrial 1920", "Roma Norte", "BODEGA", 11000, 250, "ACTIVE", 4.5, 167),
    ("v6", OTHER_PROVIDER_ID, "Restaurante Oculto", "Polanco", "RESTAURANTE", 30000, 60, "BANNED", 5.0, 999),
    ("v7", OTHER_PROVIDER_ID, "Jardín Secreto", "Coyoacán", "JARDIN", 12000, 80, "PENDING", 4.0, 10),
]


def make_venue_data(venue_id, provider_id, name, zone, category, price, capacity, status, rating, favorites):
    return {
        "id": venue_id,
        "provider_id": provider_id,
        "name": name,
        "description": f"{name} en {zone}",
        "address": f"Calle 1, {zone}",
        "zone": zone,
        "category": category,
        "price": price,
        "capacity": capacity,
        "images": [],
        "payment_methods": ["TRANSFERENCIA"] if venue_id == "v2" else ["TRANSFERENCIA", "EFECTIVO"],
        "amenities": ["Estacionamiento"],
        "services": list(_SERVICES_V1) if venue_id == "v1" else [],
        "status": status,
        "rating": rating,
        "review_count": 10,
        "views": 100,
        "favorites": favorites,
    }


def make_record(**overrides) -> VenueRecord:
    """VenueRecord for pure catalog/pricing tests; defaults to an ACTIVE venue."""
    data = {
        "id": "v",
        "provider_id": PROVIDER_ID,
        "name": "Venue",
        "description": "",
        "zone": "Centro",
        "category": "SALON_EVENTOS",
        "price": 10000,
        "capacity": 100,
        "status": "ACTIVE",
        "rating": 4.0,
    }
    data.update(overrides)
    return VenueRecord.model_validate(data)


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def catalog(db):
    """Seven venues in insertion order v1..v7 (v6 BANNED, v7 PENDING)."""
    now = datetime.now(timezone.utc)
    for seq, row in enumerate(CATALOG, start=1):
        db.add(Venue(seq=seq, created_at=now, updated_at=now, **make_venue_data(*row)))
    db.commit()
    return [row[0] for row in CATALOG]


@pytest.fixture
def client(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def as_provider():
    return {"X-User-Id": PROVIDER_ID}


@pytest.fixture
def as_client():
    return {"X-User-Id": CLIENT_ID}


@pytest.fixture
def as_admin():
    return {"X-User-Id": ADMIN_ID}


@pytest.fixture
def venue_record():
    return make_record
