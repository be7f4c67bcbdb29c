"""
FastAPI app entrypoint.

EventSpace: venue catalog, availability, pricing quotes, bookings and help center FAQs.
Run from backend: uvicorn eventspace.main:app --reload
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load .env from backend/ before any app code
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

from eventspace.api.routes import admin, bookings, faqs, metrics, pricing, venues
from eventspace.config import settings
from eventspace.core.errors import EventSpaceError, eventspace_error_handler
from eventspace.db.base import Base
from eventspace.db.session import SessionLocal, engine
from eventspace.models import FAQ, Booking, RecentlyViewed, Review, Venue, VenueFavorite  # noqa: F401
from eventspace.services.seed_service import seed_demo_data

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Dev convenience; production schema comes from alembic upgrade head
    Base.metadata.create_all(bind=engine)
    if settings.seed_demo_data:
        db = SessionLocal()
        try:
            seed_demo_data(db)
        except Exception as e:
            db.rollback()
            logger.warning("Demo data seed on startup failed: %s", e, exc_info=True)
        finally:
            db.close()
    logger.info("Backend ready at http://127.0.0.1:8000 (docs /docs, health /health)")
    yield


app = FastAPI(title="EventSpace API", version="0.1.0", lifespan=lifespan)

# CORS: dev origins + optional CORS_ORIGINS env (comma-separated) for production frontend
_cors_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:4173",
    "http://127.0.0.1:4173",
]
if settings.cors_origins:
    _cors_origins.extend(o.strip() for o in settings.cors_origins.split(",") if o.strip())
app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(EventSpaceError, eventspace_error_handler)

app.include_router(venues.router, prefix="/api/venues", tags=["venues"])
app.include_router(pricing.router, prefix="/api/pricing", tags=["pricing"])
app.include_router(bookings.router, prefix="/api/bookings", tags=["bookings"])
app.include_router(admin.router, prefix="/api/admin", tags=["admin"])
app.include_router(metrics.router, prefix="/api/metrics", tags=["metrics"])
app.include_router(faqs.router, prefix="/api/faqs", tags=["faqs"])


@app.get("/", include_in_schema=False)
def root():
    """Root: point to API docs and health."""
    return {"message": "EventSpace API", "docs": "/docs", "health": "/health"}


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
