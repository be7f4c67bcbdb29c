#!/usr/bin/env python3
"""Create tables (if missing) and insert the demo venue catalog, bookings and reviews.
Run from backend: python scripts/seed_demo_data.py [--force]
--force inserts even when venues already exist (use after scripts/reset_catalog.py).
"""
import argparse
import sys
from pathlib import Path

# Ensure backend is on path when run as script
backend_dir = Path(__file__).resolve().parent.parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

from eventspace.db.base import Base
from eventspace.db.session import SessionLocal, engine
from eventspace.models import Booking, Review, Venue, VenueFavorite  # noqa: F401
from eventspace.services.seed_service import seed_demo_data


def main():
    parser = argparse.ArgumentParser(description="Seed the EventSpace demo catalog.")
    parser.add_argument("--force", action="store_true", help="Seed even if venues already exist")
    args = parser.parse_args()

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        inserted = seed_demo_data(db, force=args.force)
        if not any(inserted.values()):
            print("Venues already present; nothing inserted (use --force after reset_catalog.py).")
            return
        print("Demo data seeded. Rows inserted:")
        for table, count in inserted.items():
            print(f"  {table}: {count}")
    except Exception as e:
        db.rollback()
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        db.close()


if __name__ == "__main__":
    main()
