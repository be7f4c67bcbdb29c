#!/usr/bin/env python3
"""Delete every venue, booking, review and favorite. Schema and alembic_version are kept.
Run from backend: python scripts/reset_catalog.py
Then optionally: python scripts/seed_demo_data.py --force
"""
import sys
from pathlib import Path

# Ensure backend is on path when run as script
backend_dir = Path(__file__).resolve().parent.parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

from eventspace.db.session import SessionLocal
from eventspace.services.admin_service import reset_catalog


def main():
    db = SessionLocal()
    try:
        deleted = reset_catalog(db)
        print("Catalog cleared. Rows deleted:")
        for table, count in deleted.items():
            print(f"  {table}: {count}")
    except Exception as e:
        db.rollback()
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        db.close()


if __name__ == "__main__":
    main()
