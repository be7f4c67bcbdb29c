from eventspace.db.base import Base
from eventspace.db.session import get_db, engine, SessionLocal
from eventspace.db.tables import ALL_TABLE_NAMES

__all__ = ["get_db", "engine", "SessionLocal", "Base", "ALL_TABLE_NAMES"]
