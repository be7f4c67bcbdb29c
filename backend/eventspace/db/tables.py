"""
Single source of truth for database tables that exist after migrations (001-002).

Use these names when writing raw SQL. alembic/env.py asserts the models match this list.
"""
ALL_TABLE_NAMES = (
    "venues",
    "bookings",
    "reviews",
    "venue_favorites",
    "recently_viewed",
    "faqs",
)
