"""
Request dependencies shared by routes.

Caller identified by X-User-Id header or ?userId= (no auth layer; the frontend sends the id
of the signed-in user). Missing identity -> PermissionDeniedError (403).
"""
from fastapi import Header, Query

from eventspace.core.errors import PermissionDeniedError


def current_user_id(
    x_user_id: str | None = Header(None, alias="X-User-Id"),
    user_id: str | None = Query(None, alias="userId"),
) -> str:
    uid = (x_user_id or user_id or "").strip()
    if not uid:
        raise PermissionDeniedError("Missing caller identity (X-User-Id header or userId query param)")
    return uid


def optional_user_id(
    x_user_id: str | None = Header(None, alias="X-User-Id"),
    user_id: str | None = Query(None, alias="userId"),
) -> str | None:
    """Same sources as current_user_id; None for anonymous callers."""
    return (x_user_id or user_id or "").strip() or None
