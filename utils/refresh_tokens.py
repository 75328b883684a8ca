"""
Refresh token lifecycle: generate, issue, redeem, revoke.

Refresh tokens are opaque 256-bit random values stored as 64 char lowercase
hex strings. They are not rotated on redemption: the same token keeps
working until it expires or is revoked.
"""
from __future__ import annotations

import logging
import secrets
from datetime import timedelta

from models.base_model import utc_now
from models.refresh_token import RefreshToken
from utils.errors import AppError, ErrorKind

logger = logging.getLogger(__name__)

REFRESH_TOKEN_BYTES = 32


def make_refresh_token() -> str:
    return secrets.token_hex(REFRESH_TOKEN_BYTES)


def issue_refresh_token(store, user_id: str, lifetime: timedelta) -> RefreshToken:
    """Create and persist a fresh refresh token for `user_id`."""
    now = utc_now()
    record = RefreshToken(
        token=make_refresh_token(),
        user_id=str(user_id),
        created_at=now,
        updated_at=now,
        expires_at=now + lifetime,
        revoked_at=None,
    )
    return store.create_refresh_token(record)


def redeem_refresh_token(store, token: str) -> str:
    """Return the owning user id of an active refresh token."""
    record = store.find_active_refresh_token(token, utc_now())
    if record is None:
        logger.info("Rejected refresh token")
        raise AppError(
            ErrorKind.INVALID_OR_EXPIRED_REFRESH_TOKEN,
            "Invalid or expired refresh token",
        )
    return record.user_id


def revoke_refresh_token(store, token: str) -> RefreshToken:
    """
    Mark a refresh token as revoked, whatever its current state.
    Revoking twice overwrites revoked_at with the later time.
    """
    record = store.set_refresh_token_revoked(token, utc_now())
    if record is None:
        raise AppError(ErrorKind.NOT_FOUND, "Refresh token not found")
    logger.info("Revoked refresh token for user %s", record.user_id)
    return record
