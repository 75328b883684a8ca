"""Unit tests for the refresh token lifecycle against the SQLite store"""
import re
from datetime import timedelta

import pytest

from models.base_model import utc_now
from models.refresh_token import RefreshToken
from utils.errors import AppError, ErrorKind
from utils.refresh_tokens import (
    issue_refresh_token,
    make_refresh_token,
    redeem_refresh_token,
    revoke_refresh_token,
)
from utils.security import hash_password

HEX_64 = re.compile(r"^[0-9a-f]{64}$")
SIXTY_DAYS = timedelta(days=60)


@pytest.fixture
def user(store):
    return store.create_user("saul@bettercall.com", hash_password("secret"))


def test_make_refresh_token_format():
    assert HEX_64.match(make_refresh_token())


def test_make_refresh_token_is_unique():
    tokens = {make_refresh_token() for _ in range(1000)}
    assert len(tokens) == 1000


def test_issue_persists_active_record(store, user):
    record = issue_refresh_token(store, user.id, SIXTY_DAYS)

    assert HEX_64.match(record.token)
    assert record.user_id == user.id
    assert record.revoked_at is None
    assert record.expires_at - record.created_at == SIXTY_DAYS
    assert store.find_active_refresh_token(record.token) is not None


def test_each_issue_creates_a_new_record(store, user):
    first = issue_refresh_token(store, user.id, SIXTY_DAYS)
    second = issue_refresh_token(store, user.id, SIXTY_DAYS)
    assert first.token != second.token
    assert store.count(RefreshToken) == 2


def test_redeem_returns_owner_and_does_not_rotate(store, user):
    record = issue_refresh_token(store, user.id, SIXTY_DAYS)

    assert redeem_refresh_token(store, record.token) == user.id
    assert redeem_refresh_token(store, record.token) == user.id


def test_redeem_unknown_token(store):
    with pytest.raises(AppError) as exc:
        redeem_refresh_token(store, make_refresh_token())
    assert exc.value.kind == ErrorKind.INVALID_OR_EXPIRED_REFRESH_TOKEN


def test_redeem_after_revoke_fails(store, user):
    record = issue_refresh_token(store, user.id, SIXTY_DAYS)
    assert redeem_refresh_token(store, record.token) == user.id

    revoked = revoke_refresh_token(store, record.token)
    assert revoked.revoked_at is not None

    with pytest.raises(AppError) as exc:
        redeem_refresh_token(store, record.token)
    assert exc.value.kind == ErrorKind.INVALID_OR_EXPIRED_REFRESH_TOKEN


def test_redeem_expired_record_fails(store, user):
    past = utc_now() - timedelta(days=1)
    record = store.create_refresh_token(
        RefreshToken(
            token=make_refresh_token(),
            user_id=user.id,
            created_at=past - SIXTY_DAYS,
            updated_at=past - SIXTY_DAYS,
            expires_at=past,
        )
    )
    assert record.revoked_at is None

    with pytest.raises(AppError) as exc:
        redeem_refresh_token(store, record.token)
    assert exc.value.kind == ErrorKind.INVALID_OR_EXPIRED_REFRESH_TOKEN


def test_revoke_expired_record_still_revokes(store, user):
    record = issue_refresh_token(store, user.id, timedelta(seconds=-1))
    revoked = revoke_refresh_token(store, record.token)
    assert revoked.revoked_at is not None


def test_revoke_twice_overwrites_timestamp(store, user):
    record = issue_refresh_token(store, user.id, SIXTY_DAYS)
    first = revoke_refresh_token(store, record.token).revoked_at
    second = revoke_refresh_token(store, record.token).revoked_at
    assert second >= first


def test_revoke_unknown_token(store):
    with pytest.raises(AppError) as exc:
        revoke_refresh_token(store, make_refresh_token())
    assert exc.value.kind == ErrorKind.NOT_FOUND


def test_tokens_are_deleted_with_their_user(store, user):
    issue_refresh_token(store, user.id, SIXTY_DAYS)
    store.delete_all_users()
    assert store.count(RefreshToken) == 0
