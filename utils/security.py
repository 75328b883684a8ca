"""
security helpers:
- Argon2 password hashing via argon2-cffi
- JWT access token creation/validation via PyJWT
- Authorization header parsing (Bearer and ApiKey schemes)

Nothing here reads the Flask config: secrets and lifetimes are passed in.
"""
from __future__ import annotations

import time
from typing import Mapping, Optional

import jwt
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

from utils.errors import AppError, ErrorKind

ph = PasswordHasher()

TOKEN_ISSUER = "chirpy"
JWT_ALGORITHM = "HS256"


def hash_password(password: str) -> str:
    """Hash a plaintext password using Argon2id.

    The digest embeds the algorithm parameters and a random salt, so two
    calls with the same password return different strings.
    """
    return ph.hash(password)


def check_password_hash(password: str, password_hash: str) -> bool:
    """Verify a plaintext password against an Argon2 digest.

    Returns False on mismatch and on malformed or foreign digests alike.
    """
    try:
        return ph.verify(password_hash, password)
    except (VerificationError, InvalidHashError, UnicodeError, TypeError, ValueError):
        return False


def make_jwt(subject: str, expires_in: int, secret: str) -> str:
    """Create a signed access token for `subject` valid for `expires_in` seconds."""
    issued_at = int(time.time())
    payload = {
        "iss": TOKEN_ISSUER,
        "sub": str(subject),
        "iat": issued_at,
        "exp": issued_at + int(expires_in),
    }
    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)


def validate_jwt(token: str, secret: str) -> str:
    """
    Validate an access token and return its subject.
    Raises AppError(TOKEN_EXPIRED) when the signature is good but the token
    is past its expiry, AppError(INVALID_TOKEN) for everything else.
    """
    try:
        decoded = jwt.decode(
            token,
            secret,
            algorithms=[JWT_ALGORITHM],
            issuer=TOKEN_ISSUER,
            options={"require": ["exp", "iat", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        raise AppError(ErrorKind.TOKEN_EXPIRED, "Token has expired")
    except jwt.InvalidTokenError as exc:
        raise AppError(ErrorKind.INVALID_TOKEN, f"Invalid token: {exc}")

    subject = decoded.get("sub")
    if not subject:
        raise AppError(ErrorKind.INVALID_TOKEN, "Invalid token: missing subject")
    return subject


def _get_authorization(headers: Mapping[str, str], scheme: str) -> str:
    raw: Optional[str] = headers.get("Authorization")
    value = (raw or "").strip()
    if not value:
        raise AppError(ErrorKind.MISSING_AUTHORIZATION, "Authorization header is missing")
    prefix = f"{scheme} "
    if not value.startswith(prefix):
        raise AppError(
            ErrorKind.MALFORMED_AUTHORIZATION,
            f"Authorization header must start with '{prefix}'",
        )
    return value[len(prefix):].strip()


def get_bearer_token(headers: Mapping[str, str]) -> str:
    """Return the token from an `Authorization: Bearer <token>` header."""
    return _get_authorization(headers, "Bearer")


def get_api_key(headers: Mapping[str, str]) -> str:
    """Return the key from an `Authorization: ApiKey <key>` header."""
    return _get_authorization(headers, "ApiKey")
